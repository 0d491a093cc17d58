"""Subscribers that drain their own channel on a dedicated thread."""
from __future__ import annotations

import logging
import sys
import threading
from typing import Callable, List, TextIO

from .mailbox import HandoffChannel, Mailbox
from .notification import SHUTDOWN, Notification
from .scheduler import start_thread

logger = logging.getLogger(__name__)


class Subscriber:
    """Listens for notifications until it receives the shutdown marker.

    The loop has two states, listening and terminated. There is no receive
    timeout: a subscriber that is never shut down listens forever.
    """

    def __init__(
        self,
        name: str,
        mailbox: Mailbox | None = None,
        handler: Callable[[Notification], None] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.name = name
        self.mailbox: Mailbox = mailbox if mailbox is not None else HandoffChannel()
        self.handler = handler
        self.stream = stream
        self.received: List[Notification] = []
        self.ready = threading.Event()
        self._terminated = threading.Event()
        self._thread: threading.Thread | None = None

    def __repr__(self) -> str:
        return f"Subscriber({self.name!r})"

    @property
    def terminated(self) -> bool:
        return self._terminated.is_set()

    def start(self) -> threading.Thread:
        if self._thread is not None:
            raise RuntimeError(f"Subscriber {self.name!r} already started")
        self._thread = start_thread(self.listen, name=f"subscriber-{self.name}")
        return self._thread

    def wait_ready(self, timeout: float | None = None) -> bool:
        return self.ready.wait(timeout)

    def listen(self) -> None:
        logger.debug("Subscriber %s listening", self.name)
        self.ready.set()
        while True:
            message = self.mailbox.receive()
            if message is SHUTDOWN:
                self._write(f"{self.name} shutting down...")
                self._terminated.set()
                logger.debug("Subscriber %s terminated", self.name)
                return
            self._handle(message)

    def _handle(self, notification: Notification) -> None:
        self._write(
            f"{self.name} received update: Order {notification.order_id} is now '{notification.status}'"
        )
        self.received.append(notification)
        if self.handler is None:
            return
        try:
            self.handler(notification)
        except Exception as exc:
            # A failing handler must not stop the loop, or later sends would block.
            logger.error("Subscriber %s handler failed: %s", self.name, exc, exc_info=True)

    def _write(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        print(line, file=stream, flush=True)

    def deliver(self, notification: Notification, timeout: float | None = None) -> bool:
        return self.mailbox.send(notification, timeout)

    def shutdown(self, timeout: float | None = None) -> bool:
        """Send the shutdown marker; in hand-off mode this waits for the loop to take it."""
        return self.mailbox.send(SHUTDOWN, timeout)

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)
