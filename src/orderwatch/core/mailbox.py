"""Inbound delivery channels for subscribers.

Two delivery modes are available:

* ``HandoffChannel`` is a zero-buffer rendezvous. ``send`` returns only once
  the receiving loop has taken the item, so a publisher fanning out to a slow
  or stalled subscriber waits on it. Without a timeout that wait is
  unbounded: sending to a channel nobody drains blocks the caller forever.
* ``BoundedMailbox`` buffers up to ``capacity`` notifications and applies an
  overflow policy once full (``drop_oldest``, ``drop_newest`` or ``block``).

Both carry the ``SHUTDOWN`` marker on the same channel as notifications, so a
subscriber loop waits on a single primitive.
"""
from __future__ import annotations

import logging
import queue
import threading
import time
from collections import deque
from typing import Deque, Protocol

from ..config.settings import MailboxConfig
from .notification import SHUTDOWN, Message, Notification

logger = logging.getLogger(__name__)

OVERFLOW_POLICIES = ("drop_oldest", "drop_newest", "block")

_EMPTY = object()


class Mailbox(Protocol):
    def send(self, item: Message, timeout: float | None = None) -> bool: ...

    def receive(self, timeout: float | None = None) -> Message: ...


class HandoffChannel:
    """Synchronous hand-off: a send completes when a receiver accepts the item."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._senders = threading.Lock()
        self._item: object = _EMPTY

    def send(self, item: Message, timeout: float | None = None) -> bool:
        deadline = None if timeout is None else time.monotonic() + timeout
        if not self._senders.acquire(timeout=-1 if timeout is None else timeout):
            return False
        try:
            with self._cond:
                self._item = item
                self._cond.notify_all()
                remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
                if self._cond.wait_for(lambda: self._item is _EMPTY, remaining):
                    return True
                # Nobody took it; withdraw the offer.
                self._item = _EMPTY
                return False
        finally:
            self._senders.release()

    def receive(self, timeout: float | None = None) -> Message:
        with self._cond:
            if not self._cond.wait_for(lambda: self._item is not _EMPTY, timeout):
                raise queue.Empty
            item = self._item
            self._item = _EMPTY
            self._cond.notify_all()
            return item  # type: ignore[return-value]


class BoundedMailbox:
    """FIFO buffer of at most ``capacity`` pending notifications."""

    def __init__(self, capacity: int = 16, overflow: str = "block", send_timeout: float | None = None) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if overflow not in OVERFLOW_POLICIES:
            raise ValueError(f"Unknown overflow policy: {overflow}")
        self.capacity = capacity
        self.overflow = overflow
        self.send_timeout = send_timeout
        self.dropped = 0
        self._items: Deque[Message] = deque()
        self._pending = 0
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return self._pending

    def send(self, item: Message, timeout: float | None = None) -> bool:
        with self._cond:
            # The shutdown marker is never subject to capacity.
            if item is SHUTDOWN or self._pending < self.capacity:
                self._append(item)
                return True

            if self.overflow == "drop_oldest":
                self._evict_oldest()
                self._append(item)
                return True

            if self.overflow == "block":
                wait = self.send_timeout if timeout is None else timeout
                if self._cond.wait_for(lambda: self._pending < self.capacity, wait):
                    self._append(item)
                    return True

            self.dropped += 1
            logger.debug("Mailbox full (%s); rejected %s", self.overflow, item)
            return False

    def receive(self, timeout: float | None = None) -> Message:
        with self._cond:
            if not self._cond.wait_for(lambda: len(self._items) > 0, timeout):
                raise queue.Empty
            item = self._items.popleft()
            if isinstance(item, Notification):
                self._pending -= 1
            self._cond.notify_all()
            return item

    def _append(self, item: Message) -> None:
        self._items.append(item)
        if isinstance(item, Notification):
            self._pending += 1
        self._cond.notify_all()

    def _evict_oldest(self) -> None:
        for index, queued in enumerate(self._items):
            if isinstance(queued, Notification):
                del self._items[index]
                self._pending -= 1
                self.dropped += 1
                logger.debug("Mailbox full (drop_oldest); evicted %s", queued)
                return


def build_mailbox(config: MailboxConfig | None = None) -> Mailbox:
    config = config or MailboxConfig()
    if config.mode == "bounded":
        return BoundedMailbox(
            capacity=config.capacity,
            overflow=config.overflow,
            send_timeout=config.send_timeout,
        )
    return HandoffChannel()
