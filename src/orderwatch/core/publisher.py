"""Order status publisher fanning notifications out to subscriber channels."""
from __future__ import annotations

import logging
import threading
from typing import List, Tuple

from ..config.settings import PublisherConfig
from ..errors import SubscriberNotReady
from .notification import Notification
from .subscriber import Subscriber

logger = logging.getLogger(__name__)


class Publisher:
    """Holds an order's status and pushes every change to its subscribers.

    Subscribers are notified in registration order, one send at a time. With
    the default hand-off channels each send waits for the subscriber loop to
    take the notification, so a subscriber that never listens stalls the
    fan-out (and ``update_status``) indefinitely unless ``send_timeout`` is set.
    """

    def __init__(self, order_id: str, status: str = "", config: PublisherConfig | None = None) -> None:
        self.order_id = order_id
        self.status = status
        self.config = config or PublisherConfig()
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        with self._lock:
            return tuple(self._subscribers)

    def register(self, subscriber: Subscriber) -> None:
        if self.config.require_ready and not subscriber.wait_ready(self.config.ready_timeout):
            raise SubscriberNotReady(subscriber.name, self.config.ready_timeout)
        with self._lock:
            self._subscribers.append(subscriber)
        logger.debug("Registered subscriber %s on order %s", subscriber.name, self.order_id)

    def deregister(self, subscriber: Subscriber) -> None:
        with self._lock:
            for index, registered in enumerate(self._subscribers):
                if registered is subscriber:
                    del self._subscribers[index]
                    logger.debug("Deregistered subscriber %s from order %s", subscriber.name, self.order_id)
                    return

    def update_status(self, status: str) -> int:
        self.status = status
        logger.info("📦 Order %s status updated to: %s", self.order_id, status,
                    extra={"order_id": self.order_id, "status": status})
        return self.notify_all()

    def notify_all(self) -> int:
        delivered = 0
        for subscriber in self.subscribers:
            notification = Notification(order_id=self.order_id, status=self.status)
            if subscriber.deliver(notification, timeout=self.config.send_timeout):
                delivered += 1
            else:
                logger.warning(
                    "⚠️ Dropped notification for %s: Order %s '%s'",
                    subscriber.name, self.order_id, self.status,
                )
        return delivered
