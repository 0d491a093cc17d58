"""Lightweight callback observers invoked on the publisher's thread."""
from __future__ import annotations

import logging
import sys
from typing import List, Protocol, TextIO

logger = logging.getLogger(__name__)


class Observer(Protocol):
    def update(self, order_id: str, status: str) -> None: ...


class OrderService:
    def __init__(self, order_id: str, status: str = "") -> None:
        self.order_id = order_id
        self.status = status
        self._observers: List[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def register(self, observer: Observer) -> None:
        self._observers.append(observer)

    def deregister(self, observer: Observer) -> None:
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                return

    def notify_all(self) -> None:
        for observer in list(self._observers):
            observer.update(self.order_id, self.status)

    def update_status(self, status: str) -> None:
        self.status = status
        logger.info("📦 Order %s status updated to: %s", self.order_id, status)
        self.notify_all()


class _StreamObserver:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self.stream if self.stream is not None else sys.stdout)


class EmailNotifier(_StreamObserver):
    """Simulates sending an email."""

    def __init__(self, email: str, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.email = email

    def update(self, order_id: str, status: str) -> None:
        self._write(f"📧 Email to {self.email}: Order {order_id} is now '{status}'")


class SMSNotifier(_StreamObserver):
    """Simulates sending an SMS."""

    def __init__(self, phone: str, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.phone = phone

    def update(self, order_id: str, status: str) -> None:
        self._write(f"📱 SMS to {self.phone}: Order {order_id} is now '{status}'")
