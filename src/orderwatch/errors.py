"""Exceptions raised by orderwatch."""
from __future__ import annotations


class OrderwatchError(Exception):
    """Base class for orderwatch errors."""


class SubscriberNotReady(OrderwatchError):
    """A subscriber did not complete its readiness handshake in time."""

    def __init__(self, name: str, timeout: float) -> None:
        super().__init__(f"Subscriber {name!r} not listening after {timeout}s")
        self.name = name
        self.timeout = timeout
