"""Values carried on subscriber channels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Notification:
    order_id: str
    status: str


class Shutdown:
    """Control marker asking a subscriber loop to exit."""

    _instance: "Shutdown | None" = None

    def __new__(cls) -> "Shutdown":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SHUTDOWN"


SHUTDOWN = Shutdown()

Message = Union[Notification, Shutdown]
