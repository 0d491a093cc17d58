"""Utilities for spawning subscriber threads."""
from __future__ import annotations

import threading
from typing import Callable


def start_thread(target: Callable[[], None], *, name: str | None = None, daemon: bool = True) -> threading.Thread:
    thread = threading.Thread(target=target, name=name, daemon=daemon)
    thread.start()
    return thread
