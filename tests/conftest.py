"""Shared pytest fixtures for the orderwatch test suite."""

import io
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from orderwatch.core.subscriber import Subscriber


@pytest.fixture
def stream():
    """In-memory sink for subscriber diagnostic lines."""
    return io.StringIO()


@pytest.fixture
def make_subscriber(stream):
    """Build subscribers and make sure their threads are stopped after each test."""
    created = []

    def _make(name, **kwargs):
        kwargs.setdefault("stream", stream)
        subscriber = Subscriber(name, **kwargs)
        created.append(subscriber)
        return subscriber

    yield _make

    for subscriber in created:
        if subscriber._thread is not None and not subscriber.terminated:
            subscriber.shutdown(timeout=1.0)
            subscriber.join(timeout=1.0)
