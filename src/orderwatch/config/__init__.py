"""Configuration helpers for orderwatch."""
from __future__ import annotations

from .settings import DemoConfig, MailboxConfig, PublisherConfig

__all__ = ["DemoConfig", "MailboxConfig", "PublisherConfig"]
