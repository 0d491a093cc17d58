"""Runtime settings for publishers, mailboxes and the demo scenarios."""
from __future__ import annotations

import os
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_ORDER_ID: str = "ORD987"
DEFAULT_STATUSES: tuple[str, ...] = ("Order Placed", "Dispatched", "Delivered")
DEFAULT_SUBSCRIBERS: tuple[str, ...] = ("📧 EmailNotifier", "📱 SMSNotifier")


def log_level() -> str:
    return os.environ.get("ORDERWATCH_LOG_LEVEL", "INFO")


def config_path() -> str | None:
    return os.environ.get("ORDERWATCH_CONFIG")


def _positive_or_none(value: Optional[float]) -> Optional[float]:
    if value is not None and value <= 0:
        raise ValueError("send_timeout must be positive or null (wait forever)")
    return value


class MailboxConfig(BaseModel):
    """Delivery channel used between a publisher and one subscriber."""

    mode: Literal["handoff", "bounded"] = Field(
        "handoff",
        description="handoff = zero-buffer synchronous send, bounded = FIFO buffer",
    )
    capacity: int = Field(16, gt=0, description="Buffer size for bounded mailboxes")
    overflow: Literal["drop_oldest", "drop_newest", "block"] = Field(
        "block",
        description="What a full bounded mailbox does with an incoming notification",
    )
    send_timeout: Optional[float] = Field(
        None,
        description="Bounded mode only: seconds a blocking overflow waits for space; null waits forever",
    )

    @field_validator("send_timeout")
    @classmethod
    def validate_send_timeout(cls, v):
        return _positive_or_none(v)

    @model_validator(mode="after")
    def check_handoff_has_no_send_timeout(self):
        # Hand-off sends are bounded by PublisherConfig.send_timeout instead.
        if self.mode == "handoff" and self.send_timeout is not None:
            raise ValueError("mailbox.send_timeout applies to bounded mailboxes; use publisher.send_timeout")
        return self


class PublisherConfig(BaseModel):
    """Fan-out behaviour of a publisher."""

    require_ready: bool = Field(
        False,
        description="Refuse to register subscribers whose loop is not listening yet",
    )
    ready_timeout: float = Field(1.0, gt=0, description="Seconds to wait for readiness")
    send_timeout: Optional[float] = Field(
        None,
        description="Seconds each delivery may block; null blocks until accepted",
    )

    @field_validator("send_timeout")
    @classmethod
    def validate_send_timeout(cls, v):
        return _positive_or_none(v)


class DemoConfig(BaseModel):
    """Scenario driven by the command line demo."""

    order_id: str = Field(DEFAULT_ORDER_ID, description="Order identifier to publish")
    statuses: List[str] = Field(
        default_factory=lambda: list(DEFAULT_STATUSES),
        description="Statuses published in order",
    )
    subscribers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SUBSCRIBERS),
        description="Names of the channel subscribers started by the demo",
    )
    opt_out: List[str] = Field(
        default_factory=list,
        description="Subscriber names deregistered partway through the scenario",
    )
    opt_out_after: int = Field(
        0,
        ge=0,
        description="Number of statuses published before opt-outs are applied",
    )
    mailbox: MailboxConfig = Field(default_factory=MailboxConfig)
    publisher: PublisherConfig = Field(default_factory=PublisherConfig)

    @model_validator(mode="after")
    def check_opt_out_is_reachable(self):
        if self.opt_out and self.opt_out_after >= len(self.statuses):
            raise ValueError(
                f"opt_out_after={self.opt_out_after} is never reached with {len(self.statuses)} statuses"
            )
        return self
