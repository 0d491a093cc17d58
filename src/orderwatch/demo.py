"""Hard-coded order tracking scenarios for both observer variants."""
from __future__ import annotations

import logging
import sys
from typing import Dict, TextIO

from .config.settings import DemoConfig
from .core.callbacks import EmailNotifier, OrderService, SMSNotifier
from .core.mailbox import build_mailbox
from .core.publisher import Publisher
from .core.subscriber import Subscriber

logger = logging.getLogger(__name__)


def _stream(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def run_channel_demo(config: DemoConfig | None = None, stream: TextIO | None = None) -> Publisher:
    """Publish every configured status to threaded subscribers, then stop them.

    Subscribers are started before registration so that a publisher requiring
    readiness accepts them. Opted-out subscribers are deregistered after
    ``opt_out_after`` statuses but keep running until the final shutdown.
    """
    config = config or DemoConfig()
    out = _stream(stream)

    publisher = Publisher(config.order_id, config=config.publisher)
    subscribers: Dict[str, Subscriber] = {}
    for name in config.subscribers:
        subscriber = Subscriber(name, mailbox=build_mailbox(config.mailbox), stream=out)
        subscriber.start()
        publisher.register(subscriber)
        subscribers[name] = subscriber

    for step, status in enumerate(config.statuses):
        if config.opt_out and step == config.opt_out_after:
            _apply_opt_outs(publisher, subscribers, config)
        print(f"\nOrder status updated to: {status}", file=out, flush=True)
        publisher.update_status(status)

    # Shutdown is cooperative: each subscriber gets its own marker.
    for subscriber in subscribers.values():
        subscriber.shutdown()
    for subscriber in subscribers.values():
        subscriber.join()

    return publisher


def _apply_opt_outs(publisher: Publisher, subscribers: Dict[str, Subscriber], config: DemoConfig) -> None:
    for name in config.opt_out:
        subscriber = subscribers.get(name)
        if subscriber is None:
            logger.warning("⚠️ Unknown subscriber in opt_out: %s", name)
            continue
        publisher.deregister(subscriber)
        logger.info("🔕 %s opted out of order %s", name, config.order_id)


def run_callback_demo(order_id: str = "ORD123", stream: TextIO | None = None) -> OrderService:
    out = _stream(stream)
    order_service = OrderService(order_id)

    email = EmailNotifier("user@example.com", stream=out)
    sms = SMSNotifier("+1234567890", stream=out)
    order_service.register(email)
    order_service.register(sms)

    for status in ("Placed", "Shipped"):
        print(f"\nOrder status updated to: {status}", file=out)
        order_service.update_status(status)

    # User opted out of SMS
    order_service.deregister(sms)

    print("\nOrder status updated to: Delivered", file=out)
    order_service.update_status("Delivered")
    return order_service
