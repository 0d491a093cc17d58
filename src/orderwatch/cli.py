"""Command-line entry points for orderwatch."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv

from .config.loaders import demo_config, write_demo_config
from .demo import run_callback_demo, run_channel_demo
from .logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orderwatch",
        description="Run the order status observer scenarios",
    )
    parser.add_argument(
        "--config",
        help="YAML scenario file (defaults to $ORDERWATCH_CONFIG)",
    )
    parser.add_argument(
        "--variant",
        choices=("channels", "callbacks"),
        default="channels",
        help="Observer variant to run (default: channels)",
    )
    parser.add_argument("--log-level", help="Override $ORDERWATCH_LOG_LEVEL")
    parser.add_argument(
        "--dump-config",
        metavar="PATH",
        help="Write the resolved scenario as YAML to PATH and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = demo_config(args.config)
    if args.dump_config:
        write_demo_config(args.dump_config, config)
        logger.info("💾 Wrote demo configuration to %s", args.dump_config)
        return 0

    logger.info("🚀 Running %s scenario for order %s", args.variant, config.order_id)
    if args.variant == "callbacks":
        run_callback_demo(config.order_id)
    else:
        run_channel_demo(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
