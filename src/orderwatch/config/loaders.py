"""Demo scenario file reading and writing."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .settings import DemoConfig, config_path

logger = logging.getLogger(__name__)


def read_demo_config(path: str | Path) -> dict[str, Any]:
    """Parse a YAML scenario file into a mapping.

    Raises ``FileNotFoundError`` for a missing file and ``ValueError`` when the
    document is empty or not a mapping.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Demo configuration not found: {path}")
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, dict) or not data:
        raise ValueError(f"Demo configuration in {path} must be a non-empty mapping")
    return data


def load_demo_config(path: str | Path) -> DemoConfig:
    config = DemoConfig(**read_demo_config(path))
    logger.info("📄 Loaded demo configuration from %s", path)
    return config


def write_demo_config(path: str | Path, config: DemoConfig) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(config.model_dump(), handle, sort_keys=False, allow_unicode=True)


def demo_config(path: str | Path | None = None) -> DemoConfig:
    """Resolve the scenario from ``path``, then ``ORDERWATCH_CONFIG``, then defaults.

    Only the absence of any path falls back to defaults; an explicit path that
    cannot be read raises.
    """
    path = path or config_path()
    if not path:
        return DemoConfig()
    return load_demo_config(path)
