"""Logging setup driven by ``configs/logging.yaml``."""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "logging.yaml"


def _load_config(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    with path.open("r", encoding="utf-8") as config_file:
        return yaml.safe_load(config_file) or None


def configure_logging(config_path: str | Path | None = None, level: str | None = None) -> None:
    """Apply the YAML logging config, or a plain console setup when none is found.

    ``level`` overrides the level of the ``share_registry`` logger only; the
    ``audit`` logger keeps its own configuration.
    """

    config = _load_config(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)
    if config is not None:
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    if level:
        logging.getLogger("share_registry").setLevel(level.upper())


__all__ = ["DEFAULT_CONFIG_PATH", "configure_logging"]
