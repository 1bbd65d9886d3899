"""YAML config loader and logging setup."""

import logging
from pathlib import Path

import yaml

from weatherlookup.config.schema import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, returns the defaults. An empty file is also all defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def configure_logging(config: AppConfig) -> None:
    level = logging.getLevelName(config.logging.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
