"""Configuration — frozen dataclass from env vars layered over an optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    log_path: str = "./logs/app.log"
    rotation_hours: float = 1
    category: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load writer settings from a YAML mapping.

    Returns an empty dict when no path is given or the file is missing, and
    raises ValueError when the document is not a mapping.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    logger.info("Loaded YAML config from %s (%s)", path, ", ".join(map(str, data)))
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config: env vars win over YAML keys, which win over defaults."""
    yaml_data = yaml_data or {}
    rotation_hours = float(
        os.environ.get("ROTATION_HOURS", yaml_data.get("rotation_hours", Config.rotation_hours))
    )
    if rotation_hours < 0:
        raise ValueError(f"rotation_hours must be non-negative, got {rotation_hours}")

    return Config(
        log_path=os.environ.get("LOG_PATH", yaml_data.get("log_path", Config.log_path)),
        rotation_hours=rotation_hours,
        category=os.environ.get("LOG_CATEGORY", yaml_data.get("category", Config.category)),
    )
