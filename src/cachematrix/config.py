"""Configuration loader for cachematrix."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path("cachematrix.yml")

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"not a boolean: {value!r}")


@dataclass(frozen=True)
class CacheMatrixConfig:
    default_inverter: str = "inv"
    log_level: str = "WARNING"
    record_solves: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheMatrixConfig":
        level = str(data.get("log_level", "WARNING")).upper()
        if level not in _LEVELS:
            raise ConfigError(f"invalid log_level: {data.get('log_level')!r}")
        inverter = data.get("default_inverter", "inv")
        if not isinstance(inverter, str) or not inverter:
            raise ConfigError(f"default_inverter must be a non-empty string, got {inverter!r}")
        return cls(
            default_inverter=inverter,
            log_level=level,
            record_solves=_to_bool(data.get("record_solves", True)),
        )


ENV_MAP = {
    "default_inverter": "CACHEMATRIX_DEFAULT_INVERTER",
    "log_level": "CACHEMATRIX_LOG_LEVEL",
    "record_solves": "CACHEMATRIX_RECORD_SOLVES",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file must hold a mapping: {path}")
    return data


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name in os.environ:
            merged[key] = os.environ[env_name]

    return merged


def load_config(config_path: Optional[str | Path] = None) -> CacheMatrixConfig:
    """
    Build a config from YAML plus ``CACHEMATRIX_*`` environment overrides.

    An explicit path must exist. Without one, ``cachematrix.yml`` in the
    working directory is read if present, otherwise defaults apply.
    """
    if config_path is None:
        path = DEFAULT_CONFIG_PATH
        data = load_yaml(path) if path.exists() else {}
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = load_yaml(path)

    data = merge_env_overrides(data)
    return CacheMatrixConfig.from_dict(data)


_active: Optional[CacheMatrixConfig] = None


def get_config() -> CacheMatrixConfig:
    """Return the active config, loading it on first use."""
    global _active
    if _active is None:
        _active = load_config()
    return _active


def peek_config() -> Optional[CacheMatrixConfig]:
    """Return the active config without loading it."""
    return _active


def set_config(config: Optional[CacheMatrixConfig]) -> None:
    """Replace the active config; ``None`` forces a reload on next use."""
    global _active
    _active = config


def configure_logging(config: Optional[CacheMatrixConfig] = None) -> logging.Logger:
    config = config or get_config()
    logger = logging.getLogger("cachematrix")
    logger.setLevel(config.log_level)
    return logger
