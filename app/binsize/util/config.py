from __future__ import annotations

import tomllib
from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, TypedDict

from binsize.logger import log as _log
from binsize.resources import config_file

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(TypedDict):
    level: str
    file: bool
    rich_tracebacks: bool


class Config(TypedDict):
    logging: LoggingConfig


DEFAULT_CONFIG: Config = {
    "logging": {"level": "INFO", "file": False, "rich_tracebacks": True},
}


def _deep_merge(
    target: MutableMapping[str, Any],
    overrides: Mapping[str, Any],
) -> MutableMapping[str, Any]:
    for key, value in overrides.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
    return target


def _validate_config(cfg: Config) -> None:
    if not isinstance(cfg["logging"], dict):
        raise ValueError("logging must be a table")

    level = cfg["logging"]["level"]
    if not isinstance(level, str) or level.upper() not in LEVELS:
        raise ValueError(f"logging.level must be one of {', '.join(LEVELS)}")
    cfg["logging"]["level"] = level.upper()

    if not isinstance(cfg["logging"]["file"], bool):
        raise ValueError("logging.file must be a boolean")

    if not isinstance(cfg["logging"]["rich_tracebacks"], bool):
        raise ValueError("logging.rich_tracebacks must be a boolean")


def load_config(path: Optional[Path] = None) -> Config:
    """Load ``binsize.toml``, falling back to defaults on any problem."""
    path = config_file if path is None else Path(path)
    if not path.exists():
        return deepcopy(DEFAULT_CONFIG)

    config = deepcopy(DEFAULT_CONFIG)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)

        _deep_merge(config, data)
        _validate_config(config)

    except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
        _log.error(f"Failed to load config: {e}", exc_info=(type(e), e, e.__traceback__))
        return deepcopy(DEFAULT_CONFIG)

    return config
