"""Persisted logging settings for :mod:`colmajor`.

The only key currently stored is ``log_level``; the file is plain JSON so it
can be edited by hand.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

PathLike = Optional[os.PathLike[str] | str]


def _default_config_path() -> Path:
    """Resolve ``COLMAJOR_LOG_CONFIG`` or ``<config dir>/logging.json``."""

    raw = os.environ.get("COLMAJOR_LOG_CONFIG")
    if raw and raw.strip():
        return Path(raw).expanduser()

    config_dir = os.environ.get("COLMAJOR_CONFIG_DIR")
    if config_dir and config_dir.strip():
        return Path(config_dir).expanduser() / "logging.json"
    return Path.home() / ".colmajor" / "logging.json"


def _resolve_config_path(config_file: PathLike = None) -> Path:
    if config_file is not None:
        return Path(config_file)
    return _default_config_path()


def load_config(config_file: PathLike = None) -> Dict[str, Any]:
    """Load the logging configuration JSON file.

    Parameters
    ----------
    config_file:
        Optional override for the configuration file path.

    Returns
    -------
    dict
        Parsed configuration content. A missing, unreadable or non-object
        file yields an empty configuration.
    """

    path = _resolve_config_path(config_file)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}

    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: PathLike = None) -> Path:
    """Write ``config`` as JSON and return the path written."""

    path = _resolve_config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(config, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path


def normalize_level(level: str | int) -> tuple[str, int]:
    """Coerce a logging level into a ``(name, numeric value)`` pair.

    Raises
    ------
    ValueError
        If the provided level cannot be resolved.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        if not isinstance(name, str) or name.startswith("Level "):
            name = str(level)
        return name, level

    candidate = logging.getLevelName(str(level).upper())
    if isinstance(candidate, int):
        return str(level).upper(), candidate

    raise ValueError(f"Unknown logging level: {level!r}")


def load_log_level(config_file: PathLike = None) -> Optional[int]:
    """Return the persisted numeric log level, or ``None`` if unset/invalid."""

    value = load_config(config_file).get("log_level")
    if value is None:
        return None
    try:
        return normalize_level(value)[1]
    except ValueError:
        return None


def save_log_level(level: str | int, config_file: PathLike = None) -> Path:
    name, _ = normalize_level(level)
    config = load_config(config_file)
    config["log_level"] = name
    return save_config(config, config_file)


__all__ = [
    "load_config",
    "save_config",
    "normalize_level",
    "load_log_level",
    "save_log_level",
]
