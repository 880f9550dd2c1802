"""Environment-driven defaults for the flattener."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Literal

CloneName = Literal["copy", "deepcopy", "none"]

_TRUTHY = {"1", "true", "yes", "y", "on"}

_CLONE_FUNCTIONS: dict[str, Callable[[Any], Any]] = {
    "copy": copy.copy,
    "deepcopy": copy.deepcopy,
    "none": lambda value: value,
}


def _is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    strict: bool = False
    clone: str = "copy"

    def clone_callable(self) -> Callable[[Any], Any]:
        return clone_function(self.clone)


def clone_function(name: str) -> Callable[[Any], Any]:
    """Return the element duplication callable registered as ``name``."""

    key = (name or "").strip().lower()
    try:
        return _CLONE_FUNCTIONS[key]
    except KeyError:
        choices = ", ".join(sorted(_CLONE_FUNCTIONS))
        raise ValueError(f"Unknown clone mode {name!r}; expected one of: {choices}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read ``COLMAJOR_STRICT`` and ``COLMAJOR_CLONE`` into :class:`Settings`.

    Unset or blank variables fall back to the dataclass defaults. The clone
    mode is only checked when it is used, so an unknown ``COLMAJOR_CLONE``
    fails calls that rely on it and not calls that pass ``clone=``.
    """

    env = os.environ if environ is None else environ

    clone = (env.get("COLMAJOR_CLONE") or "").strip().lower() or Settings.clone
    return Settings(strict=_is_truthy(env.get("COLMAJOR_STRICT")), clone=clone)


__all__ = ["CloneName", "Settings", "clone_function", "load_settings"]
