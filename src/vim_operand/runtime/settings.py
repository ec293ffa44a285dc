"""Environment-driven settings shared by the operand engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "VIM_OPERAND_"
DEFAULT_OPERATORS: tuple[str, ...] = ("d", "y", "c")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

_ACTIVE_SETTINGS: Optional["EngineSettings"] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    return _parse_flag(name, env(name), default)


def _parse_flag(name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got '{raw}'")


def _parse_operators(raw: Optional[str]) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_OPERATORS
    keys = tuple(dict.fromkeys(part.strip() for part in raw.split(",") if part.strip()))
    if not keys:
        raise ValueError(f"{ENV_PREFIX}OPERATORS must name at least one operator")
    for key in keys:
        if key[0].isdigit():
            raise ValueError(f"Operator key '{key}' cannot start with a digit")
    return keys


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Behavioural switches for operand resolution."""

    exclusive_linewise: bool = False
    operators: tuple[str, ...] = DEFAULT_OPERATORS


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""

    source = os.environ if environ is None else environ
    return EngineSettings(
        exclusive_linewise=_parse_flag(
            "EXCLUSIVE_LINEWISE",
            source.get(f"{ENV_PREFIX}EXCLUSIVE_LINEWISE"),
            False,
        ),
        operators=_parse_operators(source.get(f"{ENV_PREFIX}OPERATORS")),
    )


def get_settings() -> EngineSettings:
    global _ACTIVE_SETTINGS
    if _ACTIVE_SETTINGS is None:
        _ACTIVE_SETTINGS = load_settings()
    return _ACTIVE_SETTINGS


def reset_settings() -> None:
    global _ACTIVE_SETTINGS
    _ACTIVE_SETTINGS = None


__all__ = [
    "ENV_PREFIX",
    "DEFAULT_OPERATORS",
    "EngineSettings",
    "env",
    "env_flag",
    "get_settings",
    "load_settings",
    "reset_settings",
]
