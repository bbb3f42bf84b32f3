"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str, default: str) -> str:
    """Return an environment variable, falling back to ``default`` when missing/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def float_env_var(name: str, default: float) -> float:
    raw = optional_env_var(name, str(default))
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def int_env_var(name: str, default: int) -> int:
    raw = optional_env_var(name, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
