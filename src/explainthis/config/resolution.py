"""Tuning values for subject resolution."""

from __future__ import annotations

from dataclasses import dataclass

from .env import float_env_var, int_env_var
from .errors import ConfigurationError

DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_SEARCH_LIMIT = 3
DEFAULT_TIE_MARGIN = 1.5


@dataclass(frozen=True, slots=True)
class ResolutionSettings:
    """Race deadline and ranking knobs used by ``explain``."""

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    search_limit: int = DEFAULT_SEARCH_LIMIT
    tie_margin: float = DEFAULT_TIE_MARGIN
    language: str = "en"


def get_resolution_settings(*, language: str = "en") -> ResolutionSettings:
    timeout = float_env_var("EXPLAINTHIS_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    limit = int_env_var("EXPLAINTHIS_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT)
    margin = float_env_var("EXPLAINTHIS_TIE_MARGIN", DEFAULT_TIE_MARGIN)
    if timeout < 0:
        raise ConfigurationError("EXPLAINTHIS_TIMEOUT_SECONDS must be non-negative")
    if limit < 1:
        raise ConfigurationError("EXPLAINTHIS_SEARCH_LIMIT must be at least 1")
    if margin < 1:
        raise ConfigurationError("EXPLAINTHIS_TIE_MARGIN must be at least 1.0")
    return ResolutionSettings(
        timeout_seconds=timeout,
        search_limit=limit,
        tie_margin=margin,
        language=language,
    )
