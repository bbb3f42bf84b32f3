"""Application configuration helpers."""

from __future__ import annotations

from explainthis.common.logging import configure_logging

from .env import float_env_var, int_env_var, optional_env_var
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .resolution import ResolutionSettings, get_resolution_settings
from .services import (
    WikipediaConfig,
    WiktionaryConfig,
    get_language,
    get_user_agent,
    get_wikipedia_config,
    get_wiktionary_config,
)
from .storage import StorageConfig, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "ResolutionSettings",
    "RetryPolicy",
    "StorageConfig",
    "WikipediaConfig",
    "WiktionaryConfig",
    "configure_logging",
    "float_env_var",
    "get_language",
    "get_resolution_settings",
    "get_storage_config",
    "get_user_agent",
    "get_wikipedia_config",
    "get_wiktionary_config",
    "int_env_var",
    "optional_env_var",
]
