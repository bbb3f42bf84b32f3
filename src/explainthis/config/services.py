"""Encyclopedia and dictionary service configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from explainthis import __version__

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .storage import StorageConfig, get_storage_config

DEFAULT_LANGUAGE = "en"
DEFAULT_USER_AGENT = f"explain-this/{__version__} (+https://pypi.org/project/explain-this/)"
WIKIPEDIA_BASE_URL_TEMPLATE = "https://{language}.wikipedia.org/w/"
WIKTIONARY_BASE_URL_TEMPLATE = "https://{language}.wiktionary.org/api/rest_v1/"
SERVICE_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class WikipediaConfig:
    """Holds encyclopedia search/fetch configuration values."""

    language: str
    resilience: ResilienceConfig


@dataclass(frozen=True, slots=True)
class WiktionaryConfig:
    """Holds dictionary lookup configuration values."""

    language: str
    resilience: ResilienceConfig


def get_language() -> str:
    return optional_env_var("EXPLAINTHIS_LANGUAGE", DEFAULT_LANGUAGE).lower()


def get_user_agent() -> str:
    return optional_env_var("EXPLAINTHIS_USER_AGENT", DEFAULT_USER_AGENT)


def _is_cacheable_payload(payload: object) -> bool:
    return not (isinstance(payload, dict) and "error" in payload)


def _cache_config(storage: StorageConfig) -> CacheConfig | None:
    if storage.http_cache == "off":
        return None
    if storage.http_cache == "sqlite":
        return CacheConfig(
            backend="sqlite",
            sqlite_path=str(storage.http_cache_path()),
            should_cache=_is_cacheable_payload,
        )
    return CacheConfig(backend="memory", should_cache=_is_cacheable_payload)


def get_wikipedia_config(*, storage: StorageConfig | None = None) -> WikipediaConfig:
    language = get_language()
    storage_config = storage or get_storage_config()
    resilience = ResilienceConfig(
        name="wikipedia",
        base_url=WIKIPEDIA_BASE_URL_TEMPLATE.format(language=language),
        timeout_seconds=SERVICE_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        retry=RetryPolicy(total=3),
        cache=_cache_config(storage_config),
        default_headers={"User-Agent": get_user_agent()},
    )
    return WikipediaConfig(language=language, resilience=resilience)


def get_wiktionary_config(*, storage: StorageConfig | None = None) -> WiktionaryConfig:
    language = get_language()
    storage_config = storage or get_storage_config()
    resilience = ResilienceConfig(
        name="wiktionary",
        base_url=WIKTIONARY_BASE_URL_TEMPLATE.format(language=language),
        timeout_seconds=SERVICE_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        retry=RetryPolicy(total=2),
        cache=_cache_config(storage_config),
        default_headers={"User-Agent": get_user_agent()},
    )
    return WiktionaryConfig(language=language, resilience=resilience)
