"""MediaWiki action API client for title search and plain-text extracts."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self

from pydantic import ValidationError

from explainthis.adapters.http_resilience import ResilientClient

from .schema import APIErrorResponse, ExtractResponse, OpenSearchResponse

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from explainthis.config.http_resilience import ResilienceConfig
    from explainthis.config.services import WikipediaConfig

log = getLogger(__name__)

API_PATH = "api.php"


class WikipediaAPIError(RuntimeError):
    """Raised when the MediaWiki API returns an unexpected response."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class WikipediaClient:
    """Encyclopedia port backed by the MediaWiki action API.

    Use as an async context manager; the underlying HTTP client lives for the
    duration of the block.
    """

    def __init__(
        self,
        *,
        config: WikipediaConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._http: ResilientClient | None = None

    async def __aenter__(self) -> Self:
        self._http = self._client_factory(self._config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def search(self, subject: str, *, limit: int = 3) -> list[str]:
        params = {
            "action": "opensearch",
            "profile": "fuzzy",
            "limit": str(limit),
            "search": subject,
            "format": "json",
        }
        payload = await self._get_json(params)
        try:
            response = OpenSearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise WikipediaAPIError("Unexpected Wikipedia search payload") from exc
        log.debug("Wikipedia search %r -> %s", subject, response.titles)
        return response.titles

    async def fetch_extract(self, title: str, *, intro_only: bool = False) -> str | None:
        params = {
            "format": "json",
            "action": "query",
            "prop": "extracts",
            "explaintext": "1",
            "redirects": "1",
            "titles": title,
        }
        if intro_only:
            params["exintro"] = "1"
        payload = await self._get_json(params)
        try:
            response = ExtractResponse.model_validate(payload)
        except ValidationError as exc:
            raise WikipediaAPIError("Unexpected Wikipedia extract payload") from exc
        return response.first_extract

    async def _get_json(self, params: dict[str, str]) -> object:
        if self._http is None:
            raise WikipediaAPIError("WikipediaClient must be used inside 'async with'")
        response = await self._http.get(API_PATH, params=params)
        response.raise_for_status()

        payload = response.json()
        if isinstance(payload, dict) and "error" in payload:
            error = APIErrorResponse.model_validate(payload).error
            log.error(f"Wikipedia API error {error.code}: {error.info}")
            raise WikipediaAPIError(error.info or error.code, code=error.code)
        return payload
