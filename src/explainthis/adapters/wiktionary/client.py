"""Wiktionary REST client used as the dictionary provider."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self
from urllib.parse import quote

from pydantic import ValidationError

from explainthis.adapters.http_resilience import ResilientClient

from .schema import DefinitionResponse
from .translator import not_found, translate_definition

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from explainthis.config.http_resilience import ResilienceConfig
    from explainthis.config.services import WiktionaryConfig
    from explainthis.domain.types import DictionaryEntry

log = getLogger(__name__)

HTTP_NOT_FOUND = 404


class WiktionaryAPIError(RuntimeError):
    """Raised when the Wiktionary API returns an unexpected response."""


class WiktionaryClient:
    """Definition lookup port backed by the Wiktionary REST API."""

    def __init__(
        self,
        *,
        config: WiktionaryConfig,
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

    async def lookup(self, term: str, *, language: str = "en") -> DictionaryEntry:
        if self._http is None:
            raise WiktionaryAPIError("WiktionaryClient must be used inside 'async with'")
        normalized = term.strip().replace(" ", "_")
        if not normalized:
            return not_found(term)

        path = f"page/definition/{quote(normalized, safe='')}"
        response = await self._http.get(path, follow_redirects=True)
        if response.status_code == HTTP_NOT_FOUND:
            log.debug("Wiktionary has no entry for %r", term)
            return not_found(term)
        response.raise_for_status()

        try:
            payload = DefinitionResponse.model_validate(response.json())
        except ValidationError as exc:
            raise WiktionaryAPIError("Unexpected Wiktionary response payload") from exc
        return translate_definition(term, payload, language=language)
