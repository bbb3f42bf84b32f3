"""Ports for the external services consulted during resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import DictionaryEntry


@runtime_checkable
class DefinitionLookup(Protocol):
    """Dictionary provider: settles once per call with a definition or its absence."""

    async def lookup(self, term: str, *, language: str = "en") -> DictionaryEntry: ...


@runtime_checkable
class Encyclopedia(Protocol):
    """Encyclopedia search and article-extract service."""

    async def search(self, subject: str, *, limit: int = 3) -> list[str]: ...

    async def fetch_extract(self, title: str, *, intro_only: bool = False) -> str | None: ...


__all__ = ["DefinitionLookup", "Encyclopedia"]
