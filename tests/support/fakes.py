"""In-memory stand-ins for the dictionary and encyclopedia ports."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from explainthis.domain.types import DictionaryEntry


@dataclass
class FakeDictionary:
    entries: dict[str, DictionaryEntry] = field(default_factory=dict)
    delay: float = 0.0
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)
    cancelled: list[str] = field(default_factory=list)
    completed: list[str] = field(default_factory=list)

    async def lookup(self, term: str, *, language: str = "en") -> DictionaryEntry:
        self.calls.append((term, language))
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled.append(term)
            raise
        if self.error is not None:
            raise self.error
        self.completed.append(term)
        return self.entries.get(term, DictionaryEntry(word=term, error="not found"))


@dataclass
class FakePage:
    content: str | None
    blurb: str | None


@dataclass
class FakeEncyclopedia:
    search_results: dict[str, list[str]] = field(default_factory=dict)
    pages: dict[str, FakePage] = field(default_factory=dict)
    searches: list[tuple[str, int]] = field(default_factory=list)
    fetches: list[tuple[str, bool]] = field(default_factory=list)

    async def search(self, subject: str, *, limit: int = 3) -> list[str]:
        self.searches.append((subject, limit))
        return list(self.search_results.get(subject, []))[:limit]

    async def fetch_extract(self, title: str, *, intro_only: bool = False) -> str | None:
        self.fetches.append((title, intro_only))
        page = self.pages.get(title)
        if page is None:
            return None
        return page.blurb if intro_only else page.content
