"""Translate Wiktionary payloads into dictionary entries."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

from explainthis.domain.types import DictionaryEntry

if TYPE_CHECKING:
    from .schema import DefinitionResponse

NOT_FOUND = "not found"
_WHITESPACE = re.compile(r"\s+")


def html_to_text(markup: str) -> str:
    text = BeautifulSoup(markup, "html.parser").get_text()
    return _WHITESPACE.sub(" ", text).strip()


def translate_definition(
    term: str,
    payload: DefinitionResponse,
    *,
    language: str,
) -> DictionaryEntry:
    """Pick the first non-empty sense listed for ``language``."""

    for usage in payload.usages(language):
        for sense in usage.definitions:
            text = html_to_text(sense.definition)
            if not text:
                continue
            category = usage.part_of_speech.lower() if usage.part_of_speech else None
            return DictionaryEntry(word=term, definition=text, category=category)
    return not_found(term)


def not_found(term: str) -> DictionaryEntry:
    return DictionaryEntry(word=term, error=NOT_FOUND)
