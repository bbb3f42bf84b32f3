"""Wiktionary dictionary adapter."""

from __future__ import annotations

from .client import WiktionaryAPIError, WiktionaryClient
from .schema import DefinitionResponse
from .translator import html_to_text, translate_definition

__all__ = [
    "DefinitionResponse",
    "WiktionaryAPIError",
    "WiktionaryClient",
    "html_to_text",
    "translate_definition",
]
