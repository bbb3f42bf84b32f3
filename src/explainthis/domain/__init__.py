"""Subject resolution core: ranking, sentence extraction and the dictionary race."""

from __future__ import annotations

from .batch import explain_many_related
from .resolution import explain
from .types import (
    FALLBACK_CONFIDENCE,
    UNIDENTIFIED_MESSAGE,
    Candidate,
    DictionaryEntry,
    ErrorExpansion,
    ExplainResult,
    ExplanationKind,
    Ranking,
    WikipediaExpansion,
)

__all__ = [
    "FALLBACK_CONFIDENCE",
    "UNIDENTIFIED_MESSAGE",
    "Candidate",
    "DictionaryEntry",
    "ErrorExpansion",
    "ExplainResult",
    "ExplanationKind",
    "Ranking",
    "WikipediaExpansion",
    "explain",
    "explain_many_related",
]
