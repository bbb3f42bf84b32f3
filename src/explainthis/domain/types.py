"""Result and candidate types produced by subject resolution."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Final

FALLBACK_CONFIDENCE: Final[float] = 0.5
UNIDENTIFIED_MESSAGE: Final[str] = "Could not identify this subject."


class ExplanationKind(StrEnum):
    DEFINITION = "definition"
    WIKIPEDIA = "wikipedia"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class DictionaryEntry:
    """Dictionary provider answer for a term.

    ``definition`` is ``None`` (or blank) when the provider knows no definition;
    ``error`` then carries the provider's reason, e.g. ``"not found"``.
    """

    word: str
    definition: str | None = None
    category: str | None = None
    error: str | None = None

    @property
    def has_definition(self) -> bool:
        return bool(self.definition and self.definition.strip())


@dataclass(slots=True)
class Candidate:
    """An explored encyclopedia page and its relevance to the caller's context."""

    title: str
    content: str | None = None
    blurb: str | None = None
    sentence: str | None = None
    related: float = 0.0

    @property
    def is_complete(self) -> bool:
        return bool(self.content) and bool(self.blurb)


@dataclass(slots=True, frozen=True)
class Ranking:
    title: str
    related: float


@dataclass(slots=True, frozen=True)
class WikipediaExpansion:
    top_result: Candidate
    all_results: list[Candidate]
    search: str
    rankings: list[Ranking] = field(default_factory=list["Ranking"])

    def to_dict(self) -> dict[str, object]:
        return {
            "topResult": asdict(self.top_result),
            "allResults": [asdict(candidate) for candidate in self.all_results],
            "search": self.search,
            "rankings": [asdict(ranking) for ranking in self.rankings],
        }


@dataclass(slots=True, frozen=True)
class ErrorExpansion:
    value: str

    def to_dict(self) -> dict[str, object]:
        return {"value": self.value}


type Expansion = DictionaryEntry | WikipediaExpansion | ErrorExpansion


@dataclass(slots=True, frozen=True)
class ExplainResult:
    """Normalised answer for one subject."""

    type: ExplanationKind
    value: str
    confidence: float
    input: str
    expanded: Expansion

    @classmethod
    def from_definition(cls, subject: str, entry: DictionaryEntry) -> ExplainResult:
        return cls(
            type=ExplanationKind.DEFINITION,
            value=entry.definition or "",
            confidence=FALLBACK_CONFIDENCE,
            input=subject,
            expanded=entry,
        )

    @classmethod
    def from_candidates(
        cls,
        subject: str,
        top_result: Candidate,
        candidates: list[Candidate],
    ) -> ExplainResult:
        return cls(
            type=ExplanationKind.WIKIPEDIA,
            value=top_result.sentence or "",
            confidence=FALLBACK_CONFIDENCE,
            input=subject,
            expanded=WikipediaExpansion(
                top_result=top_result,
                all_results=candidates,
                search=subject,
                rankings=[Ranking(title=c.title, related=c.related) for c in candidates],
            ),
        )

    @classmethod
    def unidentified(cls, subject: str) -> ExplainResult:
        return cls(
            type=ExplanationKind.ERROR,
            value=UNIDENTIFIED_MESSAGE,
            confidence=0,
            input=subject,
            expanded=ErrorExpansion(value=UNIDENTIFIED_MESSAGE),
        )

    def to_dict(self) -> dict[str, object]:
        if isinstance(self.expanded, DictionaryEntry):
            expanded = asdict(self.expanded)
        else:
            expanded = self.expanded.to_dict()
        return {
            "type": str(self.type),
            "value": self.value,
            "confidence": self.confidence,
            "input": self.input,
            "expanded": expanded,
        }
