"""Exploring candidate encyclopedia pages and ranking them against a context."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from explainthis.config.resolution import DEFAULT_TIE_MARGIN

from .text import count_occurrences, extract_sentence
from .types import Candidate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .ports import Encyclopedia

log = getLogger(__name__)


async def explore_page(encyclopedia: Encyclopedia, title: str) -> Candidate:
    """Fetch the full article and its introduction for ``title`` concurrently."""

    try:
        async with asyncio.TaskGroup() as group:
            content = group.create_task(encyclopedia.fetch_extract(title))
            blurb = group.create_task(encyclopedia.fetch_extract(title, intro_only=True))
    except ExceptionGroup as failure:
        # surface the first fetch error as-is; the sibling fetch is already cancelled
        raise failure.exceptions[0] from None
    return Candidate(title=title, content=content.result(), blurb=blurb.result())


def relatedness(content: str, context: Sequence[str]) -> float:
    """Percentage of ``content`` characters accounted for by whole-word context hits."""

    lowered = content.lower()
    matches = 0
    for word in context:
        matches += count_occurrences(lowered, f" {word.strip().lower()} ")
    return matches / len(content) * 100


def score_candidate(candidate: Candidate, context: Sequence[str]) -> Candidate:
    candidate.sentence = candidate.blurb
    if not candidate.is_complete:
        log.warning("Page %r is missing content or blurb; scoring it 0", candidate.title)
        candidate.related = 0.0
        return candidate

    candidate.sentence = extract_sentence(candidate.blurb)
    candidate.related = relatedness(candidate.content, context)
    log.debug("Page %r scored %.4f", candidate.title, candidate.related)
    return candidate


async def rank_candidates(
    encyclopedia: Encyclopedia,
    titles: Sequence[str],
    context: Sequence[str],
) -> list[Candidate]:
    """Explore ``titles`` one after another and order them by descending relevance."""

    candidates: list[Candidate] = []
    for title in titles:
        candidate = await explore_page(encyclopedia, title)
        candidates.append(score_candidate(candidate, context))
    return sorted(candidates, key=lambda candidate: candidate.related, reverse=True)


def select_top_result(
    candidates: Sequence[Candidate],
    search_results: Sequence[str],
    *,
    margin: float = DEFAULT_TIE_MARGIN,
) -> Candidate | None:
    """Pick the winner of an ordered candidate list.

    When the best score does not beat the runner-up by ``margin`` the search
    service's own first suggestion wins instead.
    """

    if not candidates:
        return None
    top = candidates[0]
    if len(candidates) >= 2 and candidates[0].related < candidates[1].related * margin:
        preferred = search_results[0] if search_results else None
        top = next((c for c in candidates if c.title == preferred), top)
        log.debug("Scores too close; preferring search suggestion %r", top.title)
    return top
