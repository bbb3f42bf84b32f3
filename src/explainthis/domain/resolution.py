"""Resolve a subject by racing a dictionary lookup against an encyclopedia search."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from explainthis.config.resolution import ResolutionSettings

from .ranking import rank_candidates, select_top_result
from .types import ExplainResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .ports import DefinitionLookup, Encyclopedia

log = getLogger(__name__)


async def explain(
    subject: str,
    context: Sequence[str] = (),
    *,
    dictionary: DefinitionLookup,
    encyclopedia: Encyclopedia,
    settings: ResolutionSettings | None = None,
) -> ExplainResult:
    """Explain ``subject``, preferring a dictionary definition.

    The dictionary lookup runs as its own task against a deadline. A definition
    that arrives in time wins outright; an empty answer falls back to the
    encyclopedia immediately, and a lookup still pending at the deadline is
    cancelled so its answer can never replace the fallback result.

    Unidentifiable subjects produce an error-typed result. Transport failures
    from either service propagate to the caller.
    """

    effective = settings or ResolutionSettings()
    lookup = asyncio.create_task(
        dictionary.lookup(subject, language=effective.language),
        name=f"dictionary-lookup:{subject}",
    )
    try:
        done, _ = await asyncio.wait({lookup}, timeout=effective.timeout_seconds)
    finally:
        if not lookup.done():
            lookup.cancel()

    if lookup in done:
        entry = lookup.result()
        if entry.has_definition:
            log.info("Explained %r from the dictionary", subject)
            return ExplainResult.from_definition(subject, entry)
        log.debug("No dictionary definition for %r (%s)", subject, entry.error)
    else:
        log.warning(
            "Dictionary lookup for %r exceeded %.1fs; discarding it",
            subject,
            effective.timeout_seconds,
        )

    return await explain_from_encyclopedia(
        subject,
        context,
        encyclopedia=encyclopedia,
        settings=effective,
    )


async def explain_from_encyclopedia(
    subject: str,
    context: Sequence[str] = (),
    *,
    encyclopedia: Encyclopedia,
    settings: ResolutionSettings | None = None,
) -> ExplainResult:
    effective = settings or ResolutionSettings()
    titles = await encyclopedia.search(subject, limit=effective.search_limit)
    if not titles:
        log.info("Encyclopedia search found nothing for %r", subject)
        return ExplainResult.unidentified(subject)

    candidates = await rank_candidates(encyclopedia, titles, context)
    top = select_top_result(candidates, titles, margin=effective.tie_margin)
    if top is not None and not top.sentence:
        log.debug("Top page %r for %r has no text; trying the next ranked page", top.title, subject)
        top = next((candidate for candidate in candidates if candidate.sentence), None)
    if top is None:
        log.info("No usable page text for %r among %s", subject, titles)
        return ExplainResult.unidentified(subject)

    log.info("Explained %r from encyclopedia page %r", subject, top.title)
    return ExplainResult.from_candidates(subject, top, candidates)
