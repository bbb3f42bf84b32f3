"""Explain a list of related subjects, each in the context of the whole list."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .resolution import explain

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from explainthis.config.resolution import ResolutionSettings

    from .ports import DefinitionLookup, Encyclopedia
    from .types import ExplainResult

log = getLogger(__name__)

type ResultCallback = Callable[[ExplainResult], None]


async def explain_many_related(
    subjects: Sequence[str],
    on_each: ResultCallback,
    *,
    dictionary: DefinitionLookup,
    encyclopedia: Encyclopedia,
    settings: ResolutionSettings | None = None,
) -> dict[str, ExplainResult]:
    """Resolve ``subjects`` sequentially, calling ``on_each`` after every result.

    Every resolution receives the full subject list as context. Repeated subjects
    are resolved again and overwrite their earlier entry.
    """

    context = tuple(subjects)
    results: dict[str, ExplainResult] = {}
    for subject in context:
        result = await explain(
            subject,
            context,
            dictionary=dictionary,
            encyclopedia=encyclopedia,
            settings=settings,
        )
        results[subject] = result
        on_each(result)
    log.debug("Explained %s subjects", len(results))
    return results
