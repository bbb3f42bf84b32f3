"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from explainthis.adapters.wikipedia import WikipediaClient
from explainthis.adapters.wiktionary import WiktionaryClient
from explainthis.config import (
    get_language,
    get_resolution_settings,
    get_storage_config,
    get_wikipedia_config,
    get_wiktionary_config,
)
from explainthis.domain import explain, explain_many_related

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from explainthis.adapters.http_resilience import ResilientClient
    from explainthis.config import ResilienceConfig, ResolutionSettings
    from explainthis.domain import ExplainResult

type ClientFactory = Callable[[ResilienceConfig], ResilientClient]

log = getLogger(__name__)


def _build_clients(
    client_factory: ClientFactory | None,
) -> tuple[WiktionaryClient, WikipediaClient]:
    storage = get_storage_config()
    dictionary = WiktionaryClient(
        config=get_wiktionary_config(storage=storage),
        client_factory=client_factory,
    )
    encyclopedia = WikipediaClient(
        config=get_wikipedia_config(storage=storage),
        client_factory=client_factory,
    )
    return dictionary, encyclopedia


def explain_subject(
    subject: str,
    context: Sequence[str] = (),
    *,
    settings: ResolutionSettings | None = None,
    client_factory: ClientFactory | None = None,
) -> ExplainResult:
    """Explain one subject using Wiktionary and Wikipedia."""

    return asyncio.run(
        _explain_subject_async(
            subject,
            context,
            settings=settings,
            client_factory=client_factory,
        )
    )


def explain_subjects(
    subjects: Sequence[str],
    on_each: Callable[[ExplainResult], None],
    *,
    settings: ResolutionSettings | None = None,
    client_factory: ClientFactory | None = None,
) -> dict[str, ExplainResult]:
    """Explain related subjects in order, each using the whole list as context."""

    return asyncio.run(
        _explain_subjects_async(
            subjects,
            on_each,
            settings=settings,
            client_factory=client_factory,
        )
    )


async def _explain_subject_async(
    subject: str,
    context: Sequence[str],
    *,
    settings: ResolutionSettings | None,
    client_factory: ClientFactory | None,
) -> ExplainResult:
    effective = settings or get_resolution_settings(language=get_language())
    dictionary, encyclopedia = _build_clients(client_factory)
    async with dictionary, encyclopedia:
        return await explain(
            subject,
            context,
            dictionary=dictionary,
            encyclopedia=encyclopedia,
            settings=effective,
        )


async def _explain_subjects_async(
    subjects: Sequence[str],
    on_each: Callable[[ExplainResult], None],
    *,
    settings: ResolutionSettings | None,
    client_factory: ClientFactory | None,
) -> dict[str, ExplainResult]:
    effective = settings or get_resolution_settings(language=get_language())
    dictionary, encyclopedia = _build_clients(client_factory)
    log.info("Explaining %s related subjects", len(subjects))
    async with dictionary, encyclopedia:
        return await explain_many_related(
            subjects,
            on_each,
            dictionary=dictionary,
            encyclopedia=encyclopedia,
            settings=effective,
        )
