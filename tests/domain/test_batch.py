from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

import explainthis.domain.batch as batch_module
from explainthis.domain.batch import explain_many_related
from explainthis.domain.types import DictionaryEntry, ExplainResult, ExplanationKind
from tests.support.fakes import FakeDictionary, FakeEncyclopedia, FakePage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from explainthis.config.resolution import ResolutionSettings


def test_callback_runs_once_per_subject_in_order(fast_settings: ResolutionSettings) -> None:
    dictionary = FakeDictionary(
        entries={
            "a": DictionaryEntry(word="a", definition="First letter."),
            "b": DictionaryEntry(word="b", definition="Second letter."),
        }
    )
    seen: list[str] = []

    results = asyncio.run(
        explain_many_related(
            ["a", "b"],
            lambda result: seen.append(result.input),
            dictionary=dictionary,
            encyclopedia=FakeEncyclopedia(),
            settings=fast_settings,
        )
    )

    assert seen == ["a", "b"]
    assert list(results) == ["a", "b"]
    assert all(r.type is ExplanationKind.DEFINITION for r in results.values())


def test_callback_fires_before_next_subject_starts(fast_settings: ResolutionSettings) -> None:
    dictionary = FakeDictionary()
    events: list[str] = []

    class TracingDictionary:
        async def lookup(self, term: str, *, language: str = "en") -> DictionaryEntry:
            events.append(f"lookup:{term}")
            return await dictionary.lookup(term, language=language)

    asyncio.run(
        explain_many_related(
            ["x", "y"],
            lambda result: events.append(f"done:{result.input}"),
            dictionary=TracingDictionary(),
            encyclopedia=FakeEncyclopedia(),
            settings=fast_settings,
        )
    )

    assert events == ["lookup:x", "done:x", "lookup:y", "done:y"]


def test_whole_list_is_context_for_every_subject(
    fast_settings: ResolutionSettings,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    contexts: list[list[str]] = []

    async def fake_explain(
        subject: str,
        context: Sequence[str] = (),
        **_: object,
    ) -> ExplainResult:
        contexts.append(list(context))
        return ExplainResult.unidentified(subject)

    monkeypatch.setattr(batch_module, "explain", fake_explain)

    asyncio.run(
        explain_many_related(
            ["a", "b"],
            lambda _result: None,
            dictionary=FakeDictionary(),
            encyclopedia=FakeEncyclopedia(),
            settings=fast_settings,
        )
    )

    assert contexts == [["a", "b"], ["a", "b"]]


def test_context_boosts_related_pages(fast_settings: ResolutionSettings) -> None:
    encyclopedia = FakeEncyclopedia(
        search_results={"bark": ["Bark (sound)", "Bark (botany)"], "tree": ["Tree"]},
        pages={
            "Bark (sound)": FakePage(
                content="a bark is the loud sound a dog makes when alarmed ",
                blurb="A bark is a sound made by dogs. Also seals.",
            ),
            "Bark (botany)": FakePage(
                content="the bark protects a tree and every tree trunk and tree root ",
                blurb="Bark is the outermost layer of trees. It protects.",
            ),
            "Tree": FakePage(
                content="a tree has bark and a trunk ",
                blurb="A tree is a perennial plant. It has a trunk.",
            ),
        },
    )

    results = asyncio.run(
        explain_many_related(
            ["bark", "tree"],
            lambda _result: None,
            dictionary=FakeDictionary(),
            encyclopedia=encyclopedia,
            settings=fast_settings,
        )
    )

    assert results["bark"].value == "Bark is the outermost layer of trees."
    assert results["tree"].value == "A tree is a perennial plant."


def test_duplicate_subjects_overwrite_in_place(fast_settings: ResolutionSettings) -> None:
    seen: list[str] = []

    results = asyncio.run(
        explain_many_related(
            ["a", "b", "a"],
            lambda result: seen.append(result.input),
            dictionary=FakeDictionary(),
            encyclopedia=FakeEncyclopedia(),
            settings=fast_settings,
        )
    )

    assert seen == ["a", "b", "a"]
    assert list(results) == ["a", "b"]
