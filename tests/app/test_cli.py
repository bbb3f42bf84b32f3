from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from explainthis.domain.types import DictionaryEntry, ExplainResult
from explainthis.ui import cli

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


def _definition(subject: str) -> ExplainResult:
    return ExplainResult.from_definition(
        subject,
        DictionaryEntry(word=subject, definition=f"Meaning of {subject}."),
    )


def test_explain_command_prints_result(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    calls: list[tuple[str, list[str]]] = []

    def fake_explain_subject(subject: str, context: Sequence[str] = ()) -> ExplainResult:
        calls.append((subject, list(context)))
        return _definition(subject)

    monkeypatch.setattr(cli, "explain_subject", fake_explain_subject)

    cli.main(["explain", "dog", "--context", "cat", "pet"])

    assert calls == [("dog", ["cat", "pet"])]
    assert capsys.readouterr().out.strip() == "dog: [definition] Meaning of dog."


def test_many_command_prints_each_result_as_json(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def fake_explain_subjects(
        subjects: Sequence[str],
        on_each: Callable[[ExplainResult], None],
    ) -> dict[str, ExplainResult]:
        results: dict[str, ExplainResult] = {}
        for subject in subjects:
            results[subject] = _definition(subject)
            on_each(results[subject])
        return results

    monkeypatch.setattr(cli, "explain_subjects", fake_explain_subjects)

    cli.main(["many", "leaf", "root", "--json"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["input"] for line in lines] == ["leaf", "root"]
    assert json.loads(lines[0])["type"] == "definition"


def test_fatal_error_exits_with_status_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_explain_subject(subject: str, context: Sequence[str] = ()) -> ExplainResult:
        raise RuntimeError(f"network down for {subject} {context}")

    monkeypatch.setattr(cli, "explain_subject", failing_explain_subject)

    with pytest.raises(SystemExit) as exc:
        cli.main(["explain", "dog"])

    assert exc.value.code == 1


def test_configuration_error_exits_with_status_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPLAINTHIS_HTTP_CACHE", "redis")

    with pytest.raises(SystemExit) as exc:
        cli.main(["explain", "dog"])

    assert exc.value.code == 2


def test_missing_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])

    assert exc.value.code == 2
