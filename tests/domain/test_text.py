from __future__ import annotations

import pytest

from explainthis.domain.text import count_occurrences, extract_sentence


@pytest.mark.parametrize("haystack", ["", "abc", "a longer sentence with spaces"])
@pytest.mark.parametrize("allow_overlapping", [False, True])
def test_empty_needle_matches_every_position(haystack: str, allow_overlapping: bool) -> None:
    count = count_occurrences(haystack, "", allow_overlapping=allow_overlapping)

    assert count == len(haystack) + 1


def test_count_occurrences_without_overlap() -> None:
    assert count_occurrences("aaaa", "aa") == 2


def test_count_occurrences_with_overlap() -> None:
    assert count_occurrences("aaaa", "aa", allow_overlapping=True) == 3


def test_count_occurrences_missing_needle() -> None:
    assert count_occurrences("the cat sat", " dog ") == 0


def test_count_occurrences_requires_padding_for_whole_words() -> None:
    assert count_occurrences("the cat sat", " cat ") == 1
    assert count_occurrences("the cats sat", " cat ") == 0


def test_extract_sentence_keeps_full_stop() -> None:
    assert extract_sentence("Dogs are animals. They bark.") == "Dogs are animals."


def test_extract_sentence_without_break_returns_blurb() -> None:
    assert extract_sentence("No sentence break here") == "No sentence break here"


def test_extract_sentence_spans_lines() -> None:
    blurb = "Photosynthesis is a process\nused by plants. It converts light."

    assert extract_sentence(blurb) == "Photosynthesis is a process\nused by plants."


def test_extract_sentence_falls_back_to_first_break() -> None:
    # a single letter before the full stop does not satisfy the sentence pattern
    blurb = "Named after A. Smith, the unit"

    assert extract_sentence(blurb) == "Named after A"


def test_extract_sentence_uses_shortest_prefix() -> None:
    blurb = "First one. Second one. Third one."

    assert extract_sentence(blurb) == "First one."
