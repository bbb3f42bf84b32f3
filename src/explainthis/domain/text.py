"""Text primitives used to score and summarise encyclopedia pages."""

from __future__ import annotations

import re
from typing import Final

# Shortest prefix ending in two alphanumerics, a full stop, a space and the next
# sentence's first character.
_SENTENCE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r".*?[A-Za-z0-9][A-Za-z0-9]\. [A-Za-z0-9]",
    re.DOTALL,
)
_SENTENCE_TRIM: Final[int] = 2
_SENTENCE_BREAK: Final[str] = ". "


def count_occurrences(haystack: str, needle: str, *, allow_overlapping: bool = False) -> int:
    """Count occurrences of ``needle`` in ``haystack``.

    An empty needle matches at every position including one past the end, so the
    result is ``len(haystack) + 1``.
    """

    if len(needle) <= 0:
        return len(haystack) + 1

    count = 0
    position = 0
    step = 1 if allow_overlapping else len(needle)
    while (position := haystack.find(needle, position)) >= 0:
        count += 1
        position += step
    return count


def extract_sentence(blurb: str) -> str:
    """Return the first sentence of an introductory extract.

    The match keeps the full stop: only the trailing space and lookahead character
    are cut. Without a match the text up to the first ``". "`` is used, and a blurb
    with no sentence break at all is returned unchanged.
    """

    match = _SENTENCE_PATTERN.match(blurb)
    if match is not None:
        return match.group()[:-_SENTENCE_TRIM]
    end = blurb.find(_SENTENCE_BREAK)
    if end < 0:
        return blurb
    return blurb[:end]
