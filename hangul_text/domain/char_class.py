from __future__ import annotations

"""Character classification and run splitting (domain layer).

Primary API:
- classify(ch) -> HangulCharClass
- split(text) -> list[Run]
"""

from typing import Iterator

from hangul_text.domain.enums import HangulCharClass
from hangul_text.domain.hangul_unicode import BLOCK_RANGES


# (class, text): a maximal, non-empty span whose characters share one class
Run = tuple[HangulCharClass, str]


def _scalar_value(ch: str | int) -> int | None:
    if isinstance(ch, int):
        return ch
    if len(ch) == 0:
        return None
    if len(ch) > 1:
        raise ValueError("classify() expected a single character, got %d: %r" % (len(ch), ch))
    return ord(ch)


def classify(ch: str | int) -> HangulCharClass:
    """Return the Hangul block a character (or scalar value) belongs to.

    The empty string and any value outside the five Hangul blocks classify as
    `HangulCharClass.None_`.

    Raises:
        ValueError: if `ch` is a string of more than one character.
    """
    cp = _scalar_value(ch)
    if cp is None:
        return HangulCharClass.None_
    for first, last, char_class in BLOCK_RANGES:
        if first <= cp <= last:
            return char_class
    return HangulCharClass.None_


def iter_runs(text: str) -> Iterator[Run]:
    """Yield the maximal same-class runs of `text`, left to right."""
    start = 0
    current: HangulCharClass | None = None
    for idx, ch in enumerate(text):
        char_class = classify(ch)
        if current is None:
            current = char_class
        elif char_class != current:
            yield current, text[start:idx]
            start = idx
            current = char_class
    if current is not None:
        yield current, text[start:]


def split(text: str) -> list[Run]:
    """Split `text` into maximal runs of same-class characters.

    Joining the run texts in order gives back `text`, and no two neighbouring
    runs share a class. Empty input gives an empty list.
    """
    return list(iter_runs(text))
