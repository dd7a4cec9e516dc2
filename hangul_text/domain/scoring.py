from __future__ import annotations

"""Typed-answer scoring (domain layer).

Counts how much of a user's input matches the expected Hangul, jamo by jamo
(or keystroke by keystroke), from the start. Counting stops at the first
mismatch, so a half-typed syllable still earns credit for the jamo already
entered.
"""

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from hangul_text.domain.keystrokes import to_compat_jamos, to_keystrokes


@dataclass(frozen=True)
class ScoreResult:
    correct: int
    total: int


@dataclass(frozen=True)
class BestAnswer:
    answer: str
    correct: int
    # math.inf when no answer was scored
    total: int | float
    is_completely_correct: bool


def _common_prefix_length(expected: Sequence[str], actual: Sequence[str]) -> int:
    count = 0
    for want, got in zip(expected, actual):
        if want != got:
            break
        count += 1
    return count


def _score(expected: str, actual: str, units: Callable[[str], list[str]]) -> ScoreResult:
    want = units(expected)
    got = units(actual)
    return ScoreResult(correct=_common_prefix_length(want, got), total=len(want))


def calculate_correct_jamos(expected: str, actual: str) -> ScoreResult:
    """Score `actual` against `expected` in compatibility jamo.

    Example: ("안녕", "아녕") -> ScoreResult(correct=3, total=6)
    """
    return _score(expected, actual, to_compat_jamos)


def calculate_correct_keystrokes(expected: str, actual: str) -> ScoreResult:
    """Score `actual` against `expected` in 2-set keystrokes.

    Compound jamo count as several keystrokes, so "김믽" scores 7 of 8
    against "김민지".
    """
    return _score(expected, actual, to_keystrokes)


def calculate_best_answer(possible_answers: Iterable[str], user_input: str) -> BestAnswer:
    """Pick the accepted answer that `user_input` is closest to, by keystrokes.

    An exact match wins immediately with `is_completely_correct=True`.
    Otherwise the answer with the most correct keystrokes wins; on a tie the
    shorter (or later, equally long) answer wins. With no answers at all the
    result is `BestAnswer("", 0, math.inf, False)`.
    """
    best = BestAnswer(answer="", correct=0, total=math.inf, is_completely_correct=False)
    for answer in possible_answers:
        result = calculate_correct_keystrokes(answer, user_input)
        if answer == user_input:
            return BestAnswer(answer, result.correct, result.total, is_completely_correct=True)
        if result.correct > best.correct or (result.correct == best.correct and result.total <= best.total):
            best = BestAnswer(answer, result.correct, result.total, is_completely_correct=False)
    return best
