from __future__ import annotations

import math

import pytest

from hangul_text import (
    BestAnswer,
    ScoreResult,
    calculate_best_answer,
    calculate_correct_jamos,
    calculate_correct_keystrokes,
    split_compat_into_keystrokes,
    to_compat_jamos,
    to_keystrokes,
)


def test_split_compat_into_keystrokes() -> None:
    assert split_compat_into_keystrokes("ㄵ") == ("ㄴ", "ㅈ")
    assert split_compat_into_keystrokes("ㅘ") == ("ㅗ", "ㅏ")
    assert split_compat_into_keystrokes("ㄲ") == ("ㄲ",)
    assert split_compat_into_keystrokes("ㅖ") == ("ㅖ",)
    assert split_compat_into_keystrokes("a") == ("a",)


def test_to_compat_jamos() -> None:
    assert to_compat_jamos("안녕") == ["ㅇ", "ㅏ", "ㄴ", "ㄴ", "ㅕ", "ㅇ"]
    assert to_compat_jamos("") == []


def test_to_keystrokes() -> None:
    assert to_keystrokes("김민지") == ["ㄱ", "ㅣ", "ㅁ", "ㅁ", "ㅣ", "ㄴ", "ㅈ", "ㅣ"]
    assert to_keystrokes("의") == ["ㅇ", "ㅡ", "ㅣ"]
    assert to_keystrokes("닭") == ["ㄷ", "ㅏ", "ㄹ", "ㄱ"]


@pytest.mark.parametrize("expected,actual,correct,total", [
    ("", "안녕", 0, 0),
    ("안녕", "안녕", 6, 6),
    ("안녕", "안", 3, 6),
    ("안녕", "ㅇ", 1, 6),           # compatibility jamo, mid-composition
    ("안녕", "\u110b", 1, 6),  # positional jamo, mid-composition
    ("안녕", "아녕", 3, 6),
    ("안녕", "", 0, 6),
    ("안", "안녕하세요", 3, 3),
    ("좋은", "좋은", 6, 6),
    ("좋은", "좋", 3, 6),
    ("안녕", "가나", 0, 6),
    ("테스트", "테스트", 6, 6),
])
def test_calculate_correct_jamos(expected: str, actual: str, correct: int, total: int) -> None:
    assert calculate_correct_jamos(expected, actual) == ScoreResult(correct, total)


@pytest.mark.parametrize("expected,actual,correct,total", [
    ("", "안녕", 0, 0),
    ("안녕", "안녕", 6, 6),
    ("안녕", "ㅇ", 1, 6),
    ("안녕", "아녕", 3, 6),
    ("김민지", "김믽", 7, 8),
    ("안", "안녕하세요", 3, 3),
    ("좋은", "좋", 3, 6),
])
def test_calculate_correct_keystrokes(expected: str, actual: str, correct: int, total: int) -> None:
    assert calculate_correct_keystrokes(expected, actual) == ScoreResult(correct, total)


def test_jamo_and_keystroke_scores_differ_on_compound_jamo() -> None:
    assert calculate_correct_jamos("김민지", "김믽") == ScoreResult(5, 8)


@pytest.mark.parametrize("answers,user_input,expected", [
    # exact match wins even when listed after a longer answer
    (["안녕하세요", "안녕"], "안녕", BestAnswer("안녕", 6, 6, True)),
    ([""], "", BestAnswer("", 0, 0, True)),
    # most correct keystrokes wins
    (["사과", "사랑"], "사랑해", BestAnswer("사랑", 5, 5, False)),
    # same correct count: the shorter answer wins, whatever the order
    (["안녕하세요", "안녕"], "안", BestAnswer("안녕", 3, 6, False)),
    (["안녕", "안녕하세요"], "안", BestAnswer("안녕", 3, 6, False)),
    # same correct count and length: the later answer wins
    (["가", "나"], "다", BestAnswer("나", 0, 2, False)),
])
def test_calculate_best_answer(answers: list[str], user_input: str, expected: BestAnswer) -> None:
    assert calculate_best_answer(answers, user_input) == expected


def test_calculate_best_answer_without_answers() -> None:
    best = calculate_best_answer([], "안녕")
    assert best == BestAnswer("", 0, math.inf, False)
    assert not best.is_completely_correct
