from __future__ import annotations

import pytest

from hangul_text import (
    COMPAT_TABLE,
    HangulCharClass,
    classify,
    decompose_all,
    to_compat,
    to_compat_or_self,
    to_compat_text,
)


@pytest.mark.parametrize("jamo,compat", [
    ("\u1100", "ㄱ"),  # leading kiyeok
    ("\u11a8", "ㄱ"),  # trailing kiyeok
    ("\u1102", "ㄴ"),
    ("\u11ab", "ㄴ"),
    ("\u11aa", "ㄳ"),  # trailing cluster
    ("\u11b9", "ㅄ"),
    ("\u1104", "ㄸ"),  # lead-only double
    ("\u1161", "ㅏ"),
    ("\u1174", "ㅢ"),
    ("\u1175", "ㅣ"),
    ("\u11c2", "ㅎ"),
])
def test_to_compat_known(jamo: str, compat: str) -> None:
    assert to_compat(jamo) == compat


@pytest.mark.parametrize("ch", ["a", "", "가", "ㄱ", "\ua960", "\ud7cb", "\u1113", "\u11c3", "\u1176"])
def test_to_compat_unmapped(ch: str) -> None:
    assert to_compat(ch) is None
    assert to_compat_or_self(ch) == ch


def test_table_shape() -> None:
    assert len(COMPAT_TABLE) == 19 + 21 + 27
    assert all(classify(k) is HangulCharClass.Jamo for k in COMPAT_TABLE)
    assert all(classify(v) is HangulCharClass.CompatibilityJamo for v in COMPAT_TABLE.values())


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        COMPAT_TABLE["x"] = "y"  # type: ignore[index]


def test_every_syllable_jamo_has_compat() -> None:
    jamo = set(decompose_all("".join(chr(cp) for cp in range(0xAC00, 0xD7A4))))
    assert all(to_compat(j) is not None for j in jamo)


def test_compat_idempotence() -> None:
    for cp in list(range(0x1100, 0x1200)) + list(range(0x3130, 0x3190)) + [0x41, 0xAC00]:
        once = to_compat_or_self(chr(cp))
        if classify(once) is HangulCharClass.CompatibilityJamo:
            assert to_compat_or_self(once) == once


def test_to_compat_text() -> None:
    assert to_compat_text(decompose_all("안녕!")) == "ㅇㅏㄴㄴㅕㅇ!"
