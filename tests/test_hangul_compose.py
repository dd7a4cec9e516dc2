import pytest

from hangul_text import compose_syllable, decompose_syllable
from hangul_text.domain.hangul_unicode import S_BASE, S_LAST_ASSIGNED


def test_compose_compat_jamo_basic():
    assert compose_syllable("ㄱ", "ㅏ") == "가"
    assert compose_syllable("ㄴ", "ㅣ") == "니"
    assert compose_syllable("ㄱ", "ㅏ", "ㄴ") == "간"
    assert compose_syllable("ㅎ", "ㅣ", "ㅎ") == "힣"


def test_compose_positional_jamo():
    assert compose_syllable("\u1102", "\u1173", "\u11ab") == "는"
    assert compose_syllable("\u110b", "\u1175") == "이"


def test_compose_mixed_forms():
    assert compose_syllable("\u1102", "ㅡ", "ㄴ") == "는"


def test_compose_empty_trail_means_no_final():
    assert compose_syllable("ㄱ", "ㅏ", "") == "가"
    assert compose_syllable("ㄱ", "ㅏ", None) == "가"


@pytest.mark.parametrize("lead,vowel,trail", [
    ("", "ㅏ", None),
    ("ㄱ", "", None),
    ("ㅏ", "ㄱ", None),       # swapped
    ("ㄸ", "ㅏ", "ㄸ"),       # ㄸ is never a final
    ("ㄱ", "ㅏ", "ᆧ"),   # vowel sitting just before the finals
    ("a", "ㅏ", None),
    ("ㄱㄱ", "ㅏ", None),
])
def test_compose_invalid(lead, vowel, trail):
    with pytest.raises(ValueError):
        compose_syllable(lead, vowel, trail)


def test_compose_inverts_decompose():
    for cp in range(S_BASE, S_LAST_ASSIGNED + 1):
        ch = chr(cp)
        assert compose_syllable(*decompose_syllable(ch)) == ch
    assert chr(S_LAST_ASSIGNED) == "\ud7a3"  # 힣
