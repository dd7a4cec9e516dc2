from __future__ import annotations

"""Hangul composition helpers (domain layer).

The inverse of `hangul_decompose`: builds one precomposed syllable from a lead,
a vowel and an optional trail. Each jamo may be given in positional form
(U+1100 block, as `decompose_syllable` returns them) or in compatibility form
(U+3130 block, as typed on a keyboard).

Primary API:
- compose_syllable(lead, vowel, trail=None)
"""

from typing import Final

from hangul_text.domain.hangul_unicode import L_BASE, L_COUNT, N_COUNT, S_BASE, T_BASE, T_COUNT, V_BASE, V_COUNT


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG) if j}


def _index(ch: str, base: int, count: int, compat_map: dict[str, int]) -> int | None:
    if len(ch) != 1:
        return None
    offset = ord(ch) - base
    if 0 <= offset < count:
        return offset
    return compat_map.get(ch)


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def compose_syllable(lead: str, vowel: str, trail: str | None = None) -> str:
    """Compose a Hangul syllable from its jamo.

    Args:
        lead: leading consonant, e.g. "ᄂ" or "ㄴ"
        vowel: vowel, e.g. "ᅳ" or "ㅡ"
        trail: trailing consonant, e.g. "ᆫ" or "ㄴ"; None or "" for no final

    Returns:
        The composed syllable, e.g. "는".

    Raises:
        ValueError: if any jamo cannot take the given position in a modern syllable.

    Notes:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    li = _index(lead or "", L_BASE, L_COUNT, _CHO_MAP)
    vi = _index(vowel or "", V_BASE, V_COUNT, _JUNG_MAP)
    ti: int | None = 0
    if trail:
        ti = _index(trail, T_BASE, T_COUNT, _JONG_MAP)
        # U+11A7 sits at offset 0 but is a vowel, not a final
        if ti == 0:
            ti = None

    if li is None or vi is None or ti is None:
        raise ValueError(
            "Invalid jamo for compose_syllable: lead=%r vowel=%r trail=%r" % (lead, vowel, trail)
        )

    return chr(S_BASE + li * N_COUNT + vi * T_COUNT + ti)
