from __future__ import annotations

"""Hangul Unicode block constants.

This module is *domain* data (no I/O).

It provides:
  - The inclusive scalar-value ranges of the five Hangul blocks, in lookup order
  - The constants of the Unicode Hangul syllable algorithm:
    SBase + (LIndex * VCount + VIndex) * TCount + TIndex

Notes:
  - Syllables is listed first because it is by far the most common block in Korean text.
  - The ranges are disjoint, so the order only affects speed.
"""

from typing import Final

from hangul_text.domain.enums import HangulCharClass


# Hangul blocks (inclusive first/last scalar values)
SYLLABLES_FIRST: Final[int] = 0xAC00
SYLLABLES_LAST: Final[int] = 0xD7AF
JAMO_FIRST: Final[int] = 0x1100
JAMO_LAST: Final[int] = 0x11FF
COMPAT_JAMO_FIRST: Final[int] = 0x3130
COMPAT_JAMO_LAST: Final[int] = 0x318F
JAMO_EXT_A_FIRST: Final[int] = 0xA960
JAMO_EXT_A_LAST: Final[int] = 0xA97F
JAMO_EXT_B_FIRST: Final[int] = 0xD7B0
JAMO_EXT_B_LAST: Final[int] = 0xD7FF

BLOCK_RANGES: Final[tuple[tuple[int, int, HangulCharClass], ...]] = (
    (SYLLABLES_FIRST, SYLLABLES_LAST, HangulCharClass.Syllables),
    (JAMO_FIRST, JAMO_LAST, HangulCharClass.Jamo),
    (COMPAT_JAMO_FIRST, COMPAT_JAMO_LAST, HangulCharClass.CompatibilityJamo),
    (JAMO_EXT_A_FIRST, JAMO_EXT_A_LAST, HangulCharClass.JamoExtendedA),
    (JAMO_EXT_B_FIRST, JAMO_EXT_B_LAST, HangulCharClass.JamoExtendedB),
)


# Syllable algorithm constants
S_BASE: Final[int] = SYLLABLES_FIRST
L_BASE: Final[int] = 0x1100
V_BASE: Final[int] = 0x1161
# Trail index 0 means "no final", so the first real trail (ᆨ, U+11A8) is T_BASE + 1
T_BASE: Final[int] = 0x11A7

L_COUNT: Final[int] = 19
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT  # 588
S_COUNT: Final[int] = L_COUNT * N_COUNT  # 11172

# Last assigned syllable (힣). SYLLABLES_LAST is the end of the block, 12 code points further.
S_LAST_ASSIGNED: Final[int] = S_BASE + S_COUNT - 1
