from __future__ import annotations

"""Positional Hangul Jamo -> Hangul Compatibility Jamo (domain layer).

Positional jamo (U+1100 block) are meant to combine into syllables. Shown on
their own, terminals space them inconsistently. Their compatibility
counterparts (U+3130 block) are spacing characters and display cleanly in
isolation.

Leading and trailing forms of the same consonant map to one compatibility
character, so the table is many-to-one. It is never keyed on a compatibility
character, so mapping twice is the same as mapping once.

Jamo Extended-A/B and archaic jamo have no entry here and map to None.
"""

from types import MappingProxyType
from typing import Final, Mapping


# -----------------------------------------------------------------------------
# Domain data
# -----------------------------------------------------------------------------
#
# Keys are written as escapes: leading and trailing forms look identical in
# most fonts. The comment column shows the glyph.

_LEADING: Final[dict[str, str]] = {
    "\u1100": "ㄱ",  # ᄀ
    "\u1101": "ㄲ",  # ᄁ
    "\u1102": "ㄴ",  # ᄂ
    "\u1103": "ㄷ",  # ᄃ
    "\u1104": "ㄸ",  # ᄄ
    "\u1105": "ㄹ",  # ᄅ
    "\u1106": "ㅁ",  # ᄆ
    "\u1107": "ㅂ",  # ᄇ
    "\u1108": "ㅃ",  # ᄈ
    "\u1109": "ㅅ",  # ᄉ
    "\u110a": "ㅆ",  # ᄊ
    "\u110b": "ㅇ",  # ᄋ
    "\u110c": "ㅈ",  # ᄌ
    "\u110d": "ㅉ",  # ᄍ
    "\u110e": "ㅊ",  # ᄎ
    "\u110f": "ㅋ",  # ᄏ
    "\u1110": "ㅌ",  # ᄐ
    "\u1111": "ㅍ",  # ᄑ
    "\u1112": "ㅎ",  # ᄒ
}

_VOWELS: Final[dict[str, str]] = {
    "\u1161": "ㅏ",  # ᅡ
    "\u1162": "ㅐ",  # ᅢ
    "\u1163": "ㅑ",  # ᅣ
    "\u1164": "ㅒ",  # ᅤ
    "\u1165": "ㅓ",  # ᅥ
    "\u1166": "ㅔ",  # ᅦ
    "\u1167": "ㅕ",  # ᅧ
    "\u1168": "ㅖ",  # ᅨ
    "\u1169": "ㅗ",  # ᅩ
    "\u116a": "ㅘ",  # ᅪ
    "\u116b": "ㅙ",  # ᅫ
    "\u116c": "ㅚ",  # ᅬ
    "\u116d": "ㅛ",  # ᅭ
    "\u116e": "ㅜ",  # ᅮ
    "\u116f": "ㅝ",  # ᅯ
    "\u1170": "ㅞ",  # ᅰ
    "\u1171": "ㅟ",  # ᅱ
    "\u1172": "ㅠ",  # ᅲ
    "\u1173": "ㅡ",  # ᅳ
    "\u1174": "ㅢ",  # ᅴ
    "\u1175": "ㅣ",  # ᅵ
}

# All 27 trailing consonants of modern syllables, clusters included
_TRAILING: Final[dict[str, str]] = {
    "\u11a8": "ㄱ",  # ᆨ
    "\u11a9": "ㄲ",  # ᆩ
    "\u11aa": "ㄳ",  # ᆪ
    "\u11ab": "ㄴ",  # ᆫ
    "\u11ac": "ㄵ",  # ᆬ
    "\u11ad": "ㄶ",  # ᆭ
    "\u11ae": "ㄷ",  # ᆮ
    "\u11af": "ㄹ",  # ᆯ
    "\u11b0": "ㄺ",  # ᆰ
    "\u11b1": "ㄻ",  # ᆱ
    "\u11b2": "ㄼ",  # ᆲ
    "\u11b3": "ㄽ",  # ᆳ
    "\u11b4": "ㄾ",  # ᆴ
    "\u11b5": "ㄿ",  # ᆵ
    "\u11b6": "ㅀ",  # ᆶ
    "\u11b7": "ㅁ",  # ᆷ
    "\u11b8": "ㅂ",  # ᆸ
    "\u11b9": "ㅄ",  # ᆹ
    "\u11ba": "ㅅ",  # ᆺ
    "\u11bb": "ㅆ",  # ᆻ
    "\u11bc": "ㅇ",  # ᆼ
    "\u11bd": "ㅈ",  # ᆽ
    "\u11be": "ㅊ",  # ᆾ
    "\u11bf": "ㅋ",  # ᆿ
    "\u11c0": "ㅌ",  # ᇀ
    "\u11c1": "ㅍ",  # ᇁ
    "\u11c2": "ㅎ",  # ᇂ
}

COMPAT_TABLE: Final[Mapping[str, str]] = MappingProxyType({**_LEADING, **_VOWELS, **_TRAILING})


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def to_compat(ch: str) -> str | None:
    """Return the compatibility jamo for a positional jamo, or None.

    Example: "ᆫ" (trailing nieun, U+11AB) -> "ㄴ" (U+3134)
    """
    return COMPAT_TABLE.get(ch)


def to_compat_or_self(ch: str) -> str:
    """Like `to_compat`, but returns `ch` unchanged when there is no mapping."""
    return COMPAT_TABLE.get(ch, ch)


def to_compat_text(text: str) -> str:
    """Apply `to_compat_or_self` to every character of `text`."""
    return "".join(to_compat_or_self(ch) for ch in text)
