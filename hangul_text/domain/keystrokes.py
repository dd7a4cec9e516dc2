from __future__ import annotations

"""Keystroke breakdown for the standard 2-set (Dubeolsik) Korean keyboard.

Compound vowels and consonant clusters have no key of their own: ㅘ is typed
as ㅗ then ㅏ, and ㄵ as ㄴ then ㅈ. Double consonants (ㄲ ㄸ ㅃ ㅆ ㅉ) and
ㅒ/ㅖ are a single shifted key, so they stay whole.

Primary API:
- split_compat_into_keystrokes(ch)
- to_keystrokes(text)
"""

from types import MappingProxyType
from typing import Final, Mapping

from hangul_text.domain.compat_jamo import to_compat_or_self
from hangul_text.domain.hangul_decompose import decompose_all


KEYSTROKE_TABLE: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    # --- consonant clusters (finals only) ---
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄶ": ("ㄴ", "ㅎ"),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅅ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅀ": ("ㄹ", "ㅎ"),
    "ㅄ": ("ㅂ", "ㅅ"),

    # --- compound vowels ---
    "ㅘ": ("ㅗ", "ㅏ"),
    "ㅙ": ("ㅗ", "ㅐ"),
    "ㅚ": ("ㅗ", "ㅣ"),
    "ㅝ": ("ㅜ", "ㅓ"),
    "ㅞ": ("ㅜ", "ㅔ"),
    "ㅟ": ("ㅜ", "ㅣ"),
    "ㅢ": ("ㅡ", "ㅣ"),
})


def split_compat_into_keystrokes(ch: str) -> tuple[str, ...]:
    """Return the keys typed for one compatibility jamo.

    Characters that are not compound jamo come back as a 1-tuple of themselves.
    """
    return KEYSTROKE_TABLE.get(ch, (ch,))


def to_compat_jamos(text: str) -> list[str]:
    """Decompose all syllables in `text` and return compatibility jamo, one per item.

    Example: "안녕" -> ["ㅇ", "ㅏ", "ㄴ", "ㄴ", "ㅕ", "ㅇ"]
    """
    return [to_compat_or_self(ch) for ch in decompose_all(text)]


def to_keystrokes(text: str) -> list[str]:
    """Return the 2-set keystrokes needed to type `text`.

    Example: "믽" -> ["ㅁ", "ㅣ", "ㄴ", "ㅈ"]
    """
    keys: list[str] = []
    for jamo in to_compat_jamos(text):
        keys.extend(split_compat_into_keystrokes(jamo))
    return keys
