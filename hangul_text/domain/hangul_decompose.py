from __future__ import annotations

"""Hangul syllable decomposition (domain layer).

A precomposed syllable from the Hangul Syllables block is split into its
positional jamo from the Hangul Jamo block (lead, vowel, optional trail) using
the Unicode Hangul syllable algorithm. Nothing else is touched: jamo,
compatibility jamo and non-Hangul characters pass through `decompose_all`
unchanged.

Primary API:
- decompose_syllable(ch)
- decompose_all(text)
"""

import logging

from hangul_text.domain.char_class import classify
from hangul_text.domain.enums import HangulCharClass
from hangul_text.domain.errors import HangulInvariantError
from hangul_text.domain.hangul_unicode import L_BASE, N_COUNT, S_BASE, T_BASE, T_COUNT, V_BASE

logger = logging.getLogger(__name__)


# (lead, vowel, trail); trail is None for syllables without a final consonant
DecomposedSyllable = tuple[str, str, str | None]


def decompose_syllable(ch: str | int) -> DecomposedSyllable | None:
    """Decompose a Hangul syllable into its positional jamo.

    Args:
        ch: a single character, e.g. "는", or its scalar value

    Returns:
        (lead, vowel, trail), e.g. ("ᄂ", "ᅳ", "ᆫ"); `trail` is None when the
        syllable has no final consonant. Returns None if `ch` is not in the
        Hangul Syllables block.

    Raises:
        HangulInvariantError: if the arithmetic yields a lead or vowel outside
            the Jamo block (a defect in the constants, never bad input).
    """
    if classify(ch) is not HangulCharClass.Syllables:
        return None

    cp = ch if isinstance(ch, int) else ord(ch)
    base = cp - S_BASE
    lead_index = base // N_COUNT
    remainder = base - lead_index * N_COUNT
    vowel_index = remainder // T_COUNT
    trail_index = remainder - vowel_index * T_COUNT

    lead = chr(L_BASE + lead_index)
    vowel = chr(V_BASE + vowel_index)
    trail = None if trail_index == 0 else chr(T_BASE + trail_index)

    if classify(lead) is not HangulCharClass.Jamo or classify(vowel) is not HangulCharClass.Jamo:
        logger.debug(
            "Bad decomposition of U+%04X: lead=U+%04X vowel=U+%04X", cp, ord(lead), ord(vowel)
        )
        raise HangulInvariantError("Decomposition of %r left the Jamo block" % ch)

    return lead, vowel, trail


def syllable_to_jamos(ch: str | int) -> str | None:
    """Return the 2 or 3 jamo of a syllable joined as one string, or None."""
    decomposed = decompose_syllable(ch)
    if decomposed is None:
        return None
    lead, vowel, trail = decomposed
    return lead + vowel + (trail or "")


def decompose_all(text: str) -> str:
    """Replace every Hangul syllable in `text` with its positional jamo.

    Example: "hi 이" -> "hi \u110b\u1175"
    """
    parts: list[str] = []
    for ch in text:
        jamos = syllable_to_jamos(ch)
        parts.append(ch if jamos is None else jamos)
    return "".join(parts)
