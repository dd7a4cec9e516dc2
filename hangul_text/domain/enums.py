from __future__ import annotations

"""Domain enumerations (no I/O, no third-party dependencies)."""

from enum import Enum


class HangulCharClass(Enum):
    """Which Hangul-related Unicode block a character belongs to.

    `None_` is the catch-all for every scalar value outside the five Hangul
    blocks. Its value is the string "None" so that output and YAML dumps read
    naturally.
    """

    CompatibilityJamo = "CompatibilityJamo"
    JamoExtendedA = "JamoExtendedA"
    JamoExtendedB = "JamoExtendedB"
    Jamo = "Jamo"
    Syllables = "Syllables"
    None_ = "None"

    def __str__(self) -> str:
        return self.value
