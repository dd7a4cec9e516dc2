"""
Hangul text classification and transformation.

Package exports the domain API so callers can `from hangul_text import split`.
"""

from hangul_text.domain.char_class import Run, classify, iter_runs, split  # noqa: F401
from hangul_text.domain.compat_jamo import COMPAT_TABLE, to_compat, to_compat_or_self, to_compat_text  # noqa: F401
from hangul_text.domain.enums import HangulCharClass  # noqa: F401
from hangul_text.domain.errors import HangulInvariantError  # noqa: F401
from hangul_text.domain.hangul_compose import compose_syllable  # noqa: F401
from hangul_text.domain.hangul_decompose import (  # noqa: F401
    DecomposedSyllable,
    decompose_all,
    decompose_syllable,
    syllable_to_jamos,
)
from hangul_text.domain.keystrokes import split_compat_into_keystrokes, to_compat_jamos, to_keystrokes  # noqa: F401
from hangul_text.domain.scoring import (  # noqa: F401
    BestAnswer,
    ScoreResult,
    calculate_best_answer,
    calculate_correct_jamos,
    calculate_correct_keystrokes,
)

__version__ = "0.1.0"

__all__ = [
    "BestAnswer",
    "COMPAT_TABLE",
    "DecomposedSyllable",
    "HangulCharClass",
    "HangulInvariantError",
    "Run",
    "ScoreResult",
    "calculate_best_answer",
    "calculate_correct_jamos",
    "calculate_correct_keystrokes",
    "classify",
    "compose_syllable",
    "decompose_all",
    "decompose_syllable",
    "iter_runs",
    "split",
    "split_compat_into_keystrokes",
    "syllable_to_jamos",
    "to_compat",
    "to_compat_jamos",
    "to_compat_or_self",
    "to_compat_text",
    "to_keystrokes",
]
