from __future__ import annotations


class HangulInvariantError(AssertionError):
    """Raised when syllable arithmetic produces jamo outside the Jamo block.

    This indicates a defect in the block constants, not bad input, so library
    code never catches it.
    """
