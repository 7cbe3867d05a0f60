"""Rounding used by every metric."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity.

    Python's built-in ``round`` rounds halves to even, which would give
    ``round(2.5) == 2``; published targets and scores expect 3.
    """
    return math.floor(value + 0.5)
