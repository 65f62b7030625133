# src/depviz/utils/numbers.py

"""Numeric helpers shared by the metrics code."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int) -> float:
    """
    Round to `digits` decimals with halves rounded up.

    Python's round() uses banker's rounding; reported metrics round
    0.125 -> 0.13 instead.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
