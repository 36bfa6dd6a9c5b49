"""
Small numeric helpers shared by the rating, wage and progression modules.
"""
from __future__ import annotations

import math
from typing import Any, Optional


def clamp(value, low, high):
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 towards +infinity (not Python's banker's rounding)."""
    return int(math.floor(value + 0.5))


def finite_number(value: Any) -> Optional[float]:
    """Return value as a float if it is a real, finite number; otherwise None.

    Booleans and numeric strings are not numbers here.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)
