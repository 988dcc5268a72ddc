"""
Input coercion for values arriving from the presentation layer.

Form fields hand over strings, floats or nothing at all. The engine never
raises on them: a value either reads as an int or as None.
"""

from __future__ import annotations
from typing import Any
import math


def coerce_int(value: Any) -> int | None:
    """
    Read a value as an int, or None when it isn't numeric.

    Leading integer text wins, the way a number input is read:
    "12" -> 12, " 7 " -> 7, "3.9" -> 3, 2.5 -> 2, "abc" -> None.
    Booleans are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        digits_end = 1 if text[0] in "+-" else 0
        while digits_end < len(text) and text[digits_end] in "0123456789":
            digits_end += 1
        head = text[:digits_end]
        if not head or head in "+-":
            return None
        return int(head)
    return None


def clamp(value: int, low: int | None = None, high: int | None = None) -> int:
    """Clamp to [low, high]; either bound may be None."""
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value
