from __future__ import annotations

import math
from typing import Any


def parse_float(value: Any) -> float | None:
    """
    Parse a required numeric field.
    Returns None for absent, non-numeric or non-finite input so the caller can
    report the record instead of guessing a value.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def coerce_float(value: Any, default: float) -> float:
    """Optional numeric field -> finite float, falling back to default. Never raises."""
    number = parse_float(value)
    return default if number is None else number


def coerce_str(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text if text else default


def coerce_stroke_width(value: Any, default: int = 1) -> int:
    """Positive integer stroke width; fractional input is truncated."""
    number = parse_float(value)
    if number is None:
        return default
    width = int(number)
    return width if width > 0 else default
