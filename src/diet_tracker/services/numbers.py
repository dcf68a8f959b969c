"""Permissive numeric parsing and display rounding."""

import math


def coerce_number(value: object) -> float:
    """Parse a number, treating blanks, garbage, NaN and infinities as 0."""
    if value is None:
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves toward positive infinity, as browsers do."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
