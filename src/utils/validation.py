"""Input validation shared by models and services."""

import math
from decimal import Decimal
from numbers import Real
from typing import Any

from .constants import SLIDER_MAX, SLIDER_MIN


def is_valid_slider_value(value: Any) -> bool:
    """Check a slider value is between 0 and 5 in steps of 0.5.

    Accepts any real number (int, float, Fraction) or a Decimal; bools are
    rejected. NaN and infinities are invalid.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        if not value.is_finite():
            return False
        if value < Decimal(SLIDER_MIN) or value > Decimal(SLIDER_MAX):
            return False
        return (value * 10) % 5 == 0
    if not isinstance(value, Real):
        return False
    if not math.isfinite(value):
        return False
    if value < SLIDER_MIN or value > SLIDER_MAX:
        return False

    # Multiply by 10 to avoid floating point issues
    return (value * 10) % 5 == 0
