"""Utility functions and constants for the hut rating engine."""

from .formatting import format_score, serialize_badges, serialize_score
from .validation import is_valid_slider_value

__all__ = [
    "format_score",
    "serialize_score",
    "serialize_badges",
    "is_valid_slider_value",
]
