"""Display and transport formatting for scores and badges."""

from collections.abc import Iterable


def format_score(value: float | None) -> str:
    """Format a score or category average with one fractional digit.

    Scores move in half steps, so one digit is always enough
    (``7.5`` -> ``"7.5"``, ``-20`` -> ``"-20.0"``). ``None`` renders as
    ``"0.0"`` like an unrated restaurant.
    """
    return f"{float(value or 0.0):.1f}"


def serialize_score(value: float | None) -> float:
    """Return a score as a float so JSON keeps the fractional part."""
    return float(value or 0.0)


def serialize_badges(badges: Iterable[str]) -> list[str]:
    """Return badges as a plain ordered list of strings."""
    return [str(badge) for badge in badges]
