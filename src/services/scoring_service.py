"""Total score calculation and rating input validation."""

import logging
from collections.abc import Mapping
from typing import Any

from models.rating import SLIDER_FIELDS, Rating, RatingDraft, SelfServiceLevel
from utils.constants import EGGNOG_BONUS
from utils.validation import is_valid_slider_value

logger = logging.getLogger(__name__)

__all__ = [
    "compute_total_score",
    "is_valid_slider_value",
    "is_valid_self_service",
    "self_service_label",
    "validate_draft",
]


def _field(rating: RatingDraft | Rating | Mapping[str, Any], name: str) -> Any:
    if isinstance(rating, Mapping):
        return rating.get(name)
    return getattr(rating, name, None)


def compute_total_score(rating: RatingDraft | Rating | Mapping[str, Any]) -> float:
    """Calculate the total score for a rating.

    CRITICAL: This is a SUM, not an average!

    score = self_service + service + ski_haserl + food
            + sun_terrace + interior + apres_ski + (5 if eggnog)

    Range is -20 to +35. Missing fields count as 0 (eggnog as False), which
    lets the rating screen show a live score for an incomplete draft. The
    values are summed as given and never rounded or validated; check them
    with ``is_valid_slider_value`` / ``is_valid_self_service`` first.
    """
    total = float(_field(rating, "self_service") or 0)
    for name in SLIDER_FIELDS:
        total += float(_field(rating, name) or 0)
    if _field(rating, "eggnog"):
        total += EGGNOG_BONUS
    return total


def is_valid_self_service(value: Any) -> bool:
    """Check a self-service value is one of -20, -10 or 0."""
    if isinstance(value, bool):
        return False
    return value in (-20, -10, 0)


def self_service_label(value: SelfServiceLevel | int) -> str:
    """Get the German label for a self-service level.

    Raises:
        ValueError: If ``value`` is not a valid self-service level.
    """
    return SelfServiceLevel(value).label


def validate_draft(draft: RatingDraft) -> list[str]:
    """List everything that keeps a draft from being submitted.

    Returns an empty list when the draft is complete and valid.
    """
    problems = []
    if draft.self_service is None:
        problems.append("self_service is required")
    for name in SLIDER_FIELDS:
        value = getattr(draft, name)
        if value is not None and not is_valid_slider_value(value):
            problems.append(f"{name} must be between 0 and 5 in steps of 0.5")
    if problems:
        logger.debug("Draft rating rejected: %s", problems)
    return problems
