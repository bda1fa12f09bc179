"""Services for the hut rating engine."""

from .badge_service import BadgeService
from .score_color_service import ScoreColorService
from .scoring_service import (
    compute_total_score,
    is_valid_self_service,
    is_valid_slider_value,
    self_service_label,
)
from .stats_service import aggregate_ratings, summarize_restaurant

__all__ = [
    "BadgeService",
    "ScoreColorService",
    "compute_total_score",
    "is_valid_slider_value",
    "is_valid_self_service",
    "self_service_label",
    "aggregate_ratings",
    "summarize_restaurant",
]
