"""Data models for the hut rating engine."""

from .badge import DEFAULT_BADGE_CONFIGS, BadgeConfig, BadgeSelectorConfig
from .rating import Rating, RatingCategory, RatingDraft, SelfServiceLevel
from .restaurant import RestaurantStats
from .score import BandColors, ScoreBand, ScoreBandThresholds

__all__ = [
    "Rating",
    "RatingDraft",
    "RatingCategory",
    "SelfServiceLevel",
    "RestaurantStats",
    "ScoreBand",
    "BandColors",
    "ScoreBandThresholds",
    "BadgeConfig",
    "BadgeSelectorConfig",
    "DEFAULT_BADGE_CONFIGS",
]
