"""Badge (emoji) configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.constants import (
    DEFAULT_BADGE_THRESHOLD,
    EGGNOG_BADGE_THRESHOLD,
    MAX_REGULAR_BADGES,
)

from .rating import RatingCategory


class BadgeConfig(BaseModel):
    """Binds one rating category to its badge symbol and priority."""

    category: RatingCategory = Field(..., description="Rated category")
    symbol: str = Field(..., description="Emoji shown for the category")
    threshold: float = Field(
        default=DEFAULT_BADGE_THRESHOLD,
        description="Average must be strictly above this to qualify",
    )
    priority: int = Field(..., ge=1, description="1 = highest priority")

    model_config = ConfigDict(frozen=True)


# CRITICAL: the priority order must never change.
# 1. Apres-Ski  2. Food  3. Service  4. Sun terrace  5. Ski Haserl  6. Interior
DEFAULT_BADGE_CONFIGS: tuple[BadgeConfig, ...] = (
    BadgeConfig(category=RatingCategory.APRES_SKI, symbol="🍾", priority=1),
    BadgeConfig(category=RatingCategory.FOOD, symbol="🍽️", priority=2),
    BadgeConfig(category=RatingCategory.SERVICE, symbol="🧑‍🍳", priority=3),
    BadgeConfig(category=RatingCategory.SUN_TERRACE, symbol="☀️", priority=4),
    BadgeConfig(category=RatingCategory.SKI_HASERL, symbol="💃", priority=5),
    BadgeConfig(category=RatingCategory.INTERIOR, symbol="🛋️", priority=6),
)

EGGNOG_BADGE = "🥚🥛"


class BadgeSelectorConfig(BaseModel):
    """Configuration for badge selection."""

    badges: tuple[BadgeConfig, ...] = Field(
        default=DEFAULT_BADGE_CONFIGS,
        description="Category badges, kept in ascending priority order",
    )
    max_regular_badges: int = Field(
        default=MAX_REGULAR_BADGES,
        ge=0,
        description="Cap on category badges (bonus badge not counted)",
    )
    bonus_symbol: str = Field(default=EGGNOG_BADGE, description="Eggnog badge")
    bonus_threshold: float = Field(
        default=EGGNOG_BADGE_THRESHOLD,
        description="Eggnog share (0-1) at or above which the bonus is shown",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("badges")
    @classmethod
    def validate_badges(
        cls, v: tuple[BadgeConfig, ...]
    ) -> tuple[BadgeConfig, ...]:
        """Priorities and categories must be unique; stored by priority."""
        priorities = [badge.priority for badge in v]
        if len(set(priorities)) != len(priorities):
            raise ValueError("Badge priorities must be unique")
        categories = [badge.category for badge in v]
        if len(set(categories)) != len(categories):
            raise ValueError("Each category may only have one badge")
        return tuple(sorted(v, key=lambda badge: badge.priority))
