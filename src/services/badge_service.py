"""Badge (emoji) selection for restaurants."""

import logging

from models.badge import BadgeConfig, BadgeSelectorConfig
from models.rating import RatingCategory
from models.restaurant import RestaurantStats

logger = logging.getLogger(__name__)


class BadgeService:
    """Service for picking the badges shown next to a restaurant."""

    def __init__(self, config: BadgeSelectorConfig = None):
        """Initialize the service with badge configuration."""
        self.config = config or BadgeSelectorConfig()
        if config is not None:
            logger.info(
                "Using custom badge config: %d badges, max %d",
                len(self.config.badges),
                self.config.max_regular_badges,
            )

    def select_badges(self, stats: RestaurantStats) -> list[str]:
        """Get badges for a restaurant from its aggregated statistics.

        CRITICAL RULES:
        - At most ``max_regular_badges`` (3) category badges are shown
        - Categories are taken in strict priority order (see DEFAULT_BADGE_CONFIGS)
        - A category qualifies only when its average is > threshold (4.5)
        - The eggnog badge is ADDITIONAL and doesn't count toward the cap
        - The eggnog badge is shown when >= 50% of ratings have eggnog

        Example: apres 4.8, food 4.6, service 4.7, eggnog 60%
        -> ['🍾', '🍽️', '🧑‍🍳', '🥚🥛']
        """
        qualifying = [
            badge.symbol
            for badge in self.config.badges
            if stats.category_average(badge.category) > badge.threshold
        ]
        badges = qualifying[: self.config.max_regular_badges]

        if stats.eggnog_percentage >= self.config.bonus_threshold:
            badges.append(self.config.bonus_symbol)

        logger.debug(
            "Selected badges for %s: %s",
            stats.restaurant_id or stats.name or "restaurant",
            badges,
        )
        return badges

    def badge_for_category(self, category: RatingCategory | str) -> str:
        """Get the badge for one category, or "" if it has none.

        Accepts ``RatingCategory.FOOD``, ``"food"`` or ``"avg_food"``.
        """
        if isinstance(category, RatingCategory):
            key = category.value
        else:
            key = category.removeprefix("avg_")
        for badge in self.config.badges:
            if badge.category.value == key:
                return badge.symbol
        return ""

    def all_badge_configs(self) -> list[BadgeConfig]:
        """Get a copy of all badge configurations in priority order."""
        return list(self.config.badges)


_default_service = BadgeService()


def select_badges(stats: RestaurantStats) -> list[str]:
    """Select badges with the default configuration."""
    return _default_service.select_badges(stats)


def badge_for_category(category: RatingCategory | str) -> str:
    return _default_service.badge_for_category(category)


def all_badge_configs() -> list[BadgeConfig]:
    return _default_service.all_badge_configs()
