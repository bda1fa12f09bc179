"""Restaurant statistics aggregation.

Mirrors the backend's ``restaurant_stats`` view so the live score shown on
the rating screen and the stored averages come from the same formula.
"""

import logging
from collections import Counter
from collections.abc import Iterable

from models.rating import SLIDER_FIELDS, Rating, SelfServiceLevel
from models.restaurant import RestaurantStats
from utils.formatting import format_score, serialize_badges, serialize_score

from .badge_service import BadgeService
from .score_color_service import ScoreColorService
from .scoring_service import compute_total_score, self_service_label

logger = logging.getLogger(__name__)


def aggregate_ratings(
    ratings: Iterable[Rating],
    restaurant_id: str | None = None,
    name: str | None = None,
    ski_area_id: str | None = None,
    x: float | None = None,
    y: float | None = None,
) -> RestaurantStats:
    """Aggregate stored ratings into restaurant statistics.

    An empty list gives an unrated restaurant: count 0, every average 0 and
    no self-service mode.
    """
    ratings = list(ratings)
    count = len(ratings)
    identity = {
        "restaurant_id": restaurant_id,
        "name": name,
        "ski_area_id": ski_area_id,
        "x": x,
        "y": y,
    }
    if not ratings:
        return RestaurantStats(**identity, rating_count=0)

    averages = {
        f"avg_{field}": sum(getattr(r, field) for r in ratings) / count
        for field in SLIDER_FIELDS
    }
    eggnog_percentage = sum(1 for r in ratings if r.eggnog) / count
    avg_total_score = sum(compute_total_score(r) for r in ratings) / count

    logger.debug(
        "Aggregated %d ratings for %s: avg_total_score=%.2f",
        count,
        restaurant_id or name or "restaurant",
        avg_total_score,
    )
    return RestaurantStats(
        **identity,
        **averages,
        rating_count=count,
        eggnog_percentage=eggnog_percentage,
        avg_total_score=avg_total_score,
        most_common_self_service=_most_common_self_service(ratings),
    )


def _most_common_self_service(ratings: list[Rating]) -> SelfServiceLevel:
    """Most frequent self-service level, lowest level on ties."""
    counts = Counter(r.self_service for r in ratings)
    top = max(counts.values())
    return min(level for level, n in counts.items() if n == top)


def summarize_restaurant(
    stats: RestaurantStats,
    color_service: ScoreColorService = None,
    badge_service: BadgeService = None,
) -> dict:
    """Build the display bundle for a restaurant list entry or map pin."""
    color_service = color_service or ScoreColorService()
    badge_service = badge_service or BadgeService()

    band = color_service.classify(stats.avg_total_score, stats.rating_count)
    colors = color_service.colors(stats.avg_total_score, stats.rating_count)
    self_service = stats.most_common_self_service

    return {
        "restaurant_id": stats.restaurant_id,
        "name": stats.name,
        "rating_count": stats.rating_count,
        "score": serialize_score(stats.avg_total_score),
        "formatted_score": format_score(stats.avg_total_score),
        "band": band.value,
        "colors": colors.model_dump(),
        "badges": serialize_badges(badge_service.select_badges(stats)),
        "self_service_label": (
            self_service_label(self_service) if self_service is not None else None
        ),
    }
