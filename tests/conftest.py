"""Pytest configuration and shared fixtures."""

import pytest

from models.badge import BadgeSelectorConfig
from models.rating import Rating, RatingDraft, SelfServiceLevel
from models.restaurant import RestaurantStats
from models.score import ScoreBandThresholds


@pytest.fixture
def minimum_draft():
    """Worst possible rating: self-service only, nothing else."""
    return RatingDraft(
        self_service=SelfServiceLevel.SELF_SERVICE_ONLY,
        service=0,
        ski_haserl=0,
        food=0,
        sun_terrace=0,
        interior=0,
        apres_ski=0,
        eggnog=False,
    )


@pytest.fixture
def maximum_draft():
    """Best possible rating: table service, all sliders maxed, eggnog."""
    return RatingDraft(
        self_service=SelfServiceLevel.TABLE_SERVICE,
        service=5,
        ski_haserl=5,
        food=5,
        sun_terrace=5,
        interior=5,
        apres_ski=5,
        eggnog=True,
    )


@pytest.fixture
def sample_rating():
    """A stored rating with mixed values (total = 4.0)."""
    return Rating(
        id="rating-1",
        restaurant_id="hut-1",
        device_id="device-abc",
        self_service=SelfServiceLevel.SELF_SERVICE_ONLY,
        service=4.5,
        ski_haserl=3,
        food=5,
        sun_terrace=2.5,
        interior=4,
        apres_ski=5,
        eggnog=False,
        comment="Kaiserschmarrn top",
        created_at="2026-01-20T12:00:00Z",
        updated_at="2026-01-20T12:00:00Z",
    )


@pytest.fixture
def top_restaurant_stats():
    """Restaurant with three qualifying categories and eggnog."""
    return RestaurantStats(
        restaurant_id="hut-1",
        name="Gipfelhütte",
        ski_area_id="soelden",
        rating_count=12,
        avg_apres_ski=4.8,
        avg_food=4.6,
        avg_service=4.7,
        avg_sun_terrace=4.3,
        avg_ski_haserl=4.0,
        avg_interior=4.2,
        eggnog_percentage=0.6,
        avg_total_score=24.5,
        most_common_self_service=SelfServiceLevel.TABLE_SERVICE,
    )


@pytest.fixture
def unrated_stats():
    """Restaurant nobody has rated yet."""
    return RestaurantStats(restaurant_id="hut-2", name="Talstation", rating_count=0)


@pytest.fixture
def badge_config():
    """Default badge selector configuration."""
    return BadgeSelectorConfig()


@pytest.fixture
def band_thresholds():
    """Default score band thresholds."""
    return ScoreBandThresholds(low_min=0.0, good_min=10.0, excellent_min=20.0)
