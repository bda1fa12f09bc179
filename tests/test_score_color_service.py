"""Tests for score band classification and colors."""

import math

import pytest

from models.score import SCORE_BAND_COLORS, ScoreBand, ScoreBandThresholds
from services import score_color_service
from services.score_color_service import ScoreColorService


class TestScoreColorService:
    """Test cases for ScoreColorService."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (-0.01, ScoreBand.NEGATIVE),
            (0, ScoreBand.LOW),
            (9.99, ScoreBand.LOW),
            (10, ScoreBand.GOOD),
            (19.99, ScoreBand.GOOD),
            (20, ScoreBand.EXCELLENT),
        ],
    )
    def test_band_boundaries(self, band_thresholds, score, expected):
        """Lower edges are inclusive, upper edges exclusive."""
        service = ScoreColorService(band_thresholds)
        assert service.classify(score) == expected

    @pytest.mark.parametrize("score", [-20, -5, 0, 7.5, 15, 35, 1000, -math.inf])
    def test_zero_ratings_is_unrated(self, score):
        """A count of 0 wins over any score."""
        service = ScoreColorService()
        assert service.classify(score, rating_count=0) == ScoreBand.UNRATED

    def test_count_only_matters_when_zero(self):
        """A positive count or no count falls back to the score."""
        service = ScoreColorService()
        assert service.classify(12, rating_count=3) == ScoreBand.GOOD
        assert service.classify(12) == ScoreBand.GOOD

    def test_extremes(self):
        """Infinite scores still land in a band."""
        service = ScoreColorService()
        assert service.classify(-math.inf) == ScoreBand.NEGATIVE
        assert service.classify(math.inf) == ScoreBand.EXCELLENT

    def test_colors_match_palette(self):
        """Each accessor returns the channel of the classified band."""
        service = ScoreColorService()
        assert service.fill_color(-3) == "#EF4444"
        assert service.background_color(5) == "#FEF3C7"
        assert service.text_color(15) == "#3F6212"
        assert service.border_color(25) == "#6EE7B7"
        assert service.fill_color(25, rating_count=0) == "#9CA3AF"

    @pytest.mark.parametrize(
        "score,count",
        [(-1, None), (0, 4), (9.5, None), (10, 2), (19.99, 1), (20, None), (30, 0)],
    )
    def test_accessors_agree_on_band(self, score, count):
        """All four channels come from the same band."""
        service = ScoreColorService()
        band = service.classify(score, count)
        expected = SCORE_BAND_COLORS[band]

        assert service.fill_color(score, count) == expected.fill
        assert service.background_color(score, count) == expected.background
        assert service.text_color(score, count) == expected.text
        assert service.border_color(score, count) == expected.border

    def test_palette_is_total_and_distinct(self):
        """Every band has every channel and no two bands share a fill."""
        assert set(SCORE_BAND_COLORS) == set(ScoreBand)
        fills = {colors.fill for colors in SCORE_BAND_COLORS.values()}
        assert len(fills) == len(ScoreBand)

    def test_custom_thresholds(self):
        """Band edges come from the injected thresholds."""
        service = ScoreColorService(
            ScoreBandThresholds(low_min=-5, good_min=5, excellent_min=25)
        )
        assert service.classify(-2) == ScoreBand.LOW
        assert service.classify(22) == ScoreBand.GOOD

    def test_nan_falls_through_to_excellent(self):
        """NaN fails every band comparison and ends up in the last band."""
        service = ScoreColorService()
        assert service.classify(math.nan) == ScoreBand.EXCELLENT
        assert service.classify(math.nan, rating_count=0) == ScoreBand.UNRATED

    @pytest.mark.parametrize("score,count", [(-3, None), (7.5, 2), (15, None), (0, 0)])
    def test_classify_is_idempotent(self, score, count):
        service = ScoreColorService()
        assert service.classify(score, count) == service.classify(score, count)
        assert service.colors(score, count) == service.colors(score, count)

    def test_incomplete_palette_rejected(self):
        palette = {ScoreBand.LOW: SCORE_BAND_COLORS[ScoreBand.LOW]}
        with pytest.raises(ValueError):
            ScoreColorService(palette=palette)

    def test_empty_palette_rejected(self):
        """An empty palette is an error, not a request for the default."""
        with pytest.raises(ValueError):
            ScoreColorService(palette={})

    def test_shared_band_colors_rejected(self):
        palette = dict(SCORE_BAND_COLORS)
        palette[ScoreBand.GOOD] = palette[ScoreBand.EXCELLENT]
        with pytest.raises(ValueError):
            ScoreColorService(palette=palette)

    def test_module_level_functions(self):
        """Module helpers use the default thresholds."""
        assert score_color_service.classify(20) == ScoreBand.EXCELLENT
        assert score_color_service.fill_color(-1) == "#EF4444"
        assert score_color_service.background_color(0, 0) == "#F3F4F6"
        assert score_color_service.text_color(10) == "#3F6212"
        assert score_color_service.border_color(3) == "#FCD34D"
