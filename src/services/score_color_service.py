"""Score band classification and display colors."""

import logging

from models.score import SCORE_BAND_COLORS, BandColors, ScoreBand, ScoreBandThresholds

logger = logging.getLogger(__name__)


class ScoreColorService:
    """Service for mapping total scores to display bands and colors."""

    def __init__(
        self,
        thresholds: ScoreBandThresholds = None,
        palette: dict[ScoreBand, BandColors] = None,
    ):
        """Initialize the service with band thresholds and color palette."""
        self.thresholds = thresholds or ScoreBandThresholds()
        if palette is None:
            palette = SCORE_BAND_COLORS
        missing = [band for band in ScoreBand if band not in palette]
        if missing:
            raise ValueError(f"Palette is missing colors for {missing}")
        if len({palette[band] for band in ScoreBand}) != len(ScoreBand):
            raise ValueError("Each score band needs its own colors")
        self.palette = {band: palette[band] for band in ScoreBand}
        if thresholds is not None:
            logger.info("Using custom score band thresholds: %s", self.thresholds)

    def classify(self, score: float, rating_count: int | None = None) -> ScoreBand:
        """Convert a total score to its display band.

        Bands (lower edge inclusive, upper edge exclusive):
        - rating_count == 0: UNRATED, whatever the score
        - < 0: NEGATIVE
        - 0 - 9.9: LOW
        - 10 - 19.9: GOOD
        - >= 20: EXCELLENT

        NaN fails every comparison and falls through to EXCELLENT.
        """
        if rating_count is not None and rating_count == 0:
            band = ScoreBand.UNRATED
        elif score < self.thresholds.low_min:
            band = ScoreBand.NEGATIVE
        elif score < self.thresholds.good_min:
            band = ScoreBand.LOW
        elif score < self.thresholds.excellent_min:
            band = ScoreBand.GOOD
        else:
            band = ScoreBand.EXCELLENT

        logger.debug(
            "Classified score %s (ratings=%s) as %s", score, rating_count, band.value
        )
        return band

    def colors(self, score: float, rating_count: int | None = None) -> BandColors:
        """Get all four colors for a score."""
        return self.palette[self.classify(score, rating_count)]

    def fill_color(self, score: float, rating_count: int | None = None) -> str:
        """Main score color."""
        return self.colors(score, rating_count).fill

    def background_color(self, score: float, rating_count: int | None = None) -> str:
        """Lighter background variant of the score color."""
        return self.colors(score, rating_count).background

    def text_color(self, score: float, rating_count: int | None = None) -> str:
        """Higher contrast text color for readability."""
        return self.colors(score, rating_count).text

    def border_color(self, score: float, rating_count: int | None = None) -> str:
        return self.colors(score, rating_count).border


_default_service = ScoreColorService()


def classify(score: float, rating_count: int | None = None) -> ScoreBand:
    """Classify a score with the default thresholds."""
    return _default_service.classify(score, rating_count)


def fill_color(score: float, rating_count: int | None = None) -> str:
    return _default_service.fill_color(score, rating_count)


def background_color(score: float, rating_count: int | None = None) -> str:
    return _default_service.background_color(score, rating_count)


def text_color(score: float, rating_count: int | None = None) -> str:
    return _default_service.text_color(score, rating_count)


def border_color(score: float, rating_count: int | None = None) -> str:
    return _default_service.border_color(score, rating_count)
