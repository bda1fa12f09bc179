"""Score band and display color models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoreBand(str, Enum):
    """Display bands for a total score."""

    UNRATED = "unrated"  # No ratings yet
    NEGATIVE = "negative"  # < 0
    LOW = "low"  # 0 - 9.9
    GOOD = "good"  # 10 - 19.9
    EXCELLENT = "excellent"  # >= 20


class BandColors(BaseModel):
    """The four color channels used to render a score badge."""

    fill: str = Field(..., description="Main score color")
    background: str = Field(..., description="Lighter background variant")
    text: str = Field(..., description="High-contrast text color")
    border: str = Field(..., description="Border color")

    model_config = ConfigDict(frozen=True)


# Tailwind palette: 500 for fill, 100 background, 800 text, 300 border
SCORE_BAND_COLORS: dict[ScoreBand, BandColors] = {
    ScoreBand.UNRATED: BandColors(
        fill="#9CA3AF", background="#F3F4F6", text="#4B5563", border="#D1D5DB"
    ),
    ScoreBand.NEGATIVE: BandColors(
        fill="#EF4444", background="#FEE2E2", text="#991B1B", border="#FCA5A5"
    ),
    ScoreBand.LOW: BandColors(
        fill="#F59E0B", background="#FEF3C7", text="#92400E", border="#FCD34D"
    ),
    ScoreBand.GOOD: BandColors(
        fill="#84CC16", background="#ECFCCB", text="#3F6212", border="#BEF264"
    ),
    ScoreBand.EXCELLENT: BandColors(
        fill="#10B981", background="#D1FAE5", text="#065F46", border="#6EE7B7"
    ),
}

# Band explanations for UI info indicators
SCORE_BAND_EXPLANATIONS: dict[ScoreBand, dict[str, str]] = {
    ScoreBand.UNRATED: {
        "title": "Noch nicht bewertet",
        "description": "This hut has no ratings yet.",
    },
    ScoreBand.NEGATIVE: {
        "title": "Negativ",
        "description": "Self-service penalty outweighs everything else.",
    },
    ScoreBand.LOW: {
        "title": "Mäßig",
        "description": "Total score between 0 and 10.",
    },
    ScoreBand.GOOD: {
        "title": "Gut",
        "description": "Total score between 10 and 20.",
    },
    ScoreBand.EXCELLENT: {
        "title": "Top-Hütte",
        "description": "Total score of 20 or more.",
    },
}


class ScoreBandThresholds(BaseModel):
    """Lower edges of the score bands. Each band is [min, next_min)."""

    low_min: float = Field(default=0.0, description="Scores below this are negative")
    good_min: float = Field(default=10.0, description="Lower edge of the good band")
    excellent_min: float = Field(
        default=20.0, description="Lower edge of the excellent band"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_ascending(self) -> "ScoreBandThresholds":
        """Band edges must be strictly ascending."""
        if not self.low_min < self.good_min < self.excellent_min:
            raise ValueError("Band thresholds must be strictly ascending")
        return self
