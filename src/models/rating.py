"""Rating data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.validation import is_valid_slider_value


class SelfServiceLevel(int, Enum):
    """How much table service a hut offers.

    The values are the legacy point encoding stored by the backend, so
    ``SelfServiceLevel(-20)`` converts from storage and ``int(level)``
    converts back. Any other integer is rejected by the enum.
    """

    SELF_SERVICE_ONLY = -20
    PARTIAL_SELF_SERVICE = -10
    TABLE_SERVICE = 0

    @property
    def label(self) -> str:
        """German UI label for this level."""
        return SELF_SERVICE_LABELS[self]


SELF_SERVICE_LABELS: dict[SelfServiceLevel, str] = {
    SelfServiceLevel.SELF_SERVICE_ONLY: "Nur Selbstbedienung",
    SelfServiceLevel.PARTIAL_SELF_SERVICE: "Teilweise Selbstbedienung",
    SelfServiceLevel.TABLE_SERVICE: "Bedienung vorhanden",
}


class RatingCategory(str, Enum):
    """The six slider categories a hut is rated on."""

    APRES_SKI = "apres_ski"
    FOOD = "food"
    SERVICE = "service"
    SUN_TERRACE = "sun_terrace"
    SKI_HASERL = "ski_haserl"
    INTERIOR = "interior"

    @property
    def stats_field(self) -> str:
        """Name of the matching average on RestaurantStats."""
        return f"avg_{self.value}"


# Field names that make up a rating's total score
SLIDER_FIELDS: tuple[str, ...] = (
    "service",
    "ski_haserl",
    "food",
    "sun_terrace",
    "interior",
    "apres_ski",
)


class RatingDraft(BaseModel):
    """A rating while it is still being entered.

    Every scorable field is optional. Missing values only become zero inside
    ``compute_total_score``. Slider values are taken as given here; use
    ``is_valid_slider_value`` before trusting them.
    """

    self_service: SelfServiceLevel | None = Field(
        None, description="Self-service level (mandatory once submitted)"
    )
    service: float | None = Field(None, description="Service slider (0-5)")
    ski_haserl: float | None = Field(None, description="Ski Haserl slider (0-5)")
    food: float | None = Field(None, description="Food slider (0-5)")
    sun_terrace: float | None = Field(None, description="Sun terrace slider (0-5)")
    interior: float | None = Field(None, description="Interior slider (0-5)")
    apres_ski: float | None = Field(None, description="Apres-ski slider (0-5)")
    eggnog: bool | None = Field(None, description="Eggnog on offer (+5 bonus)")


class Rating(BaseModel):
    """A submitted rating as stored by the backend."""

    id: str | None = Field(None, description="Rating identifier")
    restaurant_id: str = Field(..., description="Rated restaurant")
    device_id: str = Field(..., description="Anonymous device that submitted it")

    self_service: SelfServiceLevel = Field(..., description="Self-service level")

    service: float = Field(default=0.0, description="Service slider (0-5)")
    ski_haserl: float = Field(default=0.0, description="Ski Haserl slider (0-5)")
    food: float = Field(default=0.0, description="Food slider (0-5)")
    sun_terrace: float = Field(default=0.0, description="Sun terrace slider (0-5)")
    interior: float = Field(default=0.0, description="Interior slider (0-5)")
    apres_ski: float = Field(default=0.0, description="Apres-ski slider (0-5)")

    eggnog: bool = Field(default=False, description="Eggnog on offer")
    comment: str | None = Field(None, description="Optional free-text comment")

    created_at: str | None = Field(None, description="ISO timestamp of creation")
    updated_at: str | None = Field(None, description="ISO timestamp of last update")

    model_config = ConfigDict(frozen=True)

    @field_validator(*SLIDER_FIELDS)
    @classmethod
    def validate_slider(cls, v: float) -> float:
        """Sliders must be 0-5 in steps of 0.5."""
        if not is_valid_slider_value(v):
            raise ValueError("Slider value must be between 0 and 5 in steps of 0.5")
        return v
