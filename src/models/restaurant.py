"""Restaurant statistics model."""

from pydantic import BaseModel, Field

from utils.formatting import format_score

from .rating import RatingCategory, SelfServiceLevel


class RestaurantStats(BaseModel):
    """Aggregated ratings for one restaurant.

    Produced by the backend's stats view (or ``aggregate_ratings``). The
    averages are trusted as given and not re-validated.
    """

    restaurant_id: str | None = Field(None, description="Restaurant identifier")
    name: str | None = Field(None, description="Restaurant display name")
    ski_area_id: str | None = Field(None, description="Ski area the hut belongs to")
    x: float | None = Field(None, description="Relative map position (0-1)")
    y: float | None = Field(None, description="Relative map position (0-1)")

    rating_count: int = Field(default=0, ge=0, description="Number of ratings")

    avg_service: float = Field(default=0.0, description="Average service rating")
    avg_ski_haserl: float = Field(default=0.0, description="Average Ski Haserl rating")
    avg_food: float = Field(default=0.0, description="Average food rating")
    avg_sun_terrace: float = Field(
        default=0.0, description="Average sun terrace rating"
    )
    avg_interior: float = Field(default=0.0, description="Average interior rating")
    avg_apres_ski: float = Field(default=0.0, description="Average apres-ski rating")

    eggnog_percentage: float = Field(
        default=0.0, description="Share of ratings with eggnog (0-1)"
    )
    avg_total_score: float = Field(
        default=0.0, description="Average total score (-20 to +35)"
    )
    most_common_self_service: SelfServiceLevel | None = Field(
        None, description="Most frequently reported self-service level"
    )

    def category_average(self, category: RatingCategory | str) -> float:
        """Get the average for a category (``"food"`` or ``"avg_food"``)."""
        if isinstance(category, RatingCategory):
            return getattr(self, category.stats_field)
        field = category if category.startswith("avg_") else f"avg_{category}"
        return getattr(self, field)

    @property
    def is_rated(self) -> bool:
        """Whether at least one rating exists."""
        return self.rating_count > 0

    @property
    def formatted_total_score(self) -> str:
        """Average total score with one decimal."""
        return format_score(self.avg_total_score)
