"""Shared constants for the hut rating engine."""

# Slider categories are rated 0-5 in half steps.
SLIDER_MIN: float = 0.0
SLIDER_MAX: float = 5.0
SLIDER_STEP: float = 0.5

# Flat bonus added to a rating's total when eggnog is on offer
EGGNOG_BONUS: float = 5.0

# Total score is a SUM over all categories, never an average.
# Minimum: self_service = -20, all sliders 0, no eggnog
# Maximum: self_service = 0, all sliders 5, eggnog
MIN_TOTAL_SCORE: float = -20.0
MAX_TOTAL_SCORE: float = 35.0

# Share of ratings with eggnog needed for the bonus badge (0-1)
EGGNOG_BADGE_THRESHOLD: float = 0.5

# Category average must be strictly above this to earn a badge
DEFAULT_BADGE_THRESHOLD: float = 4.5

# At most this many category badges are shown (eggnog badge not counted)
MAX_REGULAR_BADGES: int = 3
