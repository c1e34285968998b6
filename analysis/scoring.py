"""PCOS risk heuristic for sweat-strip colour readings."""
import math
from typing import Iterable, Tuple

DEFAULT_MAX_SCORE = 30

# (strong keywords -> 10 points, mild keywords -> 5 points)
GLUCOSE_KEYWORDS = (("dark", "high"), ("moderate",))
PH_KEYWORDS = (("purple", "alkaline"), ("neutral", "green"))
CORTISOL_KEYWORDS = (("dark", "high"), ("faint", "moderate"))
# The salt chart also lists "light", "dark yellow" and "light brown", but only
# the first phrase of each pair was ever matched; kept that way so stored
# scores stay comparable.
SALT_KEYWORDS = (("yellow", "high"), ("moderate",))


def zone_points(reading: str, keywords: Tuple[Iterable[str], Iterable[str]]) -> int:
    text = (reading or "").lower()
    strong, mild = keywords
    if any(k in text for k in strong):
        return 10
    if any(k in text for k in mild):
        return 5
    return 0


def raw_points(glucose: str, ph: str, cortisol: str, salt: str) -> int:
    return (
        zone_points(glucose, GLUCOSE_KEYWORDS)
        + zone_points(ph, PH_KEYWORDS)
        + zone_points(cortisol, CORTISOL_KEYWORDS)
        + zone_points(salt, SALT_KEYWORDS)
    )


def calculate_pcos_risk_percentage(
    glucose: str, ph: str, cortisol: str, salt: str,
    max_score: int = DEFAULT_MAX_SCORE,
) -> int:
    """Return the PCOS risk percentage (0-100) for four strip readings.

    Four zones at 10 points each can reach 40, while the percentage is taken
    against ``max_score`` (30 by default), so strong readings overshoot and
    are clamped to 100. Halves round up.
    """
    if max_score <= 0:
        raise ValueError("max_score must be positive")
    points = raw_points(glucose, ph, cortisol, salt)
    percentage = int(math.floor(points / max_score * 100 + 0.5))
    return max(0, min(100, percentage))


def score_readings(readings, max_score: int = DEFAULT_MAX_SCORE) -> int:
    return calculate_pcos_risk_percentage(
        readings.glucose, readings.ph, readings.cortisol, readings.salt,
        max_score=max_score,
    )
