"""Recovery and wellness tracking models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RecoveryMetrics:
    """Self-reported recovery state for one day.

    All scores are on a 1-10 scale.
    """

    sleep_quality: float
    sleep_hours: float
    stress_level: float
    soreness: float
    energy: float
    motivation: float
    user_id: str | None = None
    day: date | None = None
    resting_heart_rate: int | None = None
    heart_rate_variability: float | None = None
    notes: str = ""
