"""Pure calculations over workouts, nutrition and recovery."""

from .nutrition import adherence_score, bmr, macro_distribution, tdee
from .recovery import adherence_rate, readiness_score
from .rounding import round_half_up
from .training import (
    IntensityZone,
    SessionTotals,
    intensity_zone,
    one_rep_max,
    rest_seconds,
    session_totals,
    volume,
)

__all__ = [
    "IntensityZone",
    "SessionTotals",
    "adherence_rate",
    "adherence_score",
    "bmr",
    "intensity_zone",
    "macro_distribution",
    "one_rep_max",
    "readiness_score",
    "rest_seconds",
    "round_half_up",
    "session_totals",
    "tdee",
    "volume",
]
