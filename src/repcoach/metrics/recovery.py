"""Readiness and program-adherence calculations."""

from ..models.recovery import RecoveryMetrics
from .rounding import round_half_up

# Stress and soreness lower readiness.
READINESS_WEIGHTS = {
    "sleep_quality": 0.25,
    "stress_level": -0.20,
    "soreness": -0.15,
    "energy": 0.20,
    "motivation": 0.15,
    "sleep_hours": 0.15,
}

TARGET_SLEEP_HOURS = 8

# phase -> (base, slope, cap)
PHASE_INTENSITY = {
    "base_building": (5, 2, 7),
    "intensification": (6, 3, 9),
    "peak": (8, 2, 10),
}
DEFAULT_PHASE_INTENSITY = (4, 4, 8)


def readiness_score(metrics: RecoveryMetrics) -> int:
    """Composite 0-10 readiness to train."""
    normalized_sleep = min(metrics.sleep_hours / TARGET_SLEEP_HOURS, 1) * 10
    score = (
        metrics.sleep_quality * READINESS_WEIGHTS["sleep_quality"]
        + metrics.stress_level * READINESS_WEIGHTS["stress_level"]
        + metrics.soreness * READINESS_WEIGHTS["soreness"]
        + metrics.energy * READINESS_WEIGHTS["energy"]
        + metrics.motivation * READINESS_WEIGHTS["motivation"]
        + normalized_sleep * READINESS_WEIGHTS["sleep_hours"]
    )
    return max(0, min(10, round_half_up(score)))


def adherence_rate(planned: int, completed: int) -> int:
    """Completed workouts as a percentage of planned ones."""
    if planned <= 0:
        return 0
    return round_half_up(completed / planned * 100)


def is_deload_week_needed(
    consecutive_weeks: int, average_rpe: float, recovery_score: float
) -> bool:
    return consecutive_weeks >= 4 or average_rpe >= 8.5 or recovery_score <= 5


def should_progress_weight(
    current_rpe: float, target_rpe: float, consecutive_successful_sessions: int
) -> bool:
    return current_rpe <= target_rpe and consecutive_successful_sessions >= 2


def program_intensity(current_week: int, total_weeks: int, phase: str) -> float:
    """Target intensity (RPE scale) for a week within a training phase."""
    base, slope, cap = PHASE_INTENSITY.get(phase, DEFAULT_PHASE_INTENSITY)
    progress_ratio = current_week / total_weeks
    return min(base + progress_ratio * slope, cap)
