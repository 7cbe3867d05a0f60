"""Strength training calculations: volume, 1RM, intensity and rest."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..errors import ValidationError
from ..models.exercises import ExerciseType
from ..models.workout import ExerciseLog
from .rounding import round_half_up


class IntensityZone(str, Enum):
    """Training effect implied by a rep count."""

    ENDURANCE = "endurance"
    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    POWER = "power"


# Checked top-down; the first threshold the rep count reaches wins.
INTENSITY_ZONES: list[tuple[int, IntensityZone]] = [
    (15, IntensityZone.ENDURANCE),
    (8, IntensityZone.HYPERTROPHY),
    (3, IntensityZone.STRENGTH),
]

CARDIO_REST_SECONDS = 30


@dataclass(frozen=True)
class SessionTotals:
    """Aggregates of a finished workout."""

    total_sets: int
    total_reps: int
    total_volume: float


@dataclass(frozen=True)
class ExerciseStats:
    """Rolling performance summary for one exercise."""

    exercise_id: str
    times_performed: int
    trend: str  # improving, stable, declining
    strength_score: float  # 0-100
    average_weight: float | None = None
    average_reps: float | None = None
    last_weight: float | None = None
    last_reps: int | None = None


def volume(weight: float, reps: int, sets: int) -> float:
    """Training volume: weight x reps x sets."""
    if weight < 0 or reps < 0 or sets < 0:
        raise ValidationError("Volume inputs cannot be negative")
    return weight * reps * sets


def one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max with the Epley formula.

    A single rep is already a max, so the weight is returned unchanged.
    """
    if reps < 1:
        raise ValidationError("One-rep max needs at least one rep")
    if reps == 1:
        return weight
    return round_half_up(weight * (1 + reps / 30))


def intensity_zone(reps: int) -> IntensityZone:
    """Classify a rep count into an intensity zone."""
    for threshold, zone in INTENSITY_ZONES:
        if reps >= threshold:
            return zone
    return IntensityZone.POWER


def rest_seconds(intensity_percent: float, exercise_type: ExerciseType | str) -> int:
    """Suggested rest between sets.

    Args:
        intensity_percent: Load as a percentage of 1RM (0-100)
        exercise_type: Cardio always gets a short flat rest

    Returns:
        Rest in seconds
    """
    if exercise_type == ExerciseType.CARDIO:
        return CARDIO_REST_SECONDS
    if intensity_percent >= 90:
        return 180
    if intensity_percent >= 70:
        return 120
    return 60


def log_volume(log: ExerciseLog) -> float:
    """Volume of a logged exercise.

    Unweighted (bodyweight) exercises count one unit per rep.
    """
    if log.weight is None:
        return sum(log.actual_reps)
    return sum(volume(log.weight, reps, 1) for reps in log.actual_reps)


def session_totals(logs: Iterable[ExerciseLog]) -> SessionTotals:
    """Recompute session aggregates from its exercise logs."""
    total_sets = 0
    total_reps = 0
    total_volume: float = 0
    for log in logs:
        total_sets += log.sets_completed
        total_reps += sum(log.actual_reps)
        total_volume += log_volume(log)
    return SessionTotals(
        total_sets=total_sets, total_reps=total_reps, total_volume=total_volume
    )


def is_progression_ready(stats: ExerciseStats) -> bool:
    """Whether the load on an exercise can go up."""
    return stats.trend == "improving" and stats.strength_score > 75
