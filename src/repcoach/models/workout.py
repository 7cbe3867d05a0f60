"""Workout plan, runtime progress and session history models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..errors import InvalidTransitionError, ValidationError
from ..utils.timestamps import format_timestamp, parse_timestamp, to_local_naive
from .exercises import DifficultyLevel, ExerciseType


class SessionStatus(str, Enum):
    """Workout session lifecycle status."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RecordType(str, Enum):
    """Kinds of personal record."""

    WEIGHT = "weight"
    REPS = "reps"
    DURATION = "duration"
    DISTANCE = "distance"
    VOLUME = "volume"


# Allowed status changes; completed and cancelled are terminal.
_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.IN_PROGRESS: frozenset(
        {SessionStatus.COMPLETED, SessionStatus.CANCELLED}
    ),
    SessionStatus.COMPLETED: frozenset(),
    SessionStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class WorkoutExercise:
    """A planned exercise: what to do and how many times.

    Fixed for the lifetime of a session once the session starts.
    """

    exercise_id: str
    name: str
    sets: int
    reps: int
    rest_seconds: int = 60
    weight: float | None = None  # in kg
    duration_seconds: int | None = None
    distance_meters: float | None = None
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    notes: str = ""

    def __post_init__(self):
        if self.sets < 1:
            raise ValidationError(f"{self.name}: sets must be at least 1")
        if self.reps < 0:
            raise ValidationError(f"{self.name}: reps cannot be negative")
        if self.rest_seconds < 0:
            raise ValidationError(f"{self.name}: rest cannot be negative")
        if self.weight is not None and self.weight < 0:
            raise ValidationError(f"{self.name}: weight cannot be negative")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "rest_seconds": self.rest_seconds,
            "weight": self.weight,
            "duration_seconds": self.duration_seconds,
            "distance_meters": self.distance_meters,
            "exercise_type": self.exercise_type.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutExercise":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            name=data["name"],
            sets=data["sets"],
            reps=data["reps"],
            rest_seconds=data.get("rest_seconds", 60),
            weight=data.get("weight"),
            duration_seconds=data.get("duration_seconds"),
            distance_meters=data.get("distance_meters"),
            exercise_type=ExerciseType(data.get("exercise_type", "strength")),
            notes=data.get("notes", ""),
        )


@dataclass(frozen=True)
class WorkoutTemplate:
    """A reusable, ordered list of planned exercises."""

    id: str
    name: str
    exercises: tuple[WorkoutExercise, ...]
    description: str = ""
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    focus: tuple[str, ...] = ()
    warmup: tuple[str, ...] = ()
    cooldown: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.exercises:
            raise ValidationError(f"Workout '{self.name}' has no exercises")

    @property
    def total_sets(self) -> int:
        return sum(ex.sets for ex in self.exercises)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty.value,
            "focus": list(self.focus),
            "warmup": list(self.warmup),
            "cooldown": list(self.cooldown),
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutTemplate":
        """Create from dictionary."""
        return cls(
            id=data.get("id", "custom"),
            name=data["name"],
            exercises=tuple(WorkoutExercise.from_dict(ex) for ex in data["exercises"]),
            description=data.get("description", ""),
            difficulty=DifficultyLevel(data.get("difficulty", "beginner")),
            focus=tuple(data.get("focus", [])),
            warmup=tuple(data.get("warmup", [])),
            cooldown=tuple(data.get("cooldown", [])),
        )


@dataclass
class ExerciseProgress:
    """Runtime completion state of one planned exercise."""

    exercise_id: str
    target_sets: int
    completed_sets: int = 0
    is_completed: bool = False

    def record_set(self) -> None:
        """Count one more completed set, never passing the target."""
        if self.completed_sets >= self.target_sets:
            raise InvalidTransitionError(
                f"Exercise {self.exercise_id} already has all "
                f"{self.target_sets} sets completed"
            )
        self.completed_sets += 1
        if self.completed_sets == self.target_sets:
            self.is_completed = True

    def to_dict(self) -> dict:
        return {
            "exercise_id": self.exercise_id,
            "target_sets": self.target_sets,
            "completed_sets": self.completed_sets,
            "is_completed": self.is_completed,
        }


@dataclass
class ExerciseLog:
    """Finalized record of one exercise inside a workout session."""

    exercise_id: str
    exercise_name: str
    sets_completed: int
    target_sets: int
    target_reps: int
    actual_reps: list[int]
    rest_time: int
    weight: float | None = None
    notes: str | None = None

    def __post_init__(self):
        if len(self.actual_reps) != self.sets_completed:
            raise ValidationError(
                f"{self.exercise_name}: {len(self.actual_reps)} rep entries "
                f"for {self.sets_completed} completed sets"
            )
        if self.sets_completed > self.target_sets:
            raise ValidationError(
                f"{self.exercise_name}: completed sets exceed target"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "sets_completed": self.sets_completed,
            "target_sets": self.target_sets,
            "target_reps": self.target_reps,
            "actual_reps": list(self.actual_reps),
            "rest_time": self.rest_time,
            "weight": self.weight,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseLog":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            exercise_name=data["exercise_name"],
            sets_completed=data["sets_completed"],
            target_sets=data["target_sets"],
            target_reps=data["target_reps"],
            actual_reps=list(data.get("actual_reps") or []),
            rest_time=data.get("rest_time", 0),
            weight=data.get("weight"),
            notes=data.get("notes"),
        )


@dataclass
class WorkoutSession:
    """One user's performance of a workout, from start to completion.

    Totals are derived from the exercise logs; see
    ``repcoach.metrics.training.session_totals``.
    """

    user_id: str
    workout_name: str
    started_at: datetime
    status: SessionStatus = SessionStatus.IN_PROGRESS
    exercises: list[ExerciseLog] = field(default_factory=list)
    workout_template_id: str | None = None
    completed_at: datetime | None = None
    duration_minutes: int = 0
    total_sets: int = 0
    total_reps: int = 0
    total_volume: float = 0
    notes: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    def __post_init__(self):
        self.started_at = to_local_naive(self.started_at)
        self.completed_at = to_local_naive(self.completed_at)
        self.created_at = to_local_naive(self.created_at)

    def transition_to(self, status: SessionStatus) -> None:
        """Move to a new status, refusing anything but forward moves."""
        if status not in _TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Cannot move session from {self.status.value} to {status.value}"
            )
        self.status = status

    @property
    def is_final(self) -> bool:
        return self.status != SessionStatus.IN_PROGRESS

    def to_dict(self) -> dict:
        """Convert to dictionary (JSON friendly)."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "workout_name": self.workout_name,
            "workout_template_id": self.workout_template_id,
            "started_at": format_timestamp(self.started_at),
            "completed_at": format_timestamp(self.completed_at),
            "duration_minutes": self.duration_minutes,
            "total_sets": self.total_sets,
            "total_reps": self.total_reps,
            "total_volume": self.total_volume,
            "notes": self.notes,
            "status": self.status.value,
            "exercises": [log.to_dict() for log in self.exercises],
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSession":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            user_id=data["user_id"],
            workout_name=data["workout_name"],
            workout_template_id=data.get("workout_template_id"),
            started_at=parse_timestamp(data["started_at"]),
            completed_at=parse_timestamp(data.get("completed_at")),
            duration_minutes=data.get("duration_minutes", 0),
            total_sets=data.get("total_sets", 0),
            total_reps=data.get("total_reps", 0),
            total_volume=data.get("total_volume", 0),
            notes=data.get("notes"),
            status=SessionStatus(data.get("status", "in_progress")),
            exercises=[ExerciseLog.from_dict(log) for log in data.get("exercises", [])],
            created_at=parse_timestamp(data.get("created_at")),
        )


@dataclass(frozen=True)
class PersonalRecord:
    """A best result for one exercise. Records are appended, never replaced."""

    user_id: str
    exercise_id: str
    exercise_name: str
    record_type: RecordType
    value: float
    unit: str
    achieved_at: datetime
    notes: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "record_type": self.record_type.value,
            "value": self.value,
            "unit": self.unit,
            "achieved_at": format_timestamp(self.achieved_at),
            "notes": self.notes,
            "created_at": format_timestamp(self.created_at),
        }
