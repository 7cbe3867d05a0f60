"""Fitness goal model and progress helpers."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class GoalType(str, Enum):
    STRENGTH = "strength"
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    HABIT = "habit"
    PERFORMANCE = "performance"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


@dataclass
class FitnessGoal:
    """A user goal with a measurable target."""

    id: str
    goal_type: GoalType
    description: str
    target: float | None = None
    current: float | None = None
    unit: str = ""
    deadline: datetime | None = None
    priority: Priority = Priority.MEDIUM
    strategies: list[str] = field(default_factory=list)
    is_active: bool = True

    def progress_percent(self) -> float:
        """Progress towards the target, capped at 100."""
        if not self.target or not self.current:
            return 0
        return min(self.current / self.target * 100, 100)

    def is_achieved(self) -> bool:
        if not self.target or not self.current:
            return False
        return self.current >= self.target

    def days_until_deadline(self, now: datetime | None = None) -> int | None:
        """Whole days left, rounded up. None when there is no deadline."""
        if self.deadline is None:
            return None
        now = now or datetime.now()
        return math.ceil((self.deadline - now).total_seconds() / 86400)

    def urgency(self, now: datetime | None = None) -> Priority:
        days_left = self.days_until_deadline(now)
        if days_left is None:
            return self.priority
        if days_left <= 7:
            return Priority.HIGH
        if days_left <= 30:
            return Priority.MEDIUM
        return Priority.LOW


def default_goals() -> list[FitnessGoal]:
    """Inactive starter goals offered to a new user."""
    return [
        FitnessGoal(
            id="default_strength",
            goal_type=GoalType.STRENGTH,
            description="Build functional strength",
            priority=Priority.HIGH,
            strategies=["Progressive overload", "Compound movements", "Consistent training"],
            is_active=False,
        ),
        FitnessGoal(
            id="default_weight_loss",
            goal_type=GoalType.WEIGHT_LOSS,
            description="Achieve healthy weight",
            unit="kg",
            priority=Priority.HIGH,
            strategies=["Calorie deficit", "Regular cardio", "Strength training"],
            is_active=False,
        ),
        FitnessGoal(
            id="default_habit",
            goal_type=GoalType.HABIT,
            description="Exercise regularly",
            target=3,
            current=0,
            unit="days per week",
            priority=Priority.MEDIUM,
            strategies=["Schedule workouts", "Start small", "Track progress"],
            is_active=False,
        ),
    ]
