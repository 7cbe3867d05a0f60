"""User profile data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .exercises import DifficultyLevel
from .nutrition import ActivityLevel, Gender, NutritionGoal


class CoachingFrequency(str, Enum):
    """How often the coach may reach out unprompted."""

    HIGH = "high"  # every 4 hours
    MEDIUM = "medium"  # every 12 hours
    LOW = "low"  # daily


@dataclass
class UserProfile:
    """Body metrics and preferences used by the metrics engine."""

    user_id: str
    name: str
    age: int
    gender: Gender
    weight: float  # in kg
    height: float  # in cm
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    fitness_level: DifficultyLevel = DifficultyLevel.BEGINNER
    nutrition_goal: NutritionGoal = NutritionGoal.MAINTENANCE
    coaching_frequency: CoachingFrequency = CoachingFrequency.MEDIUM
    workout_duration: int = 45  # minutes
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value,
            "weight": self.weight,
            "height": self.height,
            "activity_level": self.activity_level.value,
            "fitness_level": self.fitness_level.value,
            "nutrition_goal": self.nutrition_goal.value,
            "coaching_frequency": self.coaching_frequency.value,
            "workout_duration": self.workout_duration,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=data["user_id"],
            name=data["name"],
            age=data["age"],
            gender=Gender(data["gender"]),
            weight=data["weight"],
            height=data["height"],
            activity_level=ActivityLevel(data.get("activity_level", "moderately_active")),
            fitness_level=DifficultyLevel(data.get("fitness_level", "beginner")),
            nutrition_goal=NutritionGoal(data.get("nutrition_goal", "maintenance")),
            coaching_frequency=CoachingFrequency(data.get("coaching_frequency", "medium")),
            workout_duration=data.get("workout_duration", 45),
            created_at=created_at,
            updated_at=updated_at,
        )

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"User: {self.name} ({self.user_id})\n"
        summary += f"Age: {self.age}, {self.gender.value}\n"
        summary += f"Body: {self.weight}kg, {self.height}cm\n"
        summary += f"Activity: {self.activity_level.value}\n"
        summary += f"Fitness level: {self.fitness_level.value}\n"
        summary += f"Nutrition goal: {self.nutrition_goal.value}\n"
        return summary
