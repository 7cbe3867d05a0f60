"""Nutrition data models."""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Daily activity level used for TDEE."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class NutritionGoal(str, Enum):
    """Goals that change the macro split."""

    MUSCLE_GAIN = "muscle_gain"
    WEIGHT_LOSS = "weight_loss"
    PERFORMANCE = "performance"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrients consumed (or contained in a food)."""

    calories: float
    protein: float  # grams
    carbohydrates: float  # grams
    fat: float  # grams
    fiber: float = 0  # grams


@dataclass(frozen=True)
class NutritionGoals:
    """Daily targets."""

    calories: float
    protein: float
    carbohydrates: float
    fat: float


@dataclass(frozen=True)
class MacroTargets:
    """Gram targets per macronutrient."""

    protein: int
    carbs: int
    fat: int

    def to_dict(self) -> dict:
        return {"protein": self.protein, "carbs": self.carbs, "fat": self.fat}
