"""Energy expenditure and macronutrient calculations."""

from ..errors import ValidationError
from ..models.nutrition import (
    ActivityLevel,
    Gender,
    MacroTargets,
    NutritionFacts,
    NutritionGoal,
    NutritionGoals,
)
from .rounding import round_half_up

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

# Calories per gram
PROTEIN_KCAL = 4
CARB_KCAL = 4
FAT_KCAL = 9


def bmr(weight_kg: float, height_cm: float, age: int, gender: Gender | str) -> float:
    """Basal metabolic rate (Mifflin-St Jeor)."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    try:
        gender = Gender(gender)
    except ValueError:
        raise ValidationError(f"Unknown gender: {gender}") from None
    return base + 5 if gender == Gender.MALE else base - 161


def tdee(bmr_value: float, activity_level: ActivityLevel | str) -> int:
    """Total daily energy expenditure."""
    try:
        multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
    except ValueError:
        raise ValidationError(f"Unknown activity level: {activity_level}") from None
    return round_half_up(bmr_value * multiplier)


def macro_distribution(
    calories: float, goal: NutritionGoal | str, body_weight_kg: float
) -> MacroTargets:
    """Split a calorie target into protein, carb and fat grams.

    Muscle gain and weight loss enforce a protein floor of 2.2 and 2.0 g
    per kg of body weight respectively. Unknown goals get the default split.
    """
    if calories <= 0:
        raise ValidationError("Calories must be positive")

    if goal == NutritionGoal.MUSCLE_GAIN:
        protein_ratio = max(0.30, body_weight_kg * 2.2 / calories)
        fat_ratio = 0.25
    elif goal == NutritionGoal.WEIGHT_LOSS:
        protein_ratio = max(0.35, body_weight_kg * 2.0 / calories)
        fat_ratio = 0.25
    elif goal == NutritionGoal.PERFORMANCE:
        protein_ratio = 0.25
        fat_ratio = 0.20
    else:
        protein_ratio = 0.30
        fat_ratio = 0.25

    carb_ratio = 1 - protein_ratio - fat_ratio

    return MacroTargets(
        protein=round_half_up(calories * protein_ratio / PROTEIN_KCAL),
        carbs=round_half_up(calories * carb_ratio / CARB_KCAL),
        fat=round_half_up(calories * fat_ratio / FAT_KCAL),
    )


def _closeness(actual: float, target: float) -> float:
    if target <= 0:
        raise ValidationError("Nutrition targets must be positive")
    return max(0.0, 100 - abs(actual - target) / target * 100)


def adherence_score(consumed: NutritionFacts, goals: NutritionGoals) -> int:
    """How closely intake matched targets, 0-100."""
    scores = [
        _closeness(consumed.calories, goals.calories),
        _closeness(consumed.protein, goals.protein),
        _closeness(consumed.carbohydrates, goals.carbohydrates),
        _closeness(consumed.fat, goals.fat),
    ]
    return round_half_up(sum(scores) / len(scores))


def is_within_range(actual: float, target: float, tolerance: float = 0.1) -> bool:
    return abs(actual - target) <= target * tolerance


def nutrition_density(facts: NutritionFacts) -> int:
    """Protein and fiber per calorie, as a 0-100 score."""
    if facts.calories <= 0:
        return 0
    protein_score = facts.protein / facts.calories * 100
    fiber_score = facts.fiber / facts.calories * 100
    return min(100, round_half_up(protein_score + fiber_score))
