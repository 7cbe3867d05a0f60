"""Fitness calculator routes."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...metrics.nutrition import (
    adherence_score,
    bmr,
    macro_distribution,
    nutrition_density,
    tdee,
)
from ...metrics.recovery import adherence_rate, is_deload_week_needed, readiness_score
from ...metrics.training import intensity_zone, one_rep_max, rest_seconds, volume
from ...models.exercises import ExerciseType
from ...models.nutrition import (
    ActivityLevel,
    Gender,
    NutritionFacts,
    NutritionGoal,
    NutritionGoals,
)
from ...models.recovery import RecoveryMetrics

router = APIRouter(prefix="/metrics", tags=["metrics"])


class RecoveryInput(BaseModel):
    sleep_quality: float = Field(ge=1, le=10)
    sleep_hours: float = Field(ge=0, le=24)
    stress_level: float = Field(ge=1, le=10)
    soreness: float = Field(ge=1, le=10)
    energy: float = Field(ge=1, le=10)
    motivation: float = Field(ge=1, le=10)


class NutritionInput(BaseModel):
    calories: float
    protein: float
    carbohydrates: float
    fat: float
    fiber: float = 0


class AdherenceInput(BaseModel):
    consumed: NutritionInput
    goals: NutritionInput


@router.get("/one-rep-max")
async def get_one_rep_max(weight: float, reps: int):
    """Estimated 1RM and the training zone of the rep count."""
    return {
        "one_rep_max": one_rep_max(weight, reps),
        "intensity_zone": intensity_zone(reps).value,
    }


@router.get("/volume")
async def get_volume(weight: float, reps: int, sets: int):
    return {"volume": volume(weight, reps, sets)}


@router.get("/rest")
async def get_rest(intensity: float, exercise_type: ExerciseType = ExerciseType.STRENGTH):
    return {"rest_seconds": rest_seconds(intensity, exercise_type)}


@router.get("/nutrition/targets")
async def get_nutrition_targets(
    weight: float,
    height: float,
    age: int,
    gender: Gender,
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE,
    goal: NutritionGoal = NutritionGoal.MAINTENANCE,
):
    """BMR, TDEE and macro grams for a body."""
    base = bmr(weight, height, age, gender)
    calories = tdee(base, activity_level)
    return {
        "bmr": base,
        "tdee": calories,
        "macros": macro_distribution(calories, goal, weight).to_dict(),
    }


@router.post("/nutrition/adherence")
async def post_nutrition_adherence(body: AdherenceInput):
    consumed = NutritionFacts(**body.consumed.model_dump())
    goals = body.goals.model_dump()
    goals.pop("fiber")
    return {
        "adherence": adherence_score(consumed, NutritionGoals(**goals)),
        "density": nutrition_density(consumed),
    }


@router.post("/readiness")
async def post_readiness(body: RecoveryInput):
    return {"readiness": readiness_score(RecoveryMetrics(**body.model_dump()))}


@router.get("/adherence")
async def get_adherence(planned: int, completed: int):
    return {"adherence_rate": adherence_rate(planned, completed)}


@router.get("/deload")
async def get_deload(consecutive_weeks: int, average_rpe: float, recovery_score: float):
    return {
        "deload_needed": is_deload_week_needed(
            consecutive_weeks, average_rpe, recovery_score
        )
    }
