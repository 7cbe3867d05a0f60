"""Data models for repcoach."""

from .exercises import DifficultyLevel, EquipmentType, Exercise, ExerciseType, MuscleGroup
from .goals import FitnessGoal, GoalType, Priority
from .nutrition import (
    ActivityLevel,
    Gender,
    MacroTargets,
    NutritionFacts,
    NutritionGoal,
    NutritionGoals,
)
from .recovery import RecoveryMetrics
from .user_profile import CoachingFrequency, UserProfile
from .workout import (
    ExerciseLog,
    ExerciseProgress,
    PersonalRecord,
    RecordType,
    SessionStatus,
    WorkoutExercise,
    WorkoutSession,
    WorkoutTemplate,
)

__all__ = [
    "ActivityLevel",
    "CoachingFrequency",
    "DifficultyLevel",
    "EquipmentType",
    "Exercise",
    "ExerciseLog",
    "ExerciseProgress",
    "ExerciseType",
    "FitnessGoal",
    "Gender",
    "GoalType",
    "MacroTargets",
    "MuscleGroup",
    "NutritionFacts",
    "NutritionGoal",
    "NutritionGoals",
    "PersonalRecord",
    "Priority",
    "RecordType",
    "RecoveryMetrics",
    "SessionStatus",
    "UserProfile",
    "WorkoutExercise",
    "WorkoutSession",
    "WorkoutTemplate",
]
