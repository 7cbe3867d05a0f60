"""Exercise definitions and metadata."""

from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Major muscle groups."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    ABS = "abs"
    OBLIQUES = "obliques"
    LOWER_BACK = "lower_back"
    GLUTES = "glutes"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"
    ADDUCTORS = "adductors"
    ABDUCTORS = "abductors"
    TRAPS = "traps"
    LATS = "lats"


class ExerciseType(str, Enum):
    """How an exercise is performed."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    BALANCE = "balance"
    PLYOMETRIC = "plyometric"
    ISOMETRIC = "isometric"


class EquipmentType(str, Enum):
    """Equipment types for exercises."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    RESISTANCE_BAND = "resistance_band"
    CABLE_MACHINE = "cable_machine"
    PULL_UP_BAR = "pull_up_bar"
    BENCH = "bench"
    YOGA_MAT = "yoga_mat"
    CARDIO_MACHINE = "cardio_machine"
    BODYWEIGHT = "bodyweight"
    NONE = "none"


class DifficultyLevel(str, Enum):
    """Exercise or workout difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


@dataclass(frozen=True)
class Exercise:
    """Reference data for a single exercise. Never mutated."""

    id: str
    name: str
    muscle_groups: tuple[MuscleGroup, ...]
    equipment: tuple[EquipmentType, ...]
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "muscle_groups": [mg.value for mg in self.muscle_groups],
            "equipment": [eq.value for eq in self.equipment],
            "difficulty": self.difficulty.value,
            "exercise_type": self.exercise_type.value,
            "aliases": list(self.aliases),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            muscle_groups=tuple(MuscleGroup(mg) for mg in data["muscle_groups"]),
            equipment=tuple(EquipmentType(eq) for eq in data["equipment"]),
            difficulty=DifficultyLevel(data.get("difficulty", "beginner")),
            exercise_type=ExerciseType(data.get("exercise_type", "strength")),
            aliases=tuple(data.get("aliases", [])),
        )
