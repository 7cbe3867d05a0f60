"""Built-in exercise library and workout templates."""

from ..models.exercises import (
    DifficultyLevel,
    EquipmentType,
    Exercise,
    ExerciseType,
    MuscleGroup,
)
from ..models.workout import WorkoutExercise, WorkoutTemplate

COMMON_EXERCISES: list[Exercise] = [
    # Upper body push
    Exercise(
        id="push_up",
        name="Push Up",
        muscle_groups=(MuscleGroup.CHEST, MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS),
        equipment=(EquipmentType.BODYWEIGHT,),
        aliases=("Pushup", "Press-up"),
    ),
    Exercise(
        id="bench_press",
        name="Bench Press",
        muscle_groups=(MuscleGroup.CHEST, MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS),
        equipment=(EquipmentType.BARBELL, EquipmentType.BENCH),
        difficulty=DifficultyLevel.INTERMEDIATE,
        aliases=("Flat Bench", "BB Bench"),
    ),
    Exercise(
        id="overhead_press",
        name="Overhead Press",
        muscle_groups=(MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS),
        equipment=(EquipmentType.DUMBBELL,),
        difficulty=DifficultyLevel.INTERMEDIATE,
        aliases=("OHP", "Shoulder Press"),
    ),
    # Upper body pull
    Exercise(
        id="pull_up",
        name="Pull Up",
        muscle_groups=(MuscleGroup.LATS, MuscleGroup.BICEPS, MuscleGroup.BACK),
        equipment=(EquipmentType.PULL_UP_BAR,),
        difficulty=DifficultyLevel.INTERMEDIATE,
        aliases=("Pullup", "Chin Up"),
    ),
    Exercise(
        id="dumbbell_row",
        name="Dumbbell Row",
        muscle_groups=(MuscleGroup.BACK, MuscleGroup.LATS, MuscleGroup.BICEPS),
        equipment=(EquipmentType.DUMBBELL, EquipmentType.BENCH),
        aliases=("DB Row", "One Arm Row"),
    ),
    # Lower body
    Exercise(
        id="squat",
        name="Squat",
        muscle_groups=(MuscleGroup.QUADRICEPS, MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS),
        equipment=(EquipmentType.BARBELL,),
        difficulty=DifficultyLevel.INTERMEDIATE,
        aliases=("Back Squat", "BB Squat"),
    ),
    Exercise(
        id="bodyweight_squat",
        name="Bodyweight Squat",
        muscle_groups=(MuscleGroup.QUADRICEPS, MuscleGroup.GLUTES),
        equipment=(EquipmentType.BODYWEIGHT,),
        aliases=("Air Squat",),
    ),
    Exercise(
        id="deadlift",
        name="Deadlift",
        muscle_groups=(MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES, MuscleGroup.LOWER_BACK),
        equipment=(EquipmentType.BARBELL,),
        difficulty=DifficultyLevel.ADVANCED,
        aliases=("Conventional Deadlift",),
    ),
    Exercise(
        id="lunge",
        name="Lunge",
        muscle_groups=(MuscleGroup.QUADRICEPS, MuscleGroup.GLUTES),
        equipment=(EquipmentType.BODYWEIGHT,),
        aliases=("Walking Lunge", "Forward Lunge"),
    ),
    # Core
    Exercise(
        id="plank",
        name="Plank",
        muscle_groups=(MuscleGroup.ABS, MuscleGroup.OBLIQUES),
        equipment=(EquipmentType.YOGA_MAT,),
        exercise_type=ExerciseType.ISOMETRIC,
        aliases=("Front Plank",),
    ),
    # Conditioning
    Exercise(
        id="jumping_jacks",
        name="Jumping Jacks",
        muscle_groups=(MuscleGroup.CALVES, MuscleGroup.SHOULDERS),
        equipment=(EquipmentType.NONE,),
        exercise_type=ExerciseType.CARDIO,
        aliases=("Star Jumps",),
    ),
]


BUILTIN_TEMPLATES: list[WorkoutTemplate] = [
    WorkoutTemplate(
        id="full_body_beginner",
        name="Full Body Starter",
        description="Bodyweight circuit for the first weeks of training.",
        difficulty=DifficultyLevel.BEGINNER,
        focus=("full_body",),
        warmup=("5 min brisk walk", "Arm circles"),
        cooldown=("Hamstring stretch", "Chest stretch"),
        exercises=(
            WorkoutExercise("bodyweight_squat", "Bodyweight Squat", sets=3, reps=12, rest_seconds=60),
            WorkoutExercise("push_up", "Push Up", sets=3, reps=10, rest_seconds=60),
            WorkoutExercise("lunge", "Lunge", sets=2, reps=10, rest_seconds=45),
            WorkoutExercise(
                "jumping_jacks",
                "Jumping Jacks",
                sets=2,
                reps=30,
                rest_seconds=30,
                exercise_type=ExerciseType.CARDIO,
            ),
        ),
    ),
    WorkoutTemplate(
        id="strength_basics",
        name="Strength Basics",
        description="Heavy compound lifts with long rests.",
        difficulty=DifficultyLevel.INTERMEDIATE,
        focus=("strength",),
        warmup=("Empty bar squats", "Band pull-aparts"),
        exercises=(
            WorkoutExercise("squat", "Squat", sets=5, reps=5, rest_seconds=180, weight=80),
            WorkoutExercise("bench_press", "Bench Press", sets=5, reps=5, rest_seconds=180, weight=60),
            WorkoutExercise("dumbbell_row", "Dumbbell Row", sets=3, reps=8, rest_seconds=120, weight=24),
        ),
    ),
    WorkoutTemplate(
        id="upper_hypertrophy",
        name="Upper Body Pump",
        description="Moderate loads, higher reps.",
        difficulty=DifficultyLevel.INTERMEDIATE,
        focus=("chest", "back", "shoulders"),
        exercises=(
            WorkoutExercise("bench_press", "Bench Press", sets=4, reps=10, rest_seconds=120, weight=50),
            WorkoutExercise("pull_up", "Pull Up", sets=3, reps=8, rest_seconds=120),
            WorkoutExercise("overhead_press", "Overhead Press", sets=3, reps=12, rest_seconds=90, weight=14),
        ),
    ),
]


def get_template(template_id: str) -> WorkoutTemplate | None:
    """Find a built-in template by id."""
    for template in BUILTIN_TEMPLATES:
        if template.id == template_id:
            return template
    return None
