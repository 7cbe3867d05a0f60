"""Interactive user profile input."""

import questionary
from questionary import Style

from ..models.exercises import DifficultyLevel
from ..models.nutrition import ActivityLevel, Gender, NutritionGoal
from ..models.user_profile import CoachingFrequency, UserProfile

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _is_int(value: str) -> bool | str:
    try:
        return int(value) > 0 or "Enter a positive number"
    except ValueError:
        return "Enter a whole number"


def _is_float(value: str) -> bool | str:
    try:
        return float(value) > 0 or "Enter a positive number"
    except ValueError:
        return "Enter a number"


class ProfileQuestionnaire:
    """Collects the body metrics and preferences of a user."""

    def __init__(self, existing: UserProfile | None = None):
        self.existing = existing

    def _default(self, attr: str, fallback: str = "") -> str:
        if self.existing is None:
            return fallback
        value = getattr(self.existing, attr)
        return str(value.value if hasattr(value, "value") else value)

    async def collect_profile(self, user_id: str) -> UserProfile | None:
        """Run the questionnaire. Returns None if the user aborts."""
        print("\n=== Profile ===\n")

        name = await questionary.text(
            "What's your name?",
            default=self._default("name"),
            style=custom_style,
        ).ask_async()
        if name is None:
            return None

        age = await questionary.text(
            "Your age:",
            default=self._default("age"),
            validate=_is_int,
            style=custom_style,
        ).ask_async()
        if age is None:
            return None

        gender = await questionary.select(
            "Gender (used for BMR):",
            choices=[
                questionary.Choice("Male", Gender.MALE),
                questionary.Choice("Female", Gender.FEMALE),
            ],
            style=custom_style,
        ).ask_async()
        if gender is None:
            return None

        weight = await questionary.text(
            "Your body weight (in kg):",
            default=self._default("weight"),
            validate=_is_float,
            style=custom_style,
        ).ask_async()
        height = await questionary.text(
            "Your height (in cm):",
            default=self._default("height"),
            validate=_is_float,
            style=custom_style,
        ).ask_async()
        if weight is None or height is None:
            return None

        activity = await questionary.select(
            "How active are you outside of training?",
            choices=[
                questionary.Choice("Sedentary (desk job)", ActivityLevel.SEDENTARY),
                questionary.Choice("Lightly active", ActivityLevel.LIGHTLY_ACTIVE),
                questionary.Choice("Moderately active", ActivityLevel.MODERATELY_ACTIVE),
                questionary.Choice("Very active", ActivityLevel.VERY_ACTIVE),
                questionary.Choice("Extremely active", ActivityLevel.EXTREMELY_ACTIVE),
            ],
            style=custom_style,
        ).ask_async()

        fitness_level = await questionary.select(
            "What's your training experience?",
            choices=[
                questionary.Choice("Beginner (less than 1 year)", DifficultyLevel.BEGINNER),
                questionary.Choice("Intermediate (1-3 years)", DifficultyLevel.INTERMEDIATE),
                questionary.Choice("Advanced (3+ years)", DifficultyLevel.ADVANCED),
            ],
            style=custom_style,
        ).ask_async()

        goal = await questionary.select(
            "What's your nutrition goal?",
            choices=[
                questionary.Choice("Build muscle", NutritionGoal.MUSCLE_GAIN),
                questionary.Choice("Lose weight", NutritionGoal.WEIGHT_LOSS),
                questionary.Choice("Athletic performance", NutritionGoal.PERFORMANCE),
                questionary.Choice("Maintain", NutritionGoal.MAINTENANCE),
            ],
            style=custom_style,
        ).ask_async()

        frequency = await questionary.select(
            "How often should the coach check in?",
            choices=[
                questionary.Choice("Often (every few hours)", CoachingFrequency.HIGH),
                questionary.Choice("Twice a day", CoachingFrequency.MEDIUM),
                questionary.Choice("Once a day", CoachingFrequency.LOW),
            ],
            style=custom_style,
        ).ask_async()

        duration = await questionary.select(
            "How long are your typical training sessions?",
            choices=[
                questionary.Choice("30 minutes", 30),
                questionary.Choice("45 minutes", 45),
                questionary.Choice("60 minutes", 60),
                questionary.Choice("90 minutes", 90),
            ],
            style=custom_style,
        ).ask_async()

        if None in (activity, fitness_level, goal, frequency, duration):
            return None

        return UserProfile(
            user_id=user_id,
            name=name or "User",
            age=int(age),
            gender=gender,
            weight=float(weight),
            height=float(height),
            activity_level=activity,
            fitness_level=fitness_level,
            nutrition_goal=goal,
            coaching_frequency=frequency,
            workout_duration=duration,
        )
