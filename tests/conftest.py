"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from repcoach.config import get_settings
from repcoach.models.nutrition import ActivityLevel, Gender, NutritionGoal
from repcoach.models.user_profile import UserProfile
from repcoach.models.workout import WorkoutExercise, WorkoutTemplate


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def temp_data_dir(monkeypatch, tmp_path):
    """Point the settings at an empty data directory."""
    monkeypatch.setenv("REPCOACH_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def sample_workout():
    """A two-exercise plan: one weighted, one bodyweight."""
    return WorkoutTemplate(
        id="test_plan",
        name="Test Plan",
        exercises=(
            WorkoutExercise("bench_press", "Bench Press", sets=2, reps=5, rest_seconds=90, weight=100),
            WorkoutExercise("push_up", "Push Up", sets=1, reps=10, rest_seconds=30),
        ),
    )


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        user_id="user-1",
        name="Test User",
        age=30,
        gender=Gender.MALE,
        weight=70,
        height=175,
        activity_level=ActivityLevel.SEDENTARY,
        nutrition_goal=NutritionGoal.MUSCLE_GAIN,
    )


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 15, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()
