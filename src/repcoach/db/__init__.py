"""Database layer for repcoach."""

from .engine import get_db_path, init_db
from .repositories import (
    PersonalRecordRepository,
    UserProfileRepository,
    WorkoutSessionRepository,
)

__all__ = [
    "get_db_path",
    "init_db",
    "PersonalRecordRepository",
    "UserProfileRepository",
    "WorkoutSessionRepository",
]
