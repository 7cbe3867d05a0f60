"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_settings


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_name


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # User profiles
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT UNIQUE NOT NULL,
                name TEXT NOT NULL,
                age INTEGER NOT NULL,
                gender TEXT NOT NULL,
                weight REAL NOT NULL,
                height REAL NOT NULL,
                activity_level TEXT NOT NULL,
                fitness_level TEXT NOT NULL,
                nutrition_goal TEXT NOT NULL,
                coaching_frequency TEXT DEFAULT 'medium',
                workout_duration INTEGER DEFAULT 45,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)

        # Workout sessions
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                workout_name TEXT NOT NULL,
                workout_template_id TEXT,
                started_at TEXT NOT NULL,
                completed_at TEXT,
                duration_minutes INTEGER DEFAULT 0,
                total_sets INTEGER DEFAULT 0,
                total_reps INTEGER DEFAULT 0,
                total_volume REAL DEFAULT 0,
                notes TEXT,
                status TEXT NOT NULL DEFAULT 'in_progress',
                created_at TEXT NOT NULL
            )
        """)

        # Per-exercise logs of a session
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercise_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_session_id INTEGER NOT NULL,
                user_id TEXT NOT NULL,
                position INTEGER NOT NULL,
                exercise_id TEXT NOT NULL,
                exercise_name TEXT NOT NULL,
                sets_completed INTEGER NOT NULL,
                target_sets INTEGER NOT NULL,
                target_reps INTEGER NOT NULL,
                actual_reps TEXT DEFAULT '[]',
                weight REAL,
                rest_time INTEGER DEFAULT 0,
                notes TEXT,
                FOREIGN KEY (workout_session_id) REFERENCES workout_sessions(id) ON DELETE CASCADE
            )
        """)

        # Personal records (append only)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS personal_records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                exercise_id TEXT NOT NULL,
                exercise_name TEXT NOT NULL,
                record_type TEXT NOT NULL,
                value REAL NOT NULL,
                unit TEXT NOT NULL,
                achieved_at TEXT NOT NULL,
                notes TEXT,
                created_at TEXT NOT NULL
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_sessions_user
            ON workout_sessions(user_id, completed_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercise_logs_session
            ON exercise_logs(workout_session_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_personal_records_user
            ON personal_records(user_id, exercise_id)
        """)

        await db.commit()
