"""Data access layer for repcoach.

Rows use snake_case columns and ISO-8601 timestamp strings. Repository
methods raise on storage errors; turning those into user-facing results is
the caller's job.
"""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.user_profile import UserProfile
from ..models.workout import (
    ExerciseLog,
    PersonalRecord,
    RecordType,
    SessionStatus,
    WorkoutSession,
)
from ..utils.timestamps import format_timestamp, parse_timestamp
from .engine import get_db_path


class UserProfileRepository:
    """Repository for user profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def upsert(self, profile: UserProfile) -> UserProfile:
        """Create or replace the profile of ``profile.user_id``."""
        data = profile.to_dict()
        now = datetime.now().isoformat()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO user_profiles
                (user_id, name, age, gender, weight, height, activity_level,
                 fitness_level, nutrition_goal, coaching_frequency, workout_duration,
                 created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    name = excluded.name, age = excluded.age, gender = excluded.gender,
                    weight = excluded.weight, height = excluded.height,
                    activity_level = excluded.activity_level,
                    fitness_level = excluded.fitness_level,
                    nutrition_goal = excluded.nutrition_goal,
                    coaching_frequency = excluded.coaching_frequency,
                    workout_duration = excluded.workout_duration,
                    updated_at = excluded.updated_at
                """,
                (
                    data["user_id"],
                    data["name"],
                    data["age"],
                    data["gender"],
                    data["weight"],
                    data["height"],
                    data["activity_level"],
                    data["fitness_level"],
                    data["nutrition_goal"],
                    data["coaching_frequency"],
                    data["workout_duration"],
                    now,
                    now,
                ),
            )
            await db.commit()
        return await self.get(profile.user_id)

    async def get(self, user_id: str) -> UserProfile | None:
        """Get a profile by user id."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def delete(self, user_id: str) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM user_profiles WHERE user_id = ?", (user_id,))
            await db.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> UserProfile:
        """Convert a database row to a UserProfile."""
        return UserProfile.from_dict(
            dict(row),
            id=row["id"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


class WorkoutSessionRepository:
    """Repository for workout sessions and their exercise logs."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, session: WorkoutSession) -> WorkoutSession:
        """Insert a session and its exercise logs in one transaction.

        Returns:
            The stored session with its id and creation time filled in
        """
        created_at = datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_sessions
                (user_id, workout_name, workout_template_id, started_at, completed_at,
                 duration_minutes, total_sets, total_reps, total_volume, notes,
                 status, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    session.user_id,
                    session.workout_name,
                    session.workout_template_id,
                    format_timestamp(session.started_at),
                    format_timestamp(session.completed_at),
                    session.duration_minutes,
                    session.total_sets,
                    session.total_reps,
                    session.total_volume,
                    session.notes,
                    session.status.value,
                    created_at.isoformat(),
                ),
            )
            session_id = cursor.lastrowid

            await db.executemany(
                """
                INSERT INTO exercise_logs
                (workout_session_id, user_id, position, exercise_id, exercise_name,
                 sets_completed, target_sets, target_reps, actual_reps, weight,
                 rest_time, notes)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        session_id,
                        session.user_id,
                        position,
                        log.exercise_id,
                        log.exercise_name,
                        log.sets_completed,
                        log.target_sets,
                        log.target_reps,
                        json.dumps(log.actual_reps),
                        log.weight,
                        log.rest_time,
                        log.notes,
                    )
                    for position, log in enumerate(session.exercises)
                ],
            )
            await db.commit()

        return WorkoutSession(
            id=session_id,
            user_id=session.user_id,
            workout_name=session.workout_name,
            workout_template_id=session.workout_template_id,
            started_at=session.started_at,
            completed_at=session.completed_at,
            duration_minutes=session.duration_minutes,
            total_sets=session.total_sets,
            total_reps=session.total_reps,
            total_volume=session.total_volume,
            notes=session.notes,
            status=session.status,
            exercises=list(session.exercises),
            created_at=created_at,
        )

    async def get(self, session_id: int) -> WorkoutSession | None:
        """Get a session (with logs) by id."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_sessions WHERE id = ?", (session_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            logs = await self._fetch_logs(db, [session_id])
            return self._row_to_session(row, logs.get(session_id, []))

    async def list_by_user(
        self,
        user_id: str,
        limit: int | None = None,
        status: SessionStatus | None = SessionStatus.COMPLETED,
    ) -> list[WorkoutSession]:
        """List a user's sessions, most recently completed first."""
        query = "SELECT * FROM workout_sessions WHERE user_id = ?"
        params: list = [user_id]
        if status is not None:
            query += " AND status = ?"
            params.append(status.value)
        query += " ORDER BY completed_at DESC, id DESC"
        if limit:
            query += " LIMIT ?"
            params.append(limit)

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            logs = await self._fetch_logs(db, [row["id"] for row in rows])
            return [self._row_to_session(row, logs.get(row["id"], [])) for row in rows]

    async def update(self, session: WorkoutSession) -> None:
        """Update the session row. Exercise logs are left as stored."""
        if session.id is None:
            raise ValueError("Session must have an ID to update")

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE workout_sessions SET
                    workout_name = ?, completed_at = ?, duration_minutes = ?,
                    total_sets = ?, total_reps = ?, total_volume = ?, notes = ?,
                    status = ?
                WHERE id = ?
                """,
                (
                    session.workout_name,
                    format_timestamp(session.completed_at),
                    session.duration_minutes,
                    session.total_sets,
                    session.total_reps,
                    session.total_volume,
                    session.notes,
                    session.status.value,
                    session.id,
                ),
            )
            await db.commit()

    async def delete(self, session_id: int) -> None:
        """Delete a session and its logs."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "DELETE FROM exercise_logs WHERE workout_session_id = ?", (session_id,)
            )
            await db.execute("DELETE FROM workout_sessions WHERE id = ?", (session_id,))
            await db.commit()

    async def _fetch_logs(
        self, db: aiosqlite.Connection, session_ids: list[int]
    ) -> dict[int, list[ExerciseLog]]:
        if not session_ids:
            return {}
        placeholders = ", ".join("?" for _ in session_ids)
        cursor = await db.execute(
            f"""
            SELECT * FROM exercise_logs
            WHERE workout_session_id IN ({placeholders})
            ORDER BY workout_session_id, position
            """,
            session_ids,
        )
        logs: dict[int, list[ExerciseLog]] = {}
        for row in await cursor.fetchall():
            logs.setdefault(row["workout_session_id"], []).append(
                ExerciseLog(
                    exercise_id=row["exercise_id"],
                    exercise_name=row["exercise_name"],
                    sets_completed=row["sets_completed"],
                    target_sets=row["target_sets"],
                    target_reps=row["target_reps"],
                    actual_reps=json.loads(row["actual_reps"] or "[]"),
                    weight=row["weight"],
                    rest_time=row["rest_time"],
                    notes=row["notes"],
                )
            )
        return logs

    def _row_to_session(
        self, row: aiosqlite.Row, logs: list[ExerciseLog]
    ) -> WorkoutSession:
        """Convert a database row to a WorkoutSession."""
        return WorkoutSession(
            id=row["id"],
            user_id=row["user_id"],
            workout_name=row["workout_name"],
            workout_template_id=row["workout_template_id"],
            started_at=parse_timestamp(row["started_at"]),
            completed_at=parse_timestamp(row["completed_at"]),
            duration_minutes=row["duration_minutes"],
            total_sets=row["total_sets"],
            total_reps=row["total_reps"],
            total_volume=row["total_volume"],
            notes=row["notes"],
            status=SessionStatus(row["status"]),
            exercises=logs,
            created_at=parse_timestamp(row["created_at"]),
        )


class PersonalRecordRepository:
    """Repository for personal records. Records are only ever appended."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, record: PersonalRecord) -> PersonalRecord:
        created_at = datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO personal_records
                (user_id, exercise_id, exercise_name, record_type, value, unit,
                 achieved_at, notes, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.user_id,
                    record.exercise_id,
                    record.exercise_name,
                    record.record_type.value,
                    record.value,
                    record.unit,
                    format_timestamp(record.achieved_at),
                    record.notes,
                    created_at.isoformat(),
                ),
            )
            await db.commit()
            record_id = cursor.lastrowid

        return PersonalRecord(
            id=record_id,
            user_id=record.user_id,
            exercise_id=record.exercise_id,
            exercise_name=record.exercise_name,
            record_type=record.record_type,
            value=record.value,
            unit=record.unit,
            achieved_at=record.achieved_at,
            notes=record.notes,
            created_at=created_at,
        )

    async def list_by_user(
        self, user_id: str, exercise_id: str | None = None
    ) -> list[PersonalRecord]:
        """All records of a user, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if exercise_id:
                cursor = await db.execute(
                    """
                    SELECT * FROM personal_records
                    WHERE user_id = ? AND exercise_id = ?
                    ORDER BY achieved_at DESC, id DESC
                    """,
                    (user_id, exercise_id),
                )
            else:
                cursor = await db.execute(
                    """
                    SELECT * FROM personal_records
                    WHERE user_id = ?
                    ORDER BY achieved_at DESC, id DESC
                    """,
                    (user_id,),
                )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def best_values(self, user_id: str) -> dict[tuple[str, RecordType], float]:
        """Highest recorded value per (exercise, record type)."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT exercise_id, record_type, MAX(value)
                FROM personal_records
                WHERE user_id = ?
                GROUP BY exercise_id, record_type
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return {
                (exercise_id, RecordType(record_type)): value
                for exercise_id, record_type, value in rows
            }

    def _row_to_record(self, row: aiosqlite.Row) -> PersonalRecord:
        return PersonalRecord(
            id=row["id"],
            user_id=row["user_id"],
            exercise_id=row["exercise_id"],
            exercise_name=row["exercise_name"],
            record_type=RecordType(row["record_type"]),
            value=row["value"],
            unit=row["unit"],
            achieved_at=parse_timestamp(row["achieved_at"]),
            notes=row["notes"],
            created_at=parse_timestamp(row["created_at"]),
        )
