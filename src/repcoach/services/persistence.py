"""Mapping finished workouts to and from storage."""

from datetime import datetime
from pathlib import Path
from typing import Sequence

import aiosqlite

from ..db.repositories import PersonalRecordRepository, WorkoutSessionRepository
from ..errors import (
    InvalidTransitionError,
    NotAuthenticatedError,
    Result,
    ValidationError,
)
from ..metrics.training import session_totals
from ..models.workout import (
    ExerciseLog,
    PersonalRecord,
    WorkoutSession,
    WorkoutTemplate,
)
from ..utils.logger import setup_logger
from .auth import AuthSession
from .records import detect_personal_records
from .tracker import WorkoutTracker

logger = setup_logger(__name__)

# Errors a storage call may raise that are reported back instead of raised.
STORAGE_ERRORS = (aiosqlite.Error, OSError)


def build_logs(
    workout: WorkoutTemplate, completed_sets: Sequence[int]
) -> list[ExerciseLog]:
    """One log per planned exercise, in plan order.

    Every completed set is logged with the prescribed rep count; per-set
    rep variation is not tracked.
    """
    if len(completed_sets) != len(workout.exercises):
        raise ValidationError(
            f"Expected {len(workout.exercises)} set counts, got {len(completed_sets)}"
        )
    return [
        ExerciseLog(
            exercise_id=exercise.exercise_id,
            exercise_name=exercise.name,
            sets_completed=done,
            target_sets=exercise.sets,
            target_reps=exercise.reps,
            actual_reps=[exercise.reps] * done,
            rest_time=exercise.rest_seconds,
            weight=exercise.weight,
            notes=exercise.notes or None,
        )
        for exercise, done in zip(workout.exercises, completed_sets)
    ]


def build_session(
    tracker: WorkoutTracker, user_id: str, notes: str | None = None
) -> WorkoutSession:
    """Assemble the session record of a finished tracker."""
    if not tracker.is_finished:
        raise InvalidTransitionError("Workout is still in progress")

    logs = build_logs(tracker.workout, [p.completed_sets for p in tracker.progress])
    totals = session_totals(logs)
    return WorkoutSession(
        user_id=user_id,
        workout_name=tracker.workout.name,
        workout_template_id=tracker.workout.id,
        started_at=tracker.started_at,
        completed_at=tracker.completed_at,
        duration_minutes=tracker.elapsed_minutes(),
        total_sets=totals.total_sets,
        total_reps=totals.total_reps,
        total_volume=totals.total_volume,
        notes=notes,
        status=tracker.status,
        exercises=logs,
    )


def _sort_key(session: WorkoutSession) -> datetime:
    return session.completed_at or datetime.min


class SessionPersistenceAdapter:
    """Saves finished workouts and reads workout history.

    Storage failures come back as failed ``Result`` values carrying the
    storage error message. Nothing is retried, and a failed save leaves the
    tracker untouched so the user's local progress stays visible.
    """

    def __init__(
        self,
        sessions: WorkoutSessionRepository | None = None,
        records: PersonalRecordRepository | None = None,
        db_path: Path | None = None,
    ):
        self.sessions = sessions or WorkoutSessionRepository(db_path)
        self.records = records or PersonalRecordRepository(db_path)

    async def save(self, session: WorkoutSession) -> Result[WorkoutSession]:
        """Store a session with its exercise logs."""
        try:
            saved = await self.sessions.create(session)
        except STORAGE_ERRORS as e:
            logger.warning("Failed to save workout session: %s", e)
            return Result.fail(str(e))
        logger.info("Saved workout session %s for %s", saved.id, saved.user_id)
        return Result.ok(saved)

    async def list_by_user(
        self, user_id: str, limit: int | None = None
    ) -> Result[list[WorkoutSession]]:
        """Completed sessions of a user, most recently completed first."""
        try:
            sessions = await self.sessions.list_by_user(user_id, limit)
        except STORAGE_ERRORS as e:
            logger.warning("Failed to load workout history: %s", e)
            return Result.fail(str(e))
        return Result.ok(sorted(sessions, key=_sort_key, reverse=True))

    async def update_session(self, session: WorkoutSession) -> Result[WorkoutSession]:
        """Apply notes, completion time and status to a stored open session.

        Completed and cancelled sessions are immutable. Status only moves
        forward, and totals are recomputed from the stored exercise logs.
        """
        if session.id is None:
            return Result.fail("Session must have an ID to update")
        try:
            stored = await self.sessions.get(session.id)
        except STORAGE_ERRORS as e:
            logger.warning("Failed to load workout session %s: %s", session.id, e)
            return Result.fail(str(e))
        if stored is None:
            return Result.fail(f"Workout session {session.id} not found")
        if stored.is_final:
            return Result.fail(
                f"Workout session {stored.id} is {stored.status.value} and cannot be changed"
            )

        if session.status != stored.status:
            try:
                stored.transition_to(session.status)
            except InvalidTransitionError as e:
                return Result.fail(str(e))

        totals = session_totals(stored.exercises)
        stored.notes = session.notes
        stored.completed_at = session.completed_at
        stored.duration_minutes = session.duration_minutes
        stored.total_sets = totals.total_sets
        stored.total_reps = totals.total_reps
        stored.total_volume = totals.total_volume

        try:
            await self.sessions.update(stored)
        except STORAGE_ERRORS as e:
            logger.warning("Failed to update workout session %s: %s", session.id, e)
            return Result.fail(str(e))
        return Result.ok(stored)

    async def finalize(
        self,
        tracker: WorkoutTracker,
        auth: AuthSession,
        notes: str | None = None,
    ) -> Result[WorkoutSession]:
        """Build the record of a finished tracker and store it."""
        try:
            user_id = auth.require_user_id()
        except NotAuthenticatedError as e:
            return Result.fail(str(e))

        session = build_session(tracker, user_id, notes)
        return await self.save(session)

    async def record_personal_records(
        self, session: WorkoutSession
    ) -> Result[list[PersonalRecord]]:
        """Append any new personal records set during ``session``."""
        try:
            previous = await self.records.best_values(session.user_id)
            created = []
            for record in detect_personal_records(session, previous):
                created.append(await self.records.create(record))
        except STORAGE_ERRORS as e:
            logger.warning("Failed to store personal records: %s", e)
            return Result.fail(str(e))
        return Result.ok(created)

    async def list_personal_records(
        self, user_id: str, exercise_id: str | None = None
    ) -> Result[list[PersonalRecord]]:
        try:
            records = await self.records.list_by_user(user_id, exercise_id)
        except STORAGE_ERRORS as e:
            logger.warning("Failed to load personal records: %s", e)
            return Result.fail(str(e))
        return Result.ok(records)
