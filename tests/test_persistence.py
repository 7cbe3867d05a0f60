"""Tests for session persistence and the repositories behind it."""

import asyncio
from dataclasses import replace
from datetime import datetime, timedelta

import aiosqlite
import pytest

from repcoach.db.engine import init_db
from repcoach.db.repositories import (
    PersonalRecordRepository,
    UserProfileRepository,
    WorkoutSessionRepository,
)
from repcoach.errors import InvalidTransitionError, ValidationError
from repcoach.models.workout import RecordType, SessionStatus, WorkoutSession
from repcoach.services.auth import AuthSession
from repcoach.services.persistence import (
    SessionPersistenceAdapter,
    build_logs,
    build_session,
)
from repcoach.services.records import detect_personal_records
from repcoach.services.tracker import WorkoutTracker


def run(coro):
    return asyncio.run(coro)


def finished_tracker(workout, clock, minutes=30):
    tracker = WorkoutTracker(workout, clock=clock)
    while not tracker.is_finished:
        clock.advance(minutes=minutes / workout.total_sets)
        tracker.complete_set()
        tracker.skip_rest()
    return tracker


class FailingSessionRepository:
    async def create(self, session):
        raise aiosqlite.OperationalError("database is locked")

    async def list_by_user(self, user_id, limit=None):
        raise aiosqlite.OperationalError("no such table: workout_sessions")


@pytest.fixture
def adapter(temp_db_path):
    run(init_db(temp_db_path))
    return SessionPersistenceAdapter(db_path=temp_db_path)


class TestBuildSession:
    """Tests for mapping a tracker to a session record."""

    def test_totals(self, sample_workout, clock):
        tracker = finished_tracker(sample_workout, clock)
        session = build_session(tracker, "user-1", notes="Felt good")

        assert session.status == SessionStatus.COMPLETED
        assert session.total_sets == 3
        # 2 x 5 bench reps + 10 push ups
        assert session.total_reps == 20
        # 100kg x 10 reps + 10 bodyweight reps
        assert session.total_volume == 1010
        assert session.workout_template_id == "test_plan"
        assert session.notes == "Felt good"

    def test_logs_follow_plan_order(self, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock), "user-1")
        assert [log.exercise_id for log in session.exercises] == ["bench_press", "push_up"]
        assert session.exercises[0].actual_reps == [5, 5]
        assert session.exercises[1].weight is None

    def test_duration(self, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock, minutes=45), "u")
        assert session.duration_minutes == 45
        assert session.completed_at - session.started_at == timedelta(minutes=45)

    def test_in_progress_tracker_rejected(self, sample_workout):
        tracker = WorkoutTracker(sample_workout)
        tracker.complete_set()
        with pytest.raises(InvalidTransitionError):
            build_session(tracker, "user-1")

    def test_cancelled_tracker_keeps_partial_sets(self, sample_workout):
        tracker = WorkoutTracker(sample_workout)
        tracker.complete_set()
        tracker.cancel()
        session = build_session(tracker, "user-1")

        assert session.status == SessionStatus.CANCELLED
        assert session.total_sets == 1
        assert session.completed_at is None

    def test_build_logs_checks_counts(self, sample_workout):
        with pytest.raises(ValidationError):
            build_logs(sample_workout, [2])
        with pytest.raises(ValidationError):
            build_logs(sample_workout, [3, 1])


class TestSessionPersistenceAdapter:
    """Tests for saving and listing sessions."""

    def test_save_and_list_round_trip(self, adapter, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock), "user-1")

        saved = run(adapter.save(session))
        assert saved.success
        assert saved.data.id is not None

        listed = run(adapter.list_by_user("user-1"))
        assert listed.success
        [stored] = listed.data
        assert stored.id == saved.data.id
        assert stored.total_sets == session.total_sets
        assert stored.total_reps == session.total_reps
        assert stored.total_volume == session.total_volume
        assert stored.exercises == session.exercises
        assert stored.started_at == session.started_at

    def test_list_most_recent_first(self, adapter, sample_workout, clock):
        for _ in range(3):
            session = build_session(finished_tracker(sample_workout, clock), "user-1")
            run(adapter.save(session))
            clock.advance(days=1)

        sessions = run(adapter.list_by_user("user-1")).data
        completed = [s.completed_at for s in sessions]
        assert completed == sorted(completed, reverse=True)

        limited = run(adapter.list_by_user("user-1", limit=2)).data
        assert len(limited) == 2
        assert limited[0].completed_at == completed[0]

    def test_list_only_own_completed_sessions(self, adapter, sample_workout, clock):
        run(adapter.save(build_session(finished_tracker(sample_workout, clock), "user-1")))
        run(adapter.save(build_session(finished_tracker(sample_workout, clock), "user-2")))

        cancelled = WorkoutTracker(sample_workout, clock=clock)
        cancelled.cancel()
        run(adapter.save(build_session(cancelled, "user-1")))

        sessions = run(adapter.list_by_user("user-1")).data
        assert len(sessions) == 1
        assert sessions[0].user_id == "user-1"

    def test_completed_session_is_immutable(self, adapter, sample_workout, clock):
        saved = run(adapter.save(build_session(finished_tracker(sample_workout, clock), "u"))).data
        edited = replace(
            saved, status=SessionStatus.IN_PROGRESS, total_volume=999999, notes="Edited"
        )

        result = run(adapter.update_session(edited))

        assert not result.success
        assert "cannot be changed" in result.error
        [stored] = run(adapter.list_by_user("u")).data
        assert stored.status == SessionStatus.COMPLETED
        assert stored.total_volume == saved.total_volume
        assert stored.notes is None

    def test_cancelled_session_is_immutable(self, adapter, sample_workout, clock):
        tracker = WorkoutTracker(sample_workout, clock=clock)
        tracker.complete_set()
        tracker.cancel()
        saved = run(adapter.save(build_session(tracker, "u"))).data

        result = run(adapter.update_session(replace(saved, status=SessionStatus.COMPLETED)))
        assert not result.success

    def test_open_session_completes_with_recomputed_totals(
        self, adapter, sample_workout, clock
    ):
        logs = build_logs(sample_workout, [2, 1])
        open_session = WorkoutSession(
            user_id="u",
            workout_name=sample_workout.name,
            started_at=clock.now,
            exercises=logs,
        )
        saved = run(adapter.save(open_session)).data

        finished = replace(
            saved,
            status=SessionStatus.COMPLETED,
            completed_at=clock.now + timedelta(minutes=30),
            duration_minutes=30,
            total_volume=999999,
        )
        result = run(adapter.update_session(finished))

        assert result.success
        [stored] = run(adapter.list_by_user("u")).data
        assert stored.status == SessionStatus.COMPLETED
        assert stored.total_sets == 3
        assert stored.total_volume == 1010

    def test_update_unknown_session(self, adapter, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock), "u")
        session.id = 42
        result = run(adapter.update_session(session))
        assert result.error == "Workout session 42 not found"

    def test_storage_failure_is_reported(self, temp_db_path, sample_workout, clock):
        adapter = SessionPersistenceAdapter(
            sessions=FailingSessionRepository(),
            records=PersonalRecordRepository(temp_db_path),
        )
        tracker = finished_tracker(sample_workout, clock)

        result = run(adapter.finalize(tracker, AuthSession.for_user("user-1")))

        assert not result.success
        assert result.error == "database is locked"
        # Local progress is untouched
        assert tracker.total_completed_sets == 3

    def test_list_failure_is_reported(self, temp_db_path):
        adapter = SessionPersistenceAdapter(
            sessions=FailingSessionRepository(),
            records=PersonalRecordRepository(temp_db_path),
        )
        result = run(adapter.list_by_user("user-1"))
        assert not result.success
        assert "no such table" in result.error

    def test_finalize_requires_sign_in(self, adapter, sample_workout, clock):
        tracker = finished_tracker(sample_workout, clock)
        result = run(adapter.finalize(tracker, AuthSession.anonymous()))

        assert not result.success
        assert result.error == "Please sign in"
        assert run(adapter.list_by_user("user-1")).data == []

    def test_finalize_expired_session(self, adapter, sample_workout, clock):
        expired = AuthSession(user_id="user-1", expires_at=datetime(2000, 1, 1))
        result = run(adapter.finalize(finished_tracker(sample_workout, clock), expired))
        assert result.error == "Please sign in"

    def test_finalize_saves(self, adapter, sample_workout, clock):
        tracker = finished_tracker(sample_workout, clock)
        result = run(adapter.finalize(tracker, AuthSession.for_user("user-1"), notes="ok"))

        assert result.success
        assert result.data.user_id == "user-1"
        assert result.data.notes == "ok"


class TestPersonalRecords:
    """Tests for personal record detection and storage."""

    def test_first_session_sets_records(self, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock), "user-1")
        records = detect_personal_records(session, {})
        found = {(r.exercise_id, r.record_type): r.value for r in records}

        assert found[("bench_press", RecordType.WEIGHT)] == 100
        assert found[("bench_press", RecordType.REPS)] == 5
        assert found[("bench_press", RecordType.VOLUME)] == 1000
        assert found[("push_up", RecordType.REPS)] == 10
        assert ("push_up", RecordType.WEIGHT) not in found

    def test_only_strict_improvements(self, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock), "user-1")
        previous = {
            ("bench_press", RecordType.WEIGHT): 100,
            ("bench_press", RecordType.REPS): 4,
            ("bench_press", RecordType.VOLUME): 2000,
            ("push_up", RecordType.REPS): 12,
            ("push_up", RecordType.VOLUME): 12,
        }
        records = detect_personal_records(session, previous)
        assert [(r.exercise_id, r.record_type) for r in records] == [
            ("bench_press", RecordType.REPS)
        ]

    def test_records_append(self, adapter, sample_workout, clock):
        session = build_session(finished_tracker(sample_workout, clock), "user-1")
        saved = run(adapter.save(session)).data

        first = run(adapter.record_personal_records(saved))
        assert first.success
        assert len(first.data) == 5

        again = run(adapter.record_personal_records(saved))
        assert again.data == []

        stored = run(adapter.list_personal_records("user-1", "bench_press")).data
        assert {r.record_type for r in stored} == {
            RecordType.WEIGHT,
            RecordType.REPS,
            RecordType.VOLUME,
        }
        assert all(r.id is not None for r in stored)


class TestUserProfileRepository:
    """Tests for profile storage."""

    def test_upsert_and_get(self, temp_db_path, sample_user_profile):
        run(init_db(temp_db_path))
        repo = UserProfileRepository(temp_db_path)

        created = run(repo.upsert(sample_user_profile))
        assert created.id is not None
        assert created.name == "Test User"

        sample_user_profile.weight = 72.5
        updated = run(repo.upsert(sample_user_profile))
        assert updated.id == created.id
        assert updated.weight == 72.5

    def test_get_missing(self, temp_db_path):
        run(init_db(temp_db_path))
        assert run(UserProfileRepository(temp_db_path).get("nobody")) is None

    def test_delete(self, temp_db_path, sample_user_profile):
        run(init_db(temp_db_path))
        repo = UserProfileRepository(temp_db_path)
        run(repo.upsert(sample_user_profile))
        run(repo.delete("user-1"))
        assert run(repo.get("user-1")) is None


class TestWorkoutSessionRepository:
    def test_get_and_delete(self, temp_db_path, sample_workout, clock):
        run(init_db(temp_db_path))
        repo = WorkoutSessionRepository(temp_db_path)
        saved = run(repo.create(build_session(finished_tracker(sample_workout, clock), "u")))

        fetched = run(repo.get(saved.id))
        assert fetched.workout_name == "Test Plan"
        assert len(fetched.exercises) == 2

        run(repo.delete(saved.id))
        assert run(repo.get(saved.id)) is None
