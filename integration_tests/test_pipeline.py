"""Integration tests for the full workout pipeline.

These run a workout from plan to stored history against a real SQLite
file, the way the CLI and the API do.
"""

import asyncio
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from repcoach.data import get_template
from repcoach.db.engine import init_db
from repcoach.models.workout import RecordType, SessionStatus
from repcoach.services.auth import AuthSession
from repcoach.services.coaching import CoachingTrigger, select_message
from repcoach.services.persistence import SessionPersistenceAdapter, build_session
from repcoach.services.realtime import ChannelBroadcaster, UpdateType
from repcoach.services.tracker import WorkoutTracker


class SteppingClock:
    def __init__(self):
        self.now = datetime(2024, 3, 4, 18, 0)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def db_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "pipeline.db"
        asyncio.run(init_db(path))
        yield path


async def perform(template_id, clock, publisher=None, stop_after=None):
    """Drive a tracker the way the CLI does, resting between sets."""

    async def no_wait(seconds):
        clock.advance(seconds=seconds)

    tracker = WorkoutTracker(get_template(template_id), publisher=publisher, clock=clock)
    while not tracker.is_finished:
        if stop_after is not None and tracker.total_completed_sets == stop_after:
            tracker.cancel()
            break
        clock.advance(seconds=40)
        tracker.complete_set()
        await tracker.run_rest_countdown(sleep=no_wait)
    return tracker


class TestPipelineIntegration:
    """Plan to history, end to end."""

    def test_workout_to_history_flow(self, db_path):
        clock = SteppingClock()
        broadcaster = ChannelBroadcaster()
        adapter = SessionPersistenceAdapter(db_path=db_path)
        auth = AuthSession.for_user("alice")

        async def flow():
            tracker = await perform("strength_basics", clock, publisher=broadcaster)
            saved = await adapter.finalize(tracker, auth, notes="Heavy day")
            records = await adapter.record_personal_records(saved.data)
            history = await adapter.list_by_user("alice")
            return tracker, saved, records, history

        tracker, saved, records, history = asyncio.run(flow())

        assert tracker.status == SessionStatus.COMPLETED
        assert saved.success
        session = saved.data
        assert session.total_sets == 13
        assert session.total_volume == 4076
        # 13 sets of 40s, ten 180s rests after squats and bench, two 120s after rows
        assert session.duration_minutes == (13 * 40 + 10 * 180 + 2 * 120) // 60

        assert records.success
        weights = {
            r.exercise_id: r.value for r in records.data if r.record_type == RecordType.WEIGHT
        }
        assert weights == {"squat": 80, "bench_press": 60, "dumbbell_row": 24}

        assert history.success
        assert [s.id for s in history.data] == [session.id]
        assert history.data[0].notes == "Heavy day"

    def test_progress_events_reach_listener(self):
        clock = SteppingClock()
        broadcaster = ChannelBroadcaster()
        events = []

        tracker = WorkoutTracker(
            get_template("full_body_beginner"), publisher=broadcaster, clock=clock
        )
        broadcaster.subscribe(tracker.session_key, events.append)
        while not tracker.is_finished:
            tracker.complete_set()
            tracker.skip_rest()

        types = [e.update_type for e in events]
        assert types.count(UpdateType.SET_COMPLETED) == 10
        assert types.count(UpdateType.EXERCISE_COMPLETED) == 4
        assert types[-1] == UpdateType.WORKOUT_COMPLETED

    def test_second_session_only_new_records(self, db_path):
        clock = SteppingClock()
        adapter = SessionPersistenceAdapter(db_path=db_path)
        auth = AuthSession.for_user("alice")

        async def session_records():
            tracker = await perform("upper_hypertrophy", clock)
            saved = await adapter.finalize(tracker, auth)
            return (await adapter.record_personal_records(saved.data)).data

        first = asyncio.run(session_records())
        clock.advance(days=2)
        second = asyncio.run(session_records())

        assert len(first) > 0
        assert second == []

    def test_cancelled_workout_not_in_history(self, db_path):
        clock = SteppingClock()
        adapter = SessionPersistenceAdapter(db_path=db_path)

        tracker = asyncio.run(perform("full_body_beginner", clock, stop_after=4))
        assert tracker.status == SessionStatus.CANCELLED
        assert tracker.total_completed_sets == 4

        saved = asyncio.run(adapter.save(build_session(tracker, "alice")))
        assert saved.success

        history = asyncio.run(adapter.list_by_user("alice"))
        assert history.data == []

    def test_coach_reacts_to_records(self):
        message = select_message(CoachingTrigger.PERSONAL_RECORD, "alice", recent_workouts=3)
        assert message.priority.value == "high"
