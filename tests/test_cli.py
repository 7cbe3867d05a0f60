"""Tests for the non-interactive CLI commands."""

import asyncio
from datetime import datetime

from click.testing import CliRunner

from repcoach.cli import main
from repcoach.data import get_template
from repcoach.metrics.training import session_totals
from repcoach.models.workout import SessionStatus, WorkoutSession
from repcoach.services.persistence import SessionPersistenceAdapter, build_logs


def invoke(*args):
    return CliRunner().invoke(main, list(args))


def seed_session(user_id="alice"):
    template = get_template("full_body_beginner")
    logs = build_logs(template, [ex.sets for ex in template.exercises])
    totals = session_totals(logs)
    session = WorkoutSession(
        user_id=user_id,
        workout_name=template.name,
        workout_template_id=template.id,
        started_at=datetime(2024, 1, 15, 9, 0),
        completed_at=datetime(2024, 1, 15, 9, 30),
        duration_minutes=30,
        total_sets=totals.total_sets,
        total_reps=totals.total_reps,
        total_volume=totals.total_volume,
        status=SessionStatus.COMPLETED,
        exercises=logs,
    )
    adapter = SessionPersistenceAdapter()
    saved = asyncio.run(adapter.save(session)).data
    asyncio.run(adapter.record_personal_records(saved))
    return saved


class TestInit:
    def test_init_creates_database(self, temp_data_dir):
        result = invoke("init")
        assert result.exit_code == 0
        assert "Database initialized" in result.output
        assert (temp_data_dir / "repcoach.db").exists()

    def test_commands_require_init(self, temp_data_dir):
        result = invoke("workout", "history", "--user", "alice")
        assert result.exit_code == 1
        assert "repcoach init" in result.output


class TestWorkoutCommands:
    def test_templates(self):
        result = invoke("workout", "templates")
        assert result.exit_code == 0
        assert "strength_basics" in result.output
        assert "Full Body Starter" in result.output

    def test_history_empty(self, temp_data_dir):
        invoke("init")
        result = invoke("workout", "history", "--user", "alice")
        assert result.exit_code == 0
        assert "No workouts recorded yet" in result.output

    def test_history(self, temp_data_dir):
        invoke("init")
        seed_session()
        result = invoke("workout", "history", "--user", "alice")
        assert result.exit_code == 0
        assert "Full Body Starter" in result.output
        assert "2024-01-15 09:30" in result.output

    def test_start_unknown_template(self, temp_data_dir):
        invoke("init")
        result = invoke("workout", "start", "nope", "--user", "alice")
        assert result.exit_code == 1
        assert "Unknown workout template" in result.output


class TestRecordsCommand:
    def test_records(self, temp_data_dir):
        invoke("init")
        seed_session()
        result = invoke("records", "--user", "alice", "--exercise", "pushup")
        assert result.exit_code == 0
        assert "Push Up" in result.output
        assert "Lunge" not in result.output

    def test_unknown_exercise(self, temp_data_dir):
        invoke("init")
        result = invoke("records", "--user", "alice", "--exercise", "zzzz")
        assert result.exit_code == 1


class TestCalculatorCommands:
    def test_nutrition_targets(self):
        result = invoke(
            "nutrition",
            "targets",
            "--weight", "70",
            "--height", "175",
            "--age", "30",
            "--gender", "male",
            "--activity", "moderately_active",
        )
        assert result.exit_code == 0
        assert "1648.75 kcal" in result.output
        assert "2556 kcal" in result.output

    def test_nutrition_targets_missing_input(self):
        result = invoke("nutrition", "targets", "--weight", "70")
        assert result.exit_code == 1
        assert "--height" in result.output

    def test_readiness(self):
        result = invoke(
            "readiness",
            "--sleep-quality", "10",
            "--sleep-hours", "8",
            "--stress", "1",
            "--soreness", "1",
            "--energy", "10",
            "--motivation", "10",
        )
        assert result.exit_code == 0
        assert "Readiness: 7/10" in result.output

    def test_readiness_out_of_range(self):
        result = invoke(
            "readiness",
            "--sleep-quality", "11",
            "--sleep-hours", "8",
            "--stress", "1",
            "--soreness", "1",
            "--energy", "10",
            "--motivation", "10",
        )
        assert result.exit_code == 2

    def test_coach(self):
        result = invoke("coach", "injury_reported")
        assert result.exit_code == 0
        assert "Your safety comes first" in result.output
        assert "urgent" in result.output

    def test_coach_enthusiastic(self):
        result = invoke("coach", "workout_start", "--enthusiasm", "9")
        assert "Let's crush this workout!" in result.output
