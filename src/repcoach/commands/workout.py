"""Workout execution and history commands."""

import click
import questionary

from ..clients import custom_style
from ..config import get_settings
from ..data import BUILTIN_TEMPLATES, get_template
from ..services.auth import AuthSession
from ..services.coaching import CoachingTrigger, select_message
from ..services.persistence import SessionPersistenceAdapter
from ..services.tracker import WorkoutTracker
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
)

COMPLETE_SET = "complete"
CANCEL = "cancel"
START_REST = "rest"
SKIP_REST = "skip"


@click.group()
def workout():
    """Run workouts and review workout history."""
    pass


@workout.command("templates")
def templates():
    """List the built-in workout templates."""
    rows = [
        [
            t.id,
            t.name,
            t.difficulty.value,
            str(len(t.exercises)),
            str(t.total_sets),
        ]
        for t in BUILTIN_TEMPLATES
    ]
    click.echo(format_table(["ID", "Name", "Level", "Exercises", "Sets"], rows))


def _show_position(tracker: WorkoutTracker) -> None:
    exercise = tracker.current_exercise
    click.echo()
    click.echo(
        click.style(
            f"{exercise.name}: set {tracker.current_set} of {exercise.sets}", bold=True
        )
    )
    target = f"  {exercise.reps} reps"
    if exercise.weight:
        target += f" @ {exercise.weight}kg"
    click.echo(target)
    click.echo(f"  Workout progress: {tracker.progress_percent}%")


async def _rest(tracker: WorkoutTracker) -> None:
    choice = await questionary.select(
        f"Rest {tracker.rest_seconds_remaining}s before the next set",
        choices=[
            questionary.Choice("Start rest timer", START_REST),
            questionary.Choice("Skip rest", SKIP_REST),
        ],
        style=custom_style,
    ).ask_async()

    if choice != START_REST:
        tracker.skip_rest()
        return

    def show(remaining: int) -> None:
        click.echo(f"\r  Rest: {remaining:>3}s", nl=False)

    await tracker.run_rest_countdown(on_tick=show)
    click.echo()


@workout.command("start")
@click.argument("template_id")
@click.option("--user", "user_id", help="User id to save the workout under")
@click.option("--no-rest", is_flag=True, help="Skip all rest periods")
@click.pass_context
@async_command
async def start(ctx: click.Context, template_id: str, user_id: str | None, no_rest: bool):
    """Perform a workout set by set.

    Examples:

        repcoach workout start strength_basics --user alice
    """
    ensure_initialized(ctx)

    template = get_template(template_id)
    if template is None:
        echo_error(f"Unknown workout template: {template_id}")
        ctx.exit(1)

    tracker = WorkoutTracker(template)
    click.echo(select_message(CoachingTrigger.WORKOUT_START, user_id or "guest").text)

    while not tracker.is_finished:
        _show_position(tracker)
        action = await questionary.select(
            "Next:",
            choices=[
                questionary.Choice("Complete set", COMPLETE_SET),
                questionary.Choice("Cancel workout", CANCEL),
            ],
            style=custom_style,
        ).ask_async()

        if action != COMPLETE_SET:
            tracker.cancel()
            break

        tracker.complete_set()
        if tracker.is_resting:
            if no_rest:
                tracker.skip_rest()
            else:
                await _rest(tracker)

    if not tracker.completed_at:
        echo_warning(f"Workout cancelled after {tracker.total_completed_sets} sets.")
        return

    echo_success(
        f"Workout complete: {tracker.total_completed_sets} sets "
        f"in {tracker.elapsed_minutes()} minutes"
    )

    auth = AuthSession.for_user(user_id) if user_id else AuthSession.anonymous()
    adapter = SessionPersistenceAdapter()
    result = await adapter.finalize(
        tracker,
        auth,
        notes=(
            f"Completed {tracker.total_completed_sets} sets "
            f"in {tracker.elapsed_minutes()} minutes"
        ),
    )
    if not result.success:
        echo_error(f"Workout not saved: {result.error}")
        return

    session = result.data
    echo_success(
        f"Saved session {session.id}: {session.total_reps} reps, "
        f"volume {session.total_volume:g}"
    )
    click.echo(select_message(CoachingTrigger.WORKOUT_COMPLETE, session.user_id).text)

    records = await adapter.record_personal_records(session)
    if not records.success:
        echo_warning(f"Personal records not updated: {records.error}")
    elif records.data:
        click.echo(select_message(CoachingTrigger.PERSONAL_RECORD, session.user_id).text)
        for record in records.data:
            click.echo(
                f"  - {record.exercise_name}: {record.record_type.value} "
                f"{record.value:g} {record.unit}"
            )


@workout.command("history")
@click.option("--user", "user_id", required=True, help="User id")
@click.option("--limit", type=int, default=None, help="Maximum sessions to show")
@click.pass_context
@async_command
async def history(ctx: click.Context, user_id: str, limit: int | None):
    """Show completed workouts, most recent first."""
    ensure_initialized(ctx)

    adapter = SessionPersistenceAdapter()
    result = await adapter.list_by_user(user_id, limit or get_settings().history_limit)
    if not result.success:
        echo_error(result.error)
        ctx.exit(1)

    if not result.data:
        echo_info("No workouts recorded yet.")
        return

    rows = [
        [
            str(s.id),
            s.completed_at.strftime("%Y-%m-%d %H:%M") if s.completed_at else "-",
            s.workout_name,
            str(s.total_sets),
            str(s.total_reps),
            f"{s.total_volume:g}",
            f"{s.duration_minutes} min",
        ]
        for s in result.data
    ]
    click.echo(
        format_table(
            ["ID", "Completed", "Workout", "Sets", "Reps", "Volume", "Duration"], rows
        )
    )
