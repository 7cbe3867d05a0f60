"""Personal record commands."""

import click

from ..services.persistence import SessionPersistenceAdapter
from ..utils.exercise_utils import find_exercise
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table


@click.command()
@click.option("--user", "user_id", required=True, help="User id")
@click.option("--exercise", help="Only show records for this exercise (id, name or alias)")
@click.pass_context
@async_command
async def records(ctx: click.Context, user_id: str, exercise: str | None):
    """Show personal records, newest first.

    Examples:

        repcoach records --user alice

        repcoach records --user alice --exercise "bb bench"
    """
    ensure_initialized(ctx)

    exercise_id = None
    if exercise:
        match = find_exercise(exercise)
        if match is None:
            echo_error(f"Unknown exercise: {exercise}")
            ctx.exit(1)
        exercise_id = match.id

    result = await SessionPersistenceAdapter().list_personal_records(user_id, exercise_id)
    if not result.success:
        echo_error(result.error)
        ctx.exit(1)

    if not result.data:
        echo_info("No personal records yet.")
        return

    rows = [
        [
            r.achieved_at.strftime("%Y-%m-%d"),
            r.exercise_name,
            r.record_type.value,
            f"{r.value:g} {r.unit}",
        ]
        for r in result.data
    ]
    click.echo(format_table(["Date", "Exercise", "Type", "Value"], rows))
