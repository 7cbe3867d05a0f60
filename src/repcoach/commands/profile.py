"""User profile commands."""

import click

from ..clients import ProfileQuestionnaire
from ..db.repositories import UserProfileRepository
from .base import async_command, echo_error, echo_success, echo_warning, ensure_initialized


@click.group()
def profile():
    """Manage user profiles.

    The profile holds the body metrics used for nutrition targets and the
    preferred coaching frequency.
    """
    pass


@profile.command("set")
@click.option("--user", "user_id", required=True, help="User id")
@click.pass_context
@async_command
async def set_profile(ctx: click.Context, user_id: str):
    """Create or update a profile interactively."""
    ensure_initialized(ctx)

    repo = UserProfileRepository()
    existing = await repo.get(user_id)

    questionnaire = ProfileQuestionnaire(existing)
    collected = await questionnaire.collect_profile(user_id)
    if collected is None:
        echo_warning("Profile not saved.")
        return

    saved = await repo.upsert(collected)
    echo_success(f"Saved profile for {saved.user_id}")
    click.echo()
    click.echo(saved.get_summary())


@profile.command("show")
@click.option("--user", "user_id", required=True, help="User id")
@click.pass_context
@async_command
async def show(ctx: click.Context, user_id: str):
    """Show a stored profile."""
    ensure_initialized(ctx)

    stored = await UserProfileRepository().get(user_id)
    if stored is None:
        echo_error(f"No profile for {user_id}. Run 'repcoach profile set --user {user_id}'.")
        ctx.exit(1)

    click.echo(stored.get_summary())
