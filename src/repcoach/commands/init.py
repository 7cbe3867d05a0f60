"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the repcoach data directory and database."""
    data_dir = get_settings().data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing repcoach in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("repcoach is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your profile:")
    click.echo("     repcoach profile set --user <id>")
    click.echo()
    click.echo("  2. Pick a workout and start it:")
    click.echo("     repcoach workout templates")
    click.echo("     repcoach workout start full_body_beginner --user <id>")
