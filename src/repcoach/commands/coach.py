"""Coach message preview command."""

import click

from ..services.coaching import CoachingTrigger, select_message


@click.command()
@click.argument("trigger", type=click.Choice([t.value for t in CoachingTrigger]))
@click.option("--user", "user_id", default="guest", help="User id")
@click.option(
    "--enthusiasm",
    type=click.IntRange(1, 10),
    default=5,
    help="Coach personality, 1-10 (default: 5)",
)
def coach(trigger: str, user_id: str, enthusiasm: int):
    """Show what the coach says for a situation."""
    message = select_message(trigger, user_id, enthusiasm=enthusiasm)

    click.echo(
        click.style(f"[{message.priority.value}] ", fg="cyan")
        + click.style(message.message_type.value, bold=True)
    )
    click.echo(message.text)
    click.echo()
    for reply in message.quick_replies:
        click.echo(f"  > {reply}")
