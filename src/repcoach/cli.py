"""CLI entry point for repcoach."""

import click

from . import __version__
from .commands import coach, init, nutrition, profile, readiness, records, workout
from .commands.serve import serve


@click.group()
@click.version_option(version=__version__, prog_name="repcoach")
def main():
    """repcoach: workout tracking, fitness metrics and coaching.

    Example usage:

        # Initialize the project
        repcoach init

        # Enter your body metrics
        repcoach profile set --user alice

        # Run a workout and review it
        repcoach workout start strength_basics --user alice
        repcoach workout history --user alice
        repcoach records --user alice
    """
    pass


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(workout)
main.add_command(records)
main.add_command(nutrition)
main.add_command(readiness)
main.add_command(coach)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
