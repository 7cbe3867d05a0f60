"""Recovery readiness command."""

import click

from ..metrics.recovery import readiness_score
from ..models.recovery import RecoveryMetrics

SCORE = click.IntRange(1, 10)


@click.command()
@click.option("--sleep-quality", type=SCORE, required=True, help="1-10")
@click.option("--sleep-hours", type=click.FloatRange(0, 24), required=True)
@click.option("--stress", type=SCORE, required=True, help="1-10, higher is more stressed")
@click.option("--soreness", type=SCORE, required=True, help="1-10, higher is more sore")
@click.option("--energy", type=SCORE, required=True, help="1-10")
@click.option("--motivation", type=SCORE, required=True, help="1-10")
def readiness(
    sleep_quality: int,
    sleep_hours: float,
    stress: int,
    soreness: int,
    energy: int,
    motivation: int,
):
    """Score today's readiness to train on a 0-10 scale."""
    score = readiness_score(
        RecoveryMetrics(
            sleep_quality=sleep_quality,
            sleep_hours=sleep_hours,
            stress_level=stress,
            soreness=soreness,
            energy=energy,
            motivation=motivation,
        )
    )

    if score >= 6:
        advice, color = "Good to go hard today.", "green"
    elif score >= 4:
        advice, color = "Train as planned, listen to your body.", "yellow"
    else:
        advice, color = "Consider a light session or a rest day.", "red"

    click.echo(click.style(f"Readiness: {score}/10", fg=color, bold=True))
    click.echo(advice)
