"""Nutrition target commands."""

import click

from ..db.repositories import UserProfileRepository
from ..errors import ValidationError
from ..metrics.nutrition import bmr, macro_distribution, tdee
from ..models.nutrition import ActivityLevel, Gender, NutritionGoal
from .base import async_command, echo_error, ensure_initialized


def _choices(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


@click.group()
def nutrition():
    """Nutrition calculations."""
    pass


@nutrition.command("targets")
@click.option("--user", "user_id", help="Read body metrics from this user's profile")
@click.option("--weight", type=float, help="Body weight in kg")
@click.option("--height", type=float, help="Height in cm")
@click.option("--age", type=int, help="Age in years")
@click.option("--gender", type=_choices(Gender))
@click.option("--activity", type=_choices(ActivityLevel), default=None)
@click.option("--goal", type=_choices(NutritionGoal), default=None)
@click.pass_context
@async_command
async def targets(
    ctx: click.Context,
    user_id: str | None,
    weight: float | None,
    height: float | None,
    age: int | None,
    gender: str | None,
    activity: str | None,
    goal: str | None,
):
    """Show BMR, daily calories and macro targets.

    Options given on the command line override the stored profile.

    Examples:

        repcoach nutrition targets --weight 70 --height 175 --age 30 --gender male

        repcoach nutrition targets --user alice --goal weight_loss
    """
    if user_id:
        ensure_initialized(ctx)
        stored = await UserProfileRepository().get(user_id)
        if stored is None:
            echo_error(f"No profile for {user_id}")
            ctx.exit(1)
        weight = weight or stored.weight
        height = height or stored.height
        age = age or stored.age
        gender = gender or stored.gender.value
        activity = activity or stored.activity_level.value
        goal = goal or stored.nutrition_goal.value

    missing = [
        name
        for name, value in (
            ("--weight", weight),
            ("--height", height),
            ("--age", age),
            ("--gender", gender),
        )
        if value is None
    ]
    if missing:
        echo_error(f"Missing {', '.join(missing)} (or pass --user)")
        ctx.exit(1)

    activity = activity or ActivityLevel.MODERATELY_ACTIVE.value
    goal = goal or NutritionGoal.MAINTENANCE.value

    try:
        base = bmr(weight, height, age, gender)
        calories = tdee(base, activity)
        macros = macro_distribution(calories, NutritionGoal(goal), weight)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    click.echo(click.style("Daily targets", bold=True))
    click.echo(f"  BMR:      {base:g} kcal")
    click.echo(f"  TDEE:     {calories} kcal ({activity})")
    click.echo(f"  Protein:  {macros.protein} g")
    click.echo(f"  Carbs:    {macros.carbs} g")
    click.echo(f"  Fat:      {macros.fat} g")
    click.echo(f"  Goal:     {goal}")
