"""Show a routine or workout."""

import json
from pathlib import Path

import click

from ..errors import FitlogError
from ..models import Routine, Workout
from .base import echo_error, echo_info, load_document


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--deleted", "-d", is_flag=True, help="Also list soft-deleted items")
@click.pass_context
def show(ctx, path: Path, deleted: bool):
    """Print a routine or workout stored as JSON.

    A document with a "workouts" key is read as a routine, otherwise as a
    single workout.
    """
    try:
        document = load_document(path)
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON in {path}: {e}")
        ctx.exit(1)
    except KeyError as e:
        echo_error(f"Missing field {e} in {path}")
        ctx.exit(1)
    except (FitlogError, ValueError, TypeError) as e:
        echo_error(str(e))
        ctx.exit(1)

    click.echo(document.render(), nl=False)

    if deleted:
        click.echo()
        if isinstance(document, Routine):
            _echo_deleted_routine_items(document)
        else:
            _echo_deleted_exercises(document)


def _echo_deleted_routine_items(routine: Routine) -> None:
    if routine.deleted_workouts:
        click.echo("Deleted workouts:")
        for workout in routine.deleted_workouts:
            click.echo(f"  - {workout.name}")
    else:
        echo_info("No deleted workouts")

    for workout in routine.active_workouts + routine.deleted_workouts:
        if workout.deleted_exercises:
            _echo_deleted_exercises(workout)


def _echo_deleted_exercises(workout: Workout) -> None:
    if not workout.deleted_exercises:
        echo_info(f'No deleted exercises in "{workout.name}"')
        return
    click.echo(f'Deleted exercises in "{workout.name}":')
    for exercise in workout.deleted_exercises:
        click.echo(f"  - {exercise.render()}")
