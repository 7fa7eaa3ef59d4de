"""Shared CLI utilities."""

import json
import logging
from pathlib import Path

import click

from ..models import Routine, Workout

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Send fitlog log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_document(path: Path) -> Routine | Workout:
    """Load a routine or a single workout from a JSON file.

    Objects with a ``workouts`` key are routines; anything else is read as a
    workout.
    """
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    if "workouts" in data:
        return Routine.from_dict(data)
    return Workout.from_dict(data)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)
