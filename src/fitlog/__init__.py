"""fitlog: exercises, workouts and routines for a personal fitness log."""

from .analytics import ExerciseStatistics
from .errors import (
    FitlogError,
    IllegalStateError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from .models import Exercise, Mode, Routine, SetReps, Workout

__version__ = "0.1.0"

__all__ = [
    "Exercise",
    "ExerciseStatistics",
    "FitlogError",
    "IllegalStateError",
    "InvalidArgumentError",
    "Mode",
    "Routine",
    "SetReps",
    "UnsupportedOperationError",
    "Workout",
]
