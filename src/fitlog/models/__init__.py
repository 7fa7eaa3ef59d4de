"""Domain models for fitlog."""

from .exercise import Exercise, Mode
from .routine import Routine
from .set_reps import SetReps
from .workout import Workout

__all__ = [
    "Exercise",
    "Mode",
    "Routine",
    "SetReps",
    "Workout",
]
