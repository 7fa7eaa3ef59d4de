"""Protocol for statistics computed over an exercise's history."""

from typing import Protocol, runtime_checkable

from .models.exercise import Exercise


@runtime_checkable
class ExerciseStatistics(Protocol):
    """Read-only analytics over an exercise.

    Implementations must not mutate the exercise they are given.
    """

    def delta(self, exercise: Exercise) -> float:
        """Change between the first and latest recorded values."""
        ...

    def mean(self, exercise: Exercise) -> float:
        """Average of the recorded values."""
        ...

    def mode(self, exercise: Exercise) -> float:
        """Most frequent recorded value."""
        ...

    def standard_deviation(self, exercise: Exercise) -> float:
        """Spread of the recorded values around their mean."""
        ...

    def range(self, exercise: Exercise) -> float:
        """Difference between the largest and smallest recorded values."""
        ...

    def cumulative_sum(self, exercise: Exercise) -> float:
        """Total of the recorded values."""
        ...

    def z_score(self, exercise: Exercise) -> float:
        """Standard score of the latest value against the history."""
        ...
