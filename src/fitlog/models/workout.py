"""Workout aggregate."""

from collections.abc import Iterable

from .aggregate import SoftDeleteAggregate
from .exercise import Exercise


class Workout(SoftDeleteAggregate[Exercise]):
    """An ordered list of exercises with soft delete and restore."""

    item_type = Exercise
    item_kind = "Exercise"
    container_kind = "workout"

    def __init__(self, name: str, exercises: Iterable[Exercise] = ()):
        super().__init__(name)
        for exercise in exercises:
            self.add_exercise(exercise)

    @property
    def active_exercises(self) -> tuple[Exercise, ...]:
        """Exercises currently in the workout, in order."""
        return tuple(self._active)

    @property
    def deleted_exercises(self) -> tuple[Exercise, ...]:
        """Exercises removed from the workout that can still be restored."""
        return tuple(self._deleted)

    def add_exercise(self, exercise: Exercise) -> None:
        """Add an exercise, restoring it if it was previously removed."""
        self._add(exercise)

    def remove_exercise(self, exercise: Exercise) -> None:
        """Soft-delete an active exercise."""
        self._remove(exercise)

    def edit_exercise(self, current: Exercise, new: Exercise) -> None:
        """Replace an active exercise in place with a different one."""
        self._replace(current, new)

    def restore_exercise(self, exercise: Exercise) -> None:
        """Move a removed exercise back to the end of the workout."""
        self._restore(exercise)

    def render(self) -> str:
        """Format the workout and its numbered exercises."""
        if not self._active:
            return f"{self._name}:\nNo exercises in this workout.\n"

        output = f"{self._name}:\n"
        for i, exercise in enumerate(self._active, start=1):
            output += f"{i}. {exercise.render()}\n"
        return output

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self._name,
            "exercises": [ex.to_dict() for ex in self._active],
            "deleted_exercises": [ex.to_dict() for ex in self._deleted],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        workout = cls(
            name=data["name"],
            exercises=[Exercise.from_dict(ex) for ex in data.get("exercises", [])],
        )
        workout._load_deleted(
            [Exercise.from_dict(ex) for ex in data.get("deleted_exercises", [])]
        )
        return workout

    def __repr__(self) -> str:
        return f"Workout(name={self._name!r}, exercises={self._active!r})"
