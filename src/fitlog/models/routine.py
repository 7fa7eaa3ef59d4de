"""Routine aggregate."""

import logging
from collections.abc import Iterable

from ..errors import IllegalStateError, InvalidArgumentError, UnsupportedOperationError
from .aggregate import SoftDeleteAggregate
from .workout import Workout

logger = logging.getLogger(__name__)


class Routine(SoftDeleteAggregate[Workout]):
    """An ordered list of workouts with soft delete, restore and reordering."""

    item_type = Workout
    item_kind = "Workout"
    container_kind = "routine"
    last_item_error = UnsupportedOperationError

    def __init__(self, name: str, workouts: Iterable[Workout] = ()):
        super().__init__(name)
        for workout in workouts:
            self.add_workout(workout)

    @property
    def active_workouts(self) -> tuple[Workout, ...]:
        """Workouts currently in the routine, in order."""
        return tuple(self._active)

    @property
    def deleted_workouts(self) -> tuple[Workout, ...]:
        """Workouts removed from the routine that can still be restored."""
        return tuple(self._deleted)

    def add_workout(self, workout: Workout) -> None:
        """Add a workout, restoring it if it was previously removed."""
        self._add(workout)

    def remove_workout(self, workout: Workout) -> None:
        """Soft-delete an active workout."""
        self._remove(workout)

    def restore_workout(self, workout: Workout) -> None:
        """Move a removed workout back to the end of the routine."""
        self._restore(workout)

    def reorder(self, old_index: int, new_index: int) -> None:
        """Move the workout at ``old_index`` so it ends up at ``new_index``.

        Workouts between the two positions shift by one.
        """
        size = len(self._active)
        if size < 2:
            raise IllegalStateError(
                f'Routine "{self._name}" must have at least two workouts to be reordered.'
            )
        if old_index == new_index:
            raise InvalidArgumentError("Old index and new index cannot be the same.")
        if not (0 <= old_index < size and 0 <= new_index < size):
            raise InvalidArgumentError(
                f"Invalid indices ({old_index}, {new_index}) for a routine of {size} workouts."
            )

        workout = self._active.pop(old_index)
        self._active.insert(new_index, workout)
        logger.info(
            'Workout "%s" moved from position %d to %d in routine "%s".',
            workout.name, old_index + 1, new_index + 1, self._name,
        )

    def clear(self) -> None:
        """Discard every active workout without soft-deleting them."""
        if not self._active:
            raise IllegalStateError(f'Routine "{self._name}" is already empty.')
        self._active.clear()
        logger.info('Routine "%s" cleared.', self._name)

    def render(self) -> str:
        """Format the routine and each of its numbered workouts."""
        output = f'Routine "{self._name}":\n'
        if not self._active:
            return output + "No workouts in this routine.\n"

        for i, workout in enumerate(self._active, start=1):
            output += f"{i}. {workout.render()}\n"
        return output

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self._name,
            "workouts": [w.to_dict() for w in self._active],
            "deleted_workouts": [w.to_dict() for w in self._deleted],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Routine":
        """Create from dictionary."""
        routine = cls(
            name=data["name"],
            workouts=[Workout.from_dict(w) for w in data.get("workouts", [])],
        )
        routine._load_deleted(
            [Workout.from_dict(w) for w in data.get("deleted_workouts", [])]
        )
        return routine

    def __repr__(self) -> str:
        return f"Routine(name={self._name!r}, workouts={self._active!r})"
