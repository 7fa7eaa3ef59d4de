"""Exercise entity and equipment modes."""

import math
from collections.abc import Iterable
from enum import Enum

from ..errors import InvalidArgumentError
from .set_reps import SetReps, is_int


class Mode(str, Enum):
    """Equipment used to perform an exercise."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"
    MACHINE = "machine"


class Exercise:
    """A single movement: name, sets, reps per set, target reps, weight and mode.

    Every field is validated on construction and on each ``update_*`` call.
    Updates must change the stored value; passing the current value raises
    ``InvalidArgumentError``. Equality and hashing are structural over all
    fields, so two separately built exercises with the same values are
    interchangeable inside a workout.
    """

    def __init__(
        self,
        name: str,
        sets: int,
        set_reps: Iterable[SetReps | tuple[int, int]] | None,
        target_reps: int,
        weight: float,
        mode: Mode,
    ):
        _check_name(name)
        _check_sets(sets)
        _check_target_reps(target_reps)
        _check_weight(weight)

        self._name = name
        self._sets = sets
        self._target_reps = target_reps
        self._weight = float(weight)
        self._mode = _coerce_mode(mode)

        entries = [_coerce_set_reps(item) for item in set_reps or ()]
        if not entries:
            entries = [SetReps(n, 0) for n in range(1, sets + 1)]
        if len(entries) != sets:
            raise InvalidArgumentError(
                f"Number of set reps ({len(entries)}) must match the number of sets ({sets})."
            )
        self._set_reps = entries

    @classmethod
    def create(
        cls,
        name: str,
        sets: int,
        target_reps: int,
        weight: float,
        mode: Mode,
        set_reps: Iterable[SetReps | tuple[int, int]] | None = None,
    ) -> "Exercise":
        """Create an exercise, filling in zero-rep sets when none are given."""
        return cls(name, sets, set_reps, target_reps, weight, mode)

    @property
    def name(self) -> str:
        return self._name

    @property
    def sets(self) -> int:
        return self._sets

    @property
    def target_reps(self) -> int:
        return self._target_reps

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def mode(self) -> Mode:
        return self._mode

    def update_name(self, name: str) -> None:
        """Rename the exercise."""
        _check_name(name)
        if name == self._name:
            raise InvalidArgumentError(f'New name "{name}" must be different from the current name.')
        self._name = name

    def update_weight(self, weight: float) -> None:
        """Change the working weight."""
        _check_weight(weight)
        if float(weight) == self._weight:
            raise InvalidArgumentError(f"New weight ({weight}) must be different from the current weight.")
        self._weight = float(weight)

    def update_sets(self, sets: int) -> None:
        """Change the number of sets.

        Dropping sets discards the trailing rep records; adding sets appends
        zero-rep records numbered after the last existing set.
        """
        _check_sets(sets)
        if sets == self._sets:
            raise InvalidArgumentError(f"New sets ({sets}) must be different from the current sets.")

        if sets < self._sets:
            self._set_reps = self._set_reps[:sets]
        else:
            last = self._set_reps[-1].set_number
            self._set_reps.extend(
                SetReps(last + offset, 0) for offset in range(1, sets - self._sets + 1)
            )
        self._sets = sets

    def update_target_reps(self, target_reps: int) -> None:
        """Change the target reps per set."""
        _check_target_reps(target_reps)
        if target_reps == self._target_reps:
            raise InvalidArgumentError(
                f"New target reps ({target_reps}) must be different from the current target reps."
            )
        self._target_reps = target_reps

    def update_mode(self, mode: Mode) -> None:
        """Change the equipment mode."""
        mode = _coerce_mode(mode)
        if mode == self._mode:
            raise InvalidArgumentError(f"New mode ({mode.value}) must be different from the current mode.")
        self._mode = mode

    def update_reps(self, set_index: int, reps: int) -> None:
        """Record the reps done in the set at ``set_index`` (0-based)."""
        self._check_set_index(set_index)
        current = self._set_reps[set_index]
        if not is_int(reps) or reps < 0:
            raise InvalidArgumentError(f"Reps ({reps!r}) must be a non-negative integer.")
        if reps == current.reps:
            raise InvalidArgumentError(
                f"New reps ({reps}) must be different from current reps ({current.reps})."
            )
        self._set_reps[set_index] = SetReps(current.set_number, reps)

    def get_reps_for_set(self, set_index: int) -> int:
        """Get the reps recorded for the set at ``set_index`` (0-based)."""
        self._check_set_index(set_index)
        return self._set_reps[set_index].reps

    def get_all_set_reps(self) -> tuple[SetReps, ...]:
        """Get the rep records of every set."""
        return tuple(self._set_reps)

    def render(self) -> str:
        """Format as ``Name SETSxTARGET@WEIGHT (Reps per set: [...])``."""
        if all(sr.reps == 0 for sr in self._set_reps):
            reps_output = "[]"
        else:
            reps_output = "[" + ", ".join(
                f"Set {sr.set_number}: {sr.reps}" for sr in self._set_reps
            ) + "]"
        return (
            f"{self._name} {self._sets}x{self._target_reps}@{self._weight:.2f}"
            f" (Reps per set: {reps_output})"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self._name,
            "sets": self._sets,
            "set_reps": [sr.to_dict() for sr in self._set_reps],
            "target_reps": self._target_reps,
            "weight": self._weight,
            "mode": self._mode.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            sets=data["sets"],
            set_reps=[SetReps.from_dict(sr) for sr in data.get("set_reps", [])],
            target_reps=data["target_reps"],
            weight=data["weight"],
            mode=data["mode"],
        )

    def _key(self) -> tuple:
        return (
            self._name,
            self._sets,
            self._target_reps,
            self._weight,
            self._mode,
            tuple(self._set_reps),
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Exercise):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Exercise(name={self._name!r}, sets={self._sets}, set_reps={self._set_reps!r}, "
            f"target_reps={self._target_reps}, weight={self._weight}, mode={self._mode})"
        )

    def _check_set_index(self, set_index: int) -> None:
        if not is_int(set_index) or set_index < 0 or set_index >= self._sets:
            raise InvalidArgumentError(
                f"Set index {set_index!r} is out of bounds for {self._sets} sets."
            )


def _check_name(name: str) -> None:
    if not name or not isinstance(name, str):
        raise InvalidArgumentError("Exercise name cannot be null or empty.")


def _check_sets(sets: int) -> None:
    if not is_int(sets) or sets < 1:
        raise InvalidArgumentError(f"Number of sets ({sets!r}) must be an integer of at least 1.")


def _check_target_reps(target_reps: int) -> None:
    if not is_int(target_reps):
        raise InvalidArgumentError(f"Target reps ({target_reps!r}) must be an integer.")


def _check_weight(weight: float) -> None:
    if not isinstance(weight, (int, float)) or isinstance(weight, bool):
        raise InvalidArgumentError(f"Weight ({weight!r}) must be a number.")
    if not math.isfinite(weight) or weight < 0:
        raise InvalidArgumentError(f"Weight ({weight}) must be a finite, non-negative number.")


def _coerce_mode(mode: Mode | str) -> Mode:
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(mode)
    except ValueError:
        raise InvalidArgumentError(f"Unknown exercise mode: {mode!r}") from None


def _coerce_set_reps(item: SetReps | tuple[int, int]) -> SetReps:
    if isinstance(item, SetReps):
        return item
    try:
        set_number, reps = item
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Expected a SetReps or (set number, reps) pair, got {item!r}") from None
    return SetReps(set_number, reps)
