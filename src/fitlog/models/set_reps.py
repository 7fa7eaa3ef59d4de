"""Per-set repetition records."""

from dataclasses import dataclass

from ..errors import InvalidArgumentError


def is_int(value) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SetReps:
    """Reps completed in one numbered set."""

    set_number: int  # 1-based
    reps: int

    def __post_init__(self):
        if not is_int(self.set_number) or self.set_number < 1:
            raise InvalidArgumentError(f"Set number ({self.set_number!r}) must be an integer of at least 1.")
        if not is_int(self.reps) or self.reps < 0:
            raise InvalidArgumentError(f"Reps ({self.reps!r}) must be a non-negative integer.")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"set_number": self.set_number, "reps": self.reps}

    @classmethod
    def from_dict(cls, data: dict) -> "SetReps":
        """Create from dictionary."""
        return cls(set_number=data["set_number"], reps=data["reps"])
