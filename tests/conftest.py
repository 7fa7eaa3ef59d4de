"""Pytest configuration and fixtures."""

import json

import pytest

from fitlog.models import Exercise, Mode, Routine, SetReps, Workout


def _bench_press(weight: float = 65.00) -> Exercise:
    return Exercise(
        "Bench Press",
        3,
        [SetReps(1, 10), SetReps(2, 10), SetReps(3, 8)],
        10,
        weight,
        Mode.DUMBBELL,
    )


@pytest.fixture
def make_bench_press():
    """Factory for fresh, equal bench press instances."""
    return _bench_press


@pytest.fixture
def bench_press():
    """Bench press with recorded reps."""
    return _bench_press()


@pytest.fixture
def squat():
    """Barbell squat with recorded reps."""
    return Exercise("Squat", 3, [(1, 12), (2, 10), (3, 10)], 12, 185.00, Mode.BARBELL)


@pytest.fixture
def pull_ups():
    """Bodyweight pull-ups with recorded reps."""
    return Exercise("Pull-ups", 3, [(1, 15), (2, 12), (3, 12)], 15, 0.00, Mode.BODYWEIGHT)


@pytest.fixture
def sample_workout(bench_press, squat, pull_ups):
    """A workout with three exercises."""
    return Workout("Test Workout", [bench_press, squat, pull_ups])


@pytest.fixture
def sample_routine():
    """A routine with three single-exercise workouts."""
    push = Workout("Push", [_bench_press()])
    pull = Workout(
        "Pull",
        [Exercise("Pull-ups", 3, [(1, 15), (2, 12), (3, 12)], 15, 0.00, Mode.BODYWEIGHT)],
    )
    legs = Workout(
        "Legs",
        [Exercise("Squat", 3, [(1, 12), (2, 10), (3, 10)], 12, 185.00, Mode.BARBELL)],
    )
    return Routine("Test Routine", [push, pull, legs])


@pytest.fixture
def routine_file(tmp_path, sample_routine):
    """The sample routine written to a JSON file."""
    path = tmp_path / "routine.json"
    path.write_text(json.dumps(sample_routine.to_dict()))
    return path
