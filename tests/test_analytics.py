"""Tests for the exercise statistics protocol."""

from statistics import mean, pstdev

import pytest

from fitlog.analytics import ExerciseStatistics


class RepStatistics:
    """Statistics over the reps recorded in each set."""

    def _reps(self, exercise):
        return [sr.reps for sr in exercise.get_all_set_reps()]

    def delta(self, exercise):
        reps = self._reps(exercise)
        return float(reps[-1] - reps[0])

    def mean(self, exercise):
        return float(mean(self._reps(exercise)))

    def mode(self, exercise):
        reps = self._reps(exercise)
        return float(max(set(reps), key=reps.count))

    def standard_deviation(self, exercise):
        return float(pstdev(self._reps(exercise)))

    def range(self, exercise):
        reps = self._reps(exercise)
        return float(max(reps) - min(reps))

    def cumulative_sum(self, exercise):
        return float(sum(self._reps(exercise)))

    def z_score(self, exercise):
        sd = self.standard_deviation(exercise)
        return 0.0 if sd == 0 else (self._reps(exercise)[-1] - self.mean(exercise)) / sd


class TestExerciseStatistics:
    """Tests for ExerciseStatistics protocol."""

    def test_implementation_satisfies_protocol(self):
        """Test a complete implementation is recognized."""
        assert isinstance(RepStatistics(), ExerciseStatistics)

    def test_incomplete_implementation_rejected(self):
        """Test an object missing methods is not recognized."""

        class MeanOnly:
            def mean(self, exercise):
                return 0.0

        assert not isinstance(MeanOnly(), ExerciseStatistics)

    def test_statistics_leave_exercise_unchanged(self, bench_press, make_bench_press):
        """Test analytics read the exercise without mutating it."""
        stats = RepStatistics()

        assert stats.cumulative_sum(bench_press) == 28.0
        assert stats.delta(bench_press) == -2.0
        assert stats.mode(bench_press) == 10.0
        assert bench_press == make_bench_press()

    @pytest.mark.parametrize(
        "method",
        ["delta", "mean", "mode", "standard_deviation", "range", "cumulative_sum", "z_score"],
    )
    def test_protocol_methods_documented(self, method):
        """Test every protocol method describes what it returns."""
        assert getattr(ExerciseStatistics, method).__doc__
