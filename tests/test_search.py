"""Tests for glass/search.py — bisection, sweeps, and reference root."""
import math
import numpy as np
import pytest
from shared.geometry import GeometryError, DomainError
from glass.container import make_container
from glass.volume import evaluate
from glass.search import (
    BisectionStep, bisection_step, run_bisection, volume_gap,
    sweep_volumes, sign_changes, solve_equal_volume,
)


class TestBisectionStep:
    def test_first_step_raises_low(self, container):
        # at 45° the open glass holds more
        step = bisection_step(container, 0.0, 90.0)
        assert step == BisectionStep(45.0, 90.0, 45.0)

    def test_second_step_lowers_high(self, container):
        step = bisection_step(container, 45.0, 90.0)
        assert step == BisectionStep(45.0, 67.5, 67.5)

    def test_unbounded_counts_as_larger(self, container):
        # midpoint 90: sealed volume unbounded, so 90 becomes high
        step = bisection_step(container, 90.0, 90.0)
        assert step.high == 90.0 and step.midpoint == 90.0

    @pytest.mark.parametrize("low, high", [(-1.0, 45.0), (50.0, 40.0), (0.0, 91.0)])
    def test_bad_interval(self, container, low, high):
        with pytest.raises(DomainError, match="Bad search interval"):
            bisection_step(container, low, high)


class TestRunBisection:
    def test_length(self, trace):
        assert len(trace) == 40

    def test_interval_shrinks(self, trace):
        widths = [s.high - s.low for s in trace]
        assert all(b < a for a, b in zip(widths, widths[1:]))
        assert widths[-1] < 1e-9

    def test_each_step_feeds_next(self, container, trace):
        for prev, step in zip(trace, trace[1:]):
            assert step == bisection_step(container, prev.low, prev.high)

    def test_converges_to_sixty(self, trace):
        assert abs(trace[-1].midpoint - 60.0) < 1e-8

    def test_volumes_agree(self, container, trace):
        ev = evaluate(container, trace[-1].midpoint)
        assert abs(ev.open_volume - ev.sealed_volume.value) < 1e-3

    def test_thirty_steps_enough(self, container):
        last = run_bisection(container, 0.0, 90.0, 30)[-1]
        ev = evaluate(container, last.midpoint)
        assert abs(ev.open_volume - ev.sealed_volume.value) < 1e-3

    def test_zero_steps(self, container):
        assert run_bisection(container, 0.0, 90.0, 0) == []


class TestSweep:
    def test_shapes(self, container):
        angles, gaps = sweep_volumes(container, 91)
        assert angles.shape == (91,) and gaps.shape == (91,)
        assert angles[0] == 0.0 and angles[-1] == 90.0

    def test_single_sign_change(self, container):
        _, gaps = sweep_volumes(container, 901)
        assert sign_changes(gaps) == 1

    def test_unbounded_end_is_neg_inf(self, container):
        _, gaps = sweep_volumes(container, 10)
        assert gaps[-1] == -math.inf

    def test_too_few_samples(self, container):
        with pytest.raises(DomainError, match="at least 2"):
            sweep_volumes(container, 1)


class TestSignChanges:
    def test_ignores_zeros(self):
        assert sign_changes([0.0, 1.0, 0.0, 2.0, -1.0]) == 1

    def test_none(self):
        assert sign_changes(np.array([1.0, 2.0, 3.0])) == 0

    def test_several(self):
        assert sign_changes([1, -1, 1, -1]) == 3


class TestSolveEqualVolume:
    def test_matches_sixty(self, container):
        assert abs(solve_equal_volume(container, 1.0, 89.0) - 60.0) < 1e-9

    def test_agrees_with_bisection(self, container, trace):
        root = solve_equal_volume(container, 1.0, 89.0)
        assert abs(root - trace[-1].midpoint) < 1e-8

    def test_other_glass(self):
        # open = sealed where cos(angle) = 1/2 for any glass tall enough
        c = make_container(5.0, 3.0)
        assert abs(solve_equal_volume(c, 10.0, 80.0) - 60.0) < 1e-9

    def test_no_sign_change(self, container):
        with pytest.raises(GeometryError, match="No sign change"):
            solve_equal_volume(container, 10.0, 50.0)

    def test_unbounded_end(self, container):
        with pytest.raises(GeometryError, match="Unbounded"):
            solve_equal_volume(container, 10.0, 90.0)

    def test_gap_at_sixty(self, container):
        assert abs(volume_gap(container, 60.0)) < 1e-9
