"""Equal-volume search: bisection steps, angle sweeps, and a reference root.

bisection_step is the single-step solver. The caller owns the interval and
feeds each result back in; run_bisection is that loop for scripts and tests.
Every search assumes open - sealed changes sign once over the interval.
"""
import math
from typing import NamedTuple

import numpy as np
from scipy.optimize import brentq

from shared.geometry import GeometryError, DomainError, MAX_ANGLE, volume_value
from glass.container import Container
from glass.volume import evaluate


class BisectionStep(NamedTuple):
    """Interval after one step and the angle that was tested."""
    low: float
    high: float
    midpoint: float


def _check_interval(low: float, high: float) -> None:
    if not 0 <= low <= high <= MAX_ANGLE:
        raise DomainError(f"Bad search interval: need 0 <= {low} <= {high} <= {MAX_ANGLE:g}")


def volume_gap(container: Container, angle_deg: float) -> float:
    """open - sealed at angle_deg; -inf where the sealed volume is unbounded."""
    ev = evaluate(container, angle_deg)
    return ev.open_volume - volume_value(ev.sealed_volume)


def bisection_step(container: Container, low: float, high: float) -> BisectionStep:
    """Halve [low, high] toward the angle where both glasses hold equal volume.

    The open glass holding less than the sealed one means the midpoint is
    past the crossing, so it becomes the new high; otherwise the new low.
    """
    _check_interval(low, high)
    m = (low + high) / 2
    ev = evaluate(container, m)
    if ev.open_volume < volume_value(ev.sealed_volume):
        return BisectionStep(low, m, m)
    return BisectionStep(m, high, m)


def run_bisection(container: Container, low: float, high: float,
                  steps: int) -> list[BisectionStep]:
    """Apply bisection_step *steps* times, returning every intermediate step."""
    trace = []
    for _ in range(steps):
        step = bisection_step(container, low, high)
        low, high = step.low, step.high
        trace.append(step)
    return trace


def sweep_volumes(container: Container, n: int,
                  low: float = 0.0, high: float = MAX_ANGLE) -> tuple[np.ndarray, np.ndarray]:
    """Sample n evenly spaced angles over [low, high].

    Returns (angles, gaps) with gaps[i] = open - sealed at angles[i].
    """
    _check_interval(low, high)
    if n < 2:
        raise DomainError(f"Sweep needs at least 2 samples: n={n}")
    angles = np.linspace(low, high, n)
    gaps = np.array([volume_gap(container, float(a)) for a in angles])
    return angles, gaps


def sign_changes(values) -> int:
    """Number of sign changes in a sequence, ignoring exact zeros."""
    s = np.sign(np.asarray(values, dtype=float))
    s = s[s != 0]
    return int(np.count_nonzero(s[1:] != s[:-1]))


def solve_equal_volume(container: Container, low: float, high: float,
                       xtol: float = 1e-12) -> float:
    """Reference equal-volume angle via Brent's method on [low, high].

    Both ends need a finite gap of opposite sign. Raises GeometryError if not.
    """
    _check_interval(low, high)
    g_lo = volume_gap(container, low); g_hi = volume_gap(container, high)
    if not (math.isfinite(g_lo) and math.isfinite(g_hi)):
        raise GeometryError(f"Unbounded volume at bracket end: gaps={g_lo}, {g_hi}")
    if g_lo * g_hi > 0:
        raise GeometryError(f"No sign change on [{low}, {high}]: gaps={g_lo:.6f}, {g_hi:.6f}")
    return brentq(lambda a: volume_gap(container, a), low, high, xtol=xtol)
