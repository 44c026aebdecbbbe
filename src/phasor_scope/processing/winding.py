"""Phasor estimation by winding a signal around the origin.

Each (time, amplitude) point is rotated by an angle proportional to the
trial frequency and the mean of the rotated points is taken. Components of
the signal at the trial frequency keep pointing in one direction and add
up; everything else spins around and averages towards zero, given enough
whole periods. Short windows and off-bin frequencies leak into neighbouring
estimates, as with any finite direct summation.
"""

import logging
import math
from functools import reduce
from itertools import accumulate
from typing import Iterable, Iterator, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
MeanState = Tuple[complex, int]


def as_points(points: Sequence[Point]) -> np.ndarray:
    """Coerce (time, amplitude) pairs into an (N, 2) float64 array."""
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def wind(points: Sequence[Point], frequency: float) -> Iterator[complex]:
    """Yield the wound-up point for every (time, amplitude) pair.

    The rotation is read against the sine reference: a point at angle
    theta = 2*pi*f*t becomes a*sin(theta) + i*a*cos(theta), so the angle of
    the resulting mean matches the phase of a generating sine.

    Args:
        points: (time, amplitude) pairs in time order
        frequency: Winding frequency in Hz

    Yields:
        One complex value per input point, computed as it is consumed
    """
    omega = 2.0 * math.pi * frequency
    for t, a in as_points(points):
        theta = omega * t
        yield complex(a * math.sin(theta), a * math.cos(theta))


def _mean_step(acc: MeanState, c: complex) -> MeanState:
    mean, n = acc
    return (mean * n + c) / (n + 1), n + 1


def running_means(values: Iterable[complex]) -> Iterator[complex]:
    """Yield the arithmetic mean after each value, in a single pass.

    This lets a caller show the centre of mass settling while the winding
    is still being traversed.
    """
    states = accumulate(values, _mean_step, initial=(0j, 0))
    next(states)
    for mean, _ in states:
        yield mean


def mean(values: Iterable[complex]) -> complex:
    """Streaming arithmetic mean; 0j when there are no values."""
    result, _ = reduce(_mean_step, values, (0j, 0))
    return complex(result)


def estimate(points: Sequence[Point], frequency: float) -> complex:
    """Estimate the complex amplitude of `frequency` in the given points.

    A unit-amplitude sine exactly at `frequency` gives a magnitude close to
    0.5 and an angle equal to the sine's phase. An empty input gives 0j.
    """
    return mean(wind(points, frequency))
