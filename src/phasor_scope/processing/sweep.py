"""Frequency sweep driver built on the phasor estimator."""

import logging
from typing import Iterator, List, Optional, Sequence

from phasor_scope.models import Phasor
from phasor_scope.processing.peaks import detect_peak
from phasor_scope.processing.winding import Point, as_points, estimate

logger = logging.getLogger(__name__)


def _check_step(step: float) -> None:
    # Also rejects NaN, which would otherwise never advance the sweep
    if not step > 0:
        raise ValueError(f"Sweep step must be positive, got {step}")


def _check_min(min_freq: float) -> None:
    # Phasor frequencies are never negative
    if not min_freq >= 0:
        raise ValueError(f"Sweep start must not be negative, got {min_freq}")


def resolve_step(min_freq: float, max_freq: float, resolution: float) -> float:
    """Derive a step size from a desired number of points across the range."""
    if not resolution > 0:
        raise ValueError(f"Sweep resolution must be positive, got {resolution}")
    return (max_freq - min_freq) / resolution


def frequency_steps(min_freq: float, max_freq: float, step: float) -> Iterator[float]:
    """Yield min_freq, min_freq + step, ... while the value is <= max_freq."""
    _check_step(step)
    _check_min(min_freq)

    k = 0
    f = float(min_freq)
    while f <= max_freq:
        yield f
        k += 1
        f = float(min_freq + k * step)


def sweep(
    points: Sequence[Point], min_freq: float, max_freq: float, step: float
) -> List[Phasor]:
    """Estimate one phasor per frequency in [min_freq, max_freq].

    Args:
        points: (time, amplitude) pairs, e.g. from Sample.with_time()
        min_freq: First trial frequency in Hz, must be >= 0
        max_freq: Inclusive upper bound in Hz
        step: Distance between trial frequencies, must be > 0

    Returns:
        Phasors in ascending frequency order
    """
    _check_step(step)
    _check_min(min_freq)
    data = as_points(points)

    logger.info(f"Sweep: {min_freq} => {max_freq}Hz, step {step}Hz over {len(data)} points")
    return [Phasor(f, estimate(data, f)) for f in frequency_steps(min_freq, max_freq, step)]


class SweepRunner:
    """Runs a sweep one frequency at a time.

    Every call to `step()` adds exactly one phasor to the spectrum and
    checks the newest three entries for a local peak, so an interactive
    host can redraw between steps and abort by simply not stepping again.

    Example:
        >>> runner = SweepRunner(sample.with_time(), 1.0, 100.0, 1.0)
        >>> while not runner.done:
        ...     phasor = runner.step()
    """

    def __init__(
        self, points: Sequence[Point], min_freq: float, max_freq: float, step: float
    ):
        """Initialize the runner.

        Args:
            points: (time, amplitude) pairs to analyze
            min_freq: First trial frequency in Hz, must be >= 0
            max_freq: Inclusive upper bound in Hz
            step: Distance between trial frequencies, must be > 0
        """
        _check_step(step)
        _check_min(min_freq)

        self.points = as_points(points)
        self.min_freq = min_freq
        self.max_freq = max_freq
        self.step_size = step

        self.spectrum: List[Phasor] = []
        self.raw_peaks: List[int] = []

    @property
    def next_frequency(self) -> float:
        return float(self.min_freq + len(self.spectrum) * self.step_size)

    @property
    def done(self) -> bool:
        return not self.next_frequency <= self.max_freq

    def step(self) -> Optional[Phasor]:
        """Estimate the next frequency of the sweep.

        Returns:
            The new phasor, or None once the sweep is complete
        """
        if self.done:
            return None

        phasor = Phasor(self.next_frequency, estimate(self.points, self.next_frequency))
        self.spectrum.append(phasor)

        if len(self.spectrum) >= 3 and detect_peak(self.spectrum[-3:]) == 1:
            index = len(self.spectrum) - 2
            self.raw_peaks.append(index)
            logger.debug(f"Local peak at {self.spectrum[index]}")

        return phasor

    def run(self) -> List[Phasor]:
        """Step until the sweep is complete and return the spectrum."""
        while self.step() is not None:
            pass
        return self.spectrum

    def restart(self) -> None:
        """Discard all results and start again from min_freq."""
        self.spectrum = []
        self.raw_peaks = []
