"""Data models for sampled signals and their spectral estimates."""

import cmath
import math
from dataclasses import dataclass, field
from functools import reduce
from typing import List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Sample:
    """A mono time series of amplitudes taken at a fixed rate.

    Attributes:
        amplitudes: Sample values, nominally in [-1.0, 1.0]
        rate: Sampling rate in samples per second (e.g. 44100)
    """

    amplitudes: np.ndarray
    rate: int

    def __post_init__(self):
        if not self.rate > 0 or not float(self.rate).is_integer():
            raise ValueError(f"Sample rate must be a positive integer, got {self.rate}")
        object.__setattr__(self, "rate", int(self.rate))

        data = np.array(self.amplitudes, dtype=np.float64).reshape(-1)
        data.setflags(write=False)
        object.__setattr__(self, "amplitudes", data)

    def __len__(self) -> int:
        return len(self.amplitudes)

    def is_empty(self) -> bool:
        """Check if the sample holds no data."""
        return len(self.amplitudes) == 0

    def max_amplitude(self) -> float:
        """Largest absolute amplitude, 0.0 for an empty sample."""
        if self.is_empty():
            return 0.0
        return float(np.max(np.abs(self.amplitudes)))

    def time_span(self) -> float:
        """Duration covered by the sample in seconds."""
        return len(self.amplitudes) / self.rate

    def with_time(self, resolution: Optional[int] = None) -> List[Tuple[float, float]]:
        """Pair every amplitude with its timestamp.

        Args:
            resolution: Approximate number of points wanted. When given, the
                output is thinned with a fixed stride; this is for display only.

        Returns:
            List of (time, amplitude) tuples where entry i is (i / rate, amplitudes[i]).
        """
        stride = 1
        if resolution:
            stride = max(1, len(self.amplitudes) // resolution)

        return [
            (i / self.rate, float(self.amplitudes[i]))
            for i in range(0, len(self.amplitudes), stride)
        ]

    def turning_points(self) -> List[int]:
        """Indices where the amplitude envelope switches between rising and falling.

        Odd-indexed samples are compared with their predecessor. A pair is
        rising when the absolute amplitude grows, falling otherwise, and an
        index is recorded each time that state flips.
        """
        data = np.abs(self.amplitudes)

        def step(acc, i):
            rising, points = acc
            now_rising = bool(data[i] > data[i - 1])
            if rising is not None and now_rising != rising:
                points.append(i)
            return now_rising, points

        _, points = reduce(step, range(1, len(data), 2), (None, []))
        return points

    def simplify(self) -> List[Tuple[float, float]]:
        """Reduce the sample to its turning points as (time, amplitude) pairs.

        Lossy: estimates computed from these points are cheaper but less exact.
        """
        return [(i / self.rate, float(self.amplitudes[i])) for i in self.turning_points()]

    def __repr__(self) -> str:
        return f"Sample({len(self.amplitudes)} points @ {self.rate}Hz)"


@dataclass(frozen=True)
class Phasor:
    """Estimated complex amplitude of a signal at one frequency.

    Attributes:
        frequency: Trial frequency in Hz
        value: Complex estimate; its length is the magnitude, its angle the phase
    """

    frequency: float
    value: complex

    @property
    def magnitude(self) -> float:
        return abs(self.value)

    @property
    def power(self) -> float:
        """Squared magnitude, cheaper to compare than the magnitude itself."""
        return self.value.real * self.value.real + self.value.imag * self.value.imag

    @property
    def phase(self) -> float:
        """Phase angle in radians, in (-pi, pi]."""
        return cmath.phase(self.value)

    @property
    def phase_degrees(self) -> float:
        return math.degrees(self.phase)

    def __str__(self) -> str:
        return f"{self.frequency:.2f}Hz |{self.magnitude:.4f}| {self.phase_degrees:+.1f}deg"


@dataclass
class AnalysisResult:
    """Outcome of one analysis session.

    Attributes:
        spectrum: Phasors in sweep order
        raw_peaks: Spectrum indices flagged by the peak detector
        peaks: Adjusted, filtered and deduplicated spectrum indices
    """

    spectrum: List[Phasor] = field(default_factory=list)
    raw_peaks: List[int] = field(default_factory=list)
    peaks: List[int] = field(default_factory=list)

    def peak_phasors(self) -> List[Phasor]:
        """Resolve the final peak indices back to their phasors."""
        return [self.spectrum[i] for i in self.peaks]

    def __repr__(self) -> str:
        return f"AnalysisResult({len(self.spectrum)} phasors, {len(self.peaks)} peaks)"
