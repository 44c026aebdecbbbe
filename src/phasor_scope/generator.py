"""Generates synthetic test signals from frequency/phase descriptions."""

import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from phasor_scope.models import Sample

logger = logging.getLogger(__name__)

FreqPhase = Tuple[float, float]


def _timeline(duration: float, rate: int) -> np.ndarray:
    if not rate > 0:
        raise ValueError(f"Sample rate must be positive, got {rate}")
    n = max(0, int(round(duration * rate)))
    return np.arange(n) / rate


def sinewave(
    frequency: float, phase: float, duration: float, rate: int, amplitude: float = 1.0
) -> Sample:
    """Generate a single sine wave.

    Args:
        frequency: Tone frequency in Hz
        phase: Phase offset in degrees
        duration: Length in seconds
        rate: Sampling rate in Hz
        amplitude: Peak amplitude (default 1.0)

    Returns:
        Sample with round(duration * rate) points, point i taken at i / rate
    """
    t = _timeline(duration, rate)
    data = amplitude * np.sin(2 * np.pi * frequency * t + np.radians(phase))
    return Sample(data, rate)


def sinewaves(duration: float, rate: int, frequencies: Sequence[FreqPhase]) -> Sample:
    """Mix unit-amplitude sine waves given as (frequency, phase) pairs."""
    data = np.zeros(len(_timeline(duration, rate)))
    for frequency, phase in frequencies:
        logger.debug(f"Mixing {frequency}Hz, {phase} phase")
        data += sinewave(frequency, phase, duration, rate).amplitudes

    return Sample(data, rate)


def parse_freq_phase_pairs(items: Iterable[str]) -> List[FreqPhase]:
    """Parse "freq:phase" strings such as "60:270"; the phase defaults to 0.

    Raises:
        ValueError: If an entry is not one or two numbers separated by ':'.
    """
    pairs: List[FreqPhase] = []
    for item in items:
        parts = str(item).split(":")
        if len(parts) > 2:
            raise ValueError(f"Invalid frequency entry '{item}': expected freq[:phase]")
        try:
            frequency = float(parts[0])
            phase = float(parts[1]) if len(parts) > 1 else 0.0
        except ValueError:
            raise ValueError(f"Invalid frequency entry '{item}': expected freq[:phase]") from None
        pairs.append((frequency, phase))
    return pairs
