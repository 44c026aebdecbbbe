"""Spectral estimation stages: winding, sweeping and peak handling."""

from phasor_scope.processing.peaks import adjust_peaks, detect_peak, find_peaks
from phasor_scope.processing.sweep import SweepRunner, frequency_steps, resolve_step, sweep
from phasor_scope.processing.winding import estimate, running_means, wind

__all__ = [
    "estimate",
    "wind",
    "running_means",
    "sweep",
    "frequency_steps",
    "resolve_step",
    "SweepRunner",
    "detect_peak",
    "find_peaks",
    "adjust_peaks",
]
