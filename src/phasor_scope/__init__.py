"""Phasor Scope - direct-summation spectrum analysis.

Estimates the amplitude and phase of arbitrary trial frequencies in a
sampled signal by winding it around the origin and averaging, sweeps a
frequency range to build a spectrum, and picks out its significant peaks.

Usage:
    from phasor_scope import Analyzer, SweepConfig, sinewaves

    sample = sinewaves(1.0, 1000, [(5.0, 90.0), (60.0, 270.0)])
    result = Analyzer(SweepConfig(min_freq=1, max_freq=100)).analyze(sample)
    for phasor in result.peak_phasors():
        print(phasor)
"""

__version__ = "0.1.0"

# Core exports
from phasor_scope.models import AnalysisResult, Phasor, Sample
from phasor_scope.processing import (
    SweepRunner,
    adjust_peaks,
    detect_peak,
    estimate,
    find_peaks,
    frequency_steps,
    resolve_step,
    running_means,
    sweep,
    wind,
)
from phasor_scope.analyzer import Analyzer
from phasor_scope.config import GlobalConfig, SignalSettings, SweepConfig, SystemConfig, setup_logging
from phasor_scope.generator import parse_freq_phase_pairs, sinewave, sinewaves
from phasor_scope.audio import load_wav

__all__ = [
    # Version
    "__version__",
    # Models
    "Sample",
    "Phasor",
    "AnalysisResult",
    # Core pipeline
    "Analyzer",
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
    # Configuration
    "GlobalConfig",
    "SystemConfig",
    "SignalSettings",
    "SweepConfig",
    "setup_logging",
    # Signal sources
    "sinewave",
    "sinewaves",
    "parse_freq_phase_pairs",
    "load_wav",
]
