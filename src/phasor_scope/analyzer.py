"""Analyzer - orchestrates one spectral analysis session."""

import logging
from typing import Callable, List, Optional

from phasor_scope.config import SweepConfig
from phasor_scope.models import AnalysisResult, Phasor, Sample
from phasor_scope.processing.peaks import adjust_peaks
from phasor_scope.processing.sweep import SweepRunner
from phasor_scope.processing.winding import Point

logger = logging.getLogger(__name__)


class Analyzer:
    """Direct-summation spectrum analyzer.

    Runs the full pipeline:
    Sample -> (optional turning-point reduction) -> Sweep -> Peak detection -> Peak adjustment

    Example:
        >>> from phasor_scope import Analyzer, SweepConfig, sinewaves
        >>>
        >>> sample = sinewaves(1.0, 1000, [(5.0, 90.0), (60.0, 0.0)])
        >>> analyzer = Analyzer(SweepConfig(min_freq=1, max_freq=100, step=1))
        >>> result = analyzer.analyze(sample)
        >>> [str(p) for p in result.peak_phasors()]
    """

    def __init__(
        self,
        config: Optional[SweepConfig] = None,
        on_step: Optional[Callable[[SweepRunner, Phasor], None]] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Sweep settings (uses defaults if None)
            on_step: Called after every sweep step with the runner and the new
                phasor, e.g. to redraw a live plot
        """
        self.config = config or SweepConfig()
        self.config.validate()
        self.on_step = on_step

    def points_for(self, sample: Sample) -> List[Point]:
        """Select the (time, amplitude) points the estimator will see."""
        if self.config.simplify:
            points = sample.simplify()
            logger.info(f"Simplified {len(sample)} samples to {len(points)} turning points")
            return points
        return sample.with_time()

    def runner(self, sample: Sample) -> SweepRunner:
        """Create a step-by-step sweep over the sample for a host loop to drive."""
        return SweepRunner(
            self.points_for(sample),
            self.config.min_freq,
            self.config.max_freq,
            self.config.effective_step(),
        )

    def finish(self, runner: SweepRunner) -> AnalysisResult:
        """Adjust the peaks of a (possibly partial) sweep into a result."""
        peaks = adjust_peaks(
            runner.spectrum, runner.raw_peaks, centered=self.config.centered_peaks
        )
        result = AnalysisResult(
            spectrum=list(runner.spectrum),
            raw_peaks=list(runner.raw_peaks),
            peaks=peaks,
        )
        logger.info(
            f"Analysis complete: {len(result.spectrum)} phasors, "
            f"{len(result.raw_peaks)} raw peak(s), {len(result.peaks)} significant"
        )
        return result

    def analyze(self, sample: Sample) -> AnalysisResult:
        """Sweep the configured range over the sample and locate its peaks.

        An empty sample yields an empty result.
        """
        if sample.is_empty():
            logger.warning("Sample is empty, nothing to analyze")
            return AnalysisResult()

        runner = self.runner(sample)
        logger.info(
            f"Analyzing {sample!r}: {self.config.min_freq} => {self.config.max_freq}Hz, "
            f"step {runner.step_size}Hz"
        )

        while True:
            phasor = runner.step()
            if phasor is None:
                break
            if self.on_step:
                try:
                    self.on_step(runner, phasor)
                except Exception as e:
                    logger.error(f"Error in on_step callback: {e}")

        return self.finish(runner)
