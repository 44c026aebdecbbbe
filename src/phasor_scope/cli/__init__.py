"""Command-line interface for sample spectrum analysis.

Usage:
    phasor-scope --freqs 5:90 60:270 --t 1 --rate 1000 --min 1 --max 100
    phasor-scope --wav recording.wav --min 20 --max 2000 --res 400
    phasor-scope --config analysis.yaml --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional

from phasor_scope.analyzer import Analyzer
from phasor_scope.audio import load_wav
from phasor_scope.config import GlobalConfig, setup_logging
from phasor_scope.generator import parse_freq_phase_pairs, sinewaves
from phasor_scope.models import Phasor, Sample
from phasor_scope.processing.sweep import SweepRunner
from phasor_scope.report import format_peaks, format_spectrum

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phasor-scope", description="Sample FT analysis tool (direct summation)."
    )
    parser.add_argument("--config", "-c", help="Path to a YAML configuration file")

    # Signal generation
    parser.add_argument(
        "--t", "--duration", dest="duration", type=float, help="Sine generation length in seconds"
    )
    parser.add_argument(
        "--rate", "--samplerate", dest="rate", type=int, help="Sine generation sampling rate in Hz"
    )
    parser.add_argument(
        "--freqs", nargs="+", metavar="FREQ[:PHASE]", help="Sine frequencies to generate, in Hz"
    )
    parser.add_argument("--wav", help="Analyze a WAV file instead of generated sines")

    # FT analysis
    parser.add_argument("--min", dest="min_freq", type=float, help="FT analysis min, Hz")
    parser.add_argument("--max", dest="max_freq", type=float, help="FT analysis max, Hz")
    parser.add_argument("--ss", "--stepsize", dest="step", type=float, help="FT analysis step size, Hz")
    parser.add_argument(
        "--res",
        "--resolution",
        dest="resolution",
        type=float,
        help="FT analysis resolution in points, overrides stepsize if given",
    )
    parser.add_argument(
        "--simplify", action="store_true", help="Analyze turning points only (faster, less exact)"
    )
    parser.add_argument(
        "--centered", action="store_true", help="Center merged peaks on their plateau"
    )

    # Output
    parser.add_argument(
        "--plot-spectrum", action="store_true", help="Print the magnitude spectrum as bars"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed debug output")
    return parser


def resolve_config(args: argparse.Namespace) -> GlobalConfig:
    """Merge a configuration file (if any) with command-line overrides."""
    config = GlobalConfig.load(args.config) if args.config else GlobalConfig()

    signal = config.signal
    if args.duration is not None:
        signal.duration = args.duration
    if args.rate is not None:
        signal.rate = args.rate
    if args.freqs:
        signal.frequencies = parse_freq_phase_pairs(args.freqs)
    if args.wav:
        signal.wav = args.wav

    sweep = config.sweep
    if args.min_freq is not None:
        sweep.min_freq = args.min_freq
    if args.max_freq is not None:
        sweep.max_freq = args.max_freq
    if args.step is not None:
        sweep.step = args.step
    if args.resolution is not None:
        sweep.resolution = args.resolution
    sweep.simplify = sweep.simplify or args.simplify
    sweep.centered_peaks = sweep.centered_peaks or args.centered

    if args.verbose:
        config.system.log_level = "DEBUG"

    signal.validate()
    sweep.validate()
    return config


def load_sample(config: GlobalConfig) -> Optional[Sample]:
    """Decode or generate the sample described by the configuration."""
    signal = config.signal
    if signal.wav:
        return load_wav(signal.wav)
    if signal.frequencies:
        sample = sinewaves(signal.duration, signal.rate, signal.frequencies)
        logger.info(
            f"Generated sinewaves: sampling time of {signal.duration} seconds, "
            f"sampling frequency {signal.rate}Hz"
        )
        return sample
    return None


def _log_progress(runner: SweepRunner, phasor: Phasor) -> None:
    logger.debug(f"[{len(runner.spectrum)}] {phasor}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except (ValueError, FileNotFoundError) as e:
        parser.error(str(e))

    setup_logging(config.system)

    try:
        sample = load_sample(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Could not load sample: {e}")
        return 1

    if sample is None:
        parser.error("no signal given: use --freqs, --wav or a config file")

    analyzer = Analyzer(config.sweep, on_step=_log_progress)
    result = analyzer.analyze(sample)

    if args.plot_spectrum:
        print(format_spectrum(result.spectrum))
        print()
    print(format_peaks(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
