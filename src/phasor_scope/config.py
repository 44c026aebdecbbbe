"""Configuration utilities for phasor-scope.

This module centralizes the settings for signal generation, the frequency
sweep and logging. Settings can be built in code or loaded from a single
YAML file; command-line flags are applied on top by the CLI.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .generator import FreqPhase, parse_freq_phase_pairs
from .processing.sweep import resolve_step

logger = logging.getLogger(__name__)

# Command-line defaults
DEFAULT_DURATION = 2.0  # seconds
DEFAULT_RATE = 44100  # Hz
DEFAULT_MIN_FREQ = 1.0  # Hz
DEFAULT_MAX_FREQ = 100.0  # Hz
DEFAULT_STEP = 1.0  # Hz

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader without YAML 1.1 base-60 numbers.

    An unquoted `60:30` frequency entry must reach the parser as the string
    "60:30", not as the integer 3630.
    """


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (INT_TAG, FLOAT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ConfigLoader.add_implicit_resolver(
    INT_TAG,
    re.compile(
        r"""^(?:[-+]?0b[0-1_]+
        |[-+]?0[0-7_]+
        |[-+]?(?:0|[1-9][0-9_]*)
        |[-+]?0x[0-9a-fA-F_]+)$""",
        re.X,
    ),
    list("-+0123456789"),
)
ConfigLoader.add_implicit_resolver(
    FLOAT_TAG,
    re.compile(
        r"""^(?:[-+]?(?:[0-9][0-9_]*)\.[0-9_]*(?:[eE][-+][0-9]+)?
        |\.[0-9][0-9_]*(?:[eE][-+][0-9]+)?
        |[-+]?\.(?:inf|Inf|INF)
        |\.(?:nan|NaN|NAN))$""",
        re.X,
    ),
    list("-+0123456789."),
)


@dataclass
class SystemConfig:
    """System-level configuration settings.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class SignalSettings:
    """Where the analyzed signal comes from.

    Attributes:
        duration: Length of a generated signal in seconds.
        rate: Sampling rate of a generated signal in Hz.
        frequencies: (frequency, phase in degrees) pairs to mix.
        wav: Optional WAV file; takes precedence over generation.
    """

    duration: float = DEFAULT_DURATION
    rate: int = DEFAULT_RATE
    frequencies: List[FreqPhase] = field(default_factory=list)
    wav: Optional[str] = None

    def validate(self) -> None:
        """Raise ValueError for settings that cannot produce a sample."""
        if not self.rate > 0 or not float(self.rate).is_integer():
            raise ValueError(f"Sample rate must be a positive integer, got {self.rate}")
        if not self.duration >= 0:
            raise ValueError(f"Duration must not be negative, got {self.duration}")


@dataclass
class SweepConfig:
    """Frequency sweep and peak handling settings.

    Attributes:
        min_freq: First trial frequency in Hz.
        max_freq: Inclusive upper bound in Hz.
        step: Distance between trial frequencies in Hz.
        resolution: Optional number of points across the range; overrides step.
        simplify: Analyze turning points only (faster, less exact).
        centered_peaks: Place merged plateau peaks in the plateau's middle.
    """

    min_freq: float = DEFAULT_MIN_FREQ
    max_freq: float = DEFAULT_MAX_FREQ
    step: float = DEFAULT_STEP
    resolution: Optional[float] = None
    simplify: bool = False
    centered_peaks: bool = False

    def effective_step(self) -> float:
        """Step size after applying `resolution`, if set."""
        if self.resolution is not None:
            return resolve_step(self.min_freq, self.max_freq, self.resolution)
        return self.step

    def validate(self) -> None:
        """Raise ValueError if the sweep could not make progress or starts below 0 Hz."""
        if not self.min_freq >= 0:
            raise ValueError(f"Sweep start must not be negative, got {self.min_freq}")
        step = self.effective_step()
        if not step > 0:
            raise ValueError(
                f"Sweep step must be positive, got {step} "
                f"(min={self.min_freq}, max={self.max_freq}, resolution={self.resolution})"
            )

    @classmethod
    def from_resolution(
        cls, min_freq: float, max_freq: float, resolution: float
    ) -> "SweepConfig":
        """Sweep with a fixed number of points across [min_freq, max_freq]."""
        return cls(min_freq=min_freq, max_freq=max_freq, resolution=resolution)


@dataclass
class GlobalConfig:
    """Unified configuration for an analysis session."""

    system: SystemConfig = field(default_factory=SystemConfig)
    signal: SignalSettings = field(default_factory=SignalSettings)
    sweep: SweepConfig = field(default_factory=SweepConfig)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "GlobalConfig":
        """Load the configuration from a YAML file.

        The YAML file should have the following structure:
        ```yaml
        system:
          log_level: INFO
        signal:
          duration: 1.0
          rate: 1000
          frequencies: ["5:90", "60:270"]
        sweep:
          min: 1
          max: 100
          step: 1
        ```

        Args:
            path: Path to the configuration YAML file.

        Returns:
            A GlobalConfig object populated with the settings.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = yaml.load(f, Loader=ConfigLoader) or {}

        config = cls.from_dict(data)

        # Relative WAV paths are resolved against the config file
        if config.signal.wav and not Path(config.signal.wav).is_absolute():
            config.signal.wav = str(path.parent / config.signal.wav)

        logger.debug(f"Loaded configuration from {path}")
        return config

    @classmethod
    def from_dict(cls, data: dict) -> "GlobalConfig":
        """Build a validated configuration from parsed YAML data."""
        # 1. Parse System Config
        sys_data = data.get("system") or {}
        system_config = SystemConfig(
            log_level=str(sys_data.get("log_level", "INFO")).upper(),
            log_file=sys_data.get("log_file"),
        )

        # 2. Parse Signal Settings
        signal_data = data.get("signal") or {}
        signal_config = SignalSettings(
            duration=float(signal_data.get("duration", DEFAULT_DURATION)),
            rate=float(signal_data.get("rate", DEFAULT_RATE)),
            frequencies=parse_freq_phase_pairs(signal_data.get("frequencies") or []),
            wav=signal_data.get("wav"),
        )

        # 3. Parse Sweep Config
        sweep_data = data.get("sweep") or {}
        resolution = sweep_data.get("resolution")
        sweep_config = SweepConfig(
            min_freq=float(sweep_data.get("min", DEFAULT_MIN_FREQ)),
            max_freq=float(sweep_data.get("max", DEFAULT_MAX_FREQ)),
            step=float(sweep_data.get("step", DEFAULT_STEP)),
            resolution=float(resolution) if resolution is not None else None,
            simplify=bool(sweep_data.get("simplify", False)),
            centered_peaks=bool(sweep_data.get("centered_peaks", False)),
        )

        signal_config.validate()
        signal_config.rate = int(signal_config.rate)
        sweep_config.validate()

        return cls(system=system_config, signal=signal_config, sweep=sweep_config)


def setup_logging(system: SystemConfig) -> None:
    """Configure the root logger from the system settings."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if system.log_file:
        handlers.append(logging.FileHandler(system.log_file))

    logging.basicConfig(
        level=getattr(logging, system.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
