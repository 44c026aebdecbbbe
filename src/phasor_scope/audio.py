"""WAV file decoding into mono samples."""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from scipy.io import wavfile

from phasor_scope.models import Sample

logger = logging.getLogger(__name__)


def to_float(data: np.ndarray) -> np.ndarray:
    """Scale PCM data into the [-1.0, 1.0] range.

    Signed integers are divided by their full-scale value, unsigned 8-bit
    data is re-centred around zero, floating point data is passed through.
    """
    if data.dtype == np.uint8:
        return (data.astype(np.float64) - 128.0) / 128.0
    if np.issubdtype(data.dtype, np.integer):
        return data.astype(np.float64) / float(-np.iinfo(data.dtype).min)
    return data.astype(np.float64)


def downmix(data: np.ndarray) -> np.ndarray:
    """Reduce (frames, channels) data to a single channel by averaging."""
    if data.ndim == 1:
        return data
    return data.mean(axis=1)


def load_wav(path: Union[str, Path]) -> Sample:
    """Load a WAV file as a mono Sample.

    Args:
        path: Path to a PCM or float WAV file

    Returns:
        Sample with amplitudes in [-1.0, 1.0] at the file's sample rate
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Audio file not found: {path}")

    rate, data = wavfile.read(path)
    channels = 1 if data.ndim == 1 else data.shape[1]
    sample = Sample(downmix(to_float(data)), int(rate))

    logger.info(
        f"Loaded {path.name}: {len(sample)} frames, {channels} channel(s), "
        f"{rate}Hz, {sample.time_span():.2f}s"
    )
    return sample
