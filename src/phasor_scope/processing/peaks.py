"""Peak detection and post-processing over a swept spectrum."""

import logging
import math
from itertools import groupby
from typing import List, Sequence, Tuple

from phasor_scope.models import Phasor

logger = logging.getLogger(__name__)

# Peaks at or below this fraction of the strongest peak are dropped
SIGNIFICANCE_RATIO = 3.0


def detect_peak(window: Sequence[Phasor]) -> int:
    """Return the index of the strongest of three consecutive phasors.

    Powers are compared left to right and a later entry takes over when it
    is greater than or equal to the current best, so ties go to the later
    index. A result of 1 means the middle entry is a local peak.

    Args:
        window: Exactly three consecutive phasors

    Returns:
        0, 1 or 2
    """
    if len(window) != 3:
        raise ValueError(f"Peak window must hold exactly 3 phasors, got {len(window)}")

    best = 0
    for i in (1, 2):
        if window[i].power >= window[best].power:
            best = i
    return best


def find_peaks(spectrum: Sequence[Phasor]) -> List[int]:
    """Slide a three-wide window over a spectrum and collect local peaks."""
    peaks: List[int] = []
    for end in range(3, len(spectrum) + 1):
        if detect_peak(spectrum[end - 3 : end]) == 1:
            peaks.append(end - 2)
    return peaks


def _plateau_end(spectrum: Sequence[Phasor], p0: int) -> int:
    """First index past the run of entries sharing p0's exact magnitude."""
    magnitude = spectrum[p0].magnitude
    p1 = p0 + 1
    while p1 < len(spectrum) and spectrum[p1].magnitude == magnitude:
        p1 += 1
    return p1


def adjust_peaks(
    spectrum: Sequence[Phasor], raw_peaks: Sequence[int], centered: bool = False
) -> List[int]:
    """Merge plateaus, drop insignificant peaks and remove repeats.

    1. Each raw peak p0 is moved along its plateau of bit-identical
       magnitudes. The recorded position is p0 + floor(p1 - p0), i.e. the
       first index past the plateau. With `centered`, the position is
       p0 + floor((p1 - p0) / 2) instead.
    2. Only peaks whose own magnitude is strictly greater than a third of
       the strongest raw peak survive.
    3. Consecutive duplicate positions collapse into one.

    Args:
        spectrum: Complete sweep output
        raw_peaks: Indices from the peak detector, in order
        centered: Place merged peaks in the middle of their plateau

    Returns:
        Ordered spectrum indices of the significant peaks
    """
    last = len(spectrum) - 1
    candidates: List[Tuple[float, int]] = []

    for p0 in raw_peaks:
        p1 = _plateau_end(spectrum, p0)
        if centered:
            position = p0 + math.floor((p1 - p0) / 2)
        else:
            position = p0 + math.floor(p1 - p0)
        # A plateau running into the end of the spectrum stays on the last entry
        candidates.append((spectrum[p0].magnitude, min(position, last)))

    max_amp = max((amp for amp, _ in candidates), default=0.0)
    threshold = max_amp / SIGNIFICANCE_RATIO

    significant = [position for amp, position in candidates if amp > threshold]
    peaks = [position for position, _ in groupby(significant)]

    logger.debug(f"Adjusted {len(raw_peaks)} raw peak(s) to {len(peaks)}: {peaks}")
    return peaks
