"""Plain-text rendering of spectra and peaks."""

from typing import List, Sequence

from phasor_scope.models import AnalysisResult, Phasor


def format_peaks(result: AnalysisResult) -> str:
    """Render the significant peaks as a table."""
    if not result.peaks:
        return "No peaks found."

    lines = [f"{'#':>3}  {'Frequency':>12}  {'Magnitude':>10}  {'Phase':>9}"]
    for n, index in enumerate(result.peaks, start=1):
        p = result.spectrum[index]
        lines.append(
            f"{n:>3}  {p.frequency:>10.2f}Hz  {p.magnitude:>10.4f}  {p.phase_degrees:>7.1f}deg"
        )
    return "\n".join(lines)


def format_spectrum(spectrum: Sequence[Phasor], width: int = 50) -> str:
    """Render magnitude against frequency as horizontal bars, one row per phasor."""
    if not spectrum:
        return ""

    top = max(p.magnitude for p in spectrum) or 1.0
    rows: List[str] = []
    for p in spectrum:
        bar = "#" * int(round(p.magnitude / top * width))
        rows.append(f"{p.frequency:>10.2f}Hz |{bar}")
    return "\n".join(rows)
