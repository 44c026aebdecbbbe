"""Tests for text reporting."""

from phasor_scope.models import AnalysisResult, Phasor
from phasor_scope.report import format_peaks, format_spectrum


def test_format_peaks():
    spectrum = [Phasor(1.0, 0.1 + 0j), Phasor(2.0, 0.5j), Phasor(3.0, 0.1 + 0j)]
    result = AnalysisResult(spectrum=spectrum, raw_peaks=[1], peaks=[1])

    lines = format_peaks(result).splitlines()

    assert len(lines) == 2
    assert "2.00Hz" in lines[1]
    assert "0.5000" in lines[1]
    assert "90.0deg" in lines[1]


def test_format_peaks_without_peaks():
    assert format_peaks(AnalysisResult()) == "No peaks found."


def test_format_spectrum_scales_bars():
    spectrum = [Phasor(1.0, 0.25 + 0j), Phasor(2.0, 0.5 + 0j), Phasor(3.0, 0j)]

    rows = format_spectrum(spectrum, width=10).splitlines()

    assert rows[0].endswith("|#####")
    assert rows[1].endswith("|##########")
    assert rows[2].endswith("|")


def test_format_spectrum_empty_and_silent():
    assert format_spectrum([]) == ""
    assert format_spectrum([Phasor(1.0, 0j)]).endswith("|")
