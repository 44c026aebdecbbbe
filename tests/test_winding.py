"""Tests for the winding phasor estimator."""

import math

import numpy as np
import pytest

from phasor_scope.generator import sinewaves
from phasor_scope.processing.winding import estimate, mean, running_means, wind


def phase_degrees(value: complex) -> float:
    return math.degrees(math.atan2(value.imag, value.real))


def angular_distance(a: float, b: float) -> float:
    """Smallest difference between two angles in degrees."""
    return abs((a - b + 180.0) % 360.0 - 180.0)


def test_single_tone_magnitude():
    sample = sinewaves(1.0, 1000, [(5.0, 0.0)])

    value = estimate(sample.with_time(), 5.0)

    assert value.real > 0.45
    assert abs(value) == pytest.approx(0.5, abs=1e-6)


def test_two_tones_are_separated():
    sample = sinewaves(1.0, 1000, [(5.0, 0.0), (10.0, 0.0)])
    points = sample.with_time()

    assert estimate(points, 5.0).real > 0.45
    assert estimate(points, 10.0).real > 0.45


def test_phase_is_recovered():
    sample = sinewaves(1.0, 1000, [(5.0, 90.0)])

    value = estimate(sample.with_time(), 5.0)

    assert abs(value) > 0.45
    assert phase_degrees(value) == pytest.approx(90.0, abs=0.1)


def test_phase_with_second_tone():
    sample = sinewaves(1.0, 1000, [(5.0, 90.0), (60.0, 0.0)])
    points = sample.with_time()

    at_5 = estimate(points, 5.0)
    at_60 = estimate(points, 60.0)

    assert abs(at_5) > 0.45
    assert phase_degrees(at_5) == pytest.approx(90.0, abs=0.1)
    assert abs(at_60) > 0.45
    assert phase_degrees(at_60) == pytest.approx(0.0, abs=0.1)


def test_multi_tone_phases_are_independent():
    sample = sinewaves(1.0, 1000, [(5.0, 180.0), (60.0, 270.0)])
    points = sample.with_time()

    at_5 = estimate(points, 5.0)
    at_60 = estimate(points, 60.0)

    assert abs(at_5) > 0.45
    assert angular_distance(phase_degrees(at_5), -180.0) < 0.1
    assert abs(at_60) > 0.45
    assert phase_degrees(at_60) == pytest.approx(-90.0, abs=0.1)


def test_off_bin_frequency_is_small():
    sample = sinewaves(1.0, 1000, [(5.0, 0.0)])

    assert abs(estimate(sample.with_time(), 40.0)) < 0.01


def test_empty_input_gives_zero():
    for f in (0.0, 1.0, 440.0):
        assert estimate([], f) == 0j
    assert list(wind([], 5.0)) == []
    assert list(running_means([])) == []


def test_zero_frequency_maps_to_one_axis():
    points = [(0.0, 0.5), (0.1, -0.25), (0.2, 1.0)]

    wound = list(wind(points, 0.0))

    assert all(c.real == 0.0 for c in wound)
    assert estimate(points, 0.0) == pytest.approx(complex(0.0, 1.25 / 3))


def test_running_means_end_at_mean():
    values = [1 + 1j, 3 - 1j, -2 + 0.5j, 0.5j]

    means = list(running_means(values))

    assert len(means) == len(values)
    assert means[0] == values[0]
    assert means[1] == pytest.approx(2 + 0j)
    assert means[-1] == pytest.approx(sum(values) / len(values))
    assert mean(values) == means[-1]


def test_accepts_numpy_points():
    sample = sinewaves(1.0, 1000, [(7.0, 45.0)])
    as_list = sample.with_time()
    as_array = np.array(as_list)

    assert estimate(as_array, 7.0) == estimate(as_list, 7.0)


def test_wind_is_lazy():
    points = [(0.0, 1.0), (0.25, 1.0)]

    wound = wind(points, 1.0)

    assert iter(wound) is wound
    first = next(wound)
    assert isinstance(first, complex)
    assert first == pytest.approx(complex(0.0, 1.0))
    assert next(wound) == pytest.approx(complex(1.0, 0.0))
