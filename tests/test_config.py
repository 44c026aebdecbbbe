"""Tests for YAML configuration loading."""

import logging

import pytest
import yaml

from phasor_scope.config import GlobalConfig, SweepConfig, SystemConfig, setup_logging


def write_config(tmp_path, data):
    path = tmp_path / "analysis.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


def test_defaults():
    config = GlobalConfig()

    assert config.system.log_level == "INFO"
    assert config.signal.rate == 44100
    assert config.signal.duration == 2.0
    assert config.sweep.min_freq == 1.0
    assert config.sweep.max_freq == 100.0
    assert config.sweep.effective_step() == 1.0


def test_load_full_config(tmp_path):
    path = write_config(
        tmp_path,
        {
            "system": {"log_level": "debug"},
            "signal": {"duration": 1.0, "rate": 1000, "frequencies": ["5:90", 60]},
            "sweep": {"min": 2, "max": 50, "step": 0.5, "simplify": True, "centered_peaks": True},
        },
    )

    config = GlobalConfig.load(path)

    assert config.system.log_level == "DEBUG"
    assert config.signal.rate == 1000
    assert config.signal.frequencies == [(5.0, 90.0), (60.0, 0.0)]
    assert config.sweep.min_freq == 2.0
    assert config.sweep.max_freq == 50.0
    assert config.sweep.effective_step() == 0.5
    assert config.sweep.simplify is True
    assert config.sweep.centered_peaks is True


def test_unquoted_frequency_phase_pairs(tmp_path):
    path = tmp_path / "analysis.yaml"
    path.write_text("signal:\n  frequencies: [60:30, 5:90]\n  rate: 1000\n  duration: 1.5\n")

    config = GlobalConfig.load(path)

    assert config.signal.frequencies == [(60.0, 30.0), (5.0, 90.0)]
    assert config.signal.rate == 1000
    assert isinstance(config.signal.rate, int)
    assert config.signal.duration == 1.5


def test_unquoted_pairs_in_block_list(tmp_path):
    path = tmp_path / "analysis.yaml"
    path.write_text("signal:\n  frequencies:\n    - 1:00\n    - 440\n")

    assert GlobalConfig.load(path).signal.frequencies == [(1.0, 0.0), (440.0, 0.0)]


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert GlobalConfig.load(path) == GlobalConfig()


def test_resolution_overrides_step(tmp_path):
    path = write_config(tmp_path, {"sweep": {"min": 0, "max": 100, "step": 1, "resolution": 20}})

    assert GlobalConfig.load(path).sweep.effective_step() == 5.0


def test_relative_wav_is_resolved(tmp_path):
    path = write_config(tmp_path, {"signal": {"wav": "clip.wav"}})

    assert GlobalConfig.load(path).signal.wav == str(tmp_path / "clip.wav")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GlobalConfig.load(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "data",
    [
        {"sweep": {"step": 0}},
        {"sweep": {"step": -2}},
        {"sweep": {"min": 10, "max": 10, "resolution": 5}},
        {"sweep": {"resolution": 0}},
        {"signal": {"rate": 0}},
        {"signal": {"rate": 0.5}},
        {"signal": {"rate": float("nan")}},
        {"sweep": {"min": -5}},
        {"signal": {"frequencies": ["5:x"]}},
    ],
)
def test_invalid_config_fails_fast(tmp_path, data):
    with pytest.raises(ValueError):
        GlobalConfig.load(write_config(tmp_path, data))


def test_from_resolution_preset():
    config = SweepConfig.from_resolution(10.0, 110.0, 50)
    assert config.effective_step() == 2.0


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(SystemConfig(log_level="DEBUG", log_file=str(log_file)))

    logging.getLogger("phasor_scope.test").debug("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello from test" in log_file.read_text()
    setup_logging(SystemConfig())
