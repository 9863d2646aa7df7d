"""Tests for settings models and file loaders."""

import json

import pydantic
import pytest

from ecg_hr_sim import ConfigError, ConfigLoader, Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.signal.fs == 1000
        assert settings.signal.duration == 10
        assert (settings.rate.hr_min, settings.rate.hr_max) == (60, 100)
        assert (settings.artifacts.bw_freq, settings.artifacts.bw_amp, settings.artifacts.noise_amp) == (0.1, 0.05, 0.05)
        assert settings.artifacts.powerline_amp == 0
        assert (settings.bandpass.order, settings.bandpass.low_cutoff, settings.bandpass.high_cutoff) == (2, 0.5, 50)
        assert settings.peaks.method == "global"
        assert settings.peaks.threshold_fraction == 0.6
        assert settings.peaks.min_peak_distance_s == 0.5
        settings.check()

    def test_method_is_normalized(self):
        assert Settings(peaks={"method": " Adaptive "}).peaks.method == "adaptive"

    def test_constant_rate_is_valid(self):
        Settings(rate={"hr_min": 72, "hr_max": 72}).check()

    def test_check_after_mutation(self):
        settings = Settings()
        settings.bandpass.high_cutoff = 600
        with pytest.raises(ConfigError, match="Nyquist"):
            settings.check()

    def test_wrong_type(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(signal={"fs": "fast"})


class TestConfigLoader:
    def test_from_json(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"signal": {"fs": 500}, "peaks": {"method": "adaptive", "window_s": 3}}))

        settings = ConfigLoader.from_json(path)

        assert settings.signal.fs == 500
        assert settings.signal.duration == 10
        assert settings.peaks.method == "adaptive"
        assert settings.peaks.window_s == 3

    def test_from_toml(self, tmp_path):
        path = tmp_path / "run.toml"
        path.write_text("[bandpass]\norder = 3\nhigh_cutoff = 40.0\n")

        settings = ConfigLoader.from_toml(path)

        assert settings.bandpass.order == 3
        assert settings.bandpass.high_cutoff == 40.0
        assert settings.bandpass.low_cutoff == 0.5

    def test_from_file_dispatch(self, tmp_path):
        json_path = tmp_path / "a.json"
        json_path.write_text('{"rate": {"hr_max": 120}}')
        toml_path = tmp_path / "b.TOML"
        toml_path.write_text("[rate]\nhr_max = 130\n")

        assert ConfigLoader.from_file(json_path).rate.hr_max == 120
        assert ConfigLoader.from_file(str(toml_path)).rate.hr_max == 130

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("signal: {}")
        with pytest.raises(ValueError, match="Unsupported config file format"):
            ConfigLoader.from_file(path)

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="Unknown configuration sections"):
            ConfigLoader.from_dict({"filter": {"order": 2}})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader.from_file(tmp_path / "missing.json")
