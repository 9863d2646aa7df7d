"""Tests for the causal Butterworth bandpass filter."""

import numpy as np
import pytest
from scipy import signal

from ecg_hr_sim import BandpassArgs, ConfigError, bandpass_filter, design_bandpass


def _gain(b: np.ndarray, a: np.ndarray, freq: float, fs: float) -> float:
    _, h = signal.freqz(b, a, worN=[float(freq)], fs=fs)
    return float(np.abs(h[0]))


class TestDesignBandpass:
    def test_coefficient_count(self):
        b, a = design_bandpass(1000, BandpassArgs())
        assert len(b) == len(a) == 5

    def test_magnitude_response(self):
        """Flat passband, -3 dB at both cutoffs, attenuation outside."""
        fs = 1000
        b, a = design_bandpass(fs, BandpassArgs())

        assert _gain(b, a, 10, fs) == pytest.approx(1.0, abs=0.02)
        assert _gain(b, a, 0.5, fs) == pytest.approx(1 / np.sqrt(2), abs=0.02)
        assert _gain(b, a, 50, fs) == pytest.approx(1 / np.sqrt(2), abs=0.02)
        assert _gain(b, a, 0.05, fs) < 0.1
        assert _gain(b, a, 300, fs) < 0.1

    def test_upper_cutoff_at_nyquist(self):
        with pytest.raises(ConfigError, match="Nyquist"):
            design_bandpass(100, BandpassArgs(high_cutoff=50))

    def test_upper_cutoff_just_below_nyquist(self):
        b, a = design_bandpass(1000, BandpassArgs(high_cutoff=499))
        assert np.all(np.isfinite(b)) and np.all(np.isfinite(a))

    @pytest.mark.parametrize(
        "bandpass",
        [
            BandpassArgs(low_cutoff=0),
            BandpassArgs(low_cutoff=60, high_cutoff=50),
            BandpassArgs(order=0),
        ],
    )
    def test_invalid_settings(self, bandpass):
        with pytest.raises(ConfigError):
            design_bandpass(1000, bandpass)

    def test_invalid_fs(self):
        with pytest.raises(ConfigError):
            design_bandpass(0, BandpassArgs())


class TestBandpassFilter:
    def test_length_preserved(self):
        x = np.random.default_rng(0).normal(size=3000)
        assert bandpass_filter(x, 1000, BandpassArgs()).shape == x.shape

    def test_causal(self):
        """Nothing appears in the output before the input impulse."""
        x = np.zeros(2000)
        x[500] = 1.0
        y = bandpass_filter(x, 1000, BandpassArgs())

        np.testing.assert_array_equal(y[:500], 0.0)
        assert np.abs(y[500:]).max() > 0

    def test_removes_offset(self):
        x = np.ones(20_000)
        y = bandpass_filter(x, 1000, BandpassArgs())
        assert np.abs(y[-1000:]).max() < 1e-3

    def test_input_untouched(self):
        x = np.random.default_rng(1).normal(size=1000)
        original = x.copy()
        bandpass_filter(x, 1000, BandpassArgs())
        np.testing.assert_array_equal(x, original)
