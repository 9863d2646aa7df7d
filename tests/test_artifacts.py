"""Tests for baseline wander and noise injection."""

import numpy as np
import pytest

from ecg_hr_sim import ArtifactArgs, ConfigError, inject_artifacts
from ecg_hr_sim.artifacts import baseline_wander, powerline_interference


@pytest.fixture
def clean() -> tuple[np.ndarray, np.ndarray]:
    fs = 1000
    t = np.arange(20_000) / fs
    return np.sin(2 * np.pi * 1.0 * t), t


class TestInjectArtifacts:
    def test_no_artifacts_is_identity(self, clean):
        ecg, t = clean
        noisy = inject_artifacts(ecg, t, ArtifactArgs(bw_amp=0, noise_amp=0), rng=0)
        np.testing.assert_array_equal(noisy, ecg)

    def test_length_preserved_and_input_untouched(self, clean):
        ecg, t = clean
        original = ecg.copy()
        noisy = inject_artifacts(ecg, t, ArtifactArgs(), rng=1)

        assert noisy.shape == ecg.shape
        assert noisy is not ecg
        np.testing.assert_array_equal(ecg, original)

    def test_baseline_wander_only(self, clean):
        ecg, t = clean
        noisy = inject_artifacts(ecg, t, ArtifactArgs(bw_amp=0.05, bw_freq=0.1, noise_amp=0), rng=0)
        np.testing.assert_allclose(noisy - ecg, 0.05 * np.sin(2 * np.pi * 0.1 * t), atol=1e-12)

    def test_noise_std(self):
        t = np.arange(100_000) / 1000
        noisy = inject_artifacts(np.zeros_like(t), t, ArtifactArgs(bw_amp=0, noise_amp=0.05), rng=3)
        assert np.std(noisy) == pytest.approx(0.05, rel=0.05)
        assert np.mean(noisy) == pytest.approx(0.0, abs=0.005)

    def test_seeded_noise_is_reproducible(self, clean):
        ecg, t = clean
        a = inject_artifacts(ecg, t, ArtifactArgs(), rng=42)
        b = inject_artifacts(ecg, t, ArtifactArgs(), rng=42)
        c = inject_artifacts(ecg, t, ArtifactArgs(), rng=43)

        np.testing.assert_array_equal(a, b)
        assert not np.array_equal(a, c)

    def test_seed_from_settings(self, clean):
        ecg, t = clean
        a = inject_artifacts(ecg, t, ArtifactArgs(seed=5))
        b = inject_artifacts(ecg, t, ArtifactArgs(seed=5))
        np.testing.assert_array_equal(a, b)

    def test_generator_is_used(self, clean):
        ecg, t = clean
        a = inject_artifacts(ecg, t, ArtifactArgs(), rng=np.random.default_rng(9))
        b = inject_artifacts(ecg, t, ArtifactArgs(), rng=np.random.default_rng(9))
        np.testing.assert_array_equal(a, b)

    def test_powerline(self, clean):
        ecg, t = clean
        args = ArtifactArgs(bw_amp=0, noise_amp=0, powerline_amp=0.1, powerline_freq=60)
        noisy = inject_artifacts(ecg, t, args, rng=0)
        np.testing.assert_allclose(noisy - ecg, powerline_interference(t, 60, 0.1), atol=1e-12)

    def test_negative_amplitude(self, clean):
        ecg, t = clean
        with pytest.raises(ConfigError):
            inject_artifacts(ecg, t, ArtifactArgs(noise_amp=-0.1), rng=0)

    def test_length_mismatch(self, clean):
        ecg, t = clean
        with pytest.raises(ValueError, match="lengths differ"):
            inject_artifacts(ecg, t[:-1], ArtifactArgs(), rng=0)


def test_baseline_wander_period():
    t = np.array([0.0, 2.5, 5.0])
    np.testing.assert_allclose(baseline_wander(t, freq=0.1, amplitude=0.05), [0.0, 0.05, 0.0], atol=1e-12)
