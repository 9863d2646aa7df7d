"""Shared test fixtures for ecg-hr-sim tests."""

import neurokit2 as nk
import numpy as np
import pytest

import ecg_hr_sim


@pytest.fixture
def default_settings() -> ecg_hr_sim.Settings:
    """Reference run: 10 s at 1000 Hz, 60 -> 100 bpm, default artifacts."""
    return ecg_hr_sim.Settings()


@pytest.fixture
def constant_rate_settings() -> ecg_hr_sim.Settings:
    """Constant 60 bpm without baseline wander or noise."""
    return ecg_hr_sim.Settings(
        rate={"hr_min": 60, "hr_max": 60},
        artifacts={"bw_amp": 0, "noise_amp": 0},
    )


@pytest.fixture
def reference_ecg() -> tuple[np.ndarray, int]:
    """Independent synthetic ECG at 70 bpm from neurokit2.

    Returns:
        Tuple of (ecg_signal, sfreq)
    """
    sfreq = 500
    ecg_signal = nk.ecg_simulate(
        duration=10,
        sampling_rate=sfreq,
        noise=0,
        heart_rate=70,
        random_state=0,
    )
    return np.asarray(ecg_signal), sfreq


def make_spike_train(centers: list[int], amplitudes: list[float], n_samples: int, width: float = 5.0) -> np.ndarray:
    """Sum of narrow Gaussian spikes, one per center."""
    n = np.arange(n_samples)
    x = np.zeros(n_samples)
    for center, amplitude in zip(centers, amplitudes, strict=True):
        x += amplitude * np.exp(-(((n - center) / width) ** 2))
    return x


@pytest.fixture
def spike_train():
    """Factory for spike-train test signals."""
    return make_spike_train
