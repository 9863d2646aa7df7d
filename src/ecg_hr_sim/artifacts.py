"""Baseline wander, powerline interference and broadband noise."""

import numpy as np
import pydantic

from ._logging import logger
from .exceptions import ConfigError
from .types import Signal


class ArtifactArgs(pydantic.BaseModel):
    """Settings for the artifacts added to the clean ECG.

    Attributes:
        bw_freq: Baseline wander frequency in Hz.
        bw_amp: Baseline wander amplitude.
        noise_amp: Standard deviation of the additive Gaussian noise.
        powerline_freq: Powerline interference frequency in Hz.
        powerline_amp: Powerline interference amplitude. 0 disables it.
        seed: Seed for the noise generator. If None, fresh OS entropy is used.
    """

    bw_freq: float = 0.1
    bw_amp: float = 0.05
    noise_amp: float = 0.05
    powerline_freq: float = 50.0
    powerline_amp: float = 0.0
    seed: int | None = None


def baseline_wander(t: np.ndarray, freq: float, amplitude: float) -> np.ndarray:
    """Slow sinusoidal drift of the zero level."""
    return amplitude * np.sin(2 * np.pi * freq * t)


def powerline_interference(t: np.ndarray, freq: float, amplitude: float) -> np.ndarray:
    """Sinusoidal mains interference."""
    return amplitude * np.sin(2 * np.pi * freq * t)


def gaussian_noise(n_samples: int, amplitude: float, rng: np.random.Generator) -> np.ndarray:
    """I.i.d. zero-mean Gaussian samples with standard deviation ``amplitude``."""
    return rng.normal(0.0, amplitude, n_samples)


def inject_artifacts(
    ecg: Signal,
    t: np.ndarray,
    artifacts: ArtifactArgs,
    rng: np.random.Generator | int | None = None,
) -> Signal:
    """Return a noisy copy of ``ecg``.

    Args:
        ecg: Clean signal.
        t: Time grid in seconds, same length as ``ecg``.
        artifacts: Artifact settings.
        rng: Random source for the noise. An integer is used as a seed. If
            None, a generator seeded with ``artifacts.seed`` is created.

    Returns:
        New array of the same length as ``ecg``.

    Raises:
        ConfigError: If an amplitude is negative.
        ValueError: If ``ecg`` and ``t`` differ in length.
    """
    if len(ecg) != len(t):
        raise ValueError(f"Signal and time grid lengths differ: {len(ecg)} != {len(t)}")
    for name in ("bw_amp", "noise_amp", "powerline_amp"):
        if getattr(artifacts, name) < 0:
            raise ConfigError(f"{name} must be non-negative, got {getattr(artifacts, name)}")

    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(artifacts.seed if rng is None else rng)

    logger.debug(
        f"Adding baseline wander ({artifacts.bw_amp} at {artifacts.bw_freq} Hz) "
        f"and Gaussian noise (std {artifacts.noise_amp})"
    )
    noisy = ecg + baseline_wander(t, artifacts.bw_freq, artifacts.bw_amp)
    if artifacts.powerline_amp > 0:
        logger.debug(f"Adding powerline interference ({artifacts.powerline_amp} at {artifacts.powerline_freq} Hz)")
        noisy = noisy + powerline_interference(t, artifacts.powerline_freq, artifacts.powerline_amp)
    # Always draw, so a given seed yields the same stream whatever the amplitude
    return noisy + gaussian_noise(len(ecg), artifacts.noise_amp, rng)
