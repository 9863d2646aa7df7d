"""Synthesis of a single cardiac cycle as a sum of Gaussian pulses.

Each of the six waves (P, Q, QRS, S, T, U) is modelled as
``amplitude * exp(-((t - center) / width) ** 2)`` on a local time axis that
spans [0, 1] over one beat. Wave centers are given as fractions of the nominal
beat interval ``li`` (see ``NOMINAL_BEAT_FRACTION``).
"""

import numpy as np

from .constants import NOMINAL_BEAT_FRACTION, SECONDS_PER_MINUTE, WAVE_COMPONENTS, WaveComponent
from .exceptions import ConfigError
from .types import Signal


def gaussian_pulse(t: np.ndarray, amplitude: float, width: float, center: float) -> np.ndarray:
    """Evaluate ``amplitude * exp(-((t - center) / width) ** 2)``."""
    return amplitude * np.exp(-(((t - center) / width) ** 2))


def local_time_axis(cycle_len: int) -> np.ndarray:
    """Uniform axis over [0, 1] with ``cycle_len`` points, both ends included."""
    if cycle_len < 1:
        raise ConfigError(f"Cycle length must be at least 1 sample, got {cycle_len}")
    return np.linspace(0.0, 1.0, cycle_len)


def cycle_length(rate_bpm: float, fs: float) -> int:
    """Number of samples in one cycle at ``rate_bpm``: ``round(fs / (rate / 60))``."""
    if rate_bpm <= 0:
        raise ConfigError(f"Heart rate must be positive, got {rate_bpm}")
    f_ecg = rate_bpm / SECONDS_PER_MINUTE
    return int(round(fs / f_ecg))


def synthesize_components(
    cycle_len: int,
    li: float = NOMINAL_BEAT_FRACTION,
    components: tuple[WaveComponent, ...] = WAVE_COMPONENTS,
) -> dict[str, np.ndarray]:
    """Evaluate every wave component of one cycle separately.

    Args:
        cycle_len: Number of samples in the cycle.
        li: Nominal beat-interval fraction that scales the wave centers.
        components: Wave shape table.

    Returns:
        Dictionary mapping wave name to its pulse, each of length ``cycle_len``.
    """
    t = local_time_axis(cycle_len)
    return {c.name: gaussian_pulse(t, c.amplitude, c.width, c.center * li) for c in components}


def synthesize_cycle(
    cycle_len: int,
    li: float = NOMINAL_BEAT_FRACTION,
    components: tuple[WaveComponent, ...] = WAVE_COMPONENTS,
) -> Signal:
    """Synthesize one cardiac cycle as the sum of its wave components.

    Args:
        cycle_len: Number of samples in the cycle.
        li: Nominal beat-interval fraction that scales the wave centers.
        components: Wave shape table.

    Returns:
        Array of length ``cycle_len``.

    Examples:
        >>> cycle = synthesize_cycle(cycle_length(72, fs=500))
        >>> cycle.shape
        (417,)
    """
    pulses = synthesize_components(cycle_len, li=li, components=components)
    return np.sum(list(pulses.values()), axis=0)
