"""Causal Butterworth bandpass filtering."""

import numpy as np
import pydantic
from scipy import signal

from ._logging import logger
from .exceptions import ConfigError
from .types import Signal


class BandpassArgs(pydantic.BaseModel):
    """Settings for the bandpass filter.

    Attributes:
        order: Butterworth order of each band edge.
        low_cutoff: Lower cutoff frequency in Hz. Removes baseline wander.
        high_cutoff: Upper cutoff frequency in Hz. Must be below Nyquist.
    """

    order: int = 2
    low_cutoff: float = 0.5
    high_cutoff: float = 50.0


def design_bandpass(fs: float, bandpass: BandpassArgs) -> tuple[np.ndarray, np.ndarray]:
    """Design a digital Butterworth bandpass filter.

    Args:
        fs: Sampling frequency in Hz.
        bandpass: Filter settings.

    Returns:
        Numerator and denominator coefficients ``(b, a)``.

    Raises:
        ConfigError: If ``fs`` or the cutoffs are invalid, including
            ``high_cutoff >= fs / 2``.
    """
    if fs <= 0:
        raise ConfigError(f"Sampling frequency must be positive, got {fs}")
    if bandpass.order < 1:
        raise ConfigError(f"Filter order must be at least 1, got {bandpass.order}")

    nyquist = fs / 2
    l_freq, h_freq = bandpass.low_cutoff, bandpass.high_cutoff
    if l_freq <= 0:
        raise ConfigError(f"Lower cutoff must be positive, got {l_freq} Hz")
    if l_freq >= h_freq:
        raise ConfigError(f"Lower cutoff ({l_freq} Hz) must be below upper cutoff ({h_freq} Hz)")
    if h_freq >= nyquist:
        raise ConfigError(f"Upper cutoff ({h_freq} Hz) must be below the Nyquist frequency ({nyquist} Hz)")

    b, a = signal.butter(bandpass.order, [l_freq / nyquist, h_freq / nyquist], btype="band")
    return b, a


def bandpass_filter(ecg: Signal, fs: float, bandpass: BandpassArgs) -> Signal:
    """Apply the bandpass filter forward only.

    The output lags the input by the filter's group delay; peak positions in
    the result reflect that delay.

    Args:
        ecg: Input signal.
        fs: Sampling frequency in Hz.
        bandpass: Filter settings.

    Returns:
        Filtered signal of the same length as ``ecg``.
    """
    b, a = design_bandpass(fs, bandpass)
    logger.debug(
        f"Applying order-{bandpass.order} band-pass filter: {bandpass.low_cutoff} Hz - {bandpass.high_cutoff} Hz"
    )
    return signal.lfilter(b, a, ecg)
