"""Conversion of R-peak positions into an instantaneous heart-rate series."""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from ._logging import logger
from .constants import SECONDS_PER_MINUTE
from .exceptions import ConfigError
from .types import PeakIndices


@dataclass(frozen=True)
class HeartRateEstimate:
    """Detected beats and the heart rate between consecutive beats.

    Attributes:
        peaks: Strictly increasing R-peak sample indices.
        bpm: Rate for each consecutive pair of peaks, length ``len(peaks) - 1``.
        fs: Sampling frequency in Hz.
    """

    peaks: PeakIndices
    bpm: np.ndarray
    fs: float

    @property
    def n_beats(self) -> int:
        return len(self.peaks)

    @property
    def is_sufficient(self) -> bool:
        """True if at least one rate value could be computed."""
        return len(self.bpm) > 0

    @property
    def peak_times(self) -> np.ndarray:
        """Peak times in seconds."""
        return self.peaks / self.fs

    @property
    def bpm_times(self) -> np.ndarray:
        """Time of the second peak of each pair, i.e. when each rate value is known."""
        return self.peak_times[1:]

    @property
    def mean_bpm(self) -> float | None:
        """Mean heart rate, or None when no rate could be estimated."""
        if not self.is_sufficient:
            return None
        return float(np.mean(self.bpm))

    def to_dataframe(self) -> pd.DataFrame:
        """Beat table with one row per rate value.

        Columns: ``peak_index``, ``time_s`` and ``bpm``.
        """
        return pd.DataFrame(
            {
                "peak_index": self.peaks[1:],
                "time_s": self.bpm_times,
                "bpm": self.bpm,
            }
        )


@dataclass(frozen=True)
class InsufficientDataResult(HeartRateEstimate):
    """Estimate for a record with fewer than two detected beats.

    ``bpm`` is always empty. This is a valid outcome, not an error.
    """

    reason: str = "fewer than 2 R-peaks detected"


def peaks_to_bpm(peaks: PeakIndices, fs: float) -> np.ndarray:
    """Return ``60 / (diff(peaks) / fs)``."""
    intervals_s = np.diff(peaks) / fs
    return SECONDS_PER_MINUTE / intervals_s


def estimate_heart_rate(peaks: PeakIndices, fs: float) -> HeartRateEstimate:
    """Convert R-peak indices into an instantaneous heart-rate series.

    Args:
        peaks: Strictly increasing sample indices.
        fs: Sampling frequency in Hz.

    Returns:
        HeartRateEstimate, or InsufficientDataResult if fewer than two peaks
        are given.

    Raises:
        ConfigError: If ``fs`` is not positive.
        ValueError: If ``peaks`` is not strictly increasing.
    """
    if fs <= 0:
        raise ConfigError(f"Sampling frequency must be positive, got {fs}")
    peaks = np.asarray(peaks, dtype=np.int64)
    if len(peaks) < 2:
        logger.warning(f"Only {len(peaks)} R-peak(s) detected; no heart rate could be estimated")
        return InsufficientDataResult(peaks=peaks, bpm=np.array([], dtype=float), fs=fs)
    if np.any(np.diff(peaks) <= 0):
        raise ValueError("Peak indices must be strictly increasing")
    return HeartRateEstimate(peaks=peaks, bpm=peaks_to_bpm(peaks, fs), fs=fs)
