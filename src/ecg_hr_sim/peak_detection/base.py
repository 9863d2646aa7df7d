"""Base classes and protocols for R-peak detectors."""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

import numpy as np
import pydantic

from .._logging import logger
from ..exceptions import ConfigError
from ..types import PeakIndices, Signal


class PeakDetectionArgs(pydantic.BaseModel):
    """Settings for R-peak detection.

    Attributes:
        method: Name of a registered detector ("global", "adaptive", "neurokit",
            or a plugin name).
        threshold_fraction: Fraction of the reference maximum a peak must reach.
        min_peak_distance_s: Refractory period in seconds between accepted peaks.
        window_s: Window length in seconds for the adaptive detector.
        nk_method: Algorithm passed to ``neurokit2.ecg_peaks`` by the neurokit detector.
    """

    method: str = "global"
    threshold_fraction: float = 0.6
    min_peak_distance_s: float = 0.5
    window_s: float = 2.0
    nk_method: str = "neurokit"


@runtime_checkable
class PeakDetectorProtocol(Protocol):
    """Interface that all peak detectors implement.

    A detector returns strictly increasing sample indices that are pairwise at
    least ``min_peak_distance_s * fs`` samples apart. An empty array means no
    beat could be found.
    """

    name: str

    @classmethod
    def from_args(cls, args: PeakDetectionArgs) -> PeakDetectorProtocol: ...

    def detect(self, ecg: Signal, fs: float) -> PeakIndices:
        """Detect R-peaks in ``ecg`` sampled at ``fs`` Hz."""
        ...


class BasePeakDetector:
    """Common settings handling for the built-in detectors.

    Subclasses must define ``name`` and implement ``detect``.
    """

    name: str = ""

    def __init__(self, threshold_fraction: float = 0.6, min_peak_distance_s: float = 0.5):
        if not 0 < threshold_fraction <= 1:
            raise ConfigError(f"threshold_fraction must be in (0, 1], got {threshold_fraction}")
        if min_peak_distance_s <= 0:
            raise ConfigError(f"min_peak_distance_s must be positive, got {min_peak_distance_s}")
        self.threshold_fraction = threshold_fraction
        self.min_peak_distance_s = min_peak_distance_s

    @classmethod
    def from_args(cls, args: PeakDetectionArgs) -> BasePeakDetector:
        return cls(threshold_fraction=args.threshold_fraction, min_peak_distance_s=args.min_peak_distance_s)

    def min_distance_samples(self, fs: float) -> int:
        """Refractory distance in samples, rounded up and at least 1.

        Rounding up keeps accepted peaks at least ``min_peak_distance_s * fs``
        samples apart when that product is fractional (62.5 at 125 Hz).
        """
        # tolerance absorbs float error in products that should be whole
        return max(1, math.ceil(self.min_peak_distance_s * fs - 1e-9))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(threshold_fraction={self.threshold_fraction}, "
            f"min_peak_distance_s={self.min_peak_distance_s})"
        )


def empty_peaks() -> PeakIndices:
    return np.array([], dtype=np.int64)


def has_positive_peak(ecg: Signal) -> bool:
    """Return False for empty, non-finite, or non-positive signals.

    A threshold derived from a non-positive maximum would accept every local
    maximum, so such signals are reported as having no beats.
    """
    if len(ecg) == 0:
        return False
    max_val = np.max(ecg)
    if not np.isfinite(max_val) or max_val <= 0:
        logger.warning(f"Signal maximum is {max_val}; no peaks can be detected")
        return False
    return True


def enforce_refractory(peaks: np.ndarray, ecg: Signal, distance: int) -> PeakIndices:
    """Drop peaks closer than ``distance`` samples to a higher one.

    Peaks are visited from highest to lowest amplitude, the same rule
    ``scipy.signal.find_peaks`` applies for its ``distance`` argument.
    """
    peaks = np.unique(np.asarray(peaks, dtype=np.int64))
    if len(peaks) < 2:
        return peaks
    # kept sorted, so only the two neighbours of an insertion point can conflict
    accepted = np.empty(0, dtype=np.int64)
    for idx in peaks[np.argsort(ecg[peaks], kind="stable")[::-1]]:
        pos = np.searchsorted(accepted, idx)
        if pos > 0 and idx - accepted[pos - 1] < distance:
            continue
        if pos < len(accepted) and accepted[pos] - idx < distance:
            continue
        accepted = np.insert(accepted, pos, idx)
    return accepted
