"""Amplitude-threshold R-peak detectors based on ``scipy.signal.find_peaks``."""

import numpy as np
from scipy import signal

from .._logging import logger
from ..exceptions import ConfigError
from ..types import PeakIndices, Signal
from .base import BasePeakDetector, PeakDetectionArgs, empty_peaks, has_positive_peak


class GlobalThresholdDetector(BasePeakDetector):
    """Detect local maxima above one threshold computed over the whole record.

    The threshold is ``threshold_fraction * max(ecg)``. A single artifact that
    dominates the global maximum, or amplitude drift over a long recording,
    can make this miss beats; see ``AdaptiveThresholdDetector``.

    Examples:
        detector = GlobalThresholdDetector(threshold_fraction=0.6, min_peak_distance_s=0.5)
        peaks = detector.detect(filtered, fs=1000)
    """

    name = "global"

    def detect(self, ecg: Signal, fs: float) -> PeakIndices:
        if not has_positive_peak(ecg):
            return empty_peaks()
        height = self.threshold_fraction * np.max(ecg)
        distance = self.min_distance_samples(fs)
        peaks, _ = signal.find_peaks(ecg, height=height, distance=distance)
        logger.debug(f"Global threshold {height:.3f}, distance {distance} samples: {len(peaks)} peaks")
        return peaks.astype(np.int64)


class AdaptiveThresholdDetector(BasePeakDetector):
    """Detect local maxima above a threshold that follows the local amplitude.

    The record is split into consecutive windows of ``window_s`` seconds and
    each sample's threshold is ``threshold_fraction`` times the maximum of its
    window. The window maximum is floored at ``global_floor`` times the global
    maximum so that windows without a beat do not turn noise into peaks.

    Args:
        threshold_fraction: Fraction of the window maximum a peak must reach.
        min_peak_distance_s: Refractory period in seconds.
        window_s: Window length in seconds.
        global_floor: Lower bound for the window maximum, as a fraction of the
            global maximum.
    """

    name = "adaptive"

    def __init__(
        self,
        threshold_fraction: float = 0.6,
        min_peak_distance_s: float = 0.5,
        window_s: float = 2.0,
        global_floor: float = 0.25,
    ):
        super().__init__(threshold_fraction=threshold_fraction, min_peak_distance_s=min_peak_distance_s)
        if window_s <= 0:
            raise ConfigError(f"window_s must be positive, got {window_s}")
        if not 0 <= global_floor <= 1:
            raise ConfigError(f"global_floor must be in [0, 1], got {global_floor}")
        self.window_s = window_s
        self.global_floor = global_floor

    @classmethod
    def from_args(cls, args: PeakDetectionArgs) -> "AdaptiveThresholdDetector":
        return cls(
            threshold_fraction=args.threshold_fraction,
            min_peak_distance_s=args.min_peak_distance_s,
            window_s=args.window_s,
        )

    def thresholds(self, ecg: Signal, fs: float) -> np.ndarray:
        """Per-sample detection threshold."""
        window = max(1, int(round(self.window_s * fs)))
        floor = self.global_floor * np.max(ecg)
        height = np.empty(len(ecg))
        for start in range(0, len(ecg), window):
            segment = ecg[start : start + window]
            height[start : start + window] = self.threshold_fraction * max(np.max(segment), floor)
        return height

    def detect(self, ecg: Signal, fs: float) -> PeakIndices:
        if not has_positive_peak(ecg):
            return empty_peaks()
        distance = self.min_distance_samples(fs)
        peaks, _ = signal.find_peaks(ecg, height=self.thresholds(ecg, fs), distance=distance)
        logger.debug(f"Adaptive threshold over {self.window_s} s windows: {len(peaks)} peaks")
        return peaks.astype(np.int64)
