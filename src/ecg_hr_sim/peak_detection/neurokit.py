"""R-peak detection delegated to neurokit2."""

import neurokit2 as nk
import numpy as np

from .._logging import logger
from ..types import PeakIndices, Signal
from .base import BasePeakDetector, PeakDetectionArgs, empty_peaks, enforce_refractory, has_positive_peak


class NeuroKitDetector(BasePeakDetector):
    """Detect R-peaks with one of the ``neurokit2.ecg_peaks`` algorithms.

    The refractory distance is enforced on the result so that this detector
    obeys the same spacing guarantee as the threshold detectors.
    ``threshold_fraction`` is not used by neurokit2 algorithms.

    Args:
        threshold_fraction: Accepted for interface compatibility.
        min_peak_distance_s: Refractory period in seconds.
        method: Name of the neurokit2 peak detection method.
    """

    name = "neurokit"

    def __init__(self, threshold_fraction: float = 0.6, min_peak_distance_s: float = 0.5, method: str = "neurokit"):
        super().__init__(threshold_fraction=threshold_fraction, min_peak_distance_s=min_peak_distance_s)
        self.method = method

    @classmethod
    def from_args(cls, args: PeakDetectionArgs) -> "NeuroKitDetector":
        return cls(
            threshold_fraction=args.threshold_fraction,
            min_peak_distance_s=args.min_peak_distance_s,
            method=args.nk_method,
        )

    def detect(self, ecg: Signal, fs: float) -> PeakIndices:
        if not has_positive_peak(ecg) or np.all(np.isclose(ecg, ecg[0])):
            return empty_peaks()
        _, peaks_info = nk.ecg_peaks(ecg, sampling_rate=fs, method=self.method)
        r_peaks = peaks_info["ECG_R_Peaks"]
        if r_peaks is None or len(r_peaks) == 0:
            logger.debug(f"No R-peaks detected for method '{self.method}'.")
            return empty_peaks()
        peaks = enforce_refractory(r_peaks, ecg, self.min_distance_samples(fs))
        logger.debug(f"neurokit2 '{self.method}' found {len(r_peaks)} peaks, {len(peaks)} after refractory check")
        return peaks
