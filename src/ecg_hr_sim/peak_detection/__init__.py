"""R-peak detection strategies and registry."""

from .base import BasePeakDetector, PeakDetectionArgs, PeakDetectorProtocol
from .neurokit import NeuroKitDetector
from .registry import PeakDetectorRegistry
from .threshold import AdaptiveThresholdDetector, GlobalThresholdDetector

__all__ = [
    "BasePeakDetector",
    "PeakDetectionArgs",
    "PeakDetectorProtocol",
    "GlobalThresholdDetector",
    "AdaptiveThresholdDetector",
    "NeuroKitDetector",
    "PeakDetectorRegistry",
]
