"""ecg-hr-sim: synthetic ECG generation and heart-rate estimation.

This package synthesizes a single-lead ECG whose heart rate ramps over time,
corrupts it with baseline wander and noise, removes both with a causal
Butterworth bandpass filter, detects R-peaks and converts the beat spacing into
an instantaneous heart-rate series.
"""

from ._logging import logger, set_log_file, set_log_level
from .artifacts import ArtifactArgs, inject_artifacts
from .assembler import AssembledSignal, assemble_signal
from .config import ConfigLoader, Settings, SignalArgs
from .core import HeartRatePipeline, PipelineResults, simulate_heart_rate
from .exceptions import ConfigError
from .filtering import BandpassArgs, bandpass_filter, design_bandpass
from .heart_rate import HeartRateEstimate, InsufficientDataResult, estimate_heart_rate
from .peak_detection import (
    AdaptiveThresholdDetector,
    GlobalThresholdDetector,
    NeuroKitDetector,
    PeakDetectionArgs,
    PeakDetectorProtocol,
    PeakDetectorRegistry,
)
from .rate_schedule import RateSchedule, RateScheduleArgs, make_rate_schedule
from .summary import format_summary, print_summary
from .waveform import cycle_length, synthesize_components, synthesize_cycle

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "logger",
    "set_log_level",
    "set_log_file",
    "ConfigError",
    "Settings",
    "SignalArgs",
    "RateScheduleArgs",
    "ArtifactArgs",
    "BandpassArgs",
    "PeakDetectionArgs",
    "ConfigLoader",
    "RateSchedule",
    "make_rate_schedule",
    "cycle_length",
    "synthesize_cycle",
    "synthesize_components",
    "AssembledSignal",
    "assemble_signal",
    "inject_artifacts",
    "design_bandpass",
    "bandpass_filter",
    "PeakDetectorProtocol",
    "PeakDetectorRegistry",
    "GlobalThresholdDetector",
    "AdaptiveThresholdDetector",
    "NeuroKitDetector",
    "HeartRateEstimate",
    "InsufficientDataResult",
    "estimate_heart_rate",
    "HeartRatePipeline",
    "PipelineResults",
    "simulate_heart_rate",
    "format_summary",
    "print_summary",
]


def __dir__():
    return __all__
