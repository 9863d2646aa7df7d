"""Pydantic models for configuration."""

import pydantic
from pydantic import BaseModel, Field

from ..artifacts import ArtifactArgs
from ..exceptions import ConfigError
from ..filtering import BandpassArgs
from ..peak_detection import PeakDetectionArgs, PeakDetectorRegistry
from ..rate_schedule import RateScheduleArgs, count_cycles


class SignalArgs(BaseModel):
    """Settings for the sampled time grid.

    Attributes:
        fs: Sampling frequency in Hz.
        duration: Recording duration in seconds.
    """

    fs: float = 1000.0
    duration: float = 10.0


class Settings(BaseModel):
    """Complete settings for one synthesis and analysis run.

    All fields have defaults, so ``Settings()`` reproduces the reference run:
    10 s at 1000 Hz, rate ramp 60 to 100 bpm, 0.5-50 Hz order-2 bandpass, and
    global-threshold detection at 60 % of the maximum with a 0.5 s refractory
    period.

    Args:
        signal: Sampling frequency and duration
        rate: Heart-rate ramp
        artifacts: Baseline wander, powerline and noise settings
        bandpass: Bandpass filter settings
        peaks: Peak detection settings

    Examples:
        # Default settings
        settings = Settings()

        # Constant 60 bpm without artifacts
        settings = Settings(
            rate={"hr_min": 60, "hr_max": 60},
            artifacts={"bw_amp": 0, "noise_amp": 0},
        )

        # Windowed threshold instead of a global one
        settings = Settings()
        settings.peaks.method = "adaptive"
    """

    signal: SignalArgs = Field(default_factory=SignalArgs)
    rate: RateScheduleArgs = Field(default_factory=RateScheduleArgs)
    artifacts: ArtifactArgs = Field(default_factory=ArtifactArgs)
    bandpass: BandpassArgs = Field(default_factory=BandpassArgs)
    peaks: PeakDetectionArgs = Field(default_factory=PeakDetectionArgs)

    @pydantic.field_validator("peaks")
    @classmethod
    def normalize_method(cls, v: PeakDetectionArgs) -> PeakDetectionArgs:
        v.method = v.method.strip().lower()
        return v

    def check(self) -> None:
        """Validate the combination of all settings.

        Settings are plain mutable models, so this runs right before the
        pipeline starts rather than at construction time.

        Raises:
            ConfigError: On the first invalid value found.
        """
        fs, duration = self.signal.fs, self.signal.duration
        if fs <= 0:
            raise ConfigError(f"Sampling frequency must be positive, got {fs}")
        if duration <= 0:
            raise ConfigError(f"Duration must be positive, got {duration}")

        hr_min, hr_max = self.rate.hr_min, self.rate.hr_max
        if hr_min <= 0 or hr_max <= 0:
            raise ConfigError(f"Heart rates must be positive, got hr_min={hr_min}, hr_max={hr_max}")
        if hr_min > hr_max:
            raise ConfigError(f"hr_min ({hr_min}) must not exceed hr_max ({hr_max})")
        num_cycles = count_cycles(duration, hr_min)
        if num_cycles < 2:
            raise ConfigError(
                f"A duration of {duration} s at {hr_min} bpm holds {num_cycles} cycle(s); at least 2 are required"
            )

        for name in ("bw_amp", "noise_amp", "powerline_amp"):
            if getattr(self.artifacts, name) < 0:
                raise ConfigError(f"artifacts.{name} must be non-negative, got {getattr(self.artifacts, name)}")

        bp = self.bandpass
        if bp.order < 1:
            raise ConfigError(f"Filter order must be at least 1, got {bp.order}")
        if bp.low_cutoff <= 0 or bp.low_cutoff >= bp.high_cutoff:
            raise ConfigError(
                f"Cutoffs must satisfy 0 < low_cutoff < high_cutoff, got {bp.low_cutoff} Hz and {bp.high_cutoff} Hz"
            )
        if bp.high_cutoff >= fs / 2:
            raise ConfigError(
                f"Upper cutoff ({bp.high_cutoff} Hz) must be below the Nyquist frequency ({fs / 2} Hz)"
            )

        pk = self.peaks
        if not 0 < pk.threshold_fraction <= 1:
            raise ConfigError(f"threshold_fraction must be in (0, 1], got {pk.threshold_fraction}")
        if pk.min_peak_distance_s <= 0:
            raise ConfigError(f"min_peak_distance_s must be positive, got {pk.min_peak_distance_s}")
        if pk.window_s <= 0:
            raise ConfigError(f"window_s must be positive, got {pk.window_s}")
        if not PeakDetectorRegistry.get_instance().has_detector(pk.method):
            raise ConfigError(
                f"Unknown peak detection method '{pk.method}'. "
                f"Available: {PeakDetectorRegistry.get_instance().list_detectors()}"
            )
