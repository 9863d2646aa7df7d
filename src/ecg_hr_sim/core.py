"""Main synthesis and analysis orchestrator."""

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from ._logging import logger
from .artifacts import inject_artifacts
from .assembler import assemble_signal
from .config import ConfigLoader, Settings
from .filtering import bandpass_filter
from .heart_rate import HeartRateEstimate, estimate_heart_rate
from .peak_detection import PeakDetectorProtocol, PeakDetectorRegistry
from .rate_schedule import RateSchedule, make_rate_schedule
from .types import PeakIndices, Signal


@dataclass(frozen=True)
class PipelineResults:
    """Outputs of one run, handed to summary and plotting collaborators.

    Attributes:
        time: Time grid in seconds, spacing ``1 / fs``.
        clean: Synthesized ECG before artifacts.
        noisy: ECG with baseline wander and noise.
        filtered: Bandpass-filtered noisy ECG.
        peaks: Detected R-peak indices into ``filtered``.
        bpm: Heart rate between consecutive peaks.
        fs: Sampling frequency in Hz.
        schedule: Target rate schedule the ECG was synthesized from.
        estimate: Heart-rate estimate, an InsufficientDataResult when fewer
            than two peaks were found.
    """

    time: np.ndarray
    clean: Signal
    noisy: Signal
    filtered: Signal
    peaks: PeakIndices
    bpm: np.ndarray
    fs: float
    schedule: RateSchedule
    estimate: HeartRateEstimate

    @property
    def duration(self) -> float:
        """Signal duration in seconds."""
        return len(self.time) / self.fs

    @property
    def mean_bpm(self) -> float | None:
        return self.estimate.mean_bpm


class HeartRatePipeline:
    """Synthesize a noisy ECG and recover its heart rate.

    Stages run strictly in order, each on the complete output of the previous:
    rate schedule, signal assembly, artifact injection, bandpass filtering,
    peak detection and rate estimation.

    Args:
        settings: Complete run settings. If None, uses default settings.
        detector: Peak detector to use instead of the one named by
            ``settings.peaks.method``.

    Examples:
        # Reference run with a fixed noise seed
        results = HeartRatePipeline().run(seed=0)

        # Constant rate, no artifacts
        settings = Settings(rate={"hr_min": 60, "hr_max": 60}, artifacts={"bw_amp": 0, "noise_amp": 0})
        results = HeartRatePipeline(settings).run()
    """

    def __init__(self, settings: Settings | None = None, detector: PeakDetectorProtocol | None = None):
        self.settings = settings or Settings()
        self.settings.check()
        self.detector = detector or PeakDetectorRegistry.get_instance().create(self.settings.peaks)

    @property
    def fs(self) -> float:
        return self.settings.signal.fs

    def run(self, seed: int | np.random.Generator | None = None) -> PipelineResults:
        """Run every stage once.

        Args:
            seed: Random source for the noise, as a seed or a Generator. If
                None, ``settings.artifacts.seed`` is used.

        Returns:
            PipelineResults with all intermediate signals.
        """
        s = self.settings
        logger.info(
            f"Synthesizing {s.signal.duration} s at {self.fs} Hz, "
            f"heart rate {s.rate.hr_min} -> {s.rate.hr_max} bpm"
        )
        schedule = make_rate_schedule(s.rate.hr_min, s.rate.hr_max, s.signal.duration)
        assembled = assemble_signal(schedule, self.fs)
        logger.info(f"Assembled {schedule.num_cycles} cycles into {assembled.n_samples} samples")

        noisy = inject_artifacts(assembled.ecg, assembled.time, s.artifacts, rng=seed)
        filtered = bandpass_filter(noisy, self.fs, s.bandpass)
        logger.info(f"Applied band-pass filter: {s.bandpass.low_cutoff} Hz - {s.bandpass.high_cutoff} Hz")

        peaks = self.detector.detect(filtered, self.fs)
        logger.info(f"Detected {len(peaks)} R-peaks with the '{self.detector.name}' detector")
        estimate = estimate_heart_rate(peaks, self.fs)
        if estimate.is_sufficient:
            logger.info(f"Mean heart rate: {estimate.mean_bpm:.1f} bpm over {len(estimate.bpm)} intervals")

        return PipelineResults(
            time=assembled.time,
            clean=assembled.ecg,
            noisy=noisy,
            filtered=filtered,
            peaks=estimate.peaks,
            bpm=estimate.bpm,
            fs=self.fs,
            schedule=schedule,
            estimate=estimate,
        )


def simulate_heart_rate(
    settings: Settings | str | Path | None = None,
    seed: int | np.random.Generator | None = None,
) -> PipelineResults:
    """Synthesize, corrupt, filter and analyse one ECG.

    This is the main high-level API.

    Args:
        settings: Run configuration. Can be:
            - Settings object: Use directly
            - str or Path: Load from JSON/TOML config file
            - None: Use default settings
        seed: Random source for the noise.

    Returns:
        PipelineResults of the run.

    Raises:
        ConfigError: If the settings make the pipeline undefined.
        TypeError: If settings has an unsupported type.

    Examples:
        results = ecg_hr_sim.simulate_heart_rate(seed=42)
        results = ecg_hr_sim.simulate_heart_rate("run.toml")
    """
    if settings is None:
        settings_obj = Settings()
    elif isinstance(settings, (str, Path)):
        settings_obj = ConfigLoader.from_file(settings)
    elif isinstance(settings, Settings):
        settings_obj = settings
    else:
        raise TypeError(f"settings must be a Settings object, str, Path, or None, got {type(settings).__name__}")

    return HeartRatePipeline(settings_obj).run(seed=seed)
