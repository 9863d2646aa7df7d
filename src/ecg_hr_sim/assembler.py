"""Assembly of successive cardiac cycles into one continuous ECG."""

from dataclasses import dataclass

import numpy as np

from ._logging import logger
from .constants import NOMINAL_BEAT_FRACTION
from .exceptions import ConfigError
from .rate_schedule import RateSchedule
from .types import Signal
from .waveform import cycle_length, synthesize_cycle


@dataclass(frozen=True)
class AssembledSignal:
    """Clean composite ECG and its time grid.

    Attributes:
        time: Sample times in seconds, spacing exactly ``1 / fs``.
        ecg: Clean synthesized signal, same length as ``time``.
        fs: Sampling frequency in Hz.
        cycle_lengths: Number of samples of each synthesized cycle.
    """

    time: np.ndarray
    ecg: Signal
    fs: float
    cycle_lengths: np.ndarray

    @property
    def n_samples(self) -> int:
        return len(self.ecg)

    @property
    def duration(self) -> float:
        """Signal duration in seconds."""
        return self.n_samples / self.fs


def time_grid(n_samples: int, fs: float) -> np.ndarray:
    """Return ``n_samples`` timestamps spaced exactly ``1 / fs`` apart, starting at 0."""
    return np.arange(n_samples) / fs


def _trim_trailing_zeros(ecg: np.ndarray) -> np.ndarray:
    nonzero = np.flatnonzero(ecg)
    if nonzero.size == 0:
        return ecg[:0]
    return ecg[: nonzero[-1] + 1]


def assemble_signal(
    schedule: RateSchedule,
    fs: float,
    li: float = NOMINAL_BEAT_FRACTION,
    max_samples: int | None = None,
) -> AssembledSignal:
    """Concatenate one synthesized cycle per control point of the schedule.

    The write cursor (sum of cycle lengths) is the authoritative signal length.
    Only trailing samples that are exactly zero are dropped, so the last sample
    of the result is non-zero.

    Args:
        schedule: Target heart-rate schedule.
        fs: Sampling frequency in Hz.
        li: Nominal beat-interval fraction passed to the cycle synthesizer.
        max_samples: Optional upper bound on the signal length. If None, the
            signal grows as needed.

    Returns:
        AssembledSignal with the clean ECG and its time grid.

    Raises:
        ConfigError: If ``fs`` is not positive.
        OverflowError: If ``max_samples`` is given and the cycles do not fit.
    """
    if fs <= 0:
        raise ConfigError(f"Sampling frequency must be positive, got {fs}")

    cycles: list[np.ndarray] = []
    cursor = 0
    for rate in schedule.rates:
        cycle_len = cycle_length(rate, fs)
        if max_samples is not None and cursor + cycle_len > max_samples:
            raise OverflowError(
                f"Cycle of {cycle_len} samples at {rate:.1f} bpm does not fit: "
                f"{cursor} of {max_samples} samples already written"
            )
        cycles.append(synthesize_cycle(cycle_len, li=li))
        cursor += cycle_len

    ecg = np.concatenate(cycles)[:cursor]
    ecg = _trim_trailing_zeros(ecg)
    if len(ecg) < cursor:
        logger.debug(f"Trimmed {cursor - len(ecg)} trailing zero samples")

    cycle_lengths = np.array([len(c) for c in cycles], dtype=int)
    logger.debug(f"Assembled {len(cycles)} cycles into {len(ecg)} samples ({len(ecg) / fs:.2f} s)")
    return AssembledSignal(time=time_grid(len(ecg), fs), ecg=ecg, fs=fs, cycle_lengths=cycle_lengths)
