"""Target heart-rate schedule over the duration of a recording."""

import math
from dataclasses import dataclass

import numpy as np
import pydantic

from ._logging import logger
from .constants import SECONDS_PER_MINUTE
from .exceptions import ConfigError


class RateScheduleArgs(pydantic.BaseModel):
    """Settings for the target heart-rate ramp.

    Attributes:
        hr_min: Rate at the start of the recording in bpm.
        hr_max: Rate at the end of the recording in bpm. Equal to ``hr_min``
            for a constant rate.
    """

    hr_min: float = 60.0
    hr_max: float = 100.0


@dataclass(frozen=True)
class RateSchedule:
    """Control points of the target heart rate.

    Attributes:
        times: Control-point times in seconds, linearly spaced over the duration.
        rates: Target rate in bpm at each control point.
    """

    times: np.ndarray
    rates: np.ndarray

    @property
    def num_cycles(self) -> int:
        """Number of cardiac cycles to synthesize (one per control point)."""
        return len(self.rates)

    def __len__(self) -> int:
        return self.num_cycles


def count_cycles(duration: float, hr_min: float) -> int:
    """Return ``floor(duration * hr_min / 60)``."""
    return math.floor(duration * hr_min / SECONDS_PER_MINUTE)


def make_rate_schedule(hr_min: float, hr_max: float, duration: float) -> RateSchedule:
    """Build a linearly increasing heart-rate schedule.

    Args:
        hr_min: Starting rate in bpm. Must be positive.
        hr_max: Final rate in bpm. Must not be below ``hr_min``.
        duration: Recording duration in seconds. Must be positive.

    Returns:
        RateSchedule with ``floor(duration * hr_min / 60)`` control points.

    Raises:
        ConfigError: If the rates or duration are invalid, or if fewer than two
            cycles fit into the duration.
    """
    if duration <= 0:
        raise ConfigError(f"Duration must be positive, got {duration}")
    if hr_min <= 0:
        raise ConfigError(f"hr_min must be positive, got {hr_min}")
    if hr_min > hr_max:
        raise ConfigError(f"hr_min ({hr_min}) must not exceed hr_max ({hr_max})")

    num_cycles = count_cycles(duration, hr_min)
    if num_cycles < 2:
        raise ConfigError(
            f"A duration of {duration} s at {hr_min} bpm holds {num_cycles} cycle(s); at least 2 are required. "
            "Increase the duration or hr_min."
        )

    times = np.linspace(0.0, duration, num_cycles)
    rates = np.linspace(hr_min, hr_max, num_cycles)
    logger.debug(f"Rate schedule: {num_cycles} cycles from {hr_min} to {hr_max} bpm over {duration} s")
    return RateSchedule(times=times, rates=rates)
