"""Tests for concatenating cycles into one signal."""

import numpy as np
import pytest

from ecg_hr_sim import ConfigError, assemble_signal, cycle_length, make_rate_schedule, synthesize_cycle
from ecg_hr_sim.assembler import _trim_trailing_zeros, time_grid


class TestAssembleSignal:
    def test_constant_rate_length(self):
        schedule = make_rate_schedule(hr_min=60, hr_max=60, duration=10)
        assembled = assemble_signal(schedule, fs=1000)

        assert assembled.n_samples == 10_000
        assert assembled.duration == pytest.approx(10.0)
        np.testing.assert_array_equal(assembled.cycle_lengths, np.full(10, 1000))

    def test_cycles_are_concatenated_in_order(self):
        schedule = make_rate_schedule(hr_min=60, hr_max=100, duration=10)
        assembled = assemble_signal(schedule, fs=1000)

        expected = [cycle_length(rate, 1000) for rate in schedule.rates]
        np.testing.assert_array_equal(assembled.cycle_lengths, expected)
        assert assembled.n_samples == sum(expected)
        first, second = expected[0], expected[1]
        np.testing.assert_array_equal(assembled.ecg[:first], synthesize_cycle(first))
        np.testing.assert_array_equal(assembled.ecg[first : first + second], synthesize_cycle(second))

    def test_time_grid(self):
        schedule = make_rate_schedule(hr_min=60, hr_max=100, duration=10)
        assembled = assemble_signal(schedule, fs=500)

        assert len(assembled.time) == len(assembled.ecg)
        assert assembled.time[0] == 0
        np.testing.assert_allclose(np.diff(assembled.time), 1 / 500, rtol=0, atol=1e-12)

    def test_last_sample_non_zero(self):
        schedule = make_rate_schedule(hr_min=60, hr_max=100, duration=10)
        assert assemble_signal(schedule, fs=1000).ecg[-1] != 0

    def test_fits_in_duration(self):
        """An increasing ramp never needs more than fs * duration samples."""
        schedule = make_rate_schedule(hr_min=60, hr_max=100, duration=10)
        assembled = assemble_signal(schedule, fs=1000, max_samples=10_000)
        assert assembled.n_samples <= 10_000

    def test_overflow_with_cap(self):
        schedule = make_rate_schedule(hr_min=60, hr_max=60, duration=10)
        with pytest.raises(OverflowError):
            assemble_signal(schedule, fs=1000, max_samples=5_000)

    def test_invalid_fs(self):
        schedule = make_rate_schedule(hr_min=60, hr_max=60, duration=10)
        with pytest.raises(ConfigError):
            assemble_signal(schedule, fs=0)


def test_trim_trailing_zeros():
    np.testing.assert_array_equal(_trim_trailing_zeros(np.array([1.0, 0.0, 2.0, 0.0, 0.0])), [1.0, 0.0, 2.0])
    assert len(_trim_trailing_zeros(np.zeros(4))) == 0


def test_time_grid_spacing():
    t = time_grid(4, fs=4)
    np.testing.assert_array_equal(t, [0.0, 0.25, 0.5, 0.75])
