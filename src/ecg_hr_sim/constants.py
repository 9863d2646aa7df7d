"""Constants for ECG synthesis and heart-rate estimation."""

from typing import NamedTuple


class WaveComponent(NamedTuple):
    """Shape parameters of one Gaussian pulse of the cardiac cycle.

    ``center`` is a fraction of the nominal beat interval and is multiplied by
    it at synthesis time. ``width`` is used as given, on the local [0, 1] axis.
    """

    name: str
    amplitude: float
    width: float
    center: float


# Nominal beat-interval fraction used to place the wave centers
NOMINAL_BEAT_FRACTION = 30 / 72

# Order matters only for display; the cycle is the sum of all components
WAVE_COMPONENTS: tuple[WaveComponent, ...] = (
    WaveComponent("P", 0.25, 0.09, 0.16),
    WaveComponent("Q", -0.025, 0.066, 0.166),
    WaveComponent("QRS", 1.6, 0.11, 0.5),
    WaveComponent("S", -0.25, 0.066, 0.09),
    WaveComponent("T", 0.35, 0.142, 0.2),
    WaveComponent("U", 0.035, 0.0476, 0.433),
)

WAVE_NAMES = tuple(component.name for component in WAVE_COMPONENTS)

# Broad physiological band (bpm) used to sanity-check estimates
PHYSIOLOGICAL_BPM_RANGE = (20.0, 250.0)

SECONDS_PER_MINUTE = 60.0
