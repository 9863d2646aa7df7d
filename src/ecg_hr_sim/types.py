"""Type definitions for signal data structures."""

from typing import Annotated, TypeAlias

import numpy as np
import numpy.typing as npt

# Single-lead signal sampled on a uniform grid, shape (n_timepoints,)
Signal: TypeAlias = Annotated[
    npt.NDArray[np.floating],
    "Shape: (n_timepoints,)",
]

# Strictly increasing sample indices, shape (n_peaks,)
PeakIndices: TypeAlias = Annotated[
    npt.NDArray[np.integer],
    "Shape: (n_peaks,)",
]
