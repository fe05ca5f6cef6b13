"""
Common data structures for resampling.

ResampleParams is the parameter payload wrapped by Result[P] and
exposed through ResampleSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np
from numpy.typing import NDArray


Strategy = Literal['mean', 'bootstrap', 'streaming']
STRATEGIES: tuple[str, ...] = ('mean', 'bootstrap', 'streaming')

DEFAULT_SAMPLES = 999


@dataclass(frozen=True)
class ResampleParams:
    """
    Parameter payload for resampling results.

    - distribution: one statistic value per resample, in resample order
    - samples: number of resamples (== len(distribution))
    - n: dataset size, also the size of every resample
    - strategy: "mean" | "bootstrap" | "streaming"
    - index_method: "modulo" | "rejection"
    """
    distribution: NDArray[np.float64]          # shape (samples,)
    samples: int
    n: int
    strategy: Strategy
    index_method: str
