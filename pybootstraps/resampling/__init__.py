"""
PyBootstraps resampling.

Nonparametric bootstrap over a 1D dataset: resamples of size n drawn with
replacement, a statistic evaluated on each.

Usage:
    from pybootstraps.resampling import Resampler, streaming_mean

    rs = Resampler(np.random.default_rng(1))
    means = rs.mean(data, 10_000)
    medians = rs.bootstrap(data, 10_000, np.median)
    online = rs.streaming_bootstrap(data, 10_000, streaming_mean)

    # One-shot solvers with summary output
    from pybootstraps.resampling import bootstrap_mean
    result = bootstrap_mean(data, 999, seed=42)
    print(result.summary())
"""

from pybootstraps.resampling.indexes import generate_indexes
from pybootstraps.resampling.resampler import (
    Resampler,
    Statistic,
    StreamingFunc,
    streaming_mean,
)
from pybootstraps.resampling.solvers import (
    bootstrap,
    bootstrap_mean,
    streaming_bootstrap,
)

__all__ = [
    "Resampler",
    "Statistic",
    "StreamingFunc",
    "streaming_mean",
    "generate_indexes",
    "bootstrap",
    "bootstrap_mean",
    "streaming_bootstrap",
]
