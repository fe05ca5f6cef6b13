"""
The resampling engine.

Resampler owns a random source and evaluates a statistic over bootstrap
resamples with one of three strategies:

    mean()                 running-mean fold, no resample buffer
    bootstrap()            materialized resample, arbitrary statistic
    streaming_bootstrap()  online statistic folded value by value

Each strategy draws exactly one index set of size n per resample, in
resample order, so identically seeded Resamplers give identical output
for the same sequence of calls.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybootstraps.core.validation import (
    check_array,
    check_1d,
    check_count,
    check_min_samples,
)
from pybootstraps.resampling.indexes import (
    IndexMethod,
    RandomSource,
    as_generator,
    check_index_method,
    generate_indexes,
)


Statistic = Callable[[NDArray[np.floating[Any]]], float]

# fn(i, prev, val) -> new accumulated value. i is the 0-based position of
# val within the resample; prev is the value returned for position i - 1
# (0.0 at i == 0).
StreamingFunc = Callable[[int, float, float], float]


def streaming_mean(i: int, prev: float, val: float) -> float:
    """Incremental mean: ``(prev * i + val) / (i + 1)``."""
    return ((prev * i) + val) / (i + 1)


class Resampler:
    """
    Bootstrap resampler bound to a single random source.

    The source is consumed on every resample. A Resampler is not safe to
    share between threads: construct one per thread, or serialize calls
    with an external lock.

    Usage:
        rs = Resampler(np.random.default_rng(1))
        means = rs.mean(data, 10_000)
        medians = rs.bootstrap(data, 10_000, np.median)
        online = rs.streaming_bootstrap(data, 10_000, streaming_mean)
    """

    def __init__(
        self,
        source: RandomSource,
        *,
        index_method: IndexMethod = 'modulo',
    ):
        check_index_method(index_method)
        self._rng = as_generator(source)
        self._index_method = index_method

    @classmethod
    def from_seed(
        cls,
        seed: int | None,
        *,
        index_method: IndexMethod = 'modulo',
    ) -> Resampler:
        """Build a Resampler over a fresh PCG64 source seeded with ``seed``."""
        return cls(np.random.default_rng(seed), index_method=index_method)

    @property
    def index_method(self) -> str:
        return self._index_method

    @property
    def generator(self) -> np.random.Generator:
        """The Generator this Resampler draws from."""
        return self._rng

    def indexes(self, n: int) -> NDArray[np.intp]:
        """Draw one resample index set of size n."""
        return generate_indexes(self._rng, n, method=self._index_method)

    def mean(self, data: ArrayLike, samples: int) -> NDArray[np.float64]:
        """
        Bootstrapped means of ``data``.

        Each selected value is folded into a running mean as it is drawn;
        the resample itself is never built.

        Args:
            data: 1D numeric dataset, n >= 1.
            samples: Number of resamples.

        Returns:
            Array of ``samples`` means.
        """
        values, samples = _prepare(data, samples)
        n = len(values)
        means = np.empty(samples, dtype=np.float64)
        for b in range(samples):
            m = 0.0
            for j, idx in enumerate(self.indexes(n).tolist()):
                m = ((m * j) + values[idx]) / (j + 1)
            means[b] = m
        return means

    def bootstrap(
        self,
        data: ArrayLike,
        samples: int,
        statistic: Statistic,
    ) -> NDArray[np.float64]:
        """
        Apply ``statistic`` to resampled copies of ``data``.

        The resample passed to ``statistic`` is a fresh float64 array of
        length n holding the drawn values in draw order. Exceptions raised
        by ``statistic`` propagate unchanged.

        Args:
            data: 1D numeric dataset, n >= 1.
            samples: Number of resamples.
            statistic: fn(resample) -> float.

        Returns:
            Array of ``samples`` statistic values.
        """
        arr = _as_dataset(data)
        samples = check_count(samples, 'samples')
        n = len(arr)
        vals = np.empty(samples, dtype=np.float64)
        for b in range(samples):
            vals[b] = statistic(arr[self.indexes(n)])
        return vals

    def streaming_bootstrap(
        self,
        data: ArrayLike,
        samples: int,
        fn: StreamingFunc,
    ) -> NDArray[np.float64]:
        """
        Apply a streaming (online) function to resampled values of ``data``.

        For every resample the accumulator starts at 0.0 and is replaced
        by ``fn(j, acc, value)`` for each drawn value in draw order. This
        needs no resample buffer, but only statistics with an incremental
        form can be computed; ``fn`` is trusted to be one.

        Args:
            data: 1D numeric dataset, n >= 1.
            samples: Number of resamples.
            fn: fn(i, prev, val) -> float, e.g. ``streaming_mean``.

        Returns:
            Array of ``samples`` final accumulator values.
        """
        values, samples = _prepare(data, samples)
        n = len(values)
        vals = np.empty(samples, dtype=np.float64)
        for b in range(samples):
            acc = 0.0
            for j, idx in enumerate(self.indexes(n).tolist()):
                acc = fn(j, acc, values[idx])
            vals[b] = acc
        return vals

    def __repr__(self) -> str:
        return (
            f"Resampler(bit_generator={type(self._rng.bit_generator).__name__}, "
            f"index_method={self._index_method!r})"
        )


def _as_dataset(data: ArrayLike) -> NDArray[np.float64]:
    arr = check_array(data, 'data')
    check_1d(arr, 'data')
    check_min_samples(arr, 1, 'data')
    return arr


def _prepare(data: ArrayLike, samples: int) -> tuple[list[float], int]:
    """Dataset as a list of Python floats for the scalar folds."""
    arr = _as_dataset(data)
    return arr.tolist(), check_count(samples, 'samples')
