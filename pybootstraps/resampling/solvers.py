"""
Solver dispatch for resampling.

Provides bootstrap_mean(), bootstrap() and streaming_bootstrap(), each
returning a ResampleSolution. For repeated calls against one random
stream use Resampler directly.
"""

from __future__ import annotations

import warnings
from typing import Callable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybootstraps.core.exceptions import ValidationError
from pybootstraps.resampling._common import DEFAULT_SAMPLES
from pybootstraps.resampling.backends.cpu import CPUResampleBackend
from pybootstraps.resampling.design import ResampleDesign
from pybootstraps.resampling.indexes import IndexMethod, RandomSource
from pybootstraps.resampling.resampler import StreamingFunc, streaming_mean
from pybootstraps.resampling.solution import ResampleSolution


BackendChoice = Literal['cpu']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUResampleBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def _solve(design: ResampleDesign, backend: BackendChoice) -> ResampleSolution:
    be = _get_backend(backend)
    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)

    return ResampleSolution(_result=result, _design=design)


def bootstrap_mean(
    data: ArrayLike,
    samples: int = DEFAULT_SAMPLES,
    *,
    source: RandomSource | None = None,
    seed: int | None = None,
    index_method: IndexMethod = 'modulo',
    backend: BackendChoice = 'cpu',
) -> ResampleSolution:
    """
    Bootstrapped distribution of the mean.

    Parameters
    ----------
    data : array-like
        1D numeric dataset with at least one observation.
    samples : int
        Number of resamples. Default 999.
    source : Generator or BitGenerator, optional
        Caller-seeded random source. Mutually exclusive with seed.
    seed : int, optional
        Seed for a fresh default generator.
    index_method : str
        'modulo' (default) or 'rejection'.
    backend : str
        'cpu'.

    Returns
    -------
    ResampleSolution with ``samples`` bootstrapped means.
    """
    design = ResampleDesign.for_mean(
        data, samples, source=source, seed=seed, index_method=index_method,
    )
    return _solve(design, backend)


def bootstrap(
    data: ArrayLike,
    statistic: Callable[[NDArray[np.float64]], float],
    samples: int = DEFAULT_SAMPLES,
    *,
    source: RandomSource | None = None,
    seed: int | None = None,
    index_method: IndexMethod = 'modulo',
    backend: BackendChoice = 'cpu',
) -> ResampleSolution:
    """
    Bootstrapped distribution of an arbitrary statistic.

    Parameters
    ----------
    data : array-like
        1D numeric dataset with at least one observation.
    statistic : callable
        fn(resample) -> float, called once per resample on a fresh
        array holding the drawn values in draw order. Exceptions it
        raises propagate unchanged.
    samples : int
        Number of resamples. Default 999.
    source, seed, index_method, backend
        As for bootstrap_mean().

    Returns
    -------
    ResampleSolution with ``samples`` statistic values.
    """
    design = ResampleDesign.for_bootstrap(
        data, statistic, samples,
        source=source, seed=seed, index_method=index_method,
    )
    return _solve(design, backend)


def streaming_bootstrap(
    data: ArrayLike,
    fn: StreamingFunc = streaming_mean,
    samples: int = DEFAULT_SAMPLES,
    *,
    source: RandomSource | None = None,
    seed: int | None = None,
    index_method: IndexMethod = 'modulo',
    backend: BackendChoice = 'cpu',
) -> ResampleSolution:
    """
    Bootstrapped distribution of a streaming (online) statistic.

    Parameters
    ----------
    data : array-like
        1D numeric dataset with at least one observation.
    fn : callable
        fn(i, prev, val) -> float. Default streaming_mean.
    samples : int
        Number of resamples. Default 999.
    source, seed, index_method, backend
        As for bootstrap_mean().

    Returns
    -------
    ResampleSolution with ``samples`` final accumulator values.
    """
    design = ResampleDesign.for_streaming(
        data, fn, samples,
        source=source, seed=seed, index_method=index_method,
    )
    return _solve(design, backend)
