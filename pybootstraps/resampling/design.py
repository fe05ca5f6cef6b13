"""
Design class for resampling.

ResampleDesign encapsulates all inputs needed by a backend to run one
resampling strategy. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pybootstraps.core.exceptions import ValidationError
from pybootstraps.core.validation import (
    check_array,
    check_1d,
    check_callable,
    check_count,
    check_min_samples,
)
from pybootstraps.resampling._common import DEFAULT_SAMPLES, STRATEGIES
from pybootstraps.resampling.indexes import (
    IndexMethod,
    RandomSource,
    as_generator,
    check_index_method,
)
from pybootstraps.resampling.resampler import StreamingFunc, streaming_mean


@dataclass(frozen=True)
class ResampleDesign:
    """
    Frozen design for bootstrap resampling.

    Attributes:
        data: Private float64 copy of the dataset, shape (n,).
        samples: Number of resamples.
        strategy: "mean", "bootstrap" or "streaming".
        fn: Statistic for "bootstrap" (fn(resample) -> float), streaming
            function for "streaming" (fn(i, prev, val) -> float), None
            for "mean".
        rng: Generator the resamples are drawn from. Consumed by solving.
        seed: Seed the generator was built from, or None if the caller
            supplied the source.
        index_method: "modulo" or "rejection".
    """
    data: NDArray[np.float64]
    samples: int
    strategy: str
    fn: Callable | None
    rng: np.random.Generator
    seed: int | None
    index_method: str

    @property
    def n(self) -> int:
        return self.data.shape[0]

    @classmethod
    def _build(
        cls,
        data,
        samples: int,
        strategy: str,
        fn: Callable | None,
        source: RandomSource | None,
        seed: int | None,
        index_method: str,
    ) -> ResampleDesign:
        data_arr = check_array(data, 'data')
        check_1d(data_arr, 'data')
        check_min_samples(data_arr, 1, 'data')

        samples = check_count(samples, 'samples', minimum=1)

        if strategy not in STRATEGIES:
            raise ValidationError(
                f"strategy must be 'mean', 'bootstrap', or 'streaming', "
                f"got {strategy!r}"
            )
        if fn is not None:
            check_callable(fn, 'fn')
        check_index_method(index_method)

        if source is not None and seed is not None:
            raise ValidationError("pass either source or seed, not both")
        rng = as_generator(source) if source is not None else np.random.default_rng(seed)

        return cls(
            data=data_arr.copy(),
            samples=samples,
            strategy=strategy,
            fn=fn,
            rng=rng,
            seed=seed,
            index_method=index_method,
        )

    @classmethod
    def for_mean(
        cls,
        data,
        samples: int = DEFAULT_SAMPLES,
        *,
        source: RandomSource | None = None,
        seed: int | None = None,
        index_method: IndexMethod = 'modulo',
    ) -> ResampleDesign:
        """
        Create a design for bootstrapped means.

        Args:
            data: 1D array-like with at least one observation.
            samples: Number of resamples. Must be >= 1.
            source: Caller-seeded Generator or BitGenerator. Mutually
                exclusive with seed.
            seed: Seed for a fresh default generator.
            index_method: "modulo" (default) or "rejection".

        Returns:
            Validated ResampleDesign.

        Raises:
            ValidationError: If inputs are invalid.
        """
        return cls._build(data, samples, 'mean', None, source, seed, index_method)

    @classmethod
    def for_bootstrap(
        cls,
        data,
        statistic: Callable[[NDArray[np.float64]], float],
        samples: int = DEFAULT_SAMPLES,
        *,
        source: RandomSource | None = None,
        seed: int | None = None,
        index_method: IndexMethod = 'modulo',
    ) -> ResampleDesign:
        """
        Create a design applying ``statistic`` to materialized resamples.

        Args are as for for_mean(), plus:
            statistic: fn(resample) -> float. Required.
        """
        if statistic is None:
            raise ValidationError("statistic is required for bootstrap")
        return cls._build(
            data, samples, 'bootstrap', statistic, source, seed, index_method,
        )

    @classmethod
    def for_streaming(
        cls,
        data,
        fn: StreamingFunc = streaming_mean,
        samples: int = DEFAULT_SAMPLES,
        *,
        source: RandomSource | None = None,
        seed: int | None = None,
        index_method: IndexMethod = 'modulo',
    ) -> ResampleDesign:
        """
        Create a design folding a streaming function over resamples.

        Args are as for for_mean(), plus:
            fn: fn(i, prev, val) -> float. Defaults to streaming_mean.
        """
        if fn is None:
            raise ValidationError("fn is required for streaming bootstrap")
        return cls._build(
            data, samples, 'streaming', fn, source, seed, index_method,
        )
