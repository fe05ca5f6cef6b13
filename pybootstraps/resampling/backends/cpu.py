"""
CPU backend for bootstrap resampling.

CPUResampleBackend: runs the mean, bootstrap or streaming strategy of a
ResampleDesign through a Resampler bound to the design's generator.
"""

from __future__ import annotations

import numpy as np

from pybootstraps.core.result import Result
from pybootstraps.core.compute.timing import Timer
from pybootstraps.resampling._common import ResampleParams
from pybootstraps.resampling.design import ResampleDesign
from pybootstraps.resampling.resampler import Resampler


class CPUResampleBackend:
    """
    CPU backend for bootstrap resampling.

    Single-threaded; resamples are drawn sequentially from the design's
    generator, so a design must not be solved from two threads at once.
    """

    @property
    def name(self) -> str:
        return 'cpu_resample'

    def solve(self, design: ResampleDesign) -> Result[ResampleParams]:
        """Run the design's strategy and return Result[ResampleParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        samples = design.samples
        strategy = design.strategy
        resampler = Resampler(design.rng, index_method=design.index_method)

        with timer.section('resampling'):
            if strategy == "mean":
                distribution = resampler.mean(data, samples)
            elif strategy == "bootstrap":
                distribution = resampler.bootstrap(data, samples, design.fn)
            elif strategy == "streaming":
                distribution = resampler.streaming_bootstrap(
                    data, samples, design.fn,
                )
            else:
                raise ValueError(f"Unknown strategy: {strategy!r}")

        warnings_list: list[str] = []
        if design.n == 1:
            warnings_list.append(
                "single observation: every resample equals the original data"
            )
        if not np.all(np.isfinite(data)):
            warnings_list.append(
                "data contains non-finite values; they propagate into "
                "the resamples that draw them"
            )
        n_nonfinite = int(np.sum(~np.isfinite(distribution)))
        if n_nonfinite:
            warnings_list.append(
                f"{n_nonfinite} of {samples} resample values are non-finite"
            )

        timer.stop()

        params = ResampleParams(
            distribution=distribution,
            samples=samples,
            n=design.n,
            strategy=strategy,
            index_method=design.index_method,
        )

        return Result(
            params=params,
            info={
                'strategy': strategy,
                'n': design.n,
                'samples': samples,
                'index_method': design.index_method,
                'bit_generator': type(resampler.generator.bit_generator).__name__,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
