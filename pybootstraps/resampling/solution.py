"""
Solution wrapper for resampling results.

ResampleSolution wraps Result[ResampleParams] and provides convenient
accessors and a printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pybootstraps.core.result import Result
from pybootstraps.resampling._common import ResampleParams

if TYPE_CHECKING:
    from pybootstraps.resampling.design import ResampleDesign


_STRATEGY_TITLES = {
    "mean": "BOOTSTRAPPED MEAN",
    "bootstrap": "ORDINARY NONPARAMETRIC BOOTSTRAP",
    "streaming": "STREAMING NONPARAMETRIC BOOTSTRAP",
}


@dataclass
class ResampleSolution:
    """
    User-facing resampling results.

    The distribution holds one statistic value per resample. mean() and
    std() describe that distribution; no interval or bias correction is
    derived from it.
    """
    _result: Result[ResampleParams]
    _design: 'ResampleDesign'

    # --- Core fields ---

    @property
    def distribution(self) -> NDArray[np.float64]:
        """Statistic value per resample, shape (samples,)."""
        return self._result.params.distribution

    @property
    def samples(self) -> int:
        """Number of resamples."""
        return self._result.params.samples

    @property
    def n(self) -> int:
        """Size of the dataset and of every resample."""
        return self._result.params.n

    @property
    def strategy(self) -> str:
        return self._result.params.strategy

    @property
    def index_method(self) -> str:
        return self._result.params.index_method

    def mean(self) -> float:
        """Mean of the distribution."""
        return float(np.mean(self.distribution))

    def std(self) -> float:
        """Sample standard deviation (ddof=1) of the distribution."""
        if self.samples < 2:
            return float('nan')
        return float(np.std(self.distribution, ddof=1))

    # --- Metadata ---

    @property
    def data(self) -> NDArray[np.float64]:
        """Original data, as a read-only view of the design's copy."""
        view = self._design.data.view()
        view.flags.writeable = False
        return view

    @property
    def seed(self) -> int | None:
        """Random seed used, or None if the caller supplied the source."""
        return self._design.seed

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    # --- Display ---

    def summary(self) -> str:
        """
        Printable summary of the distribution.

        Produces:
            BOOTSTRAPPED MEAN

            Resamples: 999    Observations: 50    Index method: modulo

            Distribution :
                  mean      std. dev          min          max
               5.12345       0.56789      3.01234      7.23456
        """
        lines = [f"\n{_STRATEGY_TITLES.get(self.strategy, 'BOOTSTRAP')}\n"]
        lines.append(
            f"Resamples: {self.samples}    Observations: {self.n}    "
            f"Index method: {self.index_method}"
        )
        lines.append("")
        lines.append("Distribution :")
        lines.append(
            f"{'mean':>14s} {'std. dev':>14s} {'min':>14s} {'max':>14s}"
        )
        d = self.distribution
        lines.append(
            f"{self.mean():14.5f} {self.std():14.5f} "
            f"{np.min(d):14.5f} {np.max(d):14.5f}"
        )

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ResampleSolution(samples={self.samples}, n={self.n}, "
            f"strategy={self.strategy!r}, backend={self.backend_name!r})"
        )
