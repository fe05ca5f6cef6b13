"""
Generic result container for all PyBootstraps computations.

The Result class provides a standardized envelope that resampling results
use. This enables shared tooling for timing, reproducibility and
diagnostics while letting each strategy define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (strategy, n, index method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded on every result."""
    from pybootstraps import __version__

    return {
        'pybootstraps_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for resampling computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (the result distribution, etc.)
        info: Structured metadata (strategy, n, index method)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=ResampleParams(distribution=d, samples=999, n=50,
        ...                           strategy='mean', index_method='modulo'),
        ...     info={'strategy': 'mean', 'n': 50},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_resample'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
