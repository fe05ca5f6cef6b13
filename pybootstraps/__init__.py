"""
PyBootstraps: bootstrap resampling statistics for Python.

Submodules:
    resampling: Resampler engine and one-shot bootstrap solvers
    core: Exceptions, result envelope, validation, timing
"""

__version__ = "0.1.0"

from pybootstraps import resampling
from pybootstraps.resampling import (
    Resampler,
    streaming_mean,
    bootstrap,
    bootstrap_mean,
    streaming_bootstrap,
)

__all__ = [
    "__version__",
    "resampling",
    "Resampler",
    "streaming_mean",
    "bootstrap",
    "bootstrap_mean",
    "streaming_bootstrap",
]
