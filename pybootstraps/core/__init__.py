"""
Core infrastructure for PyBootstraps.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pybootstraps.core.protocols import Backend
from pybootstraps.core.result import Result
from pybootstraps.core.exceptions import (
    PyBootstrapsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyBootstrapsError",
    "ValidationError",
    "DimensionError",
]
