"""
Exception hierarchy for PyBootstraps.

All exceptions inherit from PyBootstrapsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Error messages are actionable with actual vs expected values
    - Exceptions raised by user-supplied statistic functions are never
      caught or wrapped; they reach the caller unchanged
"""


class PyBootstrapsError(Exception):
    """Base exception for all PyBootstraps errors."""
    pass


class ValidationError(PyBootstrapsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, including
    an empty dataset handed to the index generator.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a dataset is not one-dimensional.

    Attributes:
        expected_ndim: Number of dimensions that was required
        actual_shape: Shape of the offending array, if known
    """

    def __init__(
        self,
        message: str,
        expected_ndim: int | None = None,
        actual_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected_ndim = expected_ndim
        self.actual_shape = actual_shape
