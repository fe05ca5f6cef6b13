"""
Core protocols for PyBootstraps.

These define structural interfaces that domain-specific implementations
must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so that backends need no common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pybootstraps.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result.

    Backends are stateless: all configuration, including the random
    source, is carried by the design. This makes them easy to test and
    swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_resample'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            ValidationError: If the design is invalid for this backend
        """
        ...
