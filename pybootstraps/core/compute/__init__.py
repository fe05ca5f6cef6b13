"""
Shared compute infrastructure for PyBootstraps.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
"""

from pybootstraps.core.compute.timing import Timer

__all__ = [
    "Timer",
]
