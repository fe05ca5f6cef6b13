"""Computational backends for resampling."""

from pybootstraps.resampling.backends.cpu import CPUResampleBackend

__all__ = ["CPUResampleBackend"]
