"""
Resample index generation.

Every resampling strategy draws its indexes here: ``size`` uniform 64-bit
unsigned integers taken from the random source in one batch, each reduced
into ``[0, n)``.

The default reduction is a plain modulo. When ``n`` does not divide 2**64
this favours the low indexes by at most ``n / 2**64``, which is accepted
for the sake of a fixed, reproducible draw count per resample. The
``'rejection'`` method removes the bias by redrawing out-of-range values,
at the cost of a variable number of draws.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pybootstraps.core.exceptions import ValidationError
from pybootstraps.core.validation import check_count


IndexMethod = Literal['modulo', 'rejection']
INDEX_METHODS: tuple[str, ...] = ('modulo', 'rejection')

RandomSource = np.random.Generator | np.random.BitGenerator

_UINT64_MAX = np.iinfo(np.uint64).max
_TWO_64 = 1 << 64


def as_generator(source: Any) -> np.random.Generator:
    """
    Wrap a random source as a numpy Generator.

    A Generator is returned unchanged; a BitGenerator is wrapped without
    copying its state, so draws through either object advance the same
    stream.

    Raises:
        ValidationError: If source is neither a Generator nor a BitGenerator
    """
    if isinstance(source, np.random.Generator):
        return source
    if isinstance(source, np.random.BitGenerator):
        return np.random.Generator(source)
    raise ValidationError(
        f"source: expected numpy.random.Generator or BitGenerator, "
        f"got {type(source).__name__}"
    )


def check_index_method(method: str) -> None:
    """Raise ValidationError unless method is a known index method."""
    if method not in INDEX_METHODS:
        raise ValidationError(
            f"index_method must be 'modulo' or 'rejection', got {method!r}"
        )


def _draw_uint64(rng: np.random.Generator, size: int) -> NDArray[np.uint64]:
    """Draw ``size`` uniform integers over the full uint64 range."""
    return rng.integers(
        0, _UINT64_MAX, size=size, dtype=np.uint64, endpoint=True,
    )


def _draw_uint64_unbiased(
    rng: np.random.Generator,
    n: int,
    size: int,
) -> NDArray[np.uint64]:
    """
    Draw ``size`` uint64 values from ``[0, limit)``, where limit is the
    largest multiple of n not exceeding 2**64.

    Accepted values keep their draw order; rejected ones are replaced
    from subsequent batches.
    """
    remainder = _TWO_64 % n
    if remainder == 0:
        return _draw_uint64(rng, size)

    limit = np.uint64(_TWO_64 - remainder)
    out = np.empty(size, dtype=np.uint64)
    filled = 0
    while filled < size:
        raw = _draw_uint64(rng, size - filled)
        accepted = raw[raw < limit]
        out[filled:filled + accepted.size] = accepted
        filled += accepted.size
    return out


def generate_indexes(
    source: RandomSource,
    n: int,
    size: int | None = None,
    *,
    method: IndexMethod = 'modulo',
) -> NDArray[np.intp]:
    """
    Draw resample indexes uniformly from ``[0, n)`` with replacement.

    Args:
        source: Random source. Its state is advanced by the draw.
        n: Dataset size. Must be >= 1.
        size: Number of indexes to draw. Defaults to n, the size of one
            resample.
        method: 'modulo' (default) or 'rejection'.

    Returns:
        Array of ``size`` indexes in draw order, dtype intp.

    Raises:
        ValidationError: If n < 1, size < 0 or method is unknown.

    Note:
        The source is not synchronized. Sharing it between threads
        without a lock yields overlapping, irreproducible draws.
    """
    rng = as_generator(source)
    n = check_count(n, 'n')
    if n < 1:
        raise ValidationError(
            "n: cannot draw resample indexes from an empty dataset (n=0)"
        )
    size = n if size is None else check_count(size, 'size')
    check_index_method(method)

    if method == 'modulo':
        raw = _draw_uint64(rng, size)
    else:
        raw = _draw_uint64_unbiased(rng, n, size)

    return (raw % np.uint64(n)).astype(np.intp)
