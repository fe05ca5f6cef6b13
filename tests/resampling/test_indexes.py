"""
Tests for resample index generation.

Covers range and length invariants, batch consumption of the random
stream, the empty-dataset failure, and the rejection method.
"""

import numpy as np
import pytest
from scipy import stats

from pybootstraps.core.exceptions import ValidationError
from pybootstraps.resampling.indexes import as_generator, generate_indexes


# ---------------------------------------------------------------------------
# Tests: modulo method (default)
# ---------------------------------------------------------------------------

class TestModuloIndexes:

    def test_length_defaults_to_n(self, rng):
        idx = generate_indexes(rng, 37)
        assert idx.shape == (37,)
        assert idx.dtype == np.intp

    def test_explicit_size(self, rng):
        assert generate_indexes(rng, 5, size=12).shape == (12,)

    def test_zero_size(self, rng):
        assert generate_indexes(rng, 5, size=0).shape == (0,)

    @pytest.mark.parametrize("n", [1, 2, 3, 7, 1000, 1 << 20])
    def test_range(self, rng, n):
        idx = generate_indexes(rng, n, size=5000)
        assert idx.min() >= 0
        assert idx.max() < n

    def test_single_element_always_zero(self, rng):
        idx = generate_indexes(rng, 1, size=500)
        np.testing.assert_array_equal(idx, 0)

    def test_repeats_and_omissions(self, rng):
        """Sampling is with replacement: a resample of 1000 repeats values."""
        idx = generate_indexes(rng, 1000)
        assert len(np.unique(idx)) < 1000

    def test_matches_raw_uint64_modulo(self):
        """Indexes are one batch of full-range uint64 draws reduced mod n."""
        n = 13
        raw = np.random.default_rng(7).integers(
            0, np.iinfo(np.uint64).max, size=n, dtype=np.uint64, endpoint=True,
        )
        idx = generate_indexes(np.random.default_rng(7), n)
        np.testing.assert_array_equal(idx, (raw % np.uint64(n)).astype(np.intp))

    def test_uniform(self, rng):
        """All indexes occur with equal frequency (chi-square)."""
        n = 10
        idx = generate_indexes(rng, n, size=100_000)
        counts = np.bincount(idx, minlength=n)
        assert stats.chisquare(counts).pvalue > 1e-6

    def test_advances_source(self):
        rng = np.random.default_rng(3)
        first = generate_indexes(rng, 50)
        second = generate_indexes(rng, 50)
        assert not np.array_equal(first, second)

    def test_deterministic(self):
        a = generate_indexes(np.random.default_rng(11), 100)
        b = generate_indexes(np.random.default_rng(11), 100)
        np.testing.assert_array_equal(a, b)


# ---------------------------------------------------------------------------
# Tests: rejection method
# ---------------------------------------------------------------------------

class TestRejectionIndexes:

    @pytest.mark.parametrize("n", [1, 3, 7, 1000, (1 << 62) + 1])
    def test_range_and_length(self, rng, n):
        idx = generate_indexes(rng, n, size=2000, method='rejection')
        assert idx.shape == (2000,)
        assert idx.min() >= 0
        assert idx.max() < n

    @pytest.mark.parametrize("n", [1, 2, 8, 1024])
    def test_power_of_two_matches_modulo(self, n):
        """Nothing is rejected when n divides 2**64."""
        a = generate_indexes(np.random.default_rng(5), n, method='modulo')
        b = generate_indexes(np.random.default_rng(5), n, method='rejection')
        np.testing.assert_array_equal(a, b)

    def test_uniform(self, rng):
        n = 6
        idx = generate_indexes(rng, n, size=60_000, method='rejection')
        counts = np.bincount(idx, minlength=n)
        assert stats.chisquare(counts).pvalue > 1e-6


# ---------------------------------------------------------------------------
# Tests: failures
# ---------------------------------------------------------------------------

class TestIndexErrors:

    def test_empty_dataset_fails_fast(self, rng):
        with pytest.raises(ValidationError, match="empty dataset"):
            generate_indexes(rng, 0)

    def test_negative_n(self, rng):
        with pytest.raises(ValidationError):
            generate_indexes(rng, -1)

    def test_unknown_method(self, rng):
        with pytest.raises(ValidationError, match="index_method"):
            generate_indexes(rng, 5, method='shuffle')

    def test_bad_source(self):
        with pytest.raises(ValidationError, match="source"):
            generate_indexes(42, 5)


class TestAsGenerator:

    def test_generator_returned_unchanged(self, rng):
        assert as_generator(rng) is rng

    def test_bit_generator_shares_state(self):
        bg = np.random.PCG64(9)
        gen = as_generator(bg)
        assert gen.bit_generator is bg

    def test_legacy_random_state_rejected(self):
        with pytest.raises(ValidationError):
            as_generator(np.random.RandomState(0))
