"""
Unit tests for the index arithmetic kernels.

Tests calc_length, column_major_strides, ravel/unravel and max/min scans.
"""

import numpy as np
import pytest

from ndmatrix.utils.math import (
    calc_length,
    column_major_strides,
    ravel_multi_index,
    unravel_flat_index,
    scan_max,
    scan_min,
)


def _shape(*extents):
    return np.array(extents, dtype=np.int64)


class TestCalcLength:
    """Tests for calc_length."""

    def test_product_of_extents(self):
        """Test that length is the product of the extents."""
        assert calc_length(_shape(3, 4, 5)) == 60
        assert calc_length(_shape(7)) == 7

    def test_rank_zero_is_empty(self):
        """Test that a shape with no axes has no elements."""
        assert calc_length(np.empty(0, dtype=np.int64)) == 0

    def test_zero_extent(self):
        """Test that any zero extent gives zero length."""
        assert calc_length(_shape(3, 0, 5)) == 0


class TestStrides:
    """Tests for column_major_strides."""

    def test_first_axis_fastest(self):
        """Test stride_0 = 1 and cumulative products after."""
        strides = column_major_strides(_shape(3, 4, 5))
        assert list(strides) == [1, 3, 12]

    def test_matches_numpy_fortran_strides(self):
        """Test agreement with numpy's Fortran-order strides."""
        shape = (2, 3, 4, 5)
        ref = np.zeros(shape, dtype=np.int64, order='F')
        expected = [s // ref.itemsize for s in ref.strides]
        assert list(column_major_strides(_shape(*shape))) == expected


class TestRavelUnravel:
    """Tests for multi-index <-> flat index conversion."""

    def test_known_value(self):
        """Test 1*1 + 0*3 + 3*12 = 37 in shape (3, 4, 5)."""
        shape = _shape(3, 4, 5)
        assert ravel_multi_index(shape, _shape(1, 0, 3)) == 37
        assert list(unravel_flat_index(shape, 37)) == [1, 0, 3]

    def test_roundtrip_every_flat_index(self):
        """Test that unravel then ravel returns every flat index exactly."""
        shape = _shape(3, 4, 5)
        for flat in range(60):
            index = unravel_flat_index(shape, flat)
            assert ravel_multi_index(shape, index) == flat

    def test_matches_numpy_fortran_order(self):
        """Test agreement with np.unravel_index(order='F')."""
        shape = (4, 2, 3)
        for flat in range(24):
            expected = np.unravel_index(flat, shape, order='F')
            assert tuple(unravel_flat_index(_shape(*shape), flat)) == expected

    def test_out_of_range_component_returns_sentinel(self):
        """Test that out-of-range components give -1."""
        shape = _shape(3, 4)
        assert ravel_multi_index(shape, _shape(3, 0)) == -1
        assert ravel_multi_index(shape, _shape(0, 4)) == -1
        assert ravel_multi_index(shape, _shape(-1, 0)) == -1


class TestScans:
    """Tests for scan_max and scan_min."""

    def test_against_numpy(self, rng):
        """Test scans against numpy reductions on random data."""
        for _ in range(10):
            buffer = rng.normal(size=rng.integers(1, 200))
            assert scan_max(buffer) == buffer.max()
            assert scan_min(buffer) == buffer.min()

    def test_single_element(self):
        """Test that a single element is both max and min."""
        buffer = np.array([5], dtype=np.int64)
        assert scan_max(buffer) == 5
        assert scan_min(buffer) == 5

    def test_integer_buffer(self):
        """Test integer buffers with negative values."""
        buffer = np.array([3, -7, 12, 0], dtype=np.int64)
        assert scan_max(buffer) == 12
        assert scan_min(buffer) == -7
