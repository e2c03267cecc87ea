"""
Unit tests for text rendering.
"""

import io

import numpy as np
import pytest

from ndmatrix import (
    Config,
    Matrix,
    NDArray,
    UnsupportedRankError,
    format_array,
    write_array,
)


class TestFormatArray:
    """Tests for format_array."""

    def test_rank_one_single_line(self):
        """Test that a 1-D array renders on one newline-terminated line."""
        arr = NDArray.from_numpy(np.array([1, 2, 3]))
        assert format_array(arr, width=3) == "  1  2  3\n"

    def test_rank_two_one_line_per_row(self):
        """Test that each row index gets its own line."""
        m = Matrix.from_numpy(np.array([[0, 2, 4], [1, 3, 5]]))
        assert format_array(m, width=3) == "  0  2  4\n  1  3  5\n"

    def test_rank_three_slices(self):
        """Test slice headers along the third axis."""
        arr = NDArray((2, 2, 2), dtype=np.int64)
        for k in range(8):
            arr[k] = k
        expected = "slice 0:\n 0 2\n 1 3\nslice 1:\n 4 6\n 5 7\n"
        assert format_array(arr, width=2) == expected

    def test_float_precision(self):
        """Test fixed-precision float fields."""
        arr = NDArray.from_numpy(np.array([1.0, -0.5]))
        assert format_array(arr, width=8, precision=2) == "    1.00   -0.50\n"

    def test_defaults_from_config(self):
        """Test that width and precision come from Config."""
        Config.set("formatting.width", 6)
        Config.set("formatting.precision", 1)
        arr = NDArray.from_numpy(np.array([2.5]))
        assert format_array(arr) == "   2.5\n"

    def test_empty_array(self):
        """Test that the empty array renders as an empty string."""
        assert format_array(NDArray()) == ""

    def test_rank_four_unsupported(self):
        """Test that rank > 3 raises UnsupportedRankError."""
        with pytest.raises(UnsupportedRankError):
            format_array(NDArray((2, 2, 2, 2)))

    def test_str_uses_formatter(self, matrix_4x3):
        """Test that str() renders through format_array."""
        assert str(matrix_4x3) == format_array(matrix_4x3)
        assert str(matrix_4x3).count("\n") == 4

    def test_bool_renders_as_int(self):
        """Test that booleans print as integers."""
        arr = NDArray.from_numpy(np.array([True, False]))
        assert format_array(arr, width=2) == " 1 0\n"


class TestWriteArray:
    """Tests for write_array."""

    def test_writes_to_stream(self):
        """Test that the rendering is written to a text stream."""
        arr = NDArray.from_numpy(np.array([7, 8]))
        stream = io.StringIO()
        write_array(arr, stream, width=2)
        assert stream.getvalue() == " 7 8\n"
