"""Unit tests for board size and row-major addressing."""

import pytest
import numpy as np
from src.board.size import Size


class TestSizeCreation:
    """Test Size construction and validation."""

    def test_size_new(self):
        """Width and height are stored as given."""
        size = Size(40, 55)
        assert (size.width, size.height) == (40, 55)

    def test_zero_size_allowed(self):
        """Zero dimensions give an empty board."""
        assert len(Size(0, 0)) == 0
        assert len(Size(0, 7)) == 0
        assert len(Size(7, 0)) == 0

    def test_negative_dimensions(self):
        """Negative dimensions are rejected."""
        with pytest.raises(ValueError, match="width must be non-negative"):
            Size(-1, 5)

        with pytest.raises(ValueError, match="height must be non-negative"):
            Size(5, -1)

    def test_non_integer_dimensions(self):
        """Floats and booleans are not dimensions."""
        with pytest.raises(ValueError, match="width must be an integer"):
            Size(2.5, 5)

        with pytest.raises(ValueError, match="height must be an integer"):
            Size(5, True)

    def test_numpy_integer_dimensions(self):
        """Numpy integers are accepted and stored as plain ints."""
        size = Size(np.int64(2), np.uint32(3))

        assert size == Size(2, 3)
        assert type(size.width) is int
        assert type(size.height) is int
        assert len(size) == 6

    def test_immutable(self):
        """Sizes cannot be changed after construction."""
        size = Size(3, 4)
        with pytest.raises(AttributeError):
            size.width = 10

    def test_value_equality(self):
        """Sizes compare and hash by value."""
        assert Size(3, 4) == Size(3, 4)
        assert Size(3, 4) != Size(4, 3)
        assert hash(Size(3, 4)) == hash(Size(3, 4))


class TestSizeDerivedValues:
    """Test cell count, stride and indexing."""

    def test_dimensions(self):
        """dimensions() returns (width, height)."""
        assert Size(512, 256).dimensions() == (512, 256)

    def test_len(self):
        """len() is the number of cells."""
        assert len(Size(40, 55)) == 40 * 55
        assert len(Size(512, 256)) == 512 * 256

    def test_stride(self):
        """Stride is the row width."""
        assert Size(40, 55)._stride() == 40

    def test_two_by_two(self):
        """A 2x2 board has four cells and stride two."""
        size = Size(2, 2)
        assert len(size) == 4
        assert size._stride() == 2

    @pytest.mark.parametrize("width,height", [(1, 1), (3, 7), (16, 2), (0, 9)])
    def test_len_and_stride_properties(self, width, height):
        """Cell count and stride hold for assorted shapes."""
        size = Size(width, height)
        assert len(size) == width * height
        assert size._stride() == width

    def test_large_board_len(self):
        """Cell count is exact for very large boards."""
        size = Size(1 << 20, 1 << 20)
        assert len(size) == 1 << 40

    def test_index_row_major(self):
        """Linear index is y * stride + x."""
        size = Size(3, 2)
        assert size._index(0, 0) == 0
        assert size._index(2, 0) == 2
        assert size._index(0, 1) == 3
        assert size._index(2, 1) == 5

    def test_index_out_of_bounds(self):
        """Indexing off the board raises IndexError."""
        size = Size(3, 2)
        with pytest.raises(IndexError, match="out of bounds"):
            size._index(3, 0)

        with pytest.raises(IndexError, match="out of bounds"):
            size._index(0, -1)

    def test_contains(self):
        """contains() checks board bounds."""
        size = Size(3, 2)
        assert size.contains(0, 0)
        assert size.contains(2, 1)
        assert not size.contains(3, 1)
        assert not Size(0, 0).contains(0, 0)

    def test_str(self):
        """Sizes print as WxH."""
        assert str(Size(40, 55)) == "40x55"
