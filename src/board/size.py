"""Board dimensions and row-major addressing.

A Size is the width/height pair every field on a board is checked against.
It also owns the mapping from (x, y) coordinates to positions in the flat
per-cell arrays stored by Fields.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Size:
    """Width and height of a board in cells.

    Attributes:
        width: Board width in cells
        height: Board height in cells
    """

    width: int
    height: int

    def __post_init__(self):
        """Validate dimensions after construction.

        Raises:
            ValueError: If a dimension is not an integer or is negative
        """
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"Board {label} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Board {label} must be non-negative, got {value}")
            # Store plain ints so numpy integers compare and hash like Python ones
            object.__setattr__(self, label, int(value))

    def dimensions(self) -> Tuple[int, int]:
        """Return the size as a (width, height) tuple."""
        return (self.width, self.height)

    def __len__(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _stride(self) -> int:
        """Cells per row, used to step in the y direction."""
        return self.width

    def _index(self, x: int, y: int) -> int:
        """Convert a coordinate to a linear row-major index.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self} board")
        return y * self._stride() + x

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
