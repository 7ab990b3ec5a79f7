"""
Board Field Storage

Per-cell scalar fields (light intensity, and later moisture, temperature...)
that influence plant growth. Every field covers each cell of the board
exactly once; the length check happens once, at construction, and the stored
arrays are read-only afterwards.
"""

import numpy as np
from typing import Dict, Iterator, Mapping, Sequence, Tuple, Union
import logging

from .errors import FieldCreateError, FieldSizeError
from .size import Size

logger = logging.getLogger(__name__)

FieldValues = Union[Sequence[float], np.ndarray]

# Fields every board must carry
REQUIRED_FIELDS: Tuple[str, ...] = ('light',)

FIELD_DTYPE = np.float64

# Integer and floating point inputs only; no strings, booleans or objects
_NUMERIC_KINDS = 'fiu'


def _display_name(key: str) -> str:
    """Name used for a field in error messages ("light" -> "Light")."""
    return key.capitalize()


def _validate_field(name: str, values: FieldValues, size: Size) -> np.ndarray:
    """Check one field against the board size and take a private copy.

    Args:
        name: Display name of the field, reported on failure
        values: Per-cell values in row-major order
        size: Board size the field must cover

    Returns:
        Read-only float64 copy of the values

    Raises:
        FieldCreateError: If the values are not a flat numeric sequence
        FieldSizeError: If the number of values differs from the cell count
    """
    try:
        source = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise FieldCreateError(f"{name!r} field values must be numeric: {e}") from e

    if source.size and source.dtype.kind not in _NUMERIC_KINDS:
        raise FieldCreateError(
            f"{name!r} field values must be numeric, got dtype {source.dtype}"
        )

    array = np.array(source, dtype=FIELD_DTYPE, copy=True)

    if array.ndim != 1:
        raise FieldCreateError(
            f"{name!r} field must be a flat row-major sequence, got shape {array.shape}"
        )

    if array.shape[0] != len(size):
        logger.debug(f"Rejected {name} field of length {array.shape[0]} for {size} board")
        raise FieldSizeError(name=name, len=array.shape[0], size=size)

    array.setflags(write=False)
    return array


class Fields:
    """Validated set of named per-cell fields for one board size.

    Attributes:
        size: Board size every field is checked against
    """

    def __init__(self, size: Size, light: FieldValues):
        """Create a field set holding the light field.

        Args:
            size: Size of the board the fields belong to
            light: Light value of each cell, row-major

        Raises:
            FieldSizeError: If the light field does not match the board size
        """
        self._size = size
        self._arrays: Dict[str, np.ndarray] = {
            'light': _validate_field(_display_name('light'), light, size),
        }
        logger.debug(f"Created fields {list(self._arrays)} for {size} board")

    @classmethod
    def from_arrays(cls, size: Size, arrays: Mapping[str, FieldValues]) -> 'Fields':
        """Create a field set from a mapping of field name to values.

        Each field is checked independently against the same size, in the
        mapping's order, and the first failing one is reported by name.

        Raises:
            FieldCreateError: If a required field is missing
            FieldSizeError: If any field does not match the board size
        """
        missing = [key for key in REQUIRED_FIELDS if key not in arrays]
        if missing:
            raise FieldCreateError(f"Missing required fields: {', '.join(missing)}")

        validated = {
            key: _validate_field(_display_name(key), values, size)
            for key, values in arrays.items()
        }

        fields = cls.__new__(cls)
        fields._size = size
        fields._arrays = validated
        logger.debug(f"Created fields {list(validated)} for {size} board")
        return fields

    @property
    def size(self) -> Size:
        """Board size every field is checked against."""
        return self._size

    @property
    def light(self) -> np.ndarray:
        """Relative light value of each cell (read-only, row-major)."""
        return self._arrays['light']

    @property
    def names(self) -> Tuple[str, ...]:
        """Field names in creation order."""
        return tuple(self._arrays)

    def value_at(self, x: int, y: int, name: str = 'light') -> float:
        """Get a field value at a board coordinate.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            name: Field to read

        Returns:
            The stored cell value

        Raises:
            IndexError: If coordinates are out of bounds
            KeyError: If the board has no such field
        """
        array = self[name]
        return float(array[self.size._index(x, y)])

    def as_grid(self, name: str = 'light') -> np.ndarray:
        """Read-only 2D (height, width) view of a field for display code."""
        width, height = self.size.dimensions()
        return self[name].reshape((height, width))

    def copy(self) -> 'Fields':
        """Create a deep copy of the field set."""
        return Fields.from_arrays(self.size, self._arrays)

    def __getitem__(self, name: str) -> np.ndarray:
        if name not in self._arrays:
            raise KeyError(f"Unknown field {name!r}, board has {list(self._arrays)}")
        return self._arrays[name]

    def __contains__(self, name: object) -> bool:
        return name in self._arrays

    def __iter__(self) -> Iterator[str]:
        return iter(self._arrays)

    def __len__(self) -> int:
        return len(self._arrays)

    def __eq__(self, other: object) -> bool:
        """Check equality with another field set."""
        if not isinstance(other, Fields):
            return NotImplemented
        return (self.size == other.size and
                self.names == other.names and
                all(np.array_equal(self._arrays[key], other._arrays[key])
                    for key in self._arrays))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Fields(size={self.size}, names={list(self._arrays)})"


def create_uniform_fields(size: Size, light: float = 0.0) -> Fields:
    """Create fields with the same light value on every cell.

    Args:
        size: Board size
        light: Value for every cell

    Returns:
        Fields covering the whole board
    """
    return Fields(size, np.full(len(size), light, dtype=FIELD_DTYPE))
