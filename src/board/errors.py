"""Errors raised while building board state."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .size import Size


class BoardError(Exception):
    """Base class for all board model errors."""


class FieldCreateError(BoardError, ValueError):
    """A field set could not be created from the supplied arrays."""


class FieldSizeError(FieldCreateError):
    """A field array does not cover the board exactly once.

    Attributes:
        name: Display name of the offending field (e.g. "Light")
        len: Actual length of the supplied array
        size: Board size the array was checked against
    """

    def __init__(self, name: str, len: int, size: 'Size'):
        self.name = name
        self.len = len
        self.size = size
        super().__init__(
            f"{name!r} field has wrong size ({len}) should be "
            f"({size.width * size.height}) on board with size {size!r}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSizeError):
            return NotImplemented
        return (self.name, self.len, self.size) == (other.name, other.len, other.size)

    def __hash__(self) -> int:
        return hash((self.name, self.len, self.size))

    def __reduce__(self):
        return (self.__class__, (self.name, self.len, self.size))

    def __repr__(self) -> str:
        return f"FieldSizeError(name={self.name!r}, len={self.len}, size={self.size!r})"
