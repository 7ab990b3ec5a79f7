"""
Board Configuration

Default dimensions and weights used when a board is built from settings
rather than from hand-made field arrays.
"""

from typing import Any, Dict, Mapping

from .multipliers import Multipliers
from .size import Size

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512
DEFAULT_LIGHT_MULTIPLIER = 1024
DEFAULT_LIGHT = 0.0


class BoardConfig:
    """Configuration for building a board."""

    def __init__(self,
                 width: int = DEFAULT_WIDTH,
                 height: int = DEFAULT_HEIGHT,
                 light_multiplier: int = DEFAULT_LIGHT_MULTIPLIER,
                 light: float = DEFAULT_LIGHT):
        """Initialize board configuration.

        Args:
            width: Board width in cells
            height: Board height in cells
            light_multiplier: Weight of the light field (unsigned 32-bit)
            light: Uniform light value used when no light array is supplied

        Raises:
            ValueError: If any value is out of range
        """
        self.width = width
        self.height = height
        self.light_multiplier = light_multiplier
        self.light = float(light)
        self.validate()

    @classmethod
    def default(cls) -> 'BoardConfig':
        """Default 512x512 board with a light multiplier of 1024."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'BoardConfig':
        """Build a configuration from a plain mapping.

        Raises:
            ValueError: If the mapping has unknown keys or invalid values
        """
        unknown = set(values) - {'width', 'height', 'light_multiplier', 'light'}
        if unknown:
            raise ValueError(f"Unknown board config keys: {sorted(unknown)}")
        return cls(**values)

    def validate(self) -> None:
        """Check that the settings describe a buildable board."""
        self.size()
        self.multipliers()

    def size(self) -> Size:
        return Size(self.width, self.height)

    def multipliers(self) -> Multipliers:
        return Multipliers(self.light_multiplier)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'height': self.height,
            'light_multiplier': self.light_multiplier,
            'light': self.light,
        }

    def copy(self) -> 'BoardConfig':
        """Create a copy of the configuration."""
        return BoardConfig(**self.to_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"BoardConfig({self.width}x{self.height}, "
                f"light_multiplier={self.light_multiplier}, light={self.light})")
