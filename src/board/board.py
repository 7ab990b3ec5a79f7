"""The board on which the plants evolve.

A Board is the snapshot handed to anything that displays or advances the
simulation. It is composed from already validated parts and never changed
in place; a new Board replaces the old one.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from .config import BoardConfig
from .fields import FieldValues, Fields, create_uniform_fields
from .multipliers import Multipliers
from .size import Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Board:
    """Multipliers plus validated field data for one board size.

    Attributes:
        multipliers: The multipliers for the fields
        fields: The fields of the board
    """

    multipliers: Multipliers
    fields: Fields

    # Unhashable: fields compare by array contents
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        logger.debug(f"Created board {self.fields.size} with multipliers {self.multipliers.as_dict()}")

    @property
    def size(self) -> Size:
        """Size of the board, taken from its fields."""
        return self.fields.size


def create_board(config: Optional[BoardConfig] = None,
                 light: Optional[FieldValues] = None) -> Board:
    """Create a board from configuration.

    Args:
        config: Board settings, defaults if None
        light: Explicit light values (row-major); a uniform field from the
            config is used if None

    Returns:
        Board with the configured size and multipliers

    Raises:
        FieldSizeError: If light does not match the configured size
    """
    config = config or BoardConfig.default()
    size = config.size()

    if light is None:
        fields = create_uniform_fields(size, config.light)
    else:
        fields = Fields(size, light)

    return Board(config.multipliers(), fields)


# Convenience function for testing
def create_test_board() -> Board:
    """Create a small 2x2 board for unit testing."""
    size = Size(2, 2)
    fields = Fields(size, [0.0, 0.5, 0.5, 1.0])
    return Board(Multipliers(1024), fields)
