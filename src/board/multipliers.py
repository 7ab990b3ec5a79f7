"""Integer weights controlling how strongly each field influences growth."""

from dataclasses import dataclass
from numbers import Integral
from typing import Dict

# Multipliers are stored as unsigned 32-bit weights
MAX_MULTIPLIER = 2**32 - 1


@dataclass(frozen=True)
class Multipliers:
    """All the multipliers for the board fields.

    Attributes:
        light: Multiplier of the light field
    """

    light: int

    def __post_init__(self):
        """Validate multiplier range.

        Raises:
            ValueError: If a multiplier is not an integer in [0, 2**32 - 1]
        """
        if isinstance(self.light, bool) or not isinstance(self.light, Integral):
            raise ValueError(f"Light multiplier must be an integer, got {self.light!r}")
        if not (0 <= self.light <= MAX_MULTIPLIER):
            raise ValueError(f"Light multiplier must be in [0, {MAX_MULTIPLIER}], got {self.light}")
        object.__setattr__(self, 'light', int(self.light))

    def as_dict(self) -> Dict[str, int]:
        return {'light': self.light}
