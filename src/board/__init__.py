"""
Evolution Plants: Board State Model

Board size, validated per-cell fields and field multipliers, composed into
the Board snapshot that growth and display code read from.
"""

from .size import Size
from .errors import BoardError, FieldCreateError, FieldSizeError
from .fields import Fields, create_uniform_fields
from .multipliers import Multipliers
from .config import BoardConfig
from .board import Board, create_board, create_test_board

__version__ = "0.1.0"

__all__ = [
    'Board',
    'BoardConfig',
    'BoardError',
    'FieldCreateError',
    'FieldSizeError',
    'Fields',
    'Multipliers',
    'Size',
    'create_board',
    'create_test_board',
    'create_uniform_fields',
]
