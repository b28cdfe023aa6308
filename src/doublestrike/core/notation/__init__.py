"""Notation package: FEN board field and capture notation."""

from doublestrike.core.notation.algebraic import (
    move_to_notation,
    parse_notation,
    solution_to_notation,
)
from doublestrike.core.notation.fen import board_from_fen, board_to_fen, full_fen

__all__ = [
    "board_from_fen",
    "board_to_fen",
    "full_fen",
    "move_to_notation",
    "parse_notation",
    "solution_to_notation",
]
