"""Core domain layer: board, piece kinds, capture rules and notation.

Quick start::

    from doublestrike.core import Board, PieceKind, Square, board_to_fen

    board = Board()
    board.place(PieceKind.KNIGHT, Square(1, 7))
    print(board_to_fen(board))
"""

from doublestrike.core.board import Board, PlacementError
from doublestrike.core.enums import PROMOTION_KINDS, MoveDirection, PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.core.notation import (
    board_from_fen,
    board_to_fen,
    full_fen,
    move_to_notation,
    parse_notation,
    solution_to_notation,
)
from doublestrike.core.piece import PlacedPiece, kind_char, kind_from_char, kind_symbol
from doublestrike.core.rules import has_line_of_sight, is_legal_capture, is_legal_move
from doublestrike.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    PROMOTION_ROW,
    Square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / constants
    "ALL_SQUARES",
    "BOARD_SIZE",
    "MoveDirection",
    "PieceKind",
    "PROMOTION_KINDS",
    "PROMOTION_ROW",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    "kind_char",
    "kind_from_char",
    "kind_symbol",
    # Domain objects
    "Board",
    "PlacedPiece",
    "PlacementError",
    "SolutionMove",
    # Rules
    "has_line_of_sight",
    "is_legal_capture",
    "is_legal_move",
    # Notation
    "board_from_fen",
    "board_to_fen",
    "full_fen",
    "move_to_notation",
    "parse_notation",
    "solution_to_notation",
]
