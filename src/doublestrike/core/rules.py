"""Capture-move legality rules shared by construction and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from doublestrike.core.enums import MoveDirection, PieceKind
from doublestrike.core.types import Square

if TYPE_CHECKING:
    from doublestrike.core.board import Board


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def has_line_of_sight(board: Board, src: Square, dst: Square) -> bool:
    """Whether every square strictly between *src* and *dst* is empty.

    Only meaningful for squares sharing a row, file or diagonal.
    """
    step_x = _sign(dst.x - src.x)
    step_y = _sign(dst.y - src.y)
    x, y = src.x + step_x, src.y + step_y
    while (x, y) != (dst.x, dst.y):
        if board.kind_at(Square(x, y)) is not None:
            return False
        x += step_x
        y += step_y
    return True


def is_legal_move(
    board: Board,
    src: Square,
    dst: Square,
    kind: PieceKind,
    direction: MoveDirection = MoveDirection.FORWARD,
) -> bool:
    """Whether a *kind* piece may travel from *src* to *dst*.

    Only geometry and line of sight are checked; occupancy of the end
    squares is the caller's concern. With ``MoveDirection.BACKWARD`` the
    pawn rule is mirrored: the pawn must step toward the higher row.
    """
    if src == dst:
        return False

    dx = abs(dst.x - src.x)
    dy = dst.y - src.y  # positive means moving down the board
    ady = abs(dy)

    if kind == PieceKind.PAWN:
        expected_dy = 1 if direction == MoveDirection.BACKWARD else -1
        return dx == 1 and dy == expected_dy
    if kind == PieceKind.KNIGHT:
        return (dx, ady) in ((1, 2), (2, 1))
    if kind == PieceKind.BISHOP:
        return dx == ady and has_line_of_sight(board, src, dst)
    if kind == PieceKind.ROOK:
        return (dx == 0 or ady == 0) and has_line_of_sight(board, src, dst)
    if kind == PieceKind.QUEEN:
        return (dx == ady or dx == 0 or ady == 0) and has_line_of_sight(
            board, src, dst
        )
    if kind == PieceKind.KING:
        return max(dx, ady) == 1
    return False


def is_legal_capture(board: Board, src: Square, dst: Square, kind: PieceKind) -> bool:
    """Forward-play check: legal geometry onto an occupied, non-king square."""
    victim = board.kind_at(dst)
    if victim is None or victim == PieceKind.KING:
        return False
    return is_legal_move(board, src, dst, kind, MoveDirection.FORWARD)
