"""Core enumerations for the Double Strike domain."""

from __future__ import annotations

from enum import IntEnum


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def is_promotable(self) -> bool:
        """Whether a pawn may promote to this kind."""
        return self in PROMOTION_KINDS


PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


class MoveDirection(IntEnum):
    """How a move is read by the legality rules.

    FORWARD is ordinary play. BACKWARD asks whether a piece now on the
    source square could have arrived there from the destination square,
    which is how the reverse constructor searches for un-captures.
    """

    FORWARD = 0
    BACKWARD = 1
