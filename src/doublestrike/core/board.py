"""Board - piece placement and identity tracking on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from doublestrike.core.enums import PieceKind
from doublestrike.core.piece import PlacedPiece, kind_char
from doublestrike.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    PROMOTION_ROW,
    Square,
    square_name,
)


class PlacementError(ValueError):
    """Raised when a placement breaks a structural rule of the board."""


class Board:
    """Mutable 8x8 board whose pieces carry unique integer identities."""

    __slots__ = ("_cells", "_next_id")

    def __init__(self) -> None:
        # [y][x] -> placed piece or None
        self._cells: list[list[PlacedPiece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._next_id = 1

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PlacedPiece | None:
        return self._cells[sq.y][sq.x]

    def kind_at(self, sq: Square) -> PieceKind | None:
        piece = self._cells[sq.y][sq.x]
        return piece.kind if piece is not None else None

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq.y][sq.x] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, PlacedPiece]]:
        """Yield ``(square, piece)`` for every occupied square, top row first."""
        for sq in ALL_SQUARES:
            piece = self._cells[sq.y][sq.x]
            if piece is not None:
                yield sq, piece

    def empty_squares(self) -> list[Square]:
        return [sq for sq in ALL_SQUARES if self._cells[sq.y][sq.x] is None]

    def piece_count(self) -> int:
        return sum(1 for _ in self.occupied())

    def has_king(self) -> bool:
        return any(piece.kind == PieceKind.KING for _, piece in self.occupied())

    def find(self, piece_id: int) -> Square | None:
        """Square of the piece with identity *piece_id*, if still on the board."""
        for sq, piece in self.occupied():
            if piece.piece_id == piece_id:
                return sq
        return None

    @property
    def next_id(self) -> int:
        """Identity the next placed piece will receive."""
        return self._next_id

    # -- Mutation -----------------------------------------------------------

    def place(self, kind: PieceKind, sq: Square) -> int:
        """Put a new piece of *kind* on empty *sq* and return its identity."""
        if kind == PieceKind.PAWN and sq.y == PROMOTION_ROW:
            raise PlacementError(f"Pawn cannot stand on {square_name(sq)}")
        if self._cells[sq.y][sq.x] is not None:
            raise PlacementError(f"Square {square_name(sq)} is occupied")
        piece_id = self._next_id
        self._next_id += 1
        self._cells[sq.y][sq.x] = PlacedPiece(kind, piece_id)
        return piece_id

    def remove(self, sq: Square) -> PlacedPiece | None:
        """Clear *sq*, retiring the identity of whatever stood there."""
        piece = self._cells[sq.y][sq.x]
        self._cells[sq.y][sq.x] = None
        return piece

    def relocate(
        self, src: Square, dst: Square, kind: PieceKind | None = None
    ) -> None:
        """Move the piece on *src* to empty *dst*, keeping its identity.

        *kind* replaces the piece kind (promotion, or un-promotion while
        constructing a puzzle backward).
        """
        piece = self._cells[src.y][src.x]
        if piece is None:
            raise PlacementError(f"No piece on {square_name(src)}")
        if self._cells[dst.y][dst.x] is not None:
            raise PlacementError(f"Square {square_name(dst)} is occupied")
        new_kind = piece.kind if kind is None else kind
        if new_kind == PieceKind.PAWN and dst.y == PROMOTION_ROW:
            raise PlacementError(f"Pawn cannot stand on {square_name(dst)}")
        self._cells[src.y][src.x] = None
        self._cells[dst.y][dst.x] = piece.with_kind(new_kind)

    def capture(
        self, src: Square, dst: Square, kind: PieceKind | None = None
    ) -> PlacedPiece:
        """Move the piece on *src* onto the occupied *dst*; return the victim."""
        victim = self._cells[dst.y][dst.x]
        if victim is None:
            raise PlacementError(f"Nothing to capture on {square_name(dst)}")
        self._cells[dst.y][dst.x] = None
        try:
            self.relocate(src, dst, kind)
        except PlacementError:
            self._cells[dst.y][dst.x] = victim
            raise
        return victim

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        b._next_id = self._next_id
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._next_id = 1

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.kinds() == other.kinds()

    def kinds(self) -> list[list[PieceKind | None]]:
        """Plain kind grid, identities dropped."""
        return [
            [p.kind if p is not None else None for p in row] for row in self._cells
        ]

    def __repr__(self) -> str:
        rows: list[str] = []
        for y, row in enumerate(self._cells):
            cells = [kind_char(p.kind) if p else "." for p in row]
            rows.append(f"{BOARD_SIZE - y} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
