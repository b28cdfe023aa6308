"""Solution move value object."""

from __future__ import annotations

from dataclasses import dataclass

from doublestrike.core.enums import PieceKind
from doublestrike.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class SolutionMove:
    """A forward capture in a puzzle solution.

    ``piece`` is the mover's kind after the move; for a promotion it is the
    promoted kind while the source square holds a pawn.
    """

    src: Square
    dst: Square
    piece: PieceKind
    captured: PieceKind
    piece_id: int
    promotion: bool = False

    @property
    def source_kind(self) -> PieceKind:
        """Kind expected on ``src`` before the move is played."""
        return PieceKind.PAWN if self.promotion else self.piece

    def __str__(self) -> str:
        return f"{square_name(self.src)}{square_name(self.dst)}"
