"""Placed-piece value object and piece-kind character tables."""

from __future__ import annotations

from dataclasses import dataclass

from doublestrike.core.enums import PieceKind

# FEN character ↔ PieceKind (the variant is single-sided, always uppercase)
_CHAR_MAP: dict[str, PieceKind] = {
    "P": PieceKind.PAWN,
    "N": PieceKind.KNIGHT,
    "B": PieceKind.BISHOP,
    "R": PieceKind.ROOK,
    "Q": PieceKind.QUEEN,
    "K": PieceKind.KING,
}

_UNICODE: dict[PieceKind, str] = {
    PieceKind.PAWN: "♙",
    PieceKind.KNIGHT: "♘",
    PieceKind.BISHOP: "♗",
    PieceKind.ROOK: "♖",
    PieceKind.QUEEN: "♕",
    PieceKind.KING: "♔",
}

_FEN_CHARS: dict[PieceKind, str] = {v: k for k, v in _CHAR_MAP.items()}


def kind_char(kind: PieceKind) -> str:
    """FEN letter for *kind*, e.g. KNIGHT → 'N'."""
    return _FEN_CHARS[kind]


def kind_from_char(char: str) -> PieceKind:
    """Piece kind from a FEN letter; lowercase letters are accepted."""
    try:
        return _CHAR_MAP[char.upper()]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None


def kind_symbol(kind: PieceKind) -> str:
    """Unicode chess symbol used by board diagrams, e.g. ♘."""
    return _UNICODE[kind]


@dataclass(frozen=True, slots=True)
class PlacedPiece:
    """A piece on the board together with its stable identity.

    The identity survives relocation and promotion; it is retired when the
    piece is captured.
    """

    kind: PieceKind
    piece_id: int

    def __str__(self) -> str:
        return kind_char(self.kind)

    def with_kind(self, kind: PieceKind) -> PlacedPiece:
        return PlacedPiece(kind, self.piece_id)
