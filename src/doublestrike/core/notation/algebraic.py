"""Capture notation for Double Strike solutions.

Pawn captures are written ``exd5`` (``exd8=Q`` with promotion), every other
piece as ``Nb1xc3``. The source square is always given in full so a move
reads unambiguously without the board.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import NamedTuple

from doublestrike.core.enums import PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.core.piece import kind_char, kind_from_char
from doublestrike.core.types import Square, file_char, parse_square, square_name

_PAWN_RE = re.compile(r"^([a-h])x([a-h][1-8])(?:=([QRBN]))?$")
_PIECE_RE = re.compile(r"^([KQRBN])([a-h][1-8])x([a-h][1-8])$")


class ParsedCapture(NamedTuple):
    """Fields recovered from a notation string.

    For pawn moves only the source file is known, so ``src`` is ``None``.
    """

    piece: PieceKind
    src_file: int
    src: Square | None
    dst: Square
    promotion: PieceKind | None


def move_to_notation(move: SolutionMove) -> str:
    dst = square_name(move.dst)
    if move.promotion:
        return f"{file_char(move.src)}x{dst}={kind_char(move.piece)}"
    if move.piece == PieceKind.PAWN:
        return f"{file_char(move.src)}x{dst}"
    return f"{kind_char(move.piece)}{square_name(move.src)}x{dst}"


def solution_to_notation(moves: Iterable[SolutionMove]) -> list[str]:
    return [move_to_notation(m) for m in moves]


def parse_notation(text: str) -> ParsedCapture:
    """Parse a notation string produced by :func:`move_to_notation`."""
    clean = text.strip()
    m = _PAWN_RE.match(clean)
    if m:
        src_file = ord(m.group(1)) - ord("a")
        promotion = kind_from_char(m.group(3)) if m.group(3) else None
        return ParsedCapture(
            PieceKind.PAWN, src_file, None, parse_square(m.group(2)), promotion
        )
    m = _PIECE_RE.match(clean)
    if m:
        src = parse_square(m.group(2))
        return ParsedCapture(
            kind_from_char(m.group(1)), src.x, src, parse_square(m.group(3)), None
        )
    raise ValueError(f"Invalid capture notation: {text!r}")
