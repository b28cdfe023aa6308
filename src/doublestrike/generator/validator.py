"""Forward replay of a recorded solution."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from doublestrike.core.board import Board, PlacementError
from doublestrike.core.enums import PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.core.notation import move_to_notation
from doublestrike.core.rules import is_legal_capture
from doublestrike.core.types import PROMOTION_ROW

MAX_MOVES_PER_PIECE = 2

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of replaying a solution; truthy when the solution holds."""

    ok: bool
    reason: str = ""
    move_index: int | None = None

    def __bool__(self) -> bool:
        return self.ok


_VALID = ValidationResult(True)


def _fail(reason: str, move_index: int | None = None) -> ValidationResult:
    _LOGGER.debug("Solution rejected at move %s: %s", move_index, reason)
    return ValidationResult(False, reason, move_index)


def validate_solution(
    initial_board: Board, solution: Sequence[SolutionMove]
) -> ValidationResult:
    """Replay *solution* on a copy of *initial_board* and check every rule."""
    board = initial_board.copy()
    move_counts: dict[int, int] = {}

    for index, move in enumerate(solution):
        label = move_to_notation(move)
        if board.kind_at(move.src) != move.source_kind:
            return _fail(f"{label}: expected {move.source_kind.name} on source", index)
        if board.kind_at(move.dst) != move.captured:
            return _fail(f"{label}: expected {move.captured.name} on target", index)
        if move.captured == PieceKind.KING:
            return _fail(f"{label}: the king cannot be captured", index)
        if not is_legal_capture(board, move.src, move.dst, move.source_kind):
            return _fail(f"{label}: illegal {move.source_kind.name} move", index)
        if move.promotion and (
            move.dst.y != PROMOTION_ROW or not move.piece.is_promotable
        ):
            return _fail(f"{label}: invalid promotion", index)
        count = move_counts.get(move.piece_id, 0)
        if count >= MAX_MOVES_PER_PIECE:
            return _fail(f"{label}: piece {move.piece_id} already moved twice", index)
        move_counts[move.piece_id] = count + 1

        try:
            board.capture(move.src, move.dst, move.piece)
        except PlacementError as exc:
            return _fail(f"{label}: {exc}", index)

    remaining = [piece for _, piece in board.occupied()]
    if len(remaining) != 1:
        return _fail(f"{len(remaining)} pieces remain after the solution")
    if initial_board.has_king() and remaining[0].kind != PieceKind.KING:
        return _fail(f"{remaining[0].kind.name} survived instead of the king")
    return _VALID


def replay_solution(initial_board: Board, solution: Sequence[SolutionMove]) -> Board:
    """Apply *solution* to a copy of *initial_board* without rule checks."""
    board = initial_board.copy()
    for move in solution:
        board.capture(move.src, move.dst, move.piece)
    return board
