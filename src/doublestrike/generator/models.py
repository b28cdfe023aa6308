"""Data models produced by puzzle generation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum

from doublestrike.core.board import Board
from doublestrike.core.enums import PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.core.notation import board_to_fen, full_fen, solution_to_notation

CancelCheck = Callable[[], bool]


class AttemptStatus(StrEnum):
    """How a single construction attempt ended."""

    SUCCESS = "success"
    STEP_BUDGET_EXHAUSTED = "step budget exhausted"
    INVALID_PLACEMENT = "invalid placement"
    VALIDATION_FAILED = "validation failed"


@dataclass(frozen=True, slots=True)
class Puzzle:
    """A validated starting position with its forward solution."""

    board: Board
    solution: tuple[SolutionMove, ...]
    final_kind: PieceKind
    attempts: int = 1

    @property
    def board_field(self) -> str:
        """FEN piece-placement field of the starting position."""
        return board_to_fen(self.board)

    @property
    def fen(self) -> str:
        """Full FEN with fixed defaults (white to move, no castling)."""
        return full_fen(self.board_field)

    @property
    def notation(self) -> list[str]:
        return solution_to_notation(self.solution)

    @property
    def piece_count(self) -> int:
        return self.board.piece_count()

    def copy(self) -> Puzzle:
        """Same puzzle on an independent board."""
        return replace(self, board=self.board.copy())


@dataclass(frozen=True, slots=True)
class AttemptOutcome:
    """Result of one construction attempt; ``puzzle`` is set only on success."""

    status: AttemptStatus
    puzzle: Puzzle | None = None
    detail: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == AttemptStatus.SUCCESS
