"""Puzzle generator service: retry loop around reverse construction."""

from __future__ import annotations

import logging
import random
from collections import Counter

from doublestrike.core.board import Board
from doublestrike.core.enums import PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.generator.config import GeneratorSettings
from doublestrike.generator.construction import attempt_construction
from doublestrike.generator.errors import (
    GenerationCancelled,
    GenerationExhausted,
    NoPuzzleError,
    PieceCountOutOfRange,
)
from doublestrike.generator.models import AttemptStatus, CancelCheck, Puzzle

_LOGGER = logging.getLogger(__name__)


class PuzzleGenerator:
    """Generates Double Strike puzzles of a requested size.

    Each :meth:`generate` call runs fresh construction attempts until one
    validates or the attempt budget runs out. The last successful puzzle
    stays readable through :meth:`board_encoding` and
    :meth:`solution_notation` until the next call.
    """

    __slots__ = ("_settings", "_final_kind", "_rng", "_puzzle")

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        *,
        final_kind: PieceKind | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self._settings = settings or GeneratorSettings()
        self._final_kind = final_kind
        self._rng = rng if rng is not None else random.Random(seed)
        self._puzzle: Puzzle | None = None

    # ── Configuration ────────────────────────────────────────────────────

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    @property
    def final_kind(self) -> PieceKind | None:
        return self._final_kind

    @final_kind.setter
    def final_kind(self, kind: PieceKind | None) -> None:
        self._final_kind = kind

    def seed(self, seed: int | None) -> None:
        """Reseed the random source."""
        self._rng.seed(seed)

    # ── Generation ───────────────────────────────────────────────────────

    def generate(
        self, target: int, is_cancelled: CancelCheck | None = None
    ) -> Puzzle:
        """Build and validate a puzzle with *target* pieces.

        Raises:
            PieceCountOutOfRange: *target* is outside the configured bounds.
            GenerationCancelled: *is_cancelled* returned True between attempts.
            GenerationExhausted: no attempt produced a valid puzzle.
        """
        self._puzzle = None
        settings = self._settings
        if not settings.accepts(target):
            raise PieceCountOutOfRange(
                target, settings.min_pieces, settings.max_pieces
            )

        cancelled = is_cancelled or (lambda: False)
        failures: Counter[AttemptStatus] = Counter()

        for attempt in range(1, settings.max_attempts + 1):
            if cancelled():
                _LOGGER.debug("Generation cancelled after %d attempts", attempt - 1)
                raise GenerationCancelled

            outcome = attempt_construction(
                target, settings, self._rng, self._final_kind
            )
            if outcome.succeeded:
                assert outcome.puzzle is not None
                puzzle = Puzzle(
                    board=outcome.puzzle.board,
                    solution=outcome.puzzle.solution,
                    final_kind=outcome.puzzle.final_kind,
                    attempts=attempt,
                )
                _LOGGER.info(
                    "Generated %d-piece puzzle in %d attempts: %s",
                    target,
                    attempt,
                    puzzle.board_field,
                )
                self._puzzle = puzzle
                return puzzle.copy()
            failures[outcome.status] += 1

        _LOGGER.warning(
            "Giving up on a %d-piece puzzle after %d attempts (%s)",
            target,
            settings.max_attempts,
            ", ".join(f"{status}: {n}" for status, n in failures.most_common()),
        )
        raise GenerationExhausted(target, settings.max_attempts)

    # ── Output ───────────────────────────────────────────────────────────

    @property
    def puzzle(self) -> Puzzle | None:
        """Copy of the current puzzle; mutating it leaves the stored one intact."""
        return self._puzzle.copy() if self._puzzle is not None else None

    def _require_puzzle(self) -> Puzzle:
        if self._puzzle is None:
            raise NoPuzzleError("No puzzle has been generated yet")
        return self._puzzle

    @property
    def initial_board(self) -> Board:
        return self._require_puzzle().board.copy()

    @property
    def solution(self) -> tuple[SolutionMove, ...]:
        return self._require_puzzle().solution

    def board_encoding(self) -> str:
        """FEN piece-placement field of the current puzzle."""
        return self._require_puzzle().board_field

    def solution_notation(self) -> list[str]:
        """Solution moves in playing order, e.g. ``['Nb1xc3', 'exd5']``."""
        return self._require_puzzle().notation
