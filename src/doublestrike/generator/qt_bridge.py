"""Qt bridge to run puzzle generation in a worker thread."""

from __future__ import annotations

import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from doublestrike.core.enums import PieceKind
from doublestrike.generator.config import GeneratorSettings
from doublestrike.generator.errors import DoubleStrikeError, GenerationCancelled
from doublestrike.generator.service import PuzzleGenerator


class GeneratorWorker(QObject):
    """Thread-affine worker that generates puzzles on demand.

    Move it to a ``QThread`` and drive it through queued signal connections;
    the UI can show a loading state until one of the result signals fires.
    """

    puzzle_ready = pyqtSignal(int, object)
    generation_failed = pyqtSignal(int, str)
    generation_cancelled = pyqtSignal(int)

    __slots__ = ("_cancel_event", "_generator")

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self._generator = PuzzleGenerator(settings, seed=seed)
        self._cancel_event = threading.Event()

    @property
    def generator(self) -> PuzzleGenerator:
        return self._generator

    @pyqtSlot(int, int)
    def request_puzzle(self, target: int, request_id: int) -> None:
        """Generate a *target*-piece puzzle and emit the result."""
        self._cancel_event.clear()
        try:
            puzzle = self._generator.generate(
                target, is_cancelled=self._cancel_event.is_set
            )
        except GenerationCancelled:
            self.generation_cancelled.emit(request_id)
            return
        except DoubleStrikeError as exc:
            self.generation_failed.emit(request_id, str(exc))
            return

        self.puzzle_ready.emit(request_id, puzzle)

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the running generation."""
        self._cancel_event.set()

    @pyqtSlot(object)
    def set_final_kind(self, kind: object) -> None:
        """Force the surviving piece kind for later puzzles (None = random)."""
        if kind is not None and not isinstance(kind, PieceKind):
            raise ValueError(f"Invalid final piece kind: {kind!r}")
        self._generator.final_kind = kind
