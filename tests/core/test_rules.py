"""Tests for capture-move legality rules."""

import pytest

from doublestrike.core.board import Board
from doublestrike.core.enums import MoveDirection, PieceKind
from doublestrike.core.rules import has_line_of_sight, is_legal_capture, is_legal_move
from doublestrike.core.types import parse_square


def sq(name: str):
    return parse_square(name)


class TestPawn:
    def test_forward_capture_goes_up_the_board(self) -> None:
        board = Board()
        assert is_legal_move(board, sq("e4"), sq("d5"), PieceKind.PAWN)
        assert is_legal_move(board, sq("e4"), sq("f5"), PieceKind.PAWN)

    def test_forward_rejects_downward_and_straight(self) -> None:
        board = Board()
        assert not is_legal_move(board, sq("e4"), sq("d3"), PieceKind.PAWN)
        assert not is_legal_move(board, sq("e4"), sq("e5"), PieceKind.PAWN)
        assert not is_legal_move(board, sq("e4"), sq("c6"), PieceKind.PAWN)

    def test_backward_direction_is_mirrored(self) -> None:
        board = Board()
        backward = MoveDirection.BACKWARD
        assert is_legal_move(board, sq("e4"), sq("d3"), PieceKind.PAWN, backward)
        assert not is_legal_move(board, sq("e4"), sq("d5"), PieceKind.PAWN, backward)

    def test_backward_then_forward_agree(self) -> None:
        # A pawn that could have come from d3 to e4 is legal forward d3 -> e4.
        board = Board()
        assert is_legal_move(
            board, sq("e4"), sq("d3"), PieceKind.PAWN, MoveDirection.BACKWARD
        )
        assert is_legal_move(board, sq("d3"), sq("e4"), PieceKind.PAWN)


class TestKnight:
    @pytest.mark.parametrize(
        "target", ["f6", "g5", "g3", "f2", "d2", "c3", "c5", "d6"]
    )
    def test_all_eight_jumps(self, target: str) -> None:
        assert is_legal_move(Board(), sq("e4"), sq(target), PieceKind.KNIGHT)

    def test_jumps_over_pieces(self) -> None:
        board = Board()
        for name in ("e5", "f5", "f4", "e3"):
            board.place(PieceKind.ROOK, sq(name))
        assert is_legal_move(board, sq("e4"), sq("f6"), PieceKind.KNIGHT)

    def test_rejects_non_jump(self) -> None:
        assert not is_legal_move(Board(), sq("e4"), sq("e6"), PieceKind.KNIGHT)


class TestSliders:
    def test_bishop_diagonal(self) -> None:
        assert is_legal_move(Board(), sq("a1"), sq("h8"), PieceKind.BISHOP)
        assert not is_legal_move(Board(), sq("a1"), sq("a8"), PieceKind.BISHOP)

    def test_rook_orthogonal(self) -> None:
        assert is_legal_move(Board(), sq("a1"), sq("a8"), PieceKind.ROOK)
        assert is_legal_move(Board(), sq("a1"), sq("h1"), PieceKind.ROOK)
        assert not is_legal_move(Board(), sq("a1"), sq("b2"), PieceKind.ROOK)

    def test_queen_both(self) -> None:
        board = Board()
        assert is_legal_move(board, sq("d1"), sq("d8"), PieceKind.QUEEN)
        assert is_legal_move(board, sq("d1"), sq("h5"), PieceKind.QUEEN)
        assert not is_legal_move(board, sq("d1"), sq("e3"), PieceKind.QUEEN)

    def test_blocked_line(self) -> None:
        board = Board()
        board.place(PieceKind.PAWN, sq("d4"))
        assert not is_legal_move(board, sq("a1"), sq("h8"), PieceKind.BISHOP)
        assert not is_legal_move(board, sq("d1"), sq("d8"), PieceKind.ROOK)
        assert not is_legal_move(board, sq("d1"), sq("d8"), PieceKind.QUEEN)

    def test_endpoints_do_not_block(self) -> None:
        board = Board()
        board.place(PieceKind.ROOK, sq("a1"))
        board.place(PieceKind.KNIGHT, sq("a8"))
        assert has_line_of_sight(board, sq("a1"), sq("a8"))

    def test_direction_does_not_matter_for_sliders(self) -> None:
        board = Board()
        assert is_legal_move(
            board, sq("c1"), sq("g5"), PieceKind.BISHOP, MoveDirection.BACKWARD
        )


class TestKing:
    def test_adjacent_squares(self) -> None:
        board = Board()
        for name in ("d3", "d4", "d5", "e3", "e5", "f3", "f4", "f5"):
            assert is_legal_move(board, sq("e4"), sq(name), PieceKind.KING)

    def test_rejects_two_squares(self) -> None:
        assert not is_legal_move(Board(), sq("e4"), sq("e6"), PieceKind.KING)

    def test_same_square_is_never_legal(self) -> None:
        for kind in PieceKind:
            assert not is_legal_move(Board(), sq("e4"), sq("e4"), kind)


class TestCapture:
    def test_capture_needs_a_victim(self) -> None:
        board = Board()
        board.place(PieceKind.ROOK, sq("a1"))
        assert not is_legal_capture(board, sq("a1"), sq("a8"), PieceKind.ROOK)
        board.place(PieceKind.KNIGHT, sq("a8"))
        assert is_legal_capture(board, sq("a1"), sq("a8"), PieceKind.ROOK)

    def test_king_is_never_captured(self) -> None:
        board = Board()
        board.place(PieceKind.ROOK, sq("a1"))
        board.place(PieceKind.KING, sq("a8"))
        assert not is_legal_capture(board, sq("a1"), sq("a8"), PieceKind.ROOK)

    def test_king_may_capture(self) -> None:
        board = Board()
        board.place(PieceKind.KING, sq("e4"))
        board.place(PieceKind.PAWN, sq("e5"))
        assert is_legal_capture(board, sq("e4"), sq("e5"), PieceKind.KING)
