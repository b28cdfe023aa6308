"""Tests for forward solution replay."""

from doublestrike.core.board import Board
from doublestrike.core.enums import PieceKind
from doublestrike.core.move import SolutionMove
from doublestrike.core.types import parse_square
from doublestrike.generator.validator import replay_solution, validate_solution


def _board(**pieces: PieceKind) -> tuple[Board, dict[str, int]]:
    board = Board()
    ids = {
        name: board.place(kind, parse_square(name)) for name, kind in pieces.items()
    }
    return board, ids


def _move(
    src: str,
    dst: str,
    piece: PieceKind,
    captured: PieceKind,
    piece_id: int,
    promotion: bool = False,
) -> SolutionMove:
    return SolutionMove(
        parse_square(src), parse_square(dst), piece, captured, piece_id, promotion
    )


R, N, B, P, Q, K = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.PAWN,
    PieceKind.QUEEN,
    PieceKind.KING,
)


class TestValidSolutions:
    def test_rook_double_capture(self) -> None:
        board, ids = _board(a1=R, a4=N, d4=B)
        solution = [
            _move("a1", "a4", R, N, ids["a1"]),
            _move("a4", "d4", R, B, ids["a1"]),
        ]
        result = validate_solution(board, solution)
        assert result
        assert result.reason == ""
        assert board.piece_count() == 3  # input board untouched

    def test_king_survives(self) -> None:
        board, ids = _board(e4=K, e5=P, f5=N)
        solution = [
            _move("e4", "e5", K, P, ids["e4"]),
            _move("e5", "f5", K, N, ids["e4"]),
        ]
        assert validate_solution(board, solution)

    def test_promotion(self) -> None:
        board, ids = _board(e7=P, f8=N)
        solution = [_move("e7", "f8", Q, N, ids["e7"], promotion=True)]
        assert validate_solution(board, solution)
        final = replay_solution(board, solution)
        assert final.kind_at(parse_square("f8")) == Q


class TestRejectedSolutions:
    def test_king_capture(self) -> None:
        board, ids = _board(a1=R, a4=K)
        result = validate_solution(board, [_move("a1", "a4", R, K, ids["a1"])])
        assert not result
        assert "king" in result.reason
        assert result.move_index == 0

    def test_pieces_left_over(self) -> None:
        board, ids = _board(a1=R, a4=N, h1=B)
        result = validate_solution(board, [_move("a1", "a4", R, N, ids["a1"])])
        assert not result
        assert "2 pieces remain" in result.reason

    def test_third_move_by_same_piece(self) -> None:
        board, ids = _board(a1=R, a4=N, d4=B, d8=P)
        rook = ids["a1"]
        solution = [
            _move("a1", "a4", R, N, rook),
            _move("a4", "d4", R, B, rook),
            _move("d4", "d8", R, P, rook),
        ]
        result = validate_solution(board, solution)
        assert not result
        assert result.move_index == 2
        assert "twice" in result.reason

    def test_wrong_source_kind(self) -> None:
        board, ids = _board(a1=R, a4=N)
        result = validate_solution(board, [_move("a1", "a4", B, N, ids["a1"])])
        assert not result
        assert "on source" in result.reason

    def test_wrong_captured_kind(self) -> None:
        board, ids = _board(a1=R, a4=N)
        result = validate_solution(board, [_move("a1", "a4", R, B, ids["a1"])])
        assert not result
        assert "on target" in result.reason

    def test_illegal_geometry(self) -> None:
        board, ids = _board(a1=R, d4=N)
        result = validate_solution(board, [_move("a1", "d4", R, N, ids["a1"])])
        assert not result
        assert "illegal" in result.reason

    def test_blocked_line(self) -> None:
        board, ids = _board(a1=R, a3=P, a6=N)
        result = validate_solution(board, [_move("a1", "a6", R, N, ids["a1"])])
        assert not result

    def test_pawn_reaching_last_rank_must_promote(self) -> None:
        board, ids = _board(e7=P, f8=N)
        result = validate_solution(board, [_move("e7", "f8", P, N, ids["e7"])])
        assert not result
        assert result.move_index == 0

    def test_promotion_off_the_last_rank(self) -> None:
        board, ids = _board(e4=P, f5=N)
        result = validate_solution(
            board, [_move("e4", "f5", Q, N, ids["e4"], promotion=True)]
        )
        assert not result
        assert "promotion" in result.reason
