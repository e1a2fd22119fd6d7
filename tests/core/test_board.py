"""Tests for Board."""

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4, E5, E7,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert E1 == (7, 4)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert E8 == (0, 4)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[6, col] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[1, col] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[row, col] is None

    def test_piece_count(self) -> None:
        assert Board.initial().piece_count() == 32


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_pieces_row_major(self) -> None:
        board = Board.initial()
        black = board.pieces(Color.BLACK)
        assert len(black) == 16
        assert black[0] == A8
        assert black == sorted(black)
        assert len(board.pieces(Color.WHITE)) == 16

    def test_iteration_yields_occupied_squares(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.QUEEN)
        board[A8] = Piece(Color.BLACK, PieceType.ROOK)
        assert list(board) == [
            (A8, Piece(Color.BLACK, PieceType.ROOK)),
            (E4, Piece(Color.WHITE, PieceType.QUEEN)),
        ]

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.piece_count() == 0

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestWithMove:
    def test_relocates_piece(self) -> None:
        board = Board.initial()
        after = board.with_move(E2, E4)
        assert after[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert after.is_empty(E2)

    def test_original_untouched(self) -> None:
        board = Board.initial()
        board.with_move(E2, E4)
        assert board == Board.initial()

    def test_capture_replaces_target(self) -> None:
        board = Board()
        board[E5] = Piece(Color.WHITE, PieceType.ROOK)
        board[E7] = Piece(Color.BLACK, PieceType.KNIGHT)
        after = board.with_move(E5, E7)
        assert after[E7] == Piece(Color.WHITE, PieceType.ROOK)
        assert after.piece_count() == 1

    def test_piece_count_never_increases(self) -> None:
        board = Board.initial()
        after = board.with_move(E2, E4).with_move(E7, E5)
        assert after.piece_count() == 32

    def test_empty_source_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece on e4"):
            Board.initial().with_move(E4, E5)
