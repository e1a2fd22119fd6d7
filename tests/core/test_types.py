"""Tests for square helpers and the Piece value object."""

import pytest

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import (
    ALL_SQUARES,
    A1,
    A8,
    E2,
    H1,
    is_valid_square,
    parse_square,
    square_name,
)


class TestSquares:
    def test_corner_constants(self) -> None:
        assert A8 == (0, 0)
        assert A1 == (7, 0)
        assert H1 == (7, 7)
        assert E2 == (6, 4)

    def test_square_name(self) -> None:
        assert square_name((6, 4)) == "e2"
        assert square_name((0, 7)) == "h8"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == (4, 4)
        assert parse_square("a8") == (0, 0)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44"])
    def test_parse_square_rejects_garbage(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_all_squares_row_major(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert ALL_SQUARES[0] == (0, 0)
        assert ALL_SQUARES[9] == (1, 1)
        assert ALL_SQUARES[-1] == (7, 7)

    def test_is_valid_square(self) -> None:
        assert is_valid_square((7, 7))
        assert not is_valid_square((8, 0))
        assert not is_valid_square((0, -1))


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_str_is_fen_letter(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.QUEEN).symbol == "♛"

    def test_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert str(Color.WHITE) == "white"
