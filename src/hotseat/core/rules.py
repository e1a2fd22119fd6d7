"""Per-piece movement geometry and path clearance.

Legality here is purely geometric: whose turn it is and whether the mover's
king is left in check are not considered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import Square

if TYPE_CHECKING:
    from hotseat.core.board import Board

_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MoveRules:
    """Static legality checker for a single piece move on a :class:`Board`.

    ``is_legal_move`` does not look at the destination's colour for
    non-pawn pieces: a rook "move" onto a friendly piece is reported legal.
    Excluding own-colour destinations is the job of
    :class:`~hotseat.core.move_generator.MoveGenerator`.

    A zero-displacement query (``from_sq == to_sq``) is reported legal for
    kings, rooks, bishops and queens; callers treat a click on the selected
    square as a deselect before asking.
    """

    @staticmethod
    def is_legal_move(board: Board, from_sq: Square, to_sq: Square) -> bool:
        piece = board[from_sq]
        if piece is None:
            return False
        check = _PIECE_CHECKS[piece.piece_type]
        return check(board, piece, from_sq, to_sq)

    @staticmethod
    def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between the endpoints is empty.

        Only meaningful for straight or diagonal lines.
        """
        row_step = _sign(to_sq[0] - from_sq[0])
        col_step = _sign(to_sq[1] - from_sq[1])

        row = from_sq[0] + row_step
        col = from_sq[1] + col_step
        while (row, col) != to_sq:
            if board[row, col] is not None:
                return False
            row += row_step
            col += col_step
        return True

    # ── Per-piece geometry ───────────────────────────────────────────────

    @staticmethod
    def _pawn(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        direction = _PAWN_DIRECTION[piece.color]
        start_row = _PAWN_START_ROW[piece.color]
        from_row, from_col = from_sq
        to_row, to_col = to_sq

        if from_col == to_col:
            if to_row == from_row + direction and board.is_empty(to_sq):
                return True
            # Only the destination is checked on the double step.
            return (
                from_row == start_row
                and to_row == from_row + 2 * direction
                and board.is_empty(to_sq)
            )

        if abs(to_col - from_col) == 1 and to_row == from_row + direction:
            target = board[to_sq]
            return target is not None and target.color != piece.color

        return False

    @staticmethod
    def _rook(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        if from_sq[0] != to_sq[0] and from_sq[1] != to_sq[1]:
            return False
        return MoveRules.is_path_clear(board, from_sq, to_sq)

    @staticmethod
    def _bishop(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        if abs(to_sq[0] - from_sq[0]) != abs(to_sq[1] - from_sq[1]):
            return False
        return MoveRules.is_path_clear(board, from_sq, to_sq)

    @staticmethod
    def _queen(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        row_diff = abs(to_sq[0] - from_sq[0])
        col_diff = abs(to_sq[1] - from_sq[1])
        if not (row_diff == 0 or col_diff == 0 or row_diff == col_diff):
            return False
        return MoveRules.is_path_clear(board, from_sq, to_sq)

    @staticmethod
    def _knight(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        row_diff = abs(to_sq[0] - from_sq[0])
        col_diff = abs(to_sq[1] - from_sq[1])
        return (row_diff, col_diff) in ((2, 1), (1, 2))

    @staticmethod
    def _king(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1


_PieceCheck = Callable[["Board", Piece, Square, Square], bool]

_PIECE_CHECKS: dict[PieceType, _PieceCheck] = {
    PieceType.PAWN: MoveRules._pawn,
    PieceType.KNIGHT: MoveRules._knight,
    PieceType.BISHOP: MoveRules._bishop,
    PieceType.ROOK: MoveRules._rook,
    PieceType.QUEEN: MoveRules._queen,
    PieceType.KING: MoveRules._king,
}

is_legal_move = MoveRules.is_legal_move
is_path_clear = MoveRules.is_path_clear
