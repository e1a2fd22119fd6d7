"""Destination enumeration for a selected piece."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.rules import MoveRules
from hotseat.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from hotseat.core.board import Board


class MoveGenerator:
    """Enumerates legal destinations on a fixed board snapshot."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Squares the piece on *from_sq* may move to, in row-major order.

        A destination must pass :meth:`MoveRules.is_legal_move` and must not
        hold a piece of the mover's own colour. An empty source has none.
        """
        board = self._board
        piece = board[from_sq]
        if piece is None:
            return []

        destinations: list[Square] = []
        for to_sq in ALL_SQUARES:
            if not MoveRules.is_legal_move(board, from_sq, to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != piece.color:
                destinations.append(to_sq)
        return destinations

    def legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for every piece of *color*."""
        moves: list[Move] = []
        for from_sq in self._board.pieces(color):
            for to_sq in self.legal_destinations(from_sq):
                moves.append(Move(from_sq, to_sq))
        return moves


def legal_destinations(board: Board, from_sq: Square) -> list[Square]:
    """Stateless shortcut for ``MoveGenerator(board).legal_destinations``."""
    return MoveGenerator(board).legal_destinations(from_sq)
