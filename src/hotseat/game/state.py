"""Game state snapshot — board, turn and the current selection."""

from __future__ import annotations

from dataclasses import dataclass, replace

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.notation import board_from_fen
from hotseat.core.piece import Piece
from hotseat.core.types import Square, square_name


class IllegalMoveError(ValueError):
    """Raised when a move outside the selected piece's destinations is applied."""


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of a two-player game.

    Every operation returns a new ``GameState``; the board inside a state
    is never modified after construction.  Turn order is enforced here
    (only the side to move may select), not in the move rules.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    selected: Square | None = None
    destinations: tuple[Square, ...] = ()
    last_move: Move | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, white to move."""
        return cls(Board.initial())

    @classmethod
    def from_fen(cls, placement: str, side_to_move: Color = Color.WHITE) -> GameState:
        return cls(board_from_fen(placement), side_to_move)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def is_destination(self, sq: Square) -> bool:
        return sq in self.destinations

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    # ── Transitions ──────────────────────────────────────────────────────

    def select(self, sq: Square) -> GameState:
        """Select *sq* if it holds a piece of the side to move, else deselect."""
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return self.deselect()
        destinations = MoveGenerator(self.board).legal_destinations(sq)
        return replace(self, selected=sq, destinations=tuple(destinations))

    def deselect(self) -> GameState:
        if self.selected is None and not self.destinations:
            return self
        return replace(self, selected=None, destinations=())

    def move_to(self, sq: Square) -> GameState:
        """Move the selected piece to *sq* and pass the turn."""
        if self.selected is None:
            raise IllegalMoveError("No piece selected")
        if sq not in self.destinations:
            raise IllegalMoveError(
                f"{square_name(sq)} is not a legal destination "
                f"from {square_name(self.selected)}"
            )
        move = Move(self.selected, sq)
        return GameState(
            board=self.board.with_move(move.from_sq, move.to_sq),
            side_to_move=self.side_to_move.opposite,
            last_move=move,
        )

    def click(self, sq: Square) -> GameState:
        """Apply one click on *sq*.

        Clicking the selected square deselects it, clicking a highlighted
        destination plays the move, and anything else (re)selects.
        """
        if self.selected is not None:
            if sq == self.selected:
                return self.deselect()
            if sq in self.destinations:
                return self.move_to(sq)
        return self.select(sq)
