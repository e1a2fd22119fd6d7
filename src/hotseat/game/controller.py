"""GameController — owner of the current game state.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.types import Square, square_name
from hotseat.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[GameState], None]
MoveCallback = Callable[[Move, GameState], None]  # move, state after


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Holds the single mutable reference to the current :class:`GameState`.

    Each action replaces the state wholesale and then notifies listeners.
    Methods are meant to be called from one thread (the UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState.initial()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(
        self,
        placement: str | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Start over from the initial layout or from a FEN *placement*."""
        if placement is None:
            state = GameState(Board.initial(), side_to_move)
        else:
            state = GameState.from_fen(placement, side_to_move)
        _LOGGER.info("New game, %s to move", side_to_move)
        self._replace(state)

    def click(self, sq: Square) -> GameState:
        """Handle a click on *sq* and return the resulting state."""
        before = self._state
        after = before.click(sq)
        if after is before:
            return after

        self._replace(after)

        if after.last_move is not None and after.last_move is not before.last_move:
            move = after.last_move
            _LOGGER.debug("%s played %s", before.side_to_move, move)
            for cb in self.events.on_move:
                cb(move, after)
            if not MoveGenerator(after.board).legal_moves(after.side_to_move):
                _LOGGER.info("%s has no legal moves", after.side_to_move)
        elif after.selected is not None:
            _LOGGER.debug(
                "Selected %s (%d destinations)",
                square_name(after.selected),
                len(after.destinations),
            )
        return after

    def _replace(self, state: GameState) -> None:
        self._state = state
        for cb in self.events.on_state_changed:
            cb(state)
