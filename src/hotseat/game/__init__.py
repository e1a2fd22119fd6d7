"""Game management layer — state snapshots and their owner.

Quick start::

    from hotseat.game import GameController

    ctrl = GameController()
    ctrl.click((6, 4))   # select the e2 pawn
    ctrl.click((4, 4))   # play e2-e4
"""

from hotseat.game.controller import GameController, GameEvents
from hotseat.game.state import GameState, IllegalMoveError

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "IllegalMoveError",
]
