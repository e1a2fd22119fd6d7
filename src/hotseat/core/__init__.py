"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from hotseat.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_destinations(parse_square("g1")))
"""

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator, legal_destinations
from hotseat.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from hotseat.core.piece import Piece
from hotseat.core.rules import MoveRules, is_legal_move, is_path_clear
from hotseat.core.types import (
    ALL_SQUARES,
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveRules",
    "Piece",
    # Legality
    "is_legal_move",
    "is_path_clear",
    "legal_destinations",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
