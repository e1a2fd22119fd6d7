"""Tests for BoardScene rendering helpers and click mapping."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from hotseat.core.types import A1, A8, E2, E4, H1, H8
from hotseat.game.state import GameState
from hotseat.ui.board.board_scene import BoardScene
from hotseat.ui.styles.theme import BoardTheme


def _center(scene: BoardScene, vcol: int, vrow: int) -> QPointF:
    t = scene.TILE
    return QPointF(vcol * t + t / 2, vrow * t + t / 2)


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(_center(scene, 0, 0)) == A8
    assert scene._pos_to_square(_center(scene, 7, 7)) == H1

    scene.set_flipped(True)
    assert scene._pos_to_square(_center(scene, 0, 0)) == H1
    assert scene._pos_to_square(_center(scene, 7, 7)) == A8


def test_pos_outside_board_is_none() -> None:
    scene = BoardScene()
    t = scene.TILE
    assert scene._pos_to_square(QPointF(-1, 10)) is None
    assert scene._pos_to_square(QPointF(8 * t + 1, 10)) is None


def test_draws_sixty_four_squares_with_light_corner() -> None:
    scene = BoardScene()
    theme = BoardTheme.default()
    assert len(scene._square_items) == 64
    assert scene._square_items[A8].brush().color() == theme.light_square
    assert scene._square_items[H8].brush().color() == theme.dark_square
    assert scene._square_items[A1].brush().color() == theme.dark_square


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_state_syncs_piece_items_count() -> None:
    scene = BoardScene()
    scene.set_state(GameState.initial())
    assert len(scene._piece_items) == 32


def test_selection_highlights_destinations() -> None:
    scene = BoardScene()
    scene.set_state(GameState.initial().select(E2))
    assert len(scene._highlight_items) == 1
    assert len(scene._destination_items) == 2


def test_hiding_legal_moves_clears_destinations() -> None:
    scene = BoardScene()
    scene.set_state(GameState.initial().select(E2))

    scene.set_show_legal_moves(False)
    assert scene._destination_items == []
    assert len(scene._highlight_items) == 1


def test_last_move_highlighted_after_move() -> None:
    scene = BoardScene()
    scene.set_state(GameState.initial().select(E2).move_to(E4))
    assert len(scene._highlight_items) == 2
    assert scene._destination_items == []
    assert E4 in scene._piece_items
    assert E2 not in scene._piece_items


def test_theme_change_keeps_pieces() -> None:
    scene = BoardScene()
    scene.set_state(GameState.initial())
    scene.set_theme(BoardTheme.blue())
    assert len(scene._piece_items) == 32
    assert scene._square_items[A8].brush().color() == BoardTheme.blue().light_square
