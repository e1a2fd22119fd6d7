"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from hotseat.core.enums import Color
from hotseat.core.piece import Piece
from hotseat.core.types import ALL_SQUARES, Square, make_square, square_name
from hotseat.game.state import GameState
from hotseat.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and pieces of a GameState.

    The scene makes no decisions: a press on a square is reported through
    ``square_clicked`` and the owner answers with :meth:`set_state`.

    Signals:
        square_clicked(int, int): row and column of the pressed square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._destination_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Show *state*: pieces, selection and destination highlights."""
        self._state = state
        self._sync_pieces()
        self._sync_highlights()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation (white at the top)."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE

        for sq in ALL_SQUARES:
            row, col = sq
            vc, vr = self._visual_coords(sq)
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers on the left edge, file letters on the bottom edge
            if vc == 0:
                self._add_coord(square_name(sq)[1], coord_color, vc * t + 2, vr * t + 1)
            if vr == 7:
                self._add_coord(
                    square_name(sq)[0], coord_color, vc * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(self, label: str, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(QFont("Helvetica Neue", max(9, self.TILE // 8)))
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current state."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._state.board:
            item = QGraphicsSimpleTextItem(_glyph(piece))
            item.setFont(font)
            if piece.color == Color.WHITE:
                item.setBrush(QBrush(self._theme.white_piece))
                item.setPen(QPen(self._theme.black_piece, 1.2))
            else:
                item.setBrush(QBrush(self._theme.black_piece))
            bounds = item.boundingRect()
            vc, vr = self._visual_coords(sq)
            item.setPos(
                vc * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._destination_items)
        state = self._state
        if state is None:
            return

        if state.last_move is not None:
            for sq in (state.last_move.from_sq, state.last_move.to_sq):
                rect = self._make_highlight(sq, self._theme.last_move)
                rect.setZValue(0.5)
                self._highlight_items.append(rect)

        if state.selected is not None:
            rect = self._make_highlight(state.selected, self._theme.highlight_selected)
            self._highlight_items.append(rect)

        if self._show_legal_moves:
            for sq in state.destinations:
                dot = self._make_highlight(sq, self._theme.highlight_destination)
                self._destination_items.append(dot)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(*sq)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a board square to visual (column, row)."""
        row, col = sq
        if self._flipped:
            return 7 - col, 7 - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        vc = int(pos.x() // t)
        vr = int(pos.y() // t)
        if not (0 <= vc < 8 and 0 <= vr < 8):
            return None
        if self._flipped:
            return make_square(7 - vr, 7 - vc)
        return make_square(vr, vc)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect


def _glyph(piece: Piece) -> str:
    # Filled figurines for both sides; colour comes from the brush.
    return Piece(Color.BLACK, piece.piece_type).symbol
