"""MainWindow — top-level window assembling the board and turn display."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.types import make_square
from hotseat.game.controller import GameController
from hotseat.game.state import GameState
from hotseat.ui.board.board_view import BoardView
from hotseat.ui.settings import AppSettings

_TURN_TEXT: dict[Color, str] = {
    Color.WHITE: "♔ White",
    Color.BLACK: "♛ Black",
}


class MainWindow(QMainWindow):
    """Main application window for Hotseat."""

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("♔ Hotseat Chess ♛")
        self.setMinimumSize(480, 560)
        self.resize(720, 800)

        self._controller = controller or GameController()
        self._settings = settings or AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self._on_state_changed(self._controller.state)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._board_view = BoardView()
        layout.addWidget(self._board_view, stretch=1)

        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnLabel")
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        self.setCentralWidget(central)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        self._act_new = QAction("&New game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_game)
        game_menu.addAction(self._act_new)

        self._act_flip = QAction("&Flip board", self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip)
        game_menu.addAction(self._act_flip)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._controller.events.on_state_changed.append(self._on_state_changed)
        self._controller.events.on_move.append(self._on_move)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(s.theme())
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.click(make_square(row, col))

    def _on_new_game(self) -> None:
        self._controller.new_game()
        self._status_bar.clearMessage()

    def _on_flip(self) -> None:
        self._settings.flipped = not self._settings.flipped
        self._board_view.board_scene.set_flipped(self._settings.flipped)

    def _on_state_changed(self, state: GameState) -> None:
        self._board_view.board_scene.set_state(state)
        self._turn_label.setText(f"Current player: {_TURN_TEXT[state.side_to_move]}")

    def _on_move(self, move: Move, state: GameState) -> None:
        piece = state.board[move.to_sq]
        symbol = piece.symbol if piece is not None else ""
        self._status_bar.showMessage(f"Last move: {symbol} {move}")
