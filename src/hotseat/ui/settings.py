"""User-configurable settings for the board window."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hotseat.ui.styles.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    def theme(self) -> BoardTheme:
        """Resolve :attr:`board_theme`, falling back to the default theme."""
        theme = THEMES.get(self.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", self.board_theme)
            return BoardTheme.default()
        return theme
