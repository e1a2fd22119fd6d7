"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

_LOG_LEVEL_ENV = "HOTSEAT_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known:
        logging.getLogger(__name__).warning(
            "Unknown log level %r in %s, using WARNING", level_name, _LOG_LEVEL_ENV
        )


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from hotseat.ui.main_window import MainWindow
    from hotseat.ui.styles.theme import APP_STYLE

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Hotseat")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)

    window = MainWindow()
    window.show()

    return app.exec()


def main() -> None:
    """Launch the Hotseat application."""
    _configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
