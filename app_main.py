"""Application entry point for Multitainment."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from multitainment.constants.about import APP_NAME, APP_VERSION
from multitainment.core.quiz_manager import QuizManager
from multitainment.ui.main_window import MainWindow
from multitainment.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    window = MainWindow(quiz_manager=QuizManager())
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
