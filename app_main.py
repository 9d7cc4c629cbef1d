"""Application entry point for SoloQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from solo_quiz.constants.about import APP_NAME
from solo_quiz.core.services.leaderboard import LeaderboardStore
from solo_quiz.core.settings import QuizSettings
from solo_quiz.server.api_server import start_api_server
from solo_quiz.ui.quiz_main_window import QuizMainWindow
from solo_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the leaderboard viewer, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s…", APP_NAME)

    settings = QuizSettings.from_environment()
    logger.info("Question bank: %s", settings.bank_path)
    logger.info("Results log: %s", settings.results_path)

    if settings.api_enabled:
        start_api_server(
            LeaderboardStore(settings.results_path),
            host=settings.api_host,
            port=settings.api_port,
            default_limit=settings.leaderboard_limit,
        )

    app = QApplication(sys.argv)
    window = QuizMainWindow(settings)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
