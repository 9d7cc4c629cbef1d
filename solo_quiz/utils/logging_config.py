"""Logging configuration helpers for the quiz application."""

from __future__ import annotations

import logging
from logging import Logger
import os

LOG_LEVEL_ENV = "SOLO_QUIZ_LOG_LEVEL"


def configure_logging(level: str | int | None = None) -> Logger:
    """Configure basic logging for the application and return the package logger."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("solo_quiz")
