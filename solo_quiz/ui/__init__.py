"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    confirm_abandon_session,
    show_error,
    show_info,
)
from .question_renderer import render_help_text, render_option_labels, render_question_header
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_abandon_session",
    "show_error",
    "show_info",
    "render_help_text",
    "render_option_labels",
    "render_question_header",
]
