"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from solo_quiz.constants.about import HELP_TEXT_TEMPLATE
from solo_quiz.constants.ui_constants import QUESTION_HEADER_TEMPLATE
from solo_quiz.core.markdown_renderer import renderer
from solo_quiz.core.models import MultipleChoiceQuestion, Question


def render_question_header(question: Question, number: int, total: int, font_size: int = 14) -> str:
    """Render ``"Q<n>/<total>: <text>"`` as rich text for a ``QLabel``.

    Args:
        question: The question being presented
        number: 1-based position of the question in the session
        total: Number of questions in the session
        font_size: Font size in points for the question text (default 14)

    Returns:
        HTML string ready for display in a rich-text QLabel
    """
    header = QUESTION_HEADER_TEMPLATE.format(number=number, total=total)
    fragment = renderer.render_fragment(header + question.text)
    return f'<div style="font-size: {font_size}pt;">{fragment}</div>'


def render_option_labels(question: Question) -> list[str]:
    """Labels for the MCQ radio buttons, numbered the way answers are graded."""
    if not isinstance(question, MultipleChoiceQuestion):
        return []
    return [f"{index}. {option}" for index, option in enumerate(question.options, start=1)]


def render_help_text(max_questions: int, time_per_question_seconds: int) -> str:
    """Help dialog text describing the bank format and the current session limits."""
    return HELP_TEXT_TEMPLATE.format(max_questions=max_questions, seconds=time_per_question_seconds)
