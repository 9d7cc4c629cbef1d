"""Component showing the live question, its countdown and feedback."""

from __future__ import annotations

import math

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.quiz_constants import TIME_LIMIT_WARNING_SECONDS
from solo_quiz.constants.ui_constants import (
    CORRECT_FEEDBACK,
    COUNTDOWN_REFRESH_INTERVAL_MS,
    FILL_BLANK_PROMPT,
    SUBMIT_BUTTON,
    TIME_LABEL_TEMPLATE,
)
from solo_quiz.core.models import (
    Feedback,
    FillBlankQuestion,
    MultipleChoiceQuestion,
    Question,
    TrueFalseQuestion,
)
from solo_quiz.styling.color_palette import Theme
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.question_renderer import render_option_labels, render_question_header


class QuestionPanel(QWidget):
    """UI component for answering one question at a time.

    The panel owns the visible countdown. It polls ``remaining_seconds`` every
    100 ms and calls ``on_time_up`` once the deadline has run out.
    """

    def __init__(
        self,
        on_submit: callable,
        on_time_up: callable,
        remaining_seconds: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_submit = on_submit
        self.on_time_up = on_time_up
        self.remaining_seconds = remaining_seconds

        self._game_font_size: int = 14
        self._theme = Theme.LIGHT
        self._current_question: Question | None = None
        self._duration_seconds: float = 0.0
        self._answer_buttons: list[QRadioButton] = []
        self._answer_group: QButtonGroup | None = None
        self._fill_blank_input: QLineEdit | None = None

        self._build_ui()
        self._configure_countdown_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        top_row = QHBoxLayout()
        self.question_label = QLabel(self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        top_row.addWidget(self.question_label, stretch=1)

        self.time_label = QLabel("", self)
        self.time_label.setAlignment(Qt.AlignRight | Qt.AlignTop)
        self.time_label.setStyleSheet(Styles.get_timer_style(False))
        top_row.addWidget(self.time_label)
        layout.addLayout(top_row)

        self.time_progress = QProgressBar(self)
        self.time_progress.setRange(0, 1000)
        self.time_progress.setTextVisible(False)
        layout.addWidget(self.time_progress)

        self.answer_container = QWidget(self)
        self.answer_layout = QVBoxLayout()
        self.answer_container.setLayout(self.answer_layout)
        layout.addWidget(self.answer_container, stretch=1)

        bottom_row = QHBoxLayout()
        self.feedback_label = QLabel(" ", self)
        self.feedback_label.setWordWrap(True)
        bottom_row.addWidget(self.feedback_label, stretch=1)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self._handle_submit)
        bottom_row.addWidget(self.submit_button)
        layout.addLayout(bottom_row)

    def _configure_countdown_timer(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(COUNTDOWN_REFRESH_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._tick_countdown)

    def show_question(self, question: Question, number: int, total: int, remaining_seconds: float) -> None:
        self._current_question = question
        self._duration_seconds = max(remaining_seconds, 0.001)
        self.question_label.setText(
            render_question_header(question, number, total, font_size=self._game_font_size)
        )
        self.feedback_label.setText(" ")
        self._rebuild_answer_widgets(question)
        self.submit_button.setEnabled(True)
        self._update_countdown_display(remaining_seconds)
        self.countdown_timer.start()

    def show_feedback(self, feedback: Feedback) -> None:
        self.stop_countdown()
        self.submit_button.setEnabled(False)
        self._set_answers_enabled(False)
        self.feedback_label.setStyleSheet(
            Styles.get_feedback_style(feedback.correct, self._theme) + f" font-size: {self._game_font_size}pt;"
        )
        self.feedback_label.setText(CORRECT_FEEDBACK if feedback.correct else feedback.explanation)

    def stop_countdown(self) -> None:
        self.countdown_timer.stop()

    def collect_answer(self) -> str | None:
        """Current answer as text, or None when nothing was chosen or typed."""
        question = self._current_question
        if question is None:
            return None
        if isinstance(question, FillBlankQuestion):
            text = self._fill_blank_input.text() if self._fill_blank_input else ""
            return text.strip() or None
        if self._answer_group is None:
            return None
        checked = self._answer_group.checkedButton()
        if checked is None:
            return None
        if isinstance(question, MultipleChoiceQuestion):
            return str(self._answer_group.id(checked))
        return checked.text()

    def _handle_submit(self) -> None:
        self.on_submit(self.collect_answer())

    def _tick_countdown(self) -> None:
        remaining = self.remaining_seconds()
        self._update_countdown_display(remaining)
        if remaining <= 0:
            self.countdown_timer.stop()
            self.on_time_up()

    def _update_countdown_display(self, remaining: float) -> None:
        seconds_left = max(0, math.ceil(remaining))
        self.time_label.setText(TIME_LABEL_TEMPLATE.format(seconds=seconds_left))
        self.time_label.setStyleSheet(
            Styles.get_timer_style(seconds_left <= TIME_LIMIT_WARNING_SECONDS, self._theme)
        )
        fraction = min(1.0, max(0.0, remaining / self._duration_seconds)) if self._duration_seconds else 0.0
        self.time_progress.setValue(int(fraction * 1000))

    def _rebuild_answer_widgets(self, question: Question) -> None:
        while self.answer_layout.count():
            item = self.answer_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        if self._answer_group is not None:
            self._answer_group.deleteLater()
        self._answer_buttons = []
        self._answer_group = None
        self._fill_blank_input = None

        if isinstance(question, FillBlankQuestion):
            self.answer_layout.addWidget(QLabel(FILL_BLANK_PROMPT, self.answer_container))
            self._fill_blank_input = QLineEdit(self.answer_container)
            self._fill_blank_input.returnPressed.connect(self._handle_submit)
            self._fill_blank_input.setStyleSheet(f"font-size: {self._game_font_size}pt;")
            self.answer_layout.addWidget(self._fill_blank_input)
            self._fill_blank_input.setFocus()
            return

        if isinstance(question, TrueFalseQuestion):
            labels = ["True", "False"]
        else:
            labels = render_option_labels(question)

        self._answer_group = QButtonGroup(self.answer_container)
        for button_id, label in enumerate(labels, start=1):
            button = QRadioButton(label, self.answer_container)
            button.setStyleSheet(f"font-size: {self._game_font_size}pt;")
            self._answer_group.addButton(button, button_id)
            self.answer_layout.addWidget(button)
            self._answer_buttons.append(button)
        self.answer_layout.addStretch()

    def _set_answers_enabled(self, enabled: bool) -> None:
        for button in self._answer_buttons:
            button.setEnabled(enabled)
        if self._fill_blank_input is not None:
            self._fill_blank_input.setEnabled(enabled)

    def set_game_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self.feedback_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.submit_button.setStyleSheet(f"font-size: {font_size}pt;")

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.time_label.setStyleSheet(Styles.get_timer_style(False, theme))
