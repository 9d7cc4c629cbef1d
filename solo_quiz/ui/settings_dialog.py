"""Settings dialog for configuring SoloQuiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
)

from solo_quiz.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring quiz timing, session length and display."""

    def __init__(
        self,
        parent=None,
        font_size: int = 12,
        time_per_question_seconds: int = 10,
        max_questions: int = 10,
        leaderboard_limit: int = 10,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._font_size = font_size
        self._time_per_question_seconds = time_per_question_seconds
        self._max_questions = max_questions
        self._leaderboard_limit = max(1, min(50, leaderboard_limit))
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.time_spinbox = self._add_spin_row(
            quiz_layout,
            "Time per question:",
            "Seconds allowed before a question counts as timed out",
            (3, 120),
            self._time_per_question_seconds,
            " s",
        )
        self.questions_spinbox = self._add_spin_row(
            quiz_layout,
            "Questions per session:",
            "Maximum number of shuffled questions drawn from the bank",
            (1, 100),
            self._max_questions,
        )
        layout.addWidget(quiz_group)

        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.font_spinbox = self._add_spin_row(
            display_layout,
            "Font size (questions, answers):",
            "Font size used on the question screen",
            (8, 32),
            self._font_size,
            " pt",
        )
        self.leaderboard_spinbox = self._add_spin_row(
            display_layout,
            "Leaderboard slots (top N):",
            "Number of results shown after a quiz",
            (1, 50),
            self._leaderboard_limit,
        )
        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._theme is Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)
        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_spin_row(
        self,
        layout: QVBoxLayout,
        text: str,
        tooltip: str,
        value_range: tuple[int, int],
        value: int,
        suffix: str = "",
    ) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(text)
        label.setToolTip(tooltip)
        spinbox = QSpinBox()
        spinbox.setRange(*value_range)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_font_size(self) -> int:
        return self.font_spinbox.value()

    def get_time_per_question_seconds(self) -> int:
        return self.time_spinbox.value()

    def get_max_questions(self) -> int:
        return self.questions_spinbox.value()

    def get_leaderboard_limit(self) -> int:
        """Get desired number of leaderboard slots."""
        return self.leaderboard_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT
