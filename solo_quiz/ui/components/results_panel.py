"""Component for the final score and leaderboard screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.ui_constants import (
    EXIT_BUTTON,
    FINAL_SCORE_TEMPLATE,
    PERSISTENCE_WARNING_TEMPLATE,
    PLAY_AGAIN_BUTTON,
    RESULTS_TITLE,
)
from solo_quiz.core.models import LeaderboardEntry
from solo_quiz.core.services.leaderboard import format_leaderboard_table
from solo_quiz.styling.color_palette import Theme
from solo_quiz.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component showing the participant's score and the ranked leaderboard."""

    def __init__(
        self,
        on_play_again: callable,
        on_exit: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_play_again = on_play_again
        self.on_exit = on_exit

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(RESULTS_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)

        self.final_score_label = QLabel("", self)
        self.final_score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.final_score_label)

        self.warning_label = QLabel("", self)
        self.warning_label.setWordWrap(True)
        self.warning_label.setStyleSheet(Styles.get_feedback_style(False))
        self.warning_label.setVisible(False)
        layout.addWidget(self.warning_label)

        self.leaderboard_view = QPlainTextEdit(self)
        self.leaderboard_view.setReadOnly(True)
        self.leaderboard_view.setStyleSheet(Styles.get_leaderboard_style())
        layout.addWidget(self.leaderboard_view, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.play_again_button = QPushButton(PLAY_AGAIN_BUTTON, self)
        self.play_again_button.clicked.connect(self.on_play_again)
        button_row.addWidget(self.play_again_button)

        self.exit_button = QPushButton(EXIT_BUTTON, self)
        self.exit_button.clicked.connect(self.on_exit)
        button_row.addWidget(self.exit_button)
        button_row.addStretch()
        layout.addLayout(button_row)

    def show_results(
        self,
        name: str,
        score: int,
        total: int,
        leaderboard: list[LeaderboardEntry],
        warning: str | None = None,
    ) -> None:
        self.final_score_label.setText(FINAL_SCORE_TEMPLATE.format(name=name, score=score, total=total))
        self.leaderboard_view.setPlainText(format_leaderboard_table(leaderboard))
        if warning:
            self.warning_label.setText(PERSISTENCE_WARNING_TEMPLATE.format(message=warning))
            self.warning_label.setVisible(True)
        else:
            self.warning_label.clear()
            self.warning_label.setVisible(False)

    def set_theme(self, theme: Theme) -> None:
        self.warning_label.setStyleSheet(Styles.get_feedback_style(False, theme))

    def apply_font_size(self, font_size: int) -> None:
        self.play_again_button.setStyleSheet(f"font-size: {font_size}pt;")
        self.exit_button.setStyleSheet(f"font-size: {font_size}pt;")
