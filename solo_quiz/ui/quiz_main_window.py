"""Qt main window walking one participant through start, quiz and results."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto
import logging

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
)
from solo_quiz.constants.ui_constants import (
    ABOUT_BUTTON,
    EMPTY_BANK_TEMPLATE,
    EMPTY_BANK_TITLE,
    HELP_BUTTON,
    LOAD_ERROR_TITLE,
    PERSISTENCE_WARNING_TEMPLATE,
    SETTINGS_BUTTON,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from solo_quiz.core.errors import (
    EmptyBankError,
    ErrorKind,
    LoadError,
    ValidationError,
)
from solo_quiz.core.models import Feedback, LeaderboardEntry, Question
from solo_quiz.core.services.quiz_session import QuizSession, SessionState
from solo_quiz.core.settings import QuizSettings
from solo_quiz.styling.styles import Styles
from solo_quiz.ui.components.question_panel import QuestionPanel
from solo_quiz.ui.components.results_panel import ResultsPanel
from solo_quiz.ui.components.start_panel import StartPanel
from solo_quiz.ui.dialog_helpers import confirm_abandon_session, show_error, show_info
from solo_quiz.ui.question_renderer import render_help_text
from solo_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class WindowMode(Enum):
    """Page currently shown by the main window."""

    START = auto()
    QUIZ = auto()
    RESULTS = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window; acts as the session's listener.

    The session is built with ``auto_expire=False``: the question panel's
    ``QTimer`` watches the deadline and reports a timeout through
    ``submit(timed_out=True)``, so every callback arrives on the GUI thread.
    """

    def __init__(self, settings: QuizSettings) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.settings = settings
        self._font_size: int = 12
        self._mode = WindowMode.START
        self.session = QuizSession.from_settings(settings, listener=self, auto_expire=False)

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.start_panel = StartPanel(on_start=self._handle_start, parent=self)
        self.question_panel = QuestionPanel(
            on_submit=self._handle_submit,
            on_time_up=self._handle_time_up,
            remaining_seconds=self.session.remaining_seconds,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            on_play_again=self._handle_play_again,
            on_exit=self.close,
            parent=self,
        )
        self.mode_stack.addWidget(self.start_panel)
        self.mode_stack.addWidget(self.question_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(WindowMode.START)

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: WindowMode) -> None:
        self._mode = mode
        self.settings_button.setEnabled(mode != WindowMode.QUIZ)
        index_map = {
            WindowMode.START: 0,
            WindowMode.QUIZ: 1,
            WindowMode.RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- Shell actions ---

    def _handle_start(self, name: str) -> None:
        try:
            self.session.start(name)
        except ValidationError as exc:
            self.start_panel.show_validation_error(str(exc))
            return
        except LoadError as exc:
            logger.error("Could not load question bank: %s", exc)
            show_error(self, LOAD_ERROR_TITLE, str(exc))
            return
        except EmptyBankError:
            show_error(
                self,
                EMPTY_BANK_TITLE,
                EMPTY_BANK_TEMPLATE.format(path=self.settings.bank_path),
            )
            return

        self.statusBar().clearMessage()
        self._set_mode(WindowMode.QUIZ)
        self.session.advance()

    def _handle_submit(self, answer: str | None) -> None:
        if not self.session.is_question_live:
            return
        self.session.submit(answer)

    def _handle_time_up(self) -> None:
        if not self.session.is_question_live:
            return
        self.session.submit(timed_out=True)

    def _advance_after_pause(self) -> None:
        # The participant may have closed the window or reset during the pause.
        if self.session.state is not SessionState.IN_PROGRESS or self.session.is_question_live:
            return
        self.session.advance()

    def _handle_play_again(self) -> None:
        self.session.reset()
        self.start_panel.reset_state()
        self._set_mode(WindowMode.START)

    # --- SessionListener ---

    def on_question_presented(self, question: Question, remaining_seconds: float) -> None:
        self.question_panel.show_question(
            question,
            self.session.question_number,
            self.session.total,
            remaining_seconds,
        )

    def on_feedback(self, feedback: Feedback) -> None:
        self.question_panel.show_feedback(feedback)
        QTimer.singleShot(self.settings.feedback_pause_ms, self._advance_after_pause)

    def on_session_complete(
        self, final_score: int, total: int, leaderboard: list[LeaderboardEntry]
    ) -> None:
        result = self.session.result
        self.results_panel.show_results(
            self.session.participant_name or "",
            final_score,
            total,
            leaderboard,
            warning=result.warning if result else None,
        )
        self._set_mode(WindowMode.RESULTS)

    def on_error(self, kind: ErrorKind, message: str) -> None:
        if kind is ErrorKind.PERSISTENCE:
            self.statusBar().showMessage(PERSISTENCE_WARNING_TEMPLATE.format(message=message))
            return
        show_error(self, "Error", message)

    # --- Menu ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._font_size)

    def _handle_help(self) -> None:
        help_text = render_help_text(
            self.settings.max_questions, self.settings.time_per_question_seconds
        )
        show_info(self, f"{APP_NAME} Help", help_text, font_point_size=self._font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._font_size,
            self.settings.time_per_question_seconds,
            self.settings.max_questions,
            self.settings.leaderboard_limit,
            self.settings.theme,
        )
        if not dialog.exec():
            return

        self._font_size = dialog.get_font_size()
        self.settings = replace(
            self.settings,
            time_per_question_seconds=dialog.get_time_per_question_seconds(),
            max_questions=dialog.get_max_questions(),
            leaderboard_limit=dialog.get_leaderboard_limit(),
            theme=dialog.get_theme(),
        )
        # New values apply from the next session onwards.
        self.session.time_per_question_seconds = self.settings.time_per_question_seconds
        self.session.max_questions = self.settings.max_questions
        self.session.leaderboard_limit = self.settings.leaderboard_limit
        self._apply_styles()

    def _apply_styles(self) -> None:
        theme = self.settings.theme
        self.setStyleSheet(Styles.get_main_window_style(theme))

        ui_style = f"font-size: {self._font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.start_panel.apply_font_size(self._font_size)
        self.question_panel.set_game_font_size(self._font_size + 2)
        self.results_panel.apply_font_size(self._font_size)
        self.start_panel.set_theme(theme)
        self.question_panel.set_theme(theme)
        self.results_panel.set_theme(theme)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        if self.session.state is SessionState.IN_PROGRESS:
            if not confirm_abandon_session(self):
                event.ignore()
                return
            # Abandoned runs are never written to the leaderboard.
            self.session.reset()
        self.question_panel.stop_countdown()
        QApplication.instance().quit()
        event.accept()
