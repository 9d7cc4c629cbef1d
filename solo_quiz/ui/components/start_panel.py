"""Component for the name entry screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from solo_quiz.constants.ui_constants import (
    START_BUTTON,
    START_NAME_LABEL,
    START_TITLE,
)
from solo_quiz.styling.color_palette import ColorPalette, Theme
from solo_quiz.styling.styles import Styles


class StartPanel(QWidget):
    """UI component asking the participant for a name."""

    def __init__(
        self,
        on_start: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(START_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        layout.addWidget(self.title_label)
        layout.addStretch()

        form = QGridLayout()
        form.addWidget(QLabel(START_NAME_LABEL, self), 0, 0)
        self.name_input = QLineEdit(self)
        self.name_input.returnPressed.connect(self._handle_start_click)
        form.addWidget(self.name_input, 0, 1)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self._handle_start_click)
        form.addWidget(self.start_button, 1, 0, 1, 2)

        self.error_label = QLabel(" ", self)
        self.error_label.setStyleSheet(f"color: {ColorPalette.FEEDBACK_WRONG.get(Theme.LIGHT)};")
        form.addWidget(self.error_label, 2, 0, 1, 2)

        layout.addLayout(form)
        layout.addStretch()

    def _handle_start_click(self) -> None:
        self.error_label.setText(" ")
        self.on_start(self.name_input.text())

    def show_validation_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.name_input.setFocus()

    def reset_state(self) -> None:
        self.name_input.clear()
        self.error_label.setText(" ")
        self.name_input.setFocus()

    def set_theme(self, theme: Theme) -> None:
        self.error_label.setStyleSheet(f"color: {ColorPalette.FEEDBACK_WRONG.get(theme)};")

    def apply_font_size(self, font_size: int) -> None:
        self.start_button.setStyleSheet(f"font-size: {font_size}pt;")
        self.name_input.setStyleSheet(f"font-size: {font_size}pt;")
