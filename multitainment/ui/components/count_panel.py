"""Component for picking the number of questions per round."""

from __future__ import annotations

from PySide6.QtWidgets import QButtonGroup, QGroupBox, QHBoxLayout, QPushButton, QWidget

from multitainment.constants.quiz_constants import QUESTION_COUNT_CHOICES
from multitainment.constants.ui_constants import COUNT_GROUP_TITLE
from multitainment.core.quiz_manager import QuizManager
from multitainment.styling.color_palette import Theme
from multitainment.styling.styles import Styles


class CountPanel(QGroupBox):
    """Segmented row of exclusive buttons, one per question count."""

    def __init__(self, quiz_manager: QuizManager, parent: QWidget | None = None) -> None:
        super().__init__(COUNT_GROUP_TITLE, parent)
        self.quiz_manager = quiz_manager
        self.count_buttons: dict[int, QPushButton] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        layout.setSpacing(2)
        self.setLayout(layout)

        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)
        for count in QUESTION_COUNT_CHOICES:
            button = QPushButton(str(count), self)
            button.setCheckable(True)
            self.button_group.addButton(button, count)
            self.count_buttons[count] = button
            layout.addWidget(button)

        self.count_buttons[self.quiz_manager.get_question_count()].setChecked(True)
        self.button_group.idClicked.connect(self._handle_count_selected)

    def _handle_count_selected(self, count: int) -> None:
        self.quiz_manager.set_question_count(count)

    def selected_count(self) -> int:
        return self.button_group.checkedId()

    def apply_theme(self, theme: Theme) -> None:
        style = Styles.get_segment_button_style(theme)
        for button in self.count_buttons.values():
            button.setStyleSheet(style)
