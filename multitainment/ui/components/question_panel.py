"""Component showing the current question and the answer field."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGroupBox, QLabel, QLineEdit, QVBoxLayout, QWidget

from multitainment.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    PROGRESS_TEMPLATE,
    QUESTION_GROUP_TITLE,
)
from multitainment.core.quiz_manager import QuizManager
from multitainment.styling.styles import Styles


class QuestionPanel(QGroupBox):
    """Question text plus an answer field that submits on Enter."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_submit: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(QUESTION_GROUP_TITLE, parent)
        self.quiz_manager = quiz_manager
        self.on_submit = on_submit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.question_label = QLabel("", self)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setStyleSheet(Styles.get_question_label_style(11))
        layout.addWidget(self.question_label)

        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_input.returnPressed.connect(self._handle_return_pressed)
        layout.addWidget(self.answer_input)

        self.progress_label = QLabel("", self)
        self.progress_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.progress_label)

    def _handle_return_pressed(self) -> None:
        self.on_submit(self.answer_input.text())

    def refresh(self) -> None:
        self.question_label.setText(self.quiz_manager.get_current_expression())
        if self.quiz_manager.is_round_active():
            self.progress_label.setText(
                PROGRESS_TEMPLATE.format(
                    number=self.quiz_manager.get_current_index() + 1,
                    total=self.quiz_manager.get_round_length(),
                    mistakes=self.quiz_manager.get_mistakes(),
                )
            )
        else:
            self.progress_label.setText("")

    def clear_answer(self) -> None:
        self.answer_input.clear()

    def select_answer(self) -> None:
        self.answer_input.selectAll()
        self.answer_input.setFocus()

    def apply_font_size(self, font_size: int) -> None:
        self.question_label.setStyleSheet(Styles.get_question_label_style(font_size))
