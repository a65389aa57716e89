"""Component for choosing the range of multiplication tables."""

from __future__ import annotations

from PySide6.QtCore import QSignalBlocker
from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QLabel, QSpinBox, QVBoxLayout, QWidget

from multitainment.constants.quiz_constants import TABLE_MAX_LIMIT, TABLE_MIN_LIMIT
from multitainment.constants.ui_constants import (
    RANGE_FROM_TEMPLATE,
    RANGE_GROUP_TITLE,
    RANGE_TO_TEMPLATE,
)
from multitainment.core.quiz_manager import QuizManager


class RangePanel(QGroupBox):
    """Two steppers bound to the quiz manager's table range."""

    def __init__(self, quiz_manager: QuizManager, parent: QWidget | None = None) -> None:
        super().__init__(RANGE_GROUP_TITLE, parent)
        self.quiz_manager = quiz_manager
        self._build_ui()
        self.sync_from_manager()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.from_label, self.from_spinbox = self._add_stepper_row(layout)
        self.from_spinbox.valueChanged.connect(self._handle_min_changed)

        self.to_label, self.to_spinbox = self._add_stepper_row(layout)
        self.to_spinbox.valueChanged.connect(self._handle_max_changed)

    def _add_stepper_row(self, layout: QVBoxLayout) -> tuple[QLabel, QSpinBox]:
        row = QHBoxLayout()
        label = QLabel(self)
        spinbox = QSpinBox(self)
        spinbox.setRange(TABLE_MIN_LIMIT, TABLE_MAX_LIMIT)
        # Range rules run on commit, not on every typed digit.
        spinbox.setKeyboardTracking(False)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return label, spinbox

    def _handle_min_changed(self, value: int) -> None:
        self.quiz_manager.set_table_min(value)
        self.sync_from_manager()

    def _handle_max_changed(self, value: int) -> None:
        self.quiz_manager.set_table_max(value)
        self.sync_from_manager()

    def sync_from_manager(self) -> None:
        table_min, table_max = self.quiz_manager.get_table_range()
        with QSignalBlocker(self.from_spinbox), QSignalBlocker(self.to_spinbox):
            self.from_spinbox.setValue(table_min)
            self.to_spinbox.setValue(table_max)
        self.from_label.setText(RANGE_FROM_TEMPLATE.format(value=table_min))
        self.to_label.setText(RANGE_TO_TEMPLATE.format(value=table_max))
