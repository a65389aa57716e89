"""Settings dialog for configuring Multitainment preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from multitainment.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring font size, theme and the question seed."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 11,
        theme: Theme = Theme.LIGHT,
        seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._ui_font_size = ui_font_size
        self._theme = theme
        self._seed = seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Appearance
        appearance_group = QGroupBox("Appearance")
        appearance_layout = QVBoxLayout()
        appearance_group.setLayout(appearance_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Font size:")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(8, 24)
        self.font_spinbox.setValue(self._ui_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        appearance_layout.addLayout(font_row)

        theme_row = QHBoxLayout()
        theme_label = QLabel("Theme:")
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.name.capitalize(), userData=theme)
        self.theme_combo.setCurrentIndex(self.theme_combo.findData(self._theme))
        theme_row.addWidget(theme_label)
        theme_row.addStretch()
        theme_row.addWidget(self.theme_combo)
        appearance_layout.addLayout(theme_row)

        layout.addWidget(appearance_group)

        # Questions
        questions_group = QGroupBox("Questions")
        questions_layout = QHBoxLayout()
        questions_group.setLayout(questions_layout)

        self.seed_checkbox = QCheckBox("Use fixed random seed")
        self.seed_checkbox.setToolTip("Every round started with the same seed and settings asks the same questions.")
        self.seed_checkbox.setChecked(self._seed is not None)
        self.seed_checkbox.toggled.connect(self._handle_seed_toggle)
        questions_layout.addWidget(self.seed_checkbox)

        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999_999)
        self.seed_spinbox.setValue(self._seed or 0)
        self.seed_spinbox.setEnabled(self._seed is not None)
        questions_layout.addWidget(self.seed_spinbox)

        layout.addWidget(questions_group)

        # Buttons
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

    def _handle_seed_toggle(self, checked: bool) -> None:
        self.seed_spinbox.setEnabled(checked)

    def get_ui_font_size(self) -> int:
        """Get the selected font size."""
        return self.font_spinbox.value()

    def get_theme(self) -> Theme:
        return self.theme_combo.currentData()

    def get_seed(self) -> int | None:
        """Get the fixed seed, or None when rounds should be random."""
        if not self.seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
