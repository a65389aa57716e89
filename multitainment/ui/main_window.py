"""Qt main window: round settings, the current question and the Start action."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow,
    QSizePolicy,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from multitainment.constants.about import (
    APP_ABOUT_TEXT,
    APP_AUTHOR,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from multitainment.constants.ui_constants import (
    INCORRECT_MESSAGE,
    INCORRECT_TITLE,
    NOT_STARTED_MESSAGE,
    NOT_STARTED_TITLE,
    RESULTS_TITLE,
    TOOLBAR_ABOUT,
    TOOLBAR_HELP,
    TOOLBAR_SETTINGS,
    TOOLBAR_START,
    WINDOW_TITLE,
)
from multitainment.core.models import InvalidRoundConfig, SubmissionOutcome
from multitainment.core.quiz_manager import QuizManager
from multitainment.core.summary_renderer import renderer
from multitainment.styling.color_palette import Theme
from multitainment.styling.styles import Styles
from multitainment.ui.components.count_panel import CountPanel
from multitainment.ui.components.question_panel import QuestionPanel
from multitainment.ui.components.range_panel import RangePanel
from multitainment.ui.dialog_helpers import show_error, show_info, show_warning
from multitainment.ui.settings_dialog import SettingsDialog


class MainWindow(QMainWindow):
    """Single-screen quiz window."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager

        self._ui_font_size: int = 11
        self._theme: Theme = Theme.LIGHT
        self._seed: int | None = None

        self._build_ui()
        self._build_toolbar()
        self._apply_styles()
        self.question_panel.refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.range_panel = RangePanel(self.quiz_manager, self)
        root_layout.addWidget(self.range_panel)

        self.count_panel = CountPanel(self.quiz_manager, self)
        root_layout.addWidget(self.count_panel)

        self.question_panel = QuestionPanel(self.quiz_manager, on_submit=self._handle_submit, parent=self)
        root_layout.addWidget(self.question_panel)

        root_layout.addStretch()

    def _build_toolbar(self) -> None:
        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        toolbar.setToolButtonStyle(Qt.ToolButtonTextOnly)
        self.addToolBar(Qt.TopToolBarArea, toolbar)

        self.settings_action = QAction(TOOLBAR_SETTINGS, self)
        self.settings_action.triggered.connect(self._handle_settings)
        toolbar.addAction(self.settings_action)

        self.help_action = QAction(TOOLBAR_HELP, self)
        self.help_action.triggered.connect(self._handle_help)
        toolbar.addAction(self.help_action)

        self.about_action = QAction(TOOLBAR_ABOUT, self)
        self.about_action.triggered.connect(self._handle_about)
        toolbar.addAction(self.about_action)

        # Push Start to the right-hand edge
        spacer = QWidget(toolbar)
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        toolbar.addWidget(spacer)

        self.start_action = QAction(TOOLBAR_START, self)
        self.start_action.triggered.connect(self._handle_start)
        toolbar.addAction(self.start_action)

    def _handle_start(self) -> None:
        try:
            self.quiz_manager.start_round()
        except InvalidRoundConfig as exc:
            show_error(self, "Cannot start", str(exc))
            return
        self.question_panel.clear_answer()
        self.question_panel.refresh()
        self.question_panel.select_answer()

    def _handle_submit(self, text: str) -> None:
        result = self.quiz_manager.submit_answer(text)

        if result.outcome is SubmissionOutcome.NOT_STARTED:
            show_warning(self, NOT_STARTED_TITLE, NOT_STARTED_MESSAGE)
            self.question_panel.clear_answer()
        elif result.outcome is SubmissionOutcome.INCORRECT:
            show_warning(self, INCORRECT_TITLE, INCORRECT_MESSAGE)
            self.question_panel.select_answer()
        else:
            self.question_panel.clear_answer()

        self.question_panel.refresh()

        if result.summary is not None:
            show_info(
                self,
                RESULTS_TITLE,
                renderer.render_html(result.summary),
                font_point_size=self._ui_font_size,
                rich_text=True,
            )

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"Author: {APP_AUTHOR}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._ui_font_size, self._theme, self._seed)
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._theme = dialog.get_theme()
            self._seed = dialog.get_seed()

            self.quiz_manager.set_seed(self._seed)
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme, self._ui_font_size))
        self.count_panel.apply_theme(self._theme)
        self.question_panel.apply_font_size(self._ui_font_size)
