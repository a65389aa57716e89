"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, font_size: int = 11) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {font_size}pt;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_GROUP.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                margin-top: 18px;
                padding: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QGroupBox QWidget {{
                background-color: {ColorPalette.BACKGROUND_GROUP.get(theme)};
            }}
            QLineEdit, QSpinBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QToolBar QToolButton {{
                color: {ColorPalette.ACCENT.get(theme)};
                padding: 4px 8px;
            }}
        """

    @staticmethod
    def get_segment_button_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QPushButton {{
                background-color: {ColorPalette.SEGMENT_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.SEGMENT_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
            }}
        """

    @staticmethod
    def get_question_label_style(font_size: int) -> str:
        return f"font-size: {font_size + 5}pt; font-weight: bold;"
