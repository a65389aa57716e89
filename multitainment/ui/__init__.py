"""Qt UI components for Multitainment."""

from .dialog_helpers import show_error, show_info, show_warning
from .main_window import MainWindow

__all__ = [
    "MainWindow",
    "show_error",
    "show_info",
    "show_warning",
]
