"""Color palette for Multitainment supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """A color with one value per theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the quiz window."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1F", dark="#F2F2F7")
    TEXT_SECONDARY = ThemeColors(light="#6E6E73", dark="#A1A1A6")

    BACKGROUND_PRIMARY = ThemeColors(light="#F2F2F7", dark="#1C1C1E")
    BACKGROUND_GROUP = ThemeColors(light="#FFFFFF", dark="#2C2C2E")

    BORDER_PRIMARY = ThemeColors(light="#D1D1D6", dark="#48484A")

    # Segmented count selector and toolbar accent
    ACCENT = ThemeColors(light="#007AFF", dark="#0A84FF")
    ACCENT_TEXT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")
    SEGMENT_BG = ThemeColors(light="#E5E5EA", dark="#3A3A3C")
    SEGMENT_HOVER_BG = ThemeColors(light="#D8D8DE", dark="#48484A")
