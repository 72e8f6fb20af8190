# -*- coding: utf-8 -*-
"""
Font Utilities - Centralized font management.

Fonts are set with QFont directly instead of in QSS so stylesheets never
fight over font properties.

Usage:
    from ui.font_utils import create_font, FontManager

    label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_BOLD))
"""

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication
from typing import Optional, List


class FontManager:
    """Font configuration shared by every widget."""

    PRIMARY_FONT_FAMILY = "Inter"
    FALLBACK_FONT_FAMILY = "Segoe UI"

    # Default sizes (in points)
    SIZE_SMALL = 8
    SIZE_BODY = 10
    SIZE_SUBHEADING = 12
    SIZE_HEADING = 14
    SIZE_TITLE = 18

    # QFont weights
    WEIGHT_REGULAR = QFont.Normal
    WEIGHT_MEDIUM = QFont.Medium
    WEIGHT_SEMIBOLD = QFont.DemiBold
    WEIGHT_BOLD = QFont.Bold

    @staticmethod
    def create_font(
        size: int = SIZE_BODY,
        weight: int = WEIGHT_REGULAR,
        families: Optional[List[str]] = None
    ) -> QFont:
        """
        Create a QFont with the application families.

        Args:
            size: Font size in points
            weight: QFont weight
            families: Custom family list (default: primary then fallback)
        """
        if families is None:
            families = [
                FontManager.PRIMARY_FONT_FAMILY,
                FontManager.FALLBACK_FONT_FAMILY
            ]

        font = QFont()
        font.setFamilies(families)
        font.setPointSize(size)
        font.setWeight(weight)
        return font

    @staticmethod
    def set_application_default():
        """Set the default font of the whole application. Call once from main.py."""
        QApplication.setFont(FontManager.create_font())


def create_font(
    size: int = FontManager.SIZE_BODY,
    weight: int = FontManager.WEIGHT_REGULAR,
    families: Optional[List[str]] = None
) -> QFont:
    """Convenience wrapper for FontManager.create_font()."""
    return FontManager.create_font(size, weight, families)


def set_application_default_font():
    FontManager.set_application_default()
