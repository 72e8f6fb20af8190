# -*- coding: utf-8 -*-
"""
Action Button Component - Wizard button with consistent styling.

Variants:
- primary: solid brand color, for Continue and the submit action
- outline: white with a border, for Back and Close
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from ..design_system import Colors, WizardDimensions
from ..font_utils import create_font, FontManager
from ..style_manager import StyleManager, ButtonVariant


class ActionButton(QPushButton):
    """
    Reusable action button.

    Usage:
        btn = ActionButton(tr("button.continue"), variant="primary")
        btn = ActionButton(tr("button.back"), variant="outline")
    """

    VARIANTS = {
        "primary": ButtonVariant.PRIMARY,
        "outline": ButtonVariant.OUTLINE,
    }

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        color: str = Colors.PRIMARY,
        min_width: int = WizardDimensions.BUTTON_MIN_WIDTH,
        parent=None
    ):
        """
        Args:
            text: Button text
            variant: "primary" or "outline"
            color: Background color of the primary variant
            min_width: Minimum width in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)
        if variant not in self.VARIANTS:
            raise ValueError(f"Invalid variant: {variant}. Must be 'primary' or 'outline'")

        self.variant = variant
        self.setMinimumWidth(min_width)
        self.setCursor(Qt.PointingHandCursor)
        self.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_SEMIBOLD))
        self.setStyleSheet(StyleManager.button(self.VARIANTS[variant], color))
