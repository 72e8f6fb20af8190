# -*- coding: utf-8 -*-
"""
Input Field Component - Line edit with default and error states.
"""

from typing import Optional

from PyQt5.QtWidgets import QLineEdit

from ..style_manager import StyleManager, InputVariant
from ..font_utils import create_font, FontManager


class InputField(QLineEdit):
    """
    Text input styled from the design system.

    Usage:
        field = InputField(placeholder="(555) 555-5555", max_length=14)
        field.set_error(True)
    """

    def __init__(self, placeholder: str = "", max_length: Optional[int] = None, parent=None):
        """
        Args:
            placeholder: Placeholder text
            max_length: Maximum number of characters, if limited
            parent: Parent widget
        """
        super().__init__(parent)
        self._has_error = False

        if placeholder:
            self.setPlaceholderText(placeholder)
        if max_length:
            self.setMaxLength(max_length)

        self.setFont(create_font(size=FontManager.SIZE_BODY))
        self._apply_variant()

    def _apply_variant(self):
        variant = InputVariant.ERROR if self._has_error else InputVariant.DEFAULT
        self.setStyleSheet(StyleManager.input_field(variant))

    def set_error(self, has_error: bool):
        """Toggle the error border."""
        if has_error == self._has_error:
            return
        self._has_error = has_error
        self._apply_variant()

    def has_error(self) -> bool:
        return self._has_error

    def set_text_silently(self, text: str):
        """Replace the text without emitting textEdited."""
        if self.text() != text:
            self.setText(text)
