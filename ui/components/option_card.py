# -*- coding: utf-8 -*-
"""
Option Card Component - Selectable answer rendered as a bordered card.

Used for single-select and multi-select answers. The card does not hold
its own checked state; the step widget sets it from the answers after
every change.
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt, pyqtSignal

from ..font_utils import create_font, FontManager
from ..style_manager import StyleManager


class OptionCard(QPushButton):
    """
    Clickable option card.

    Signals:
        option_clicked(str): Emitted with the option value when clicked
    """

    option_clicked = pyqtSignal(str)

    def __init__(self, value: str, label: str, multi: bool = False, parent=None):
        """
        Args:
            value: Stored option value
            label: Display label
            multi: Show a check box marker (multi-select) instead of a radio marker
            parent: Parent widget
        """
        super().__init__(parent)
        self.value = value
        self.label = label
        self.multi = multi
        self._selected = False

        self.setCursor(Qt.PointingHandCursor)
        self.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
        self.clicked.connect(lambda: self.option_clicked.emit(self.value))
        self._refresh()

    def is_selected(self) -> bool:
        return self._selected

    def set_selected(self, selected: bool):
        if selected == self._selected:
            return
        self._selected = selected
        self._refresh()

    def setEnabled(self, enabled: bool):
        super().setEnabled(enabled)
        self._refresh()

    def _refresh(self):
        if self.multi:
            marker = "☑" if self._selected else "☐"
        else:
            marker = "◉" if self._selected else "○"
        self.setText(f"{marker}  {self.label}")
        self.setStyleSheet(StyleManager.option_card(self._selected, not self.isEnabled()))
