# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Back / Continue navigation of a lead wizard.
"""

from PyQt5.QtWidgets import QFrame, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from ..design_system import Colors, Spacing
from ..style_manager import StyleManager
from .action_button import ActionButton


class WizardFooter(QFrame):
    """
    Footer with Back and Continue buttons.

    Back is only shown when the wizard can go back. On the last step the
    Continue button carries the wizard's submit label.

    Signals:
        previous_clicked: Emitted when Back is clicked
        next_clicked: Emitted when Continue (or the submit button) is clicked
    """

    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(self, color: str = Colors.PRIMARY, parent=None):
        super().__init__(parent)
        self.setObjectName("WizardFooter")
        self.setStyleSheet(StyleManager.wizard_footer())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(Spacing.LG, Spacing.MD, Spacing.LG, Spacing.MD)
        layout.setSpacing(12)

        self.btn_previous = ActionButton(tr("button.back"), variant="outline")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = ActionButton(tr("button.continue"), variant="primary", color=color)
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_previous_visible(self, visible: bool):
        self.btn_previous.setVisible(visible)

    def set_next_text(self, text: str):
        self.btn_next.setText(text)
