# -*- coding: utf-8 -*-
"""
Wizard Header Component - Colored header of a lead wizard.

Shows the wizard title, a close button and, while the wizard is in
progress, "Step X of N", "P% complete" and a progress bar.
"""

from PyQt5.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QProgressBar
from PyQt5.QtCore import pyqtSignal, Qt

from services.translation_manager import tr
from ..design_system import Colors, Spacing, WizardDimensions
from ..font_utils import create_font, FontManager
from ..style_manager import StyleManager


class WizardHeader(QFrame):
    """
    Header with title, close button and progress.

    Signals:
        close_clicked: Emitted when the close button is clicked

    Usage:
        header = WizardHeader(title="Request Free Samples")
        header.set_progress(current=2, total=3, percent=67)
    """

    close_clicked = pyqtSignal()

    def __init__(self, title: str = "", color: str = Colors.PRIMARY, parent=None):
        super().__init__(parent)
        self.setObjectName("WizardHeader")
        self.setStyleSheet(StyleManager.wizard_header(color))
        self._setup_ui(title)

    def _setup_ui(self, title: str):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            WizardDimensions.HEADER_PADDING_H, WizardDimensions.HEADER_PADDING_V,
            WizardDimensions.HEADER_PADDING_H, WizardDimensions.HEADER_PADDING_V
        )
        layout.setSpacing(Spacing.SM)

        top_row = QHBoxLayout()
        self.title_label = QLabel(title)
        self.title_label.setFont(create_font(size=FontManager.SIZE_HEADING, weight=FontManager.WEIGHT_BOLD))
        top_row.addWidget(self.title_label)
        top_row.addStretch()

        self.btn_close = QPushButton("✕")
        self.btn_close.setObjectName("WizardCloseButton")
        self.btn_close.setCursor(Qt.PointingHandCursor)
        self.btn_close.setStyleSheet(StyleManager.close_button())
        self.btn_close.clicked.connect(self.close_clicked.emit)
        top_row.addWidget(self.btn_close)
        layout.addLayout(top_row)

        # Progress block (hidden after submission)
        self.progress_container = QFrame()
        progress_layout = QVBoxLayout(self.progress_container)
        progress_layout.setContentsMargins(0, 0, 0, 0)
        progress_layout.setSpacing(Spacing.XS)

        labels_row = QHBoxLayout()
        self.step_label = QLabel()
        self.percent_label = QLabel()
        for label in (self.step_label, self.percent_label):
            label.setFont(create_font(size=FontManager.SIZE_SMALL + 1))
        labels_row.addWidget(self.step_label)
        labels_row.addStretch()
        labels_row.addWidget(self.percent_label)
        progress_layout.addLayout(labels_row)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(WizardDimensions.PROGRESS_HEIGHT)
        self.progress_bar.setStyleSheet(StyleManager.progress_bar(Colors.PRIMARY_WHITE))
        progress_layout.addWidget(self.progress_bar)

        layout.addWidget(self.progress_container)

    def set_title(self, title: str):
        self.title_label.setText(title)

    def set_progress(self, current: int, total: int, percent: int):
        """Update the step counter and progress bar."""
        self.step_label.setText(tr("wizard.progress.step", current=current, total=total))
        self.percent_label.setText(tr("wizard.progress.percent", percent=percent))
        self.progress_bar.setValue(percent)

    def set_progress_visible(self, visible: bool):
        self.progress_container.setVisible(visible)
