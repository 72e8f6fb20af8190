# -*- coding: utf-8 -*-
"""
Lead Wizard - Modal overlay hosting one wizard variant.

Provides unified wizard UI with:
- Header with title, close button and progress
- Step container (scrollable) and the confirmation view
- Navigation buttons (Back, Continue / submit)

The host renders nothing while closed. A close gesture (close button,
Close on the confirmation, or the window's own close) goes through the
controller, which resets a submitted wizard and keeps an unfinished one
resumable; the host then hides and calls `on_close` once.
"""

from typing import Callable, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QFrame, QStackedWidget, QScrollArea
)
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from repositories.local_storage import KeyValueStorage
from services.translation_manager import tr
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from ui.design_system import Colors, WizardDimensions
from ui.font_utils import create_font, FontManager
from ui.style_manager import StyleManager
from utils.logger import get_logger

from .base_step import ConfirmationView
from .step_widget import StepWidget
from .wizard_controller import WizardController
from .wizard_definition import WizardDefinition

logger = get_logger(__name__)


class ConfirmationWidget(QWidget):
    """Terminal view shown after submission."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        pad = WizardDimensions.CONTENT_PADDING
        self._layout.setContentsMargins(pad, pad, pad, pad)
        self._layout.setSpacing(12)

    def show_view(self, view: ConfirmationView):
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        icon = QLabel("✓")
        icon.setAlignment(Qt.AlignCenter)
        icon.setFont(create_font(size=28, weight=FontManager.WEIGHT_BOLD))
        icon.setStyleSheet(f"color: {Colors.SUCCESS}; border: none;")
        self._layout.addWidget(icon)

        self.title_label = QLabel(view.title)
        self.title_label.setObjectName("confirmation_title")
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_BOLD))
        self.title_label.setStyleSheet(StyleManager.label_title())
        self._layout.addWidget(self.title_label)

        if view.description:
            description = QLabel(view.description)
            description.setAlignment(Qt.AlignCenter)
            description.setWordWrap(True)
            description.setStyleSheet(StyleManager.label_subtitle())
            self._layout.addWidget(description)

        for heading, text in view.details:
            detail = QLabel(f"<b>{heading}</b><br>{text}")
            detail.setWordWrap(True)
            detail.setStyleSheet(StyleManager.info_box())
            self._layout.addWidget(detail)

        if view.next_steps_title:
            next_title = QLabel(view.next_steps_title)
            next_title.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_SEMIBOLD))
            next_title.setStyleSheet(StyleManager.label_title())
            self._layout.addWidget(next_title)

        for number, (heading, text) in enumerate(view.next_steps, start=1):
            marker = f"{number}." if view.numbered else "•"
            body = f"<b>{heading}</b><br>{text}" if heading else text
            item_label = QLabel(f"{marker} {body}")
            item_label.setWordWrap(True)
            item_label.setStyleSheet(StyleManager.label_subtitle())
            self._layout.addWidget(item_label)

        self._layout.addStretch()


class LeadWizard(QWidget):
    """
    Modal host of one lead wizard.

    Signals:
        wizard_completed(dict): Finalized answers, emitted on submission
        wizard_closed(): Emitted once per close gesture

    Usage:
        wizard = LeadWizard(sample_request_definition(), storage, on_close=on_close)
        wizard.wizard_completed.connect(handle_lead)
        wizard.set_open(True)
    """

    wizard_completed = pyqtSignal(dict)
    wizard_closed = pyqtSignal()

    def __init__(
        self,
        definition: WizardDefinition,
        storage: KeyValueStorage,
        is_open: bool = False,
        on_close: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None
    ):
        """
        Args:
            definition: Wizard variant definition
            storage: Key-value storage for checkpoints
            is_open: Show the overlay immediately
            on_close: Called once each time the user closes the wizard
            parent: Parent widget
        """
        super().__init__(parent, Qt.Dialog)
        self.definition = definition
        self._on_close = on_close

        self.setWindowModality(Qt.ApplicationModal)
        self.setWindowTitle(definition.title())
        self.setFixedWidth(Config.WIZARD_WIDTH)
        self.setMaximumHeight(Config.WIZARD_MAX_HEIGHT)

        self.controller = WizardController(definition, storage, self)
        self.controller.step_changed.connect(self._on_step_changed)
        self.controller.errors_changed.connect(lambda _errors: self._refresh())
        self.controller.answers_changed.connect(lambda _answers: self._refresh())
        self.controller.submitted.connect(self._on_submitted)
        self.controller.closed.connect(self._on_controller_closed)

        self._setup_ui()
        self._refresh()
        self.set_open(is_open)

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        card = QFrame()
        card.setObjectName("WizardCard")
        card.setStyleSheet(StyleManager.wizard_card())
        layout = QVBoxLayout(card)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = WizardHeader(self.definition.title())
        self.header.close_clicked.connect(self.request_close)
        layout.addWidget(self.header)

        self.step_widget = StepWidget()
        self.step_widget.field_edited.connect(self.controller.set_field)
        self.step_widget.member_toggled.connect(self.controller.toggle_set_member)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setWidget(self.step_widget)

        self.confirmation_widget = ConfirmationWidget()

        self.stack = QStackedWidget()
        self.stack.addWidget(self.scroll_area)
        self.stack.addWidget(self.confirmation_widget)
        layout.addWidget(self.stack, 1)

        self.footer = WizardFooter()
        self.footer.previous_clicked.connect(self.controller.retreat)
        self.footer.next_clicked.connect(self._handle_next)
        layout.addWidget(self.footer)

        outer.addWidget(card)

    # =========================================================================
    # Open / Close
    # =========================================================================

    def is_open(self) -> bool:
        return self.isVisible()

    def set_open(self, is_open: bool):
        """Show or hide the overlay without counting as a close gesture."""
        if is_open:
            self._refresh()
            self.show()
            self.raise_()
            logger.debug(f"{self.definition.wizard_id}: opened")
        else:
            self.hide()

    def request_close(self):
        """User close gesture."""
        self.controller.close()

    def closeEvent(self, event):
        # Window manager close: route through the controller like the button
        if self.isVisible():
            self.controller.close()
        event.accept()

    def _on_controller_closed(self):
        self.hide()
        logger.info(f"{self.definition.wizard_id}: closed")
        if self._on_close is not None:
            self._on_close()
        self.wizard_closed.emit()

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_next(self):
        if self.controller.is_submitted():
            self.request_close()
        else:
            self.controller.advance()

    def _on_step_changed(self, old_step: int, new_step: int):
        self._refresh()
        self.scroll_area.verticalScrollBar().setValue(0)

    def _on_submitted(self, answers: dict):
        self._refresh()
        self.wizard_completed.emit(answers)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _refresh(self):
        submitted = self.controller.is_submitted()
        self.header.set_title(self.definition.title(submitted))
        self.header.set_progress_visible(not submitted)

        if submitted:
            self.confirmation_widget.show_view(self.controller.confirmation_view())
            self.stack.setCurrentWidget(self.confirmation_widget)
            self.footer.set_previous_visible(False)
            self.footer.set_next_text(tr("button.close"))
            return

        self.step_widget.show_view(self.controller.current_view())
        self.stack.setCurrentWidget(self.scroll_area)
        self.header.set_progress(
            self.controller.current_step,
            self.controller.total_steps,
            self.controller.progress_percent()
        )
        self.footer.set_previous_visible(self.controller.can_retreat())
        if self.controller.is_last_step():
            self.footer.set_next_text(tr(self.definition.submit_button_key))
        else:
            self.footer.set_next_text(tr("button.continue"))
