# -*- coding: utf-8 -*-
"""
Storefront window with the two lead-form entry points.
"""

from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel
from PyQt5.QtCore import Qt, pyqtSignal

from .config import Config
from repositories.local_storage import KeyValueStorage
from services.exceptions import ValidationException
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.design_system import Colors
from ui.font_utils import create_font, FontManager
from ui.style_manager import StyleManager
from ui.wizards.framework.base_wizard import LeadWizard
from ui.wizards.framework.wizard_definition import WizardDefinition
from ui.wizards.sample_request import sample_request_definition
from ui.wizards.supply_finder import supply_finder_definition
from utils.logger import get_logger

logger = get_logger(__name__)


class StorefrontWindow(QMainWindow):
    """
    Main window of the storefront.

    Opens the Sample Request and Supply Finder wizards as modal overlays
    and receives their finalized answers.

    Signals:
        lead_received(str, object): wizard id and the finalized answer record
    """

    lead_received = pyqtSignal(str, object)

    def __init__(self, storage: KeyValueStorage, parent=None):
        super().__init__(parent)
        self.storage = storage
        self.wizards: Dict[str, LeadWizard] = {}

        self._setup_window()
        self._create_widgets()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setStyleSheet(f"QMainWindow {{ background-color: {Colors.BACKGROUND}; }}")

    def _create_widgets(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(48, 48, 48, 48)
        layout.setSpacing(16)
        layout.addStretch()

        title = QLabel(tr("storefront.title"))
        title.setAlignment(Qt.AlignCenter)
        title.setFont(create_font(size=24, weight=FontManager.WEIGHT_BOLD))
        title.setStyleSheet(StyleManager.label_title())
        layout.addWidget(title)

        subtitle = QLabel(tr("storefront.subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet(StyleManager.label_subtitle())
        layout.addWidget(subtitle)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.btn_samples = ActionButton(tr("storefront.get_samples"), variant="primary", min_width=180)
        self.btn_samples.clicked.connect(self.open_sample_request)
        buttons.addWidget(self.btn_samples)

        self.btn_supplies = ActionButton(
            tr("storefront.find_supplies"), variant="primary", color=Colors.ACCENT, min_width=180
        )
        self.btn_supplies.clicked.connect(self.open_supply_finder)
        buttons.addWidget(self.btn_supplies)
        buttons.addStretch()
        layout.addLayout(buttons)

        support = QLabel(tr("storefront.support", phone=Config.SUPPORT_PHONE))
        support.setAlignment(Qt.AlignCenter)
        support.setStyleSheet(StyleManager.label_hint())
        layout.addWidget(support)

        layout.addStretch()
        self.setCentralWidget(central)

    # =========================================================================
    # Wizards
    # =========================================================================

    def open_sample_request(self):
        self._open_wizard(sample_request_definition())

    def open_supply_finder(self):
        self._open_wizard(supply_finder_definition())

    def get_wizard(self, wizard_id: str) -> Optional[LeadWizard]:
        return self.wizards.get(wizard_id)

    def _open_wizard(self, definition: WizardDefinition):
        wizard = self.wizards.get(definition.wizard_id)
        if wizard is None:
            wizard = LeadWizard(
                definition,
                self.storage,
                on_close=lambda wid=definition.wizard_id: logger.debug(f"{wid}: overlay dismissed"),
                parent=self,
            )
            wizard.wizard_completed.connect(
                lambda answers, d=definition: self._on_wizard_completed(d, answers)
            )
            self.wizards[definition.wizard_id] = wizard
        wizard.set_open(True)

    def _on_wizard_completed(self, definition: WizardDefinition, answers: Dict[str, Any]):
        try:
            record = definition.build_record(answers)
        except ValidationException as e:
            logger.error(f"Rejected {definition.wizard_id} lead: {e.errors}")
            return
        logger.info(f"Lead received from {definition.wizard_id}: {record}")
        self.lead_received.emit(definition.wizard_id, record)
