# -*- coding: utf-8 -*-
"""
Step Widget - Qt rendering of a StepView.

The widget is rebuilt when the step's layout changes (a different step, or
a different set of inputs) and updated in place otherwise, so a line edit
keeps its focus and cursor while the user types.

User gestures are emitted as signals:
- field_edited(name, value): text, single select, dropdown, checkbox
- member_toggled(name, value): multi select
"""

from typing import Dict, List, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QCheckBox, QComboBox
from PyQt5.QtCore import Qt, pyqtSignal

from ui.components.input_field import InputField
from ui.components.option_card import OptionCard
from ui.design_system import Spacing, WizardDimensions
from ui.font_utils import create_font, FontManager
from ui.style_manager import StyleManager
from utils.logger import get_logger

from .base_step import StepView, InputView, InputKind

logger = get_logger(__name__)


class _InputRow:
    """Widgets that make up one rendered input."""

    def __init__(self, view: InputView):
        self.name = view.name
        self.kind = view.kind
        self.container = QWidget()
        self.label: Optional[QLabel] = None
        self.line_edit: Optional[InputField] = None
        self.cards: List[OptionCard] = []
        self.checkbox: Optional[QCheckBox] = None
        self.combo: Optional[QComboBox] = None
        self.hint_label: Optional[QLabel] = None
        self.error_label = QLabel()
        self.error_label.setObjectName(f"error_{view.name}")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(StyleManager.label_error())
        self.error_label.setFont(create_font(size=FontManager.SIZE_SMALL + 1))


class StepWidget(QWidget):
    """
    Renders any StepView.

    Signals:
        field_edited(str, object): A field was set to a new value
        member_toggled(str, str): A multi-select option was clicked
    """

    field_edited = pyqtSignal(str, object)
    member_toggled = pyqtSignal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._view: Optional[StepView] = None
        self._rows: Dict[str, _InputRow] = {}

        self._layout = QVBoxLayout(self)
        pad = WizardDimensions.CONTENT_PADDING
        self._layout.setContentsMargins(pad, pad, pad, pad)
        self._layout.setSpacing(Spacing.MD)

    # =========================================================================
    # Public API
    # =========================================================================

    def show_view(self, view: StepView):
        """Display a step, rebuilding only when its layout changed."""
        if self._needs_rebuild(view):
            self._rebuild(view)
        else:
            self._update(view)
        self._view = view

    def line_edit(self, name: str) -> Optional[InputField]:
        row = self._rows.get(name)
        return row.line_edit if row else None

    def option_cards(self, name: str) -> List[OptionCard]:
        row = self._rows.get(name)
        return list(row.cards) if row else []

    def checkbox(self, name: str) -> Optional[QCheckBox]:
        row = self._rows.get(name)
        return row.checkbox if row else None

    def combo_box(self, name: str) -> Optional[QComboBox]:
        row = self._rows.get(name)
        return row.combo if row else None

    def error_text(self, name: str) -> str:
        row = self._rows.get(name)
        return row.error_label.text() if row else ""

    def step_error_text(self) -> str:
        return self.step_error_label.text()

    # =========================================================================
    # Building
    # =========================================================================

    def _needs_rebuild(self, view: StepView) -> bool:
        if self._view is None or self._view.title != view.title:
            return True
        old = [(i.name, i.kind, len(i.options)) for i in self._view.inputs]
        new = [(i.name, i.kind, len(i.options)) for i in view.inputs]
        return old != new or self._view.notes != view.notes

    def _clear(self):
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._rows = {}

    def _rebuild(self, view: StepView):
        self._clear()

        self.title_label = QLabel(view.title)
        self.title_label.setObjectName("step_title")
        self.title_label.setWordWrap(True)
        self.title_label.setFont(create_font(size=FontManager.SIZE_HEADING, weight=FontManager.WEIGHT_BOLD))
        self.title_label.setStyleSheet(StyleManager.label_title())
        self._layout.addWidget(self.title_label)

        if view.description:
            description = QLabel(view.description)
            description.setWordWrap(True)
            description.setStyleSheet(StyleManager.label_subtitle())
            self._layout.addWidget(description)

        for input_view in view.inputs:
            row = self._build_row(input_view)
            self._rows[input_view.name] = row
            self._layout.addWidget(row.container)

        self.step_error_label = QLabel()
        self.step_error_label.setObjectName("step_error")
        self.step_error_label.setWordWrap(True)
        self.step_error_label.setStyleSheet(StyleManager.label_error())
        self._layout.addWidget(self.step_error_label)

        for note in view.notes:
            note_label = QLabel(note)
            note_label.setWordWrap(True)
            note_label.setStyleSheet(StyleManager.info_box())
            self._layout.addWidget(note_label)

        self._layout.addStretch()
        self._update(view)
        logger.debug(f"Built step view '{view.title}' with {len(view.inputs)} inputs")

    def _build_row(self, view: InputView) -> _InputRow:
        row = _InputRow(view)
        layout = QVBoxLayout(row.container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        if view.label and view.kind != InputKind.CHECKBOX:
            row.label = QLabel(view.label)
            row.label.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_SEMIBOLD))
            row.label.setStyleSheet(StyleManager.label_title())
            layout.addWidget(row.label)

        name = view.name
        if view.kind == InputKind.TEXT:
            row.line_edit = InputField(view.placeholder, view.max_length)
            row.line_edit.setObjectName(f"input_{name}")
            row.line_edit.textEdited.connect(lambda text, n=name: self.field_edited.emit(n, text))
            layout.addWidget(row.line_edit)

        elif view.kind in (InputKind.SINGLE_SELECT, InputKind.MULTI_SELECT):
            multi = view.kind == InputKind.MULTI_SELECT
            for option in view.options:
                card = OptionCard(option.value, option.label, multi=multi)
                card.setObjectName(f"option_{name}_{option.value}")
                if multi:
                    card.option_clicked.connect(lambda value, n=name: self.member_toggled.emit(n, value))
                else:
                    card.option_clicked.connect(lambda value, n=name: self.field_edited.emit(n, value))
                row.cards.append(card)
                layout.addWidget(card)

        elif view.kind == InputKind.CHECKBOX:
            row.checkbox = QCheckBox(view.label)
            row.checkbox.setObjectName(f"checkbox_{name}")
            row.checkbox.setCursor(Qt.PointingHandCursor)
            row.checkbox.clicked.connect(lambda checked, n=name: self.field_edited.emit(n, checked))
            layout.addWidget(row.checkbox)

        elif view.kind == InputKind.DROPDOWN:
            row.combo = QComboBox()
            row.combo.setObjectName(f"combo_{name}")
            row.combo.setStyleSheet(StyleManager.combo_box())
            row.combo.addItem(view.placeholder, "")
            for option in view.options:
                row.combo.addItem(option.label, option.value)
            row.combo.activated.connect(
                lambda index, n=name, combo=row.combo: self.field_edited.emit(n, combo.itemData(index))
            )
            layout.addWidget(row.combo)

        if view.hint:
            row.hint_label = QLabel(view.hint)
            row.hint_label.setWordWrap(True)
            row.hint_label.setStyleSheet(StyleManager.label_hint())
            row.hint_label.setFont(create_font(size=FontManager.SIZE_SMALL + 1))
            layout.addWidget(row.hint_label)

        layout.addWidget(row.error_label)
        return row

    # =========================================================================
    # Updating
    # =========================================================================

    def _update(self, view: StepView):
        for input_view in view.inputs:
            row = self._rows.get(input_view.name)
            if row is not None:
                self._update_row(row, input_view)

        self.step_error_label.setText(view.error or "")
        self.step_error_label.setVisible(bool(view.error))

    def _update_row(self, row: _InputRow, view: InputView):
        if row.line_edit is not None:
            row.line_edit.set_text_silently(view.value or "")
            row.line_edit.set_error(bool(view.error))
            row.line_edit.setEnabled(not view.disabled)

        for card in row.cards:
            card.set_selected(view.is_selected(card.value))
            card.setEnabled(not view.disabled)

        if row.checkbox is not None:
            row.checkbox.setChecked(bool(view.value))
            row.checkbox.setEnabled(not view.disabled)

        if row.combo is not None:
            index = row.combo.findData(view.value or "")
            row.combo.setCurrentIndex(max(index, 0))
            row.combo.setEnabled(not view.disabled)

        row.error_label.setText(view.error or "")
        row.error_label.setVisible(bool(view.error))
