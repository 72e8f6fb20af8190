# -*- coding: utf-8 -*-
"""
Tests for InputField and OptionCard UI components.
"""

import pytest
from PyQt5.QtCore import Qt

from ui.components.input_field import InputField
from ui.components.option_card import OptionCard
from ui.design_system import Colors


@pytest.fixture
def input_field(qtbot):
    """Create an InputField instance."""
    field = InputField(placeholder="Enter text", max_length=5)
    qtbot.addWidget(field)
    return field


def test_input_field_creation(input_field):
    assert input_field.placeholderText() == "Enter text"
    assert not input_field.has_error()


def test_input_field_max_length(input_field, qtbot):
    qtbot.keyClicks(input_field, "3310199")
    assert input_field.text() == "33101"


def test_input_field_error_state(input_field):
    """Test toggling the error border."""
    input_field.set_error(True)
    assert input_field.has_error()
    assert Colors.INPUT_BORDER_ERROR in input_field.styleSheet()

    input_field.set_error(False)
    assert not input_field.has_error()


def test_set_text_silently(input_field, qtbot):
    """Programmatic updates must not look like user edits."""
    with qtbot.assertNotEmitted(input_field.textEdited):
        input_field.set_text_silently("12345")
    assert input_field.text() == "12345"


def test_input_field_enabled(input_field):
    assert input_field.isEnabled()
    input_field.setEnabled(False)
    assert not input_field.isEnabled()


class TestOptionCard:

    def test_click_emits_value(self, qtbot):
        card = OptionCard("medicare", "Medicare")
        qtbot.addWidget(card)
        with qtbot.waitSignal(card.option_clicked) as blocker:
            qtbot.mouseClick(card, Qt.LeftButton)
        assert blocker.args == ["medicare"]

    def test_selection_marker(self, qtbot):
        card = OptionCard("adult-briefs", "Adult Briefs", multi=True)
        qtbot.addWidget(card)
        assert not card.is_selected()
        card.set_selected(True)
        assert card.is_selected()
        assert card.text().startswith("☑")

    def test_disabled_card_does_not_emit(self, qtbot):
        card = OptionCard("adult-briefs", "Adult Briefs", multi=True)
        qtbot.addWidget(card)
        card.setEnabled(False)
        with qtbot.assertNotEmitted(card.option_clicked):
            qtbot.mouseClick(card, Qt.LeftButton)
