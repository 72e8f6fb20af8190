# -*- coding: utf-8 -*-
"""
Storefront UI Components
"""

from .action_button import ActionButton
from .input_field import InputField
from .option_card import OptionCard
from .wizard_header import WizardHeader
from .wizard_footer import WizardFooter

__all__ = [
    "ActionButton",
    "InputField",
    "OptionCard",
    "WizardHeader",
    "WizardFooter",
]
