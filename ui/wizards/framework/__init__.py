# -*- coding: utf-8 -*-
"""
Wizard Framework - Generic engine behind the storefront lead wizards.

Provides the state store, controller, step renderers and the overlay host.
Each wizard variant only supplies a WizardDefinition.
"""

from .base_step import BaseStep, StepView, InputView, InputKind, ConfirmationView
from .wizard_definition import WizardDefinition
from .wizard_state import WizardState
from .wizard_controller import WizardController
from .step_widget import StepWidget
from .base_wizard import LeadWizard, ConfirmationWidget

__all__ = [
    'BaseStep',
    'StepView',
    'InputView',
    'InputKind',
    'ConfirmationView',
    'WizardDefinition',
    'WizardState',
    'WizardController',
    'StepWidget',
    'LeadWizard',
    'ConfirmationWidget',
]
