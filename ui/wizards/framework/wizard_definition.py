# -*- coding: utf-8 -*-
"""
Wizard Definition - Parameters of one wizard variant.

The engine is generic; each variant supplies its field schema, step
renderers, step validator, storage key and copy text through a
WizardDefinition. The definition is checked when it is built, so a typo in
a field name fails at import time instead of at render time.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from models.field_schema import FormSchema
from services.exceptions import WizardDefinitionError
from services.wizard.step_validator import StepValidator
from services.translation_manager import tr

from .base_step import BaseStep, ConfirmationView

# (field name, new value, answers after the change) -> additional updates
FieldEffect = Callable[[str, Any, Dict[str, Any]], Dict[str, Any]]

# (field name, current answers) -> True if edits and toggles of the field are ignored
FieldLock = Callable[[str, Dict[str, Any]], bool]


@dataclass
class WizardDefinition:
    """Everything that distinguishes one wizard variant from another."""

    wizard_id: str
    storage_key: str
    schema: FormSchema
    steps: List[BaseStep]
    validator: StepValidator
    confirmation: Callable[[Dict[str, Any]], ConfirmationView]

    # Translation keys for the overlay chrome
    title_key: str = ""
    submitted_title_key: str = ""
    submit_button_key: str = "button.continue"

    # Builds the hand-off record from finalized answers
    record_factory: Optional[Callable[[Dict[str, Any]], Any]] = None

    field_effect: Optional[FieldEffect] = None
    field_lock: Optional[FieldLock] = None

    def __post_init__(self):
        self._check()

    def _check(self):
        if not self.storage_key:
            raise WizardDefinitionError(f"{self.wizard_id}: storage key is required")
        if not self.steps:
            raise WizardDefinitionError(f"{self.wizard_id}: at least one step is required")

        for spec in self.schema:
            if not spec.default_matches_kind():
                raise WizardDefinitionError(
                    f"{self.wizard_id}: default of '{spec.name}' does not match {spec.kind.value}"
                )

        for index, step in enumerate(self.steps, start=1):
            for name in step.field_names:
                if name not in self.schema:
                    raise WizardDefinitionError(
                        f"{self.wizard_id}: step {index} uses unknown field '{name}'"
                    )

        for step_number in self.validator.validated_steps():
            if not 1 <= step_number <= self.total_steps:
                raise WizardDefinitionError(
                    f"{self.wizard_id}: validator rule for missing step {step_number}"
                )

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def get_step(self, step: int) -> BaseStep:
        """Renderer for a 1-indexed step."""
        return self.steps[step - 1]

    def title(self, submitted: bool = False) -> str:
        return tr(self.submitted_title_key if submitted else self.title_key)

    def build_record(self, answers: Dict[str, Any]) -> Any:
        """
        Hand-off record for finalized answers (the answers dict if no factory).

        Raises:
            ValidationException: if the answers do not pass every step
        """
        self.validator.ensure_valid(answers)
        if self.record_factory is None:
            return dict(answers)
        return self.record_factory(answers)
