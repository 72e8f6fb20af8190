# -*- coding: utf-8 -*-
"""
Wizard State - Form state store shared by all lead wizards.

Holds the answers, the 1-indexed current step, the transient field errors
and the submitted flag. Every mutation is synchronous and total: requests
that cannot apply (unknown field, step out of range, answers while
submitted) are ignored and logged, never raised.
"""

import copy
from typing import Any, Dict

from models.field_schema import FormSchema
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardState:
    """Answers, step, errors and submission flag of one wizard."""

    def __init__(self, schema: FormSchema, total_steps: int):
        """
        Args:
            schema: Field schema of the wizard variant
            total_steps: Number of steps (current step stays in [1, total_steps])
        """
        self.schema = schema
        self.total_steps = total_steps
        self._answers: Dict[str, Any] = schema.defaults()
        self._step: int = 1
        self._errors: Dict[str, str] = {}
        self._submitted: bool = False

    # =========================================================================
    # Answers
    # =========================================================================

    def get_answers(self) -> Dict[str, Any]:
        """Copy of the current answers."""
        return copy.deepcopy(self._answers)

    def get_field(self, name: str, default: Any = None) -> Any:
        return copy.deepcopy(self._answers.get(name, default))

    def set_field(self, name: str, value: Any) -> bool:
        """
        Set one answer, coerced to the field's declared type.

        Values the field cannot hold (a non-boolean flag, an option that is
        not on the field's list) are ignored.

        Returns:
            True if the answers changed
        """
        if self._submitted:
            logger.debug(f"Ignoring update of '{name}': wizard already submitted")
            return False
        spec = self.schema.get(name)
        if spec is None:
            logger.warning(f"Ignoring update of unknown field '{name}'")
            return False

        try:
            coerced = spec.coerce(value)
        except ValueError as e:
            logger.warning(f"Ignoring update of '{name}': {e}")
            return False
        if self._answers.get(name) == coerced:
            return False
        self._answers[name] = coerced
        return True

    def toggle_set_member(self, name: str, value: str) -> bool:
        """
        Add value to a set-valued field, or remove it if already present.

        Returns:
            True if the answers changed
        """
        if self._submitted:
            logger.debug(f"Ignoring toggle of '{name}': wizard already submitted")
            return False
        if not self.schema.is_set_field(name):
            logger.warning(f"Ignoring toggle of '{name}': not a multi-choice field")
            return False
        if not self.schema.get(name).allows([value]):
            logger.warning(f"Ignoring toggle of '{name}': {value!r} is not one of the options")
            return False

        members = self._answers[name]
        if value in members:
            members.remove(value)
        else:
            members.append(value)
        return True

    # =========================================================================
    # Step
    # =========================================================================

    def get_step(self) -> int:
        return self._step

    def set_step(self, step: int) -> bool:
        """
        Move to a step, clamped into [1, total_steps].

        Returns:
            True if the step changed
        """
        if self._submitted:
            logger.debug(f"Ignoring step change to {step}: wizard already submitted")
            return False
        try:
            requested = int(step)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring step change to {step!r}: not a step number")
            return False
        clamped = max(1, min(requested, self.total_steps))
        if clamped != step:
            logger.warning(f"Step {step} out of range, clamped to {clamped}")
        if clamped == self._step:
            return False
        self._step = clamped
        return True

    # =========================================================================
    # Errors
    # =========================================================================

    def get_errors(self) -> Dict[str, str]:
        return dict(self._errors)

    def set_errors(self, errors: Dict[str, str]):
        self._errors = dict(errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    # =========================================================================
    # Submission
    # =========================================================================

    def is_submitted(self) -> bool:
        return self._submitted

    def mark_submitted(self):
        self._submitted = True
        self._errors = {}

    def reset(self):
        """Back to defaults: fresh answers, step 1, no errors, not submitted."""
        self._answers = self.schema.defaults()
        self._step = 1
        self._errors = {}
        self._submitted = False

    def restore(self, answers: Dict[str, Any], step: int):
        """Load a checkpoint (answers are normalized against the schema)."""
        self._answers = self.schema.normalize(answers)
        self._step = max(1, min(step, self.total_steps))
        self._errors = {}
        self._submitted = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the persistable part of the state."""
        return {
            "formData": self.get_answers(),
            "step": self._step,
        }
