# -*- coding: utf-8 -*-
"""
Wizard Controller - Drives a lead wizard through its steps.

Handles:
- Step progression gated by validation (advance)
- Going back without validation (retreat)
- Submission and the terminal submitted state
- Closing, with a reset when the wizard was submitted
- Checkpointing answers and step after every change
"""

from typing import Any, Dict

from PyQt5.QtCore import QObject, pyqtSignal

from repositories.local_storage import KeyValueStorage
from services.exceptions import StorageException
from services.wizard.checkpoint_store import CheckpointStore
from utils.logger import get_logger

from .base_step import StepView, ConfirmationView
from .wizard_definition import WizardDefinition
from .wizard_state import WizardState

logger = get_logger(__name__)


class WizardController(QObject):
    """
    State machine of one wizard: Step(1..N) -> Submitted.

    Responsibilities:
    - Own the WizardState and its checkpoint
    - Validate before moving forward
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    errors_changed = pyqtSignal(dict)
    answers_changed = pyqtSignal(dict)
    submitted = pyqtSignal(dict)  # finalized answers
    closed = pyqtSignal()

    def __init__(self, definition: WizardDefinition, storage: KeyValueStorage, parent=None):
        """
        Initialize the controller and restore any checkpoint.

        Args:
            definition: Wizard variant definition
            storage: Key-value storage holding checkpoints
            parent: Optional QObject parent
        """
        super().__init__(parent)
        self.definition = definition
        self.state = WizardState(definition.schema, definition.total_steps)
        self.checkpoints = CheckpointStore(
            storage, definition.storage_key, definition.schema, definition.total_steps
        )
        self._restore()

    def _restore(self):
        checkpoint = self.checkpoints.load()
        if checkpoint is None:
            logger.debug(f"{self.definition.wizard_id}: starting fresh")
            return
        self.state.restore(checkpoint.answers, checkpoint.step)
        logger.info(f"{self.definition.wizard_id}: resumed at step {checkpoint.step}")

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def total_steps(self) -> int:
        return self.definition.total_steps

    @property
    def current_step(self) -> int:
        return self.state.get_step()

    def get_answers(self) -> Dict[str, Any]:
        return self.state.get_answers()

    def get_errors(self) -> Dict[str, str]:
        return self.state.get_errors()

    def is_submitted(self) -> bool:
        return self.state.is_submitted()

    def is_last_step(self) -> bool:
        return self.current_step == self.total_steps

    def can_retreat(self) -> bool:
        return not self.is_submitted() and self.current_step > 1

    def progress_percent(self) -> int:
        """Completion of the current step as a whole percentage (half rounds up)."""
        return int(self.current_step * 100 / self.total_steps + 0.5)

    def current_view(self) -> StepView:
        """Description of the current step."""
        step = self.definition.get_step(self.current_step)
        return step.render(self.state.get_answers(), self.state.get_errors())

    def confirmation_view(self) -> ConfirmationView:
        return self.definition.confirmation(self.state.get_answers())

    # =========================================================================
    # Field updates
    # =========================================================================

    def set_field(self, name: str, value: Any) -> bool:
        """Route an edit gesture into the state and checkpoint it."""
        if self._is_locked(name):
            logger.debug(f"Edit of '{name}' ignored while locked")
            return False
        if not self.state.set_field(name, value):
            return False

        effect = self.definition.field_effect
        if effect is not None:
            for other, other_value in effect(name, value, self.state.get_answers()).items():
                self.state.set_field(other, other_value)

        self._after_answers_changed()
        return True

    def toggle_set_member(self, name: str, value: str) -> bool:
        """Route a multi-select gesture into the state and checkpoint it."""
        if self._is_locked(name):
            logger.debug(f"Toggle of '{name}' ignored while locked")
            return False
        if not self.state.toggle_set_member(name, value):
            return False
        self._after_answers_changed()
        return True

    def _is_locked(self, name: str) -> bool:
        lock = self.definition.field_lock
        return lock is not None and lock(name, self.state.get_answers())

    def _after_answers_changed(self):
        self._checkpoint()
        self.answers_changed.emit(self.state.get_answers())

    # =========================================================================
    # Transitions
    # =========================================================================

    def advance(self) -> bool:
        """
        Validate the current step and move forward, or submit on the last step.

        Returns:
            True if the wizard moved forward or was submitted
        """
        if self.is_submitted():
            logger.debug("advance() ignored: already submitted")
            return False

        step = self.current_step
        errors = self.definition.validator.validate(step, self.state.get_answers())
        if errors:
            title = self.definition.get_step(step).get_step_title()
            logger.warning(
                f"{self.definition.wizard_id}: step {step} ({title}) validation failed: {sorted(errors)}"
            )
            self.state.set_errors(errors)
            self.errors_changed.emit(dict(errors))
            return False

        if step == self.total_steps:
            self.submit()
            return True

        self._clear_errors()
        self.state.set_step(step + 1)
        logger.info(f"{self.definition.wizard_id}: step {step} -> {step + 1}")
        self._checkpoint()
        self.step_changed.emit(step, step + 1)
        return True

    def retreat(self) -> bool:
        """Move one step back without validation. Returns False on step 1."""
        if not self.can_retreat():
            logger.debug(f"retreat() ignored at step {self.current_step}")
            return False

        step = self.current_step
        self._clear_errors()
        self.state.set_step(step - 1)
        logger.info(f"{self.definition.wizard_id}: step {step} -> {step - 1} (back)")
        self._checkpoint()
        self.step_changed.emit(step, step - 1)
        return True

    def submit(self):
        """Finalize the answers: drop the checkpoint and enter the submitted state."""
        if self.is_submitted():
            return
        self._clear_checkpoint()
        self.state.mark_submitted()
        answers = self.state.get_answers()
        logger.info(f"{self.definition.wizard_id}: submitted")
        self.submitted.emit(answers)

    def close(self):
        """
        Close the wizard.

        A submitted wizard is reset to defaults and its checkpoint cleared.
        An unfinished wizard keeps its checkpoint so it can be resumed.
        """
        if self.is_submitted():
            old_step = self.current_step
            self.state.reset()
            self._clear_checkpoint()
            logger.info(f"{self.definition.wizard_id}: reset after submission")
            self.step_changed.emit(old_step, 1)
            self.answers_changed.emit(self.state.get_answers())
        self.closed.emit()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _clear_errors(self):
        if self.state.has_errors():
            self.state.set_errors({})
            self.errors_changed.emit({})

    def _checkpoint(self):
        if self.is_submitted():
            return
        try:
            self.checkpoints.save(self.state.get_answers(), self.current_step)
        except StorageException as e:
            logger.warning(f"Checkpoint not saved: {e}")

    def _clear_checkpoint(self):
        try:
            self.checkpoints.clear()
        except StorageException as e:
            logger.warning(f"Checkpoint not cleared: {e}")
