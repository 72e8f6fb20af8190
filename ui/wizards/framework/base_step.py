# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard step renderers.

A step renderer is a pure function of the answers it owns and the errors
for those answers. It returns a StepView describing the inputs to show,
their current values and inline errors. It never validates and never
persists; StepWidget turns the description into widgets and routes user
gestures back to the controller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from models.catalog_options import Option


class InputKind(Enum):
    """How an input is presented and which gesture it emits."""
    TEXT = "text"                    # line edit -> set_field
    SINGLE_SELECT = "single_select"  # option cards, one selected -> set_field
    MULTI_SELECT = "multi_select"    # option cards, many selected -> toggle_set_member
    CHECKBOX = "checkbox"            # boolean -> set_field
    DROPDOWN = "dropdown"            # combo box -> set_field


@dataclass
class InputView:
    """Description of one input on a step."""
    name: str
    kind: InputKind
    label: str
    value: Any
    error: Optional[str] = None
    options: Tuple[Option, ...] = ()
    placeholder: str = ""
    disabled: bool = False
    max_length: Optional[int] = None
    hint: str = ""

    def is_selected(self, option_value: str) -> bool:
        """Whether an option is currently selected (select kinds only)."""
        if self.kind == InputKind.MULTI_SELECT:
            return option_value in (self.value or [])
        return self.value == option_value


@dataclass
class StepView:
    """Everything needed to draw one step."""
    title: str
    description: str = ""
    inputs: List[InputView] = field(default_factory=list)
    # Error that belongs to the step as a whole rather than to one input
    error: Optional[str] = None
    notes: List[str] = field(default_factory=list)

    def get_input(self, name: str) -> Optional[InputView]:
        for view in self.inputs:
            if view.name == name:
                return view
        return None


@dataclass
class ConfirmationView:
    """Terminal view shown after submission."""
    title: str
    description: str = ""
    # (heading, text) pairs, e.g. delivery estimate
    details: List[Tuple[str, str]] = field(default_factory=list)
    next_steps_title: str = ""
    # (heading, text) pairs; heading may be empty
    next_steps: List[Tuple[str, str]] = field(default_factory=list)
    numbered: bool = False


class BaseStep(ABC):
    """
    Abstract base class for wizard step renderers.

    Subclasses declare the answer fields they own in `field_names` and
    implement describe().
    """

    # Answer fields this step reads
    field_names: Tuple[str, ...] = ()

    # Error keys this step displays that are not field names
    extra_error_keys: Tuple[str, ...] = ()

    def render(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        """Slice answers and errors down to this step and describe it."""
        own_answers = {name: answers.get(name) for name in self.field_names}
        own_keys = set(self.field_names) | set(self.extra_error_keys)
        own_errors = {key: msg for key, msg in errors.items() if key in own_keys}
        return self.describe(own_answers, own_errors)

    @abstractmethod
    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        """
        Describe the step.

        Args:
            answers: Values of the fields in `field_names`
            errors: Errors keyed by those fields (or `extra_error_keys`)

        Returns:
            StepView for the step
        """
        pass

    def get_step_title(self) -> str:
        """
        Get the step's title.

        Default implementation returns the class name.
        """
        return self.__class__.__name__
