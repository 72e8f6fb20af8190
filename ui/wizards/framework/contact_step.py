# -*- coding: utf-8 -*-
"""
Contact Step - Name, email, phone and ZIP inputs shared by both wizards.
"""

from typing import Any, Dict, List, Tuple

from services.translation_manager import tr

from .base_step import BaseStep, StepView, InputView, InputKind

# field name -> (label key, placeholder key, max length)
CONTACT_INPUTS = {
    "fullName": ("contact.full_name", "contact.full_name.placeholder", None),
    "email": ("contact.email", "contact.email.placeholder", None),
    "phone": ("contact.phone", "contact.phone.placeholder", None),
    "zipCode": ("contact.zip_code", "contact.zip_code.placeholder", 5),
}


class ContactStep(BaseStep):
    """
    Contact details step.

    The order of `field_names` is the order the inputs are shown in.
    """

    field_names: Tuple[str, ...] = ("fullName", "email", "phone", "zipCode")

    def __init__(self, title_key: str, description_key: str, field_order: Tuple[str, ...] = None):
        if field_order is not None:
            self.field_names = tuple(field_order)
        self.title_key = title_key
        self.description_key = description_key

    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        return StepView(
            title=tr(self.title_key),
            description=tr(self.description_key),
            inputs=self.contact_inputs(answers, errors),
        )

    def contact_inputs(self, answers: Dict[str, Any], errors: Dict[str, str]) -> List[InputView]:
        inputs = []
        for name in self.field_names:
            if name not in CONTACT_INPUTS:
                continue
            label_key, placeholder_key, max_length = CONTACT_INPUTS[name]
            inputs.append(InputView(
                name=name,
                kind=InputKind.TEXT,
                label=tr(label_key),
                value=answers.get(name) or "",
                error=errors.get(name),
                placeholder=tr(placeholder_key),
                max_length=max_length,
            ))
        return inputs

    def get_step_title(self) -> str:
        return tr(self.title_key)
