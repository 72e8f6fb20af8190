# -*- coding: utf-8 -*-
"""
Supply Finder Wizard - "Find My Supplies" lead form.

Steps:
1. Insurance type
2. Products of interest
3. Prescribing doctor status
4. Contact information and the educational-resources opt-in
"""

from typing import Any, Dict

from app.config import Config
from models.catalog_options import (
    INSURANCE_TYPE_OPTIONS, PRODUCT_INTEREST_OPTIONS, PRESCRIBING_DOCTOR_OPTIONS
)
from models.field_schema import FieldKind, FieldSpec, FormSchema
from models.lead_forms import SupplyFinderAnswers
from services.translation_manager import tr
from services.wizard.step_validator import supply_finder_validator
from ui.wizards.framework.base_step import (
    BaseStep, StepView, InputView, InputKind, ConfirmationView
)
from ui.wizards.framework.contact_step import ContactStep
from ui.wizards.framework.wizard_definition import WizardDefinition

WIZARD_ID = "supply_finder"

SUPPLY_FINDER_SCHEMA = FormSchema([
    FieldSpec("insuranceType", FieldKind.CHOICE, options=INSURANCE_TYPE_OPTIONS),
    FieldSpec("productInterest", FieldKind.MULTI_CHOICE, options=PRODUCT_INTEREST_OPTIONS),
    FieldSpec("hasPrescribingDoctor", FieldKind.CHOICE, options=PRESCRIBING_DOCTOR_OPTIONS),
    FieldSpec("fullName"),
    FieldSpec("phone"),
    FieldSpec("email"),
    FieldSpec("zipCode"),
    FieldSpec("receiveResources", FieldKind.FLAG),
])


class SingleChoiceStep(BaseStep):
    """A step with one question answered by exactly one option card."""

    def __init__(self, field_name: str, options, title_key: str, description_key: str):
        self.field_names = (field_name,)
        self.field_name = field_name
        self.options = options
        self.title_key = title_key
        self.description_key = description_key

    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        return StepView(
            title=tr(self.title_key),
            description=tr(self.description_key),
            inputs=[InputView(
                name=self.field_name,
                kind=InputKind.SINGLE_SELECT,
                label="",
                value=answers.get(self.field_name) or "",
                error=errors.get(self.field_name),
                options=self.options,
            )],
            notes=self.notes_for(answers.get(self.field_name) or ""),
        )

    def notes_for(self, value: str):
        return []

    def get_step_title(self) -> str:
        return tr(self.title_key)


class InsuranceTypeStep(SingleChoiceStep):
    def __init__(self):
        super().__init__(
            "insuranceType", INSURANCE_TYPE_OPTIONS,
            "supply_finder.insurance.title", "supply_finder.insurance.description"
        )


class PrescribingDoctorStep(SingleChoiceStep):
    def __init__(self):
        super().__init__(
            "hasPrescribingDoctor", PRESCRIBING_DOCTOR_OPTIONS,
            "supply_finder.doctor.title", "supply_finder.doctor.description"
        )

    def notes_for(self, value: str):
        # Reassurance shown once the customer says they need a doctor
        if value == "no":
            return [tr("supply_finder.doctor.no_hint")]
        return []


class ProductInterestStep(BaseStep):
    """Step 2: any number of product categories."""

    field_names = ("productInterest",)

    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        return StepView(
            title=tr("supply_finder.products.title"),
            description=tr("supply_finder.products.description"),
            inputs=[InputView(
                name="productInterest",
                kind=InputKind.MULTI_SELECT,
                label="",
                value=list(answers.get("productInterest") or []),
                error=errors.get("productInterest"),
                options=PRODUCT_INTEREST_OPTIONS,
            )],
        )

    def get_step_title(self) -> str:
        return tr("supply_finder.products.title")


class SupplyContactStep(ContactStep):
    """Step 4: contact details plus the resources opt-in."""

    def __init__(self):
        super().__init__(
            "supply_finder.contact.title",
            "supply_finder.contact.description",
            field_order=("fullName", "phone", "email", "zipCode", "receiveResources"),
        )

    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        view = super().describe(answers, errors)
        view.inputs.append(InputView(
            name="receiveResources",
            kind=InputKind.CHECKBOX,
            label=tr("supply_finder.contact.resources"),
            value=bool(answers.get("receiveResources")),
        ))
        return view


def supply_finder_confirmation(answers: Dict[str, Any]) -> ConfirmationView:
    return ConfirmationView(
        title=tr("supply_finder.confirmation.title"),
        description=tr("supply_finder.confirmation.description"),
        next_steps=[
            (tr(f"supply_finder.confirmation.step{n}.title"),
             tr(f"supply_finder.confirmation.step{n}.description"))
            for n in (1, 2, 3)
        ],
        numbered=True,
    )


def supply_finder_definition(storage_key: str = None) -> WizardDefinition:
    """
    Build the supply finder wizard definition.

    Args:
        storage_key: Checkpoint key (default: Config.SUPPLY_FINDER_STORAGE_KEY)
    """
    return WizardDefinition(
        wizard_id=WIZARD_ID,
        storage_key=storage_key or Config.SUPPLY_FINDER_STORAGE_KEY,
        schema=SUPPLY_FINDER_SCHEMA,
        steps=[
            InsuranceTypeStep(),
            ProductInterestStep(),
            PrescribingDoctorStep(),
            SupplyContactStep(),
        ],
        validator=supply_finder_validator(),
        confirmation=supply_finder_confirmation,
        title_key="supply_finder.title",
        submitted_title_key="supply_finder.title.submitted",
        submit_button_key="supply_finder.button.submit",
        record_factory=SupplyFinderAnswers.from_dict,
    )
