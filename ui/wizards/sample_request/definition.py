# -*- coding: utf-8 -*-
"""
Sample Request Wizard - "Get Free Samples" lead form.

Steps:
1. Contact information (where to ship the samples)
2. Product selection, or "Send me an assortment"
3. Insurance information (optional)
"""

from typing import Any, Dict

from app.config import Config
from models.catalog_options import SAMPLE_PRODUCT_OPTIONS, INSURANCE_PROVIDER_OPTIONS
from models.field_schema import FieldKind, FieldSpec, FormSchema
from models.lead_forms import SampleRequestAnswers
from services.translation_manager import tr
from services.wizard.step_validator import SampleRequestSteps, sample_request_validator
from ui.wizards.framework.base_step import (
    BaseStep, StepView, InputView, InputKind, ConfirmationView
)
from ui.wizards.framework.contact_step import ContactStep
from ui.wizards.framework.wizard_definition import WizardDefinition

WIZARD_ID = "sample_request"

SAMPLE_REQUEST_SCHEMA = FormSchema([
    FieldSpec("fullName"),
    FieldSpec("email"),
    FieldSpec("phone"),
    FieldSpec("zipCode"),
    FieldSpec("selectedProducts", FieldKind.MULTI_CHOICE, options=SAMPLE_PRODUCT_OPTIONS),
    FieldSpec("sendAssortment", FieldKind.FLAG),
    FieldSpec("insuranceProvider", FieldKind.CHOICE, options=INSURANCE_PROVIDER_OPTIONS),
    FieldSpec("memberId"),
])


class ProductStep(BaseStep):
    """Step 2: pick specific products or ask for an assortment."""

    field_names = ("sendAssortment", "selectedProducts")
    extra_error_keys = (SampleRequestSteps.PRODUCTS_ERROR_FIELD,)

    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        assortment = bool(answers.get("sendAssortment"))
        return StepView(
            title=tr("sample_request.products.title"),
            description=tr("sample_request.products.description"),
            inputs=[
                InputView(
                    name="sendAssortment",
                    kind=InputKind.CHECKBOX,
                    label=tr("sample_request.products.assortment"),
                    value=assortment,
                    hint=tr("sample_request.products.assortment.hint"),
                ),
                InputView(
                    name="selectedProducts",
                    kind=InputKind.MULTI_SELECT,
                    label=tr("sample_request.products.specific"),
                    value=list(answers.get("selectedProducts") or []),
                    options=SAMPLE_PRODUCT_OPTIONS,
                    # Products are locked while an assortment is requested
                    disabled=assortment,
                ),
            ],
            error=errors.get(SampleRequestSteps.PRODUCTS_ERROR_FIELD),
        )

    def get_step_title(self) -> str:
        return tr("sample_request.products.title")


class InsuranceStep(BaseStep):
    """Step 3: optional insurance provider and member ID."""

    field_names = ("insuranceProvider", "memberId")

    def describe(self, answers: Dict[str, Any], errors: Dict[str, str]) -> StepView:
        return StepView(
            title=tr("sample_request.insurance.title"),
            description=tr("sample_request.insurance.description"),
            inputs=[
                InputView(
                    name="insuranceProvider",
                    kind=InputKind.DROPDOWN,
                    label=tr("sample_request.insurance.provider"),
                    value=answers.get("insuranceProvider") or "",
                    options=INSURANCE_PROVIDER_OPTIONS,
                    placeholder=tr("sample_request.insurance.provider.placeholder"),
                ),
                InputView(
                    name="memberId",
                    kind=InputKind.TEXT,
                    label=tr("sample_request.insurance.member_id"),
                    value=answers.get("memberId") or "",
                    placeholder=tr("sample_request.insurance.member_id.placeholder"),
                    hint=tr("sample_request.insurance.member_id.hint"),
                ),
            ],
            notes=[tr("sample_request.insurance.skip_note")],
        )

    def get_step_title(self) -> str:
        return tr("sample_request.insurance.title")


def assortment_clears_products(name: str, value: Any, answers: Dict[str, Any]) -> Dict[str, Any]:
    """Turning the assortment on drops any individually selected products."""
    if name == "sendAssortment" and answers.get("sendAssortment") and answers.get("selectedProducts"):
        return {"selectedProducts": []}
    return {}


def products_locked(name: str, answers: Dict[str, Any]) -> bool:
    return name == "selectedProducts" and bool(answers.get("sendAssortment"))


def sample_request_confirmation(answers: Dict[str, Any]) -> ConfirmationView:
    return ConfirmationView(
        title=tr("sample_request.confirmation.title"),
        description=tr("sample_request.confirmation.description"),
        details=[
            (tr("sample_request.confirmation.delivery"),
             tr("sample_request.confirmation.delivery.value")),
            (tr("sample_request.confirmation.email"),
             tr("sample_request.confirmation.email.value", email=answers.get("email", ""))),
        ],
        next_steps_title=tr("sample_request.confirmation.next"),
        next_steps=[
            ("", tr("sample_request.confirmation.next.email")),
            ("", tr("sample_request.confirmation.next.try")),
            ("", tr("sample_request.confirmation.next.call", phone=Config.SUPPORT_PHONE)),
        ],
    )


def sample_request_definition(storage_key: str = None) -> WizardDefinition:
    """
    Build the sample request wizard definition.

    Args:
        storage_key: Checkpoint key (default: Config.SAMPLE_REQUEST_STORAGE_KEY)
    """
    return WizardDefinition(
        wizard_id=WIZARD_ID,
        storage_key=storage_key or Config.SAMPLE_REQUEST_STORAGE_KEY,
        schema=SAMPLE_REQUEST_SCHEMA,
        steps=[
            ContactStep("sample_request.contact.title", "sample_request.contact.description"),
            ProductStep(),
            InsuranceStep(),
        ],
        validator=sample_request_validator(),
        confirmation=sample_request_confirmation,
        title_key="sample_request.title",
        submitted_title_key="sample_request.title.submitted",
        submit_button_key="sample_request.button.submit",
        record_factory=SampleRequestAnswers.from_dict,
        field_effect=assortment_clears_products,
        field_lock=products_locked,
    )
