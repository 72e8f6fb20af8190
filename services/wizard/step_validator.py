# -*- coding: utf-8 -*-
"""
Step validation service for the lead-generation wizards.

Validates answers for each step without UI coupling. Validation is always
recomputed from scratch; no state is kept between calls.
"""

from typing import Any, Dict, Mapping, Optional

from services.validation import (
    ValidationStrategy,
    SelectionRequiredValidator,
    ChoiceValidator,
    RequiredTextValidator,
    contact_validator,
)
from models.catalog_options import PRESCRIBING_DOCTOR_OPTIONS, option_values
from services.exceptions import ValidationException


class StepValidator:
    """Validates wizard step answers using one strategy per step."""

    def __init__(self, rules: Mapping[int, ValidationStrategy]):
        """
        Args:
            rules: 1-indexed step number -> strategy. Steps without an
                entry always validate.
        """
        self._rules: Dict[int, ValidationStrategy] = dict(rules)

    def validate(self, step: int, answers: Dict[str, Any]) -> Dict[str, str]:
        """
        Validate answers for a step.

        Returns:
            Mapping of field name to error message (empty if the step is valid)
        """
        strategy: Optional[ValidationStrategy] = self._rules.get(step)
        if strategy is None:
            return {}
        return strategy.validate(answers)

    def validated_steps(self):
        """Step numbers that carry a rule."""
        return sorted(self._rules)

    def validate_all(self, answers: Dict[str, Any]) -> Dict[str, str]:
        """Errors of every step, earlier steps first."""
        errors: Dict[str, str] = {}
        for step in self.validated_steps():
            for field, message in self.validate(step, answers).items():
                errors.setdefault(field, message)
        return errors

    def ensure_valid(self, answers: Dict[str, Any]) -> None:
        """
        Check finalized answers against every step.

        Raises:
            ValidationException: with the field -> message map if any step fails
        """
        errors = self.validate_all(answers)
        if errors:
            raise ValidationException(
                f"{len(errors)} field(s) failed validation",
                field=next(iter(errors)),
                errors=errors,
                context="wizard answers",
            )


class SampleRequestSteps:
    """Step numbers of the sample request wizard."""
    CONTACT = 1
    PRODUCTS = 2
    INSURANCE = 3

    TOTAL = 3

    # Step 2 reports one combined error for the product grid
    PRODUCTS_ERROR_FIELD = "products"


class SupplyFinderSteps:
    """Step numbers of the supply finder wizard."""
    INSURANCE_TYPE = 1
    PRODUCT_INTEREST = 2
    PRESCRIBING_DOCTOR = 3
    CONTACT = 4

    TOTAL = 4


def sample_request_validator() -> StepValidator:
    # Insurance step is optional, always valid
    return StepValidator({
        SampleRequestSteps.CONTACT: contact_validator(),
        SampleRequestSteps.PRODUCTS: SelectionRequiredValidator(
            "selectedProducts",
            "validation.products_or_assortment",
            alternative_flag="sendAssortment",
            error_field=SampleRequestSteps.PRODUCTS_ERROR_FIELD,
        ),
    })


def supply_finder_validator() -> StepValidator:
    return StepValidator({
        SupplyFinderSteps.INSURANCE_TYPE: RequiredTextValidator(
            "insuranceType", "validation.insurance_type_required"
        ),
        SupplyFinderSteps.PRODUCT_INTEREST: SelectionRequiredValidator(
            "productInterest", "validation.product_interest_required"
        ),
        SupplyFinderSteps.PRESCRIBING_DOCTOR: ChoiceValidator(
            "hasPrescribingDoctor",
            "validation.option_required",
            option_values(PRESCRIBING_DOCTOR_OPTIONS),
        ),
        SupplyFinderSteps.CONTACT: contact_validator(),
    })
