# -*- coding: utf-8 -*-
"""
Tests for wizard definitions: construction-time checks and hand-off records.
"""

import pytest

from models.field_schema import FieldKind, FieldSpec, FormSchema
from models.lead_forms import SampleRequestAnswers, SupplyFinderAnswers
from services.exceptions import ValidationException, WizardDefinitionError
from services.wizard.step_validator import StepValidator
from services.validation import RequiredTextValidator
from ui.wizards.framework.base_step import BaseStep, StepView, ConfirmationView
from ui.wizards.framework.wizard_definition import WizardDefinition
from ui.wizards.sample_request import sample_request_definition
from ui.wizards.supply_finder import supply_finder_definition


class NameStep(BaseStep):
    field_names = ("name",)

    def describe(self, answers, errors):
        return StepView(title="Name")


class TypoStep(BaseStep):
    field_names = ("nmae",)

    def describe(self, answers, errors):
        return StepView(title="Typo")


def _definition(**overrides):
    params = dict(
        wizard_id="test",
        storage_key="test-key",
        schema=FormSchema([FieldSpec("name")]),
        steps=[NameStep()],
        validator=StepValidator({1: RequiredTextValidator("name", "validation.name_required")}),
        confirmation=lambda answers: ConfirmationView(title="Done"),
    )
    params.update(overrides)
    return WizardDefinition(**params)


class TestDefinitionChecks:

    def test_valid_definition(self):
        assert _definition().total_steps == 1

    def test_unknown_step_field(self):
        with pytest.raises(WizardDefinitionError):
            _definition(steps=[TypoStep()])

    def test_default_of_wrong_kind(self):
        schema = FormSchema([FieldSpec("name"), FieldSpec("opt_in", FieldKind.FLAG, default="yes")])
        with pytest.raises(WizardDefinitionError):
            _definition(schema=schema)

    def test_no_steps(self):
        with pytest.raises(WizardDefinitionError):
            _definition(steps=[])

    def test_missing_storage_key(self):
        with pytest.raises(WizardDefinitionError):
            _definition(storage_key="")

    def test_rule_for_missing_step(self):
        validator = StepValidator({2: RequiredTextValidator("name", "validation.name_required")})
        with pytest.raises(WizardDefinitionError):
            _definition(validator=validator)


class TestVariants:

    def test_sample_request(self):
        definition = sample_request_definition()
        assert definition.total_steps == 3
        assert definition.storage_key == "liberator-sample-request"
        assert definition.title() == "Get Free Samples"

    def test_supply_finder(self):
        definition = supply_finder_definition()
        assert definition.total_steps == 4
        assert definition.storage_key == "liberator-supply-finder"

    def test_storage_key_is_injectable(self):
        assert sample_request_definition("other-key").storage_key == "other-key"


class TestBuildRecord:

    def test_sample_request_record(self, contact_answers):
        definition = sample_request_definition()
        answers = definition.schema.defaults()
        answers.update(contact_answers, sendAssortment=True)
        record = definition.build_record(answers)
        assert isinstance(record, SampleRequestAnswers)
        assert record.send_assortment

    def test_supply_finder_record(self, contact_answers):
        definition = supply_finder_definition()
        answers = definition.schema.defaults()
        answers.update(
            contact_answers,
            insuranceType="medicare",
            productInterest=["ostomy"],
            hasPrescribingDoctor="yes",
        )
        record = definition.build_record(answers)
        assert isinstance(record, SupplyFinderAnswers)
        assert record.insurance_type == "medicare"

    def test_incomplete_answers_are_rejected(self):
        definition = sample_request_definition()
        with pytest.raises(ValidationException):
            definition.build_record(definition.schema.defaults())

    def test_without_factory_returns_answers(self):
        assert _definition().build_record({"name": "Jo"}) == {"name": "Jo"}
