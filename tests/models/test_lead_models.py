# -*- coding: utf-8 -*-
"""
Tests for field schemas and lead records.
"""

import pytest

from models.catalog_options import (
    SAMPLE_PRODUCT_OPTIONS, INSURANCE_PROVIDER_OPTIONS, INSURANCE_TYPE_OPTIONS,
    PRODUCT_INTEREST_OPTIONS, PRESCRIBING_DOCTOR_OPTIONS, option_values,
)
from models.field_schema import FieldKind, FieldSpec, FormSchema
from models.lead_forms import SampleRequestAnswers, SupplyFinderAnswers


def test_option_lists():
    assert len(SAMPLE_PRODUCT_OPTIONS) == 8
    assert len(INSURANCE_PROVIDER_OPTIONS) == 9
    assert len(INSURANCE_TYPE_OPTIONS) == 4
    assert len(PRODUCT_INTEREST_OPTIONS) == 5
    assert option_values(PRESCRIBING_DOCTOR_OPTIONS) == ("yes", "no")


class TestFieldSpec:

    def test_defaults_by_kind(self):
        assert FieldSpec("a").default_value() == ""
        assert FieldSpec("b", FieldKind.MULTI_CHOICE).default_value() == []
        assert FieldSpec("c", FieldKind.FLAG).default_value() is False

    def test_default_is_a_fresh_copy(self):
        spec = FieldSpec("a", FieldKind.MULTI_CHOICE, default=["x"])
        first = spec.default_value()
        first.append("y")
        assert spec.default_value() == ["x"]

    def test_mismatched_default(self):
        assert not FieldSpec("a", FieldKind.FLAG, default="no").default_matches_kind()

    def test_coerce(self):
        assert FieldSpec("a").coerce(None) == ""
        assert FieldSpec("a").coerce(12345) == "12345"
        assert FieldSpec("b", FieldKind.FLAG).coerce(True) is True
        multi = FieldSpec("c", FieldKind.MULTI_CHOICE)
        assert multi.coerce(["x", "y", "x", 3]) == ["x", "y"]

    @pytest.mark.parametrize("value", ["false", "true", 1, 0, None])
    def test_flag_accepts_only_booleans(self, value):
        with pytest.raises(ValueError):
            FieldSpec("b", FieldKind.FLAG).coerce(value)

    def test_multi_choice_needs_a_collection(self):
        with pytest.raises(ValueError):
            FieldSpec("c", FieldKind.MULTI_CHOICE).coerce("x")

    def test_choice_limited_to_options(self):
        spec = FieldSpec("insuranceType", FieldKind.CHOICE, options=INSURANCE_TYPE_OPTIONS)
        assert spec.coerce("medicare") == "medicare"
        assert spec.coerce("") == ""
        with pytest.raises(ValueError):
            spec.coerce("bogus-plan")

    def test_multi_choice_limited_to_options(self):
        spec = FieldSpec("productInterest", FieldKind.MULTI_CHOICE, options=PRODUCT_INTEREST_OPTIONS)
        assert spec.coerce(["ostomy", "incontinence"]) == ["ostomy", "incontinence"]
        with pytest.raises(ValueError):
            spec.coerce(["ostomy", "not-a-product"])

    def test_default_outside_options(self):
        spec = FieldSpec("insuranceType", FieldKind.CHOICE, default="bogus", options=INSURANCE_TYPE_OPTIONS)
        assert not spec.default_matches_kind()


class TestFormSchema:

    def test_normalize(self):
        schema = FormSchema([
            FieldSpec("name"),
            FieldSpec("tags", FieldKind.MULTI_CHOICE),
            FieldSpec("opt_in", FieldKind.FLAG),
        ])
        assert schema.normalize({"name": 7, "tags": ["a", "a"], "opt_in": True, "extra": 1}) == {
            "name": "",
            "tags": ["a"],
            "opt_in": True,
        }
        assert schema.is_set_field("tags")
        assert not schema.is_set_field("name")
        assert "extra" not in schema

    def test_normalize_drops_values_outside_options(self):
        schema = FormSchema([
            FieldSpec("insuranceType", FieldKind.CHOICE, options=INSURANCE_TYPE_OPTIONS),
            FieldSpec("productInterest", FieldKind.MULTI_CHOICE, options=PRODUCT_INTEREST_OPTIONS),
            FieldSpec("receiveResources", FieldKind.FLAG),
        ])
        assert schema.normalize({
            "insuranceType": "bogus-plan",
            "productInterest": ["ostomy", "not-a-product"],
            "receiveResources": "false",
        }) == {"insuranceType": "", "productInterest": [], "receiveResources": False}


class TestLeadRecords:

    def test_sample_request_from_dict(self):
        record = SampleRequestAnswers.from_dict({
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "phone": "(555) 123-4567",
            "zipCode": "10001",
            "selectedProducts": ["adult-briefs"],
            "sendAssortment": False,
            "insuranceProvider": "aetna",
            "memberId": "",
        })
        assert record.contact.full_name == "Jane Doe"
        assert record.selected_products == ["adult-briefs"]
        assert record.to_dict()["insuranceProvider"] == "aetna"

    def test_supply_finder_from_dict(self):
        record = SupplyFinderAnswers.from_dict({"hasPrescribingDoctor": "no", "productInterest": ["ostomy"]})
        assert record.has_prescribing_doctor == "no"
        assert record.to_dict()["productInterest"] == ["ostomy"]
        assert record.to_dict()["receiveResources"] is False
