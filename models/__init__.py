# -*- coding: utf-8 -*-
"""
Storefront Data Models
"""

from .catalog_options import Option
from .field_schema import FieldKind, FieldSpec, FormSchema
from .lead_forms import ContactDetails, SampleRequestAnswers, SupplyFinderAnswers

__all__ = [
    "Option",
    "FieldKind",
    "FieldSpec",
    "FormSchema",
    "ContactDetails",
    "SampleRequestAnswers",
    "SupplyFinderAnswers",
]
