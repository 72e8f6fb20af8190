# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    RequiredTextValidator,
    EmailValidator,
    PhoneValidator,
    ZipCodeValidator,
    SelectionRequiredValidator,
    ChoiceValidator,
    CompositeValidator,
    contact_validator,
)

__all__ = [
    'ValidationStrategy',
    'RequiredTextValidator',
    'EmailValidator',
    'PhoneValidator',
    'ZipCodeValidator',
    'SelectionRequiredValidator',
    'ChoiceValidator',
    'CompositeValidator',
    'contact_validator',
]
