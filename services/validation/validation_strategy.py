# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Pluggable field rules for wizard answers.

Each strategy inspects an answers dictionary and returns a mapping of
field name to human-readable message. An empty mapping means valid.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from services.translation_manager import tr

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ZIP_CODE_PATTERN = re.compile(r"[0-9]{5}")
PHONE_DIGITS = 10


def _text(record: Dict[str, Any], field: str) -> str:
    value = record.get(field)
    return value if isinstance(value, str) else ""


def digits_only(value: str) -> str:
    """Strip every non-digit character."""
    return re.sub(r"[^0-9]", "", value or "")


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements one rule over a record of wizard answers.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        """
        Validate a record.

        Args:
            record: Dictionary of wizard answers

        Returns:
            Mapping of field name to error message (empty if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """Check if record passes this strategy."""
        return len(self.validate(record)) == 0


class RequiredTextValidator(ValidationStrategy):
    """Field must be non-empty after trimming whitespace."""

    def __init__(self, field: str, message_key: str):
        self.field = field
        self.message_key = message_key

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        if not _text(record, self.field).strip():
            return {self.field: tr(self.message_key)}
        return {}


class FormattedTextValidator(ValidationStrategy):
    """
    Required text field that must also satisfy a format check.

    The format check receives the raw value; an empty (after trim) value
    reports the "required" message instead of the format message.
    """

    def __init__(self, field: str, required_key: str, invalid_key: str, check):
        self.field = field
        self.required_key = required_key
        self.invalid_key = invalid_key
        self.check = check

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        value = _text(record, self.field)
        if not value.strip():
            return {self.field: tr(self.required_key)}
        if not self.check(value):
            return {self.field: tr(self.invalid_key)}
        return {}


def is_valid_email(value: str) -> bool:
    """Non-whitespace local part, '@', domain containing a dot."""
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: str) -> bool:
    """Exactly ten digits once formatting characters are removed."""
    return len(digits_only(value)) == PHONE_DIGITS


def is_valid_zip_code(value: str) -> bool:
    """Exactly five digits, nothing else."""
    return ZIP_CODE_PATTERN.fullmatch(value) is not None


class EmailValidator(FormattedTextValidator):
    def __init__(self, field: str = "email"):
        super().__init__(field, "validation.email_required", "validation.email_invalid", is_valid_email)


class PhoneValidator(FormattedTextValidator):
    def __init__(self, field: str = "phone"):
        super().__init__(field, "validation.phone_required", "validation.phone_invalid", is_valid_phone)


class ZipCodeValidator(FormattedTextValidator):
    def __init__(self, field: str = "zipCode"):
        super().__init__(field, "validation.zip_required", "validation.zip_invalid", is_valid_zip_code)


class SelectionRequiredValidator(ValidationStrategy):
    """
    At least one member selected in a set-valued field.

    If `alternative_flag` names a boolean field that is set, the selection
    is not required. Errors are reported under `error_field`, which defaults
    to the set field itself.
    """

    def __init__(self, field: str, message_key: str,
                 alternative_flag: Optional[str] = None,
                 error_field: Optional[str] = None):
        self.field = field
        self.message_key = message_key
        self.alternative_flag = alternative_flag
        self.error_field = error_field or field

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        selected = record.get(self.field) or []
        if len(selected) > 0:
            return {}
        if self.alternative_flag and record.get(self.alternative_flag) is True:
            return {}
        return {self.error_field: tr(self.message_key)}


class ChoiceValidator(ValidationStrategy):
    """Field must hold one of a fixed set of values."""

    def __init__(self, field: str, message_key: str, allowed: Iterable[str]):
        self.field = field
        self.message_key = message_key
        self.allowed = frozenset(allowed)

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        if _text(record, self.field) not in self.allowed:
            return {self.field: tr(self.message_key)}
        return {}


class CompositeValidator(ValidationStrategy):
    """Runs several strategies and merges their errors in order."""

    def __init__(self, strategies: List[ValidationStrategy]):
        self.strategies = list(strategies)

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for strategy in self.strategies:
            for field, message in strategy.validate(record).items():
                errors.setdefault(field, message)
        return errors


def contact_validator() -> CompositeValidator:
    """Name, email, phone and ZIP code rules shared by both wizards."""
    return CompositeValidator([
        RequiredTextValidator("fullName", "validation.name_required"),
        EmailValidator(),
        PhoneValidator(),
        ZipCodeValidator(),
    ])
