# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or {}
        self.context = context


class StorageException(Exception):
    """Exception raised when the local key-value storage fails."""

    def __init__(self, message: str, key: str = None,
                 original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.original_error = original_error

    def __str__(self):
        if self.key:
            return f"[{self.key}] {self.message}"
        return self.message


class WizardDefinitionError(Exception):
    """Raised when a wizard variant declares an inconsistent schema."""
