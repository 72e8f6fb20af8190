# -*- coding: utf-8 -*-
"""Sample request wizard."""

from .definition import sample_request_definition, SAMPLE_REQUEST_SCHEMA, ProductStep, InsuranceStep

__all__ = [
    'sample_request_definition',
    'SAMPLE_REQUEST_SCHEMA',
    'ProductStep',
    'InsuranceStep',
]
