# -*- coding: utf-8 -*-
"""Supply finder wizard."""

from .definition import supply_finder_definition, SUPPLY_FINDER_SCHEMA

__all__ = [
    'supply_finder_definition',
    'SUPPLY_FINDER_SCHEMA',
]
