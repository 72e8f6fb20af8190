# -*- coding: utf-8 -*-
"""
Storefront Repository Layer
"""

from .local_storage import KeyValueStorage, InMemoryStorage, SQLiteStorage, create_storage

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "SQLiteStorage",
    "create_storage",
]
