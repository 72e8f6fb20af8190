# -*- coding: utf-8 -*-
"""
Shared test configuration.
"""
import os
import sys
from pathlib import Path

import pytest

# Headless Qt for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("STOREFRONT_STORAGE_BACKEND", "memory")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from repositories.local_storage import InMemoryStorage  # noqa: E402


@pytest.fixture
def memory_storage():
    """Fresh in-memory key-value storage."""
    return InMemoryStorage()


@pytest.fixture
def contact_answers():
    """Valid contact block shared by both wizards."""
    return {
        "fullName": "John Smith",
        "email": "john@example.com",
        "phone": "(555) 123-4567",
        "zipCode": "33101",
    }
