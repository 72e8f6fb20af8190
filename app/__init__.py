# -*- coding: utf-8 -*-
"""
Liberator Storefront Application Core Module
"""

from .config import Config

# StorefrontWindow is imported lazily; the wizard modules import app.config
__all__ = ["Config", "StorefrontWindow"]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "StorefrontWindow":
        from .main_window import StorefrontWindow
        return StorefrontWindow
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
