# -*- coding: utf-8 -*-
"""
Design System - Design tokens for the storefront UI.

Single source of truth for colors, spacing and dimensions. Stylesheets are
generated from these tokens in ui/style_manager.py.
"""


class Colors:
    """Color palette."""

    # Brand
    PRIMARY = "#0B5394"
    PRIMARY_HOVER = "#094578"
    ACCENT = "#0E9F8E"
    ACCENT_LIGHT = "rgba(14, 159, 142, 0.10)"
    PRIMARY_WHITE = "#FFFFFF"

    # Backgrounds
    BACKGROUND = "#F3F4F6"
    SURFACE = "#FFFFFF"
    INFO_BG = "#EFF6FF"
    MUTED_BG = "#F9FAFB"

    # Text
    TEXT_PRIMARY = "#111827"
    TEXT_SECONDARY = "#4B5563"
    TEXT_MUTED = "#6B7280"
    TEXT_DISABLED = "#9CA3AF"

    # Borders
    BORDER_DEFAULT = "#E5E7EB"
    BORDER_HOVER = "#D1D5DB"

    # Status
    SUCCESS = "#22C55E"
    ERROR = "#DC2626"

    # Inputs
    INPUT_BG = "#FFFFFF"
    INPUT_BORDER = "#D1D5DB"
    INPUT_BORDER_FOCUS = "#0B5394"
    INPUT_BORDER_ERROR = "#EF4444"

    # Progress
    PROGRESS_TRACK = "#E5E7EB"


class BorderRadius:
    SM = 6
    MD = 8
    LG = 16


class Spacing:
    """Layout spacing scale."""
    XS = 4
    SM = 8
    MD = 16
    LG = 24


class WizardDimensions:
    """Wizard overlay dimensions."""
    HEADER_PADDING_H = 24
    HEADER_PADDING_V = 16
    CONTENT_PADDING = 24
    PROGRESS_HEIGHT = 8
    BUTTON_HEIGHT = 40
    BUTTON_MIN_WIDTH = 110
