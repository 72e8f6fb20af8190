# -*- coding: utf-8 -*-
"""
Centralized Style Manager.
Single source of truth for the storefront's stylesheets.

Usage:
    from ui.style_manager import StyleManager

    field.setStyleSheet(StyleManager.input_field(InputVariant.ERROR))
    card.setStyleSheet(StyleManager.option_card(selected=True))
"""

from enum import Enum
from .design_system import Colors, BorderRadius, WizardDimensions


class ButtonVariant(Enum):
    """Button style variants"""
    PRIMARY = "primary"
    OUTLINE = "outline"


class InputVariant(Enum):
    """Input field style variants"""
    DEFAULT = "default"
    ERROR = "error"


class StyleManager:
    """
    Centralized stylesheet generator.

    All QSS styles are generated here so components stay free of colors.
    """

    # ==================== BUTTONS ====================

    @staticmethod
    def button(variant: ButtonVariant = ButtonVariant.PRIMARY, color: str = Colors.PRIMARY) -> str:
        """
        Get wizard button stylesheet.

        Args:
            variant: PRIMARY (solid) or OUTLINE
            color: Brand color of the solid variant

        Returns:
            Complete QSS stylesheet string
        """
        if variant == ButtonVariant.OUTLINE:
            return f"""
                QPushButton {{
                    background-color: {Colors.SURFACE};
                    color: {Colors.TEXT_PRIMARY};
                    border: 1px solid {Colors.BORDER_HOVER};
                    border-radius: {BorderRadius.SM}px;
                    padding: 8px 16px;
                    min-height: {WizardDimensions.BUTTON_HEIGHT - 18}px;
                }}
                QPushButton:hover {{
                    background-color: {Colors.MUTED_BG};
                }}
            """
        return f"""
            QPushButton {{
                background-color: {color};
                color: {Colors.PRIMARY_WHITE};
                border: none;
                border-radius: {BorderRadius.SM}px;
                padding: 8px 24px;
                min-height: {WizardDimensions.BUTTON_HEIGHT - 16}px;
                font-weight: 600;
            }}
            QPushButton:hover {{
                background-color: {Colors.PRIMARY_HOVER};
            }}
            QPushButton:disabled {{
                background-color: {Colors.TEXT_DISABLED};
            }}
        """

    @staticmethod
    def close_button() -> str:
        """Round close button on a colored header."""
        return f"""
            QPushButton {{
                background: transparent;
                color: rgba(255, 255, 255, 0.8);
                border: none;
                border-radius: 12px;
                font-size: 16px;
                min-width: 24px;
                min-height: 24px;
            }}
            QPushButton:hover {{
                color: {Colors.PRIMARY_WHITE};
                background-color: rgba(255, 255, 255, 0.2);
            }}
        """

    # ==================== INPUTS ====================

    @staticmethod
    def input_field(variant: InputVariant = InputVariant.DEFAULT) -> str:
        """
        Get input field stylesheet.

        Args:
            variant: Input variant (DEFAULT, ERROR)

        Returns:
            Complete QSS stylesheet string
        """
        border_color = Colors.INPUT_BORDER
        focus_color = Colors.INPUT_BORDER_FOCUS

        if variant == InputVariant.ERROR:
            border_color = Colors.INPUT_BORDER_ERROR
            focus_color = Colors.INPUT_BORDER_ERROR

        return f"""
            QLineEdit {{
                background-color: {Colors.INPUT_BG};
                border: 1px solid {border_color};
                border-radius: {BorderRadius.SM}px;
                padding: 8px 12px;
                min-height: 20px;
                color: {Colors.TEXT_PRIMARY};
            }}
            QLineEdit:focus {{
                border: 2px solid {focus_color};
                padding: 7px 11px;
            }}
            QLineEdit:disabled {{
                background-color: {Colors.MUTED_BG};
                color: {Colors.TEXT_DISABLED};
            }}
        """

    @staticmethod
    def combo_box() -> str:
        """Get combo box stylesheet."""
        return f"""
            QComboBox {{
                background-color: {Colors.SURFACE};
                border: 1px solid {Colors.INPUT_BORDER};
                border-radius: {BorderRadius.SM}px;
                padding: 8px 12px;
                min-height: 20px;
                color: {Colors.TEXT_PRIMARY};
            }}
            QComboBox:hover {{
                border-color: {Colors.INPUT_BORDER_FOCUS};
            }}
            QComboBox QAbstractItemView {{
                background-color: {Colors.SURFACE};
                border: 1px solid {Colors.BORDER_DEFAULT};
                selection-background-color: {Colors.ACCENT_LIGHT};
                selection-color: {Colors.ACCENT};
            }}
        """

    # ==================== OPTION CARDS ====================

    @staticmethod
    def option_card(selected: bool = False, disabled: bool = False) -> str:
        """
        Get selectable option card stylesheet.

        Usage: Single/multi select answers rendered as bordered cards
        """
        border = Colors.ACCENT if selected else Colors.BORDER_DEFAULT
        background = Colors.ACCENT_LIGHT if selected else Colors.SURFACE
        text = Colors.ACCENT if selected else Colors.TEXT_PRIMARY
        if disabled:
            text = Colors.TEXT_DISABLED
        return f"""
            QPushButton {{
                background-color: {background};
                color: {text};
                border: 2px solid {border};
                border-radius: {BorderRadius.MD}px;
                padding: 12px 16px;
                text-align: left;
                font-weight: {600 if selected else 500};
            }}
            QPushButton:hover {{
                border-color: {Colors.ACCENT if selected else Colors.BORDER_HOVER};
            }}
        """

    # ==================== WIZARD ====================

    @staticmethod
    def wizard_header(color: str = Colors.PRIMARY) -> str:
        return f"""
            QFrame#WizardHeader {{
                background-color: {color};
                border: none;
            }}
            QLabel {{
                color: {Colors.PRIMARY_WHITE};
                background: transparent;
            }}
        """

    @staticmethod
    def wizard_card() -> str:
        return f"""
            QFrame#WizardCard {{
                background-color: {Colors.SURFACE};
                border-radius: {BorderRadius.LG}px;
            }}
        """

    @staticmethod
    def wizard_footer() -> str:
        return f"""
            QFrame#WizardFooter {{
                background-color: {Colors.SURFACE};
                border-top: 1px solid {Colors.BORDER_DEFAULT};
            }}
        """

    @staticmethod
    def progress_bar(color: str = Colors.ACCENT) -> str:
        return f"""
            QProgressBar {{
                border: none;
                background-color: {Colors.PROGRESS_TRACK};
                border-radius: {WizardDimensions.PROGRESS_HEIGHT // 2}px;
            }}
            QProgressBar::chunk {{
                background-color: {color};
                border-radius: {WizardDimensions.PROGRESS_HEIGHT // 2}px;
            }}
        """

    @staticmethod
    def info_box() -> str:
        return f"""
            QLabel {{
                background-color: {Colors.INFO_BG};
                color: {Colors.TEXT_SECONDARY};
                border-radius: {BorderRadius.MD}px;
                padding: 16px;
            }}
        """

    # ==================== LABELS ====================

    @staticmethod
    def label_title() -> str:
        return f"color: {Colors.TEXT_PRIMARY}; border: none;"

    @staticmethod
    def label_subtitle() -> str:
        return f"color: {Colors.TEXT_SECONDARY}; border: none;"

    @staticmethod
    def label_hint() -> str:
        return f"color: {Colors.TEXT_MUTED}; border: none;"

    @staticmethod
    def label_error() -> str:
        return f"color: {Colors.ERROR}; border: none;"
