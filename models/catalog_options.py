# -*- coding: utf-8 -*-
"""
Static option lists consumed by select-style wizard inputs.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Option:
    """A selectable {value, label} pair."""
    value: str
    label: str


def option_values(options: Tuple[Option, ...]) -> Tuple[str, ...]:
    """Return the values of an option list, in order."""
    return tuple(option.value for option in options)


# Sample-Request: products that can be sampled
SAMPLE_PRODUCT_OPTIONS: Tuple[Option, ...] = (
    Option("intermittent-catheters", "Intermittent Catheters"),
    Option("external-catheters", "External Catheters"),
    Option("foley-catheters", "Foley Catheters"),
    Option("ostomy-pouches", "Ostomy Pouches"),
    Option("ostomy-accessories", "Ostomy Accessories"),
    Option("adult-briefs", "Adult Briefs"),
    Option("protective-underwear", "Protective Underwear"),
    Option("incontinence-pads", "Incontinence Pads"),
)

# Sample-Request: optional insurance provider
INSURANCE_PROVIDER_OPTIONS: Tuple[Option, ...] = (
    Option("medicare", "Medicare"),
    Option("medicaid", "Medicaid"),
    Option("aetna", "Aetna"),
    Option("blue-cross", "Blue Cross Blue Shield"),
    Option("cigna", "Cigna"),
    Option("humana", "Humana"),
    Option("united", "UnitedHealthcare"),
    Option("other", "Other"),
    Option("none", "No Insurance / Self-Pay"),
)

# Supply-Finder: insurance type
INSURANCE_TYPE_OPTIONS: Tuple[Option, ...] = (
    Option("medicare", "Medicare"),
    Option("medicaid", "Medicaid"),
    Option("private", "Private Insurance"),
    Option("not-sure", "Not Sure"),
)

# Supply-Finder: product categories of interest
PRODUCT_INTEREST_OPTIONS: Tuple[Option, ...] = (
    Option("intermittent-catheters", "Intermittent Catheters"),
    Option("external-catheters", "External Catheters"),
    Option("incontinence", "Incontinence Supplies"),
    Option("ostomy", "Ostomy Supplies"),
    Option("not-sure", "Not sure - help me choose"),
)

# Supply-Finder: prescribing doctor status
PRESCRIBING_DOCTOR_OPTIONS: Tuple[Option, ...] = (
    Option("yes", "Yes, I have a prescribing doctor"),
    Option("no", "No, I need help with this"),
)
