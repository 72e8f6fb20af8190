# -*- coding: utf-8 -*-
"""
Lead form records.

Finalized answers of the two lead-generation wizards, handed off to
whatever collaborator processes a request. Dictionary keys use the
camelCase names of the persisted form data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


@dataclass
class ContactDetails:
    """Contact block shared by both wizards."""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    zip_code: str = ""


@dataclass
class SampleRequestAnswers:
    """Answers of the free-sample request wizard."""
    contact: ContactDetails = field(default_factory=ContactDetails)
    selected_products: List[str] = field(default_factory=list)
    send_assortment: bool = False
    insurance_provider: str = ""
    member_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to form-data dictionary."""
        return {
            "fullName": self.contact.full_name,
            "email": self.contact.email,
            "phone": self.contact.phone,
            "zipCode": self.contact.zip_code,
            "selectedProducts": list(self.selected_products),
            "sendAssortment": self.send_assortment,
            "insuranceProvider": self.insurance_provider,
            "memberId": self.member_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SampleRequestAnswers":
        """Create from form-data dictionary."""
        return cls(
            contact=ContactDetails(
                full_name=_as_str(data.get("fullName")),
                email=_as_str(data.get("email")),
                phone=_as_str(data.get("phone")),
                zip_code=_as_str(data.get("zipCode")),
            ),
            selected_products=_as_str_list(data.get("selectedProducts")),
            send_assortment=bool(data.get("sendAssortment", False)),
            insurance_provider=_as_str(data.get("insuranceProvider")),
            member_id=_as_str(data.get("memberId")),
        )


@dataclass
class SupplyFinderAnswers:
    """Answers of the supply-finder wizard."""
    insurance_type: str = ""
    product_interest: List[str] = field(default_factory=list)
    has_prescribing_doctor: str = ""
    contact: ContactDetails = field(default_factory=ContactDetails)
    receive_resources: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to form-data dictionary."""
        return {
            "insuranceType": self.insurance_type,
            "productInterest": list(self.product_interest),
            "hasPrescribingDoctor": self.has_prescribing_doctor,
            "fullName": self.contact.full_name,
            "phone": self.contact.phone,
            "email": self.contact.email,
            "zipCode": self.contact.zip_code,
            "receiveResources": self.receive_resources,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SupplyFinderAnswers":
        """Create from form-data dictionary."""
        return cls(
            insurance_type=_as_str(data.get("insuranceType")),
            product_interest=_as_str_list(data.get("productInterest")),
            has_prescribing_doctor=_as_str(data.get("hasPrescribingDoctor")),
            contact=ContactDetails(
                full_name=_as_str(data.get("fullName")),
                email=_as_str(data.get("email")),
                phone=_as_str(data.get("phone")),
                zip_code=_as_str(data.get("zipCode")),
            ),
            receive_resources=bool(data.get("receiveResources", False)),
        )
