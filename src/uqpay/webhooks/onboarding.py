"""
Onboarding webhook payloads (``onboarding.account.*``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from uqpay.webhooks.base import (
    WebhookPayload,
    get_bool,
    get_int,
    get_object,
    get_object_list,
    get_str,
    get_str_list,
)
from uqpay.webhooks.event_types import ACCOUNT_EVENTS


class AccountStatus(str, Enum):
    PROCESSING = "PROCESSING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"


class VerificationStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class EntityType(str, Enum):
    COMPANY = "COMPANY"
    INDIVIDUAL = "INDIVIDUAL"


class BusinessStructure(str, Enum):
    SOLE_PROPRIETOR = "SOLE_PROPRIETOR"
    PARTNERSHIP = "PARTNERSHIP"
    CORPORATION = "CORPORATION"
    LLC = "LLC"
    NON_PROFIT = "NON_PROFIT"
    GOVERNMENT_ENTITY = "GOVERNMENT_ENTITY"
    PUBLICLY_TRADED = "PUBLICLY_TRADED"
    PRIVATELY_HELD = "PRIVATELY_HELD"


class RepresentativeRole(str, Enum):
    DIRECTOR = "DIRECTOR"
    OWNER = "OWNER"
    SHAREHOLDER = "SHAREHOLDER"
    AUTHORIZED_USER = "AUTHORIZED_USER"
    UBO = "UBO"  # Ultimate Beneficial Owner


class IdentificationType(str, Enum):
    PASSPORT = "PASSPORT"
    NATIONAL_ID = "NATIONAL_ID"
    DRIVER_LICENSE = "DRIVER_LICENSE"


@dataclass
class Address:
    line1: str = ""
    line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        return cls(
            line1=get_str(data, "line1"),
            line2=get_str(data, "line2"),
            city=get_str(data, "city"),
            state=get_str(data, "state"),
            postal_code=get_str(data, "postal_code"),
            country=get_str(data, "country"),
        )


@dataclass
class ContactDetails:
    email: str = ""
    phone: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContactDetails:
        return cls(email=get_str(data, "email"), phone=get_str(data, "phone"))


@dataclass
class MonthlyEstimatedRevenue:
    amount: str = ""
    currency: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MonthlyEstimatedRevenue:
        return cls(amount=get_str(data, "amount"), currency=get_str(data, "currency"))


@dataclass
class Identifier:
    """Business registration identifier."""

    type: str = ""
    number: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Identifier:
        return cls(type=get_str(data, "type"), number=get_str(data, "number"))


@dataclass
class BusinessDetails:
    """Company information for COMPANY accounts."""

    legal_entity_name: str = ""
    legal_entity_name_english: str = ""
    incorporation_date: str = ""
    registration_number: str = ""
    business_structure: str = ""
    product_description: str = ""
    merchant_category_code: str = ""
    mcc: str = ""
    estimated_worker_count: str = ""
    monthly_estimated_revenue: MonthlyEstimatedRevenue | None = None
    account_purpose: list[str] = field(default_factory=list)
    identifier: Identifier | None = None
    website_url: str = ""
    country: str = ""
    industry_code: str = ""
    banking_countries: list[str] = field(default_factory=list)
    banking_currencies: list[str] = field(default_factory=list)
    business_address: list[Address] = field(default_factory=list)
    registration_address: Address | None = None
    identification_expiry_date: str = ""
    identification_issue_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BusinessDetails:
        return cls(
            legal_entity_name=get_str(data, "legal_entity_name"),
            legal_entity_name_english=get_str(data, "legal_entity_name_english"),
            incorporation_date=get_str(data, "incorporation_date"),
            registration_number=get_str(data, "registration_number"),
            business_structure=get_str(data, "business_structure"),
            product_description=get_str(data, "product_description"),
            merchant_category_code=get_str(data, "merchant_category_code"),
            mcc=get_str(data, "mcc"),
            estimated_worker_count=get_str(data, "estimated_worker_count"),
            monthly_estimated_revenue=get_object(
                data, "monthly_estimated_revenue", MonthlyEstimatedRevenue.from_dict
            ),
            account_purpose=get_str_list(data, "account_purpose"),
            identifier=get_object(data, "identifier", Identifier.from_dict),
            website_url=get_str(data, "website_url"),
            country=get_str(data, "country"),
            industry_code=get_str(data, "industry_code"),
            banking_countries=get_str_list(data, "banking_countries"),
            banking_currencies=get_str_list(data, "banking_currencies"),
            business_address=get_object_list(data, "business_address", Address.from_dict),
            registration_address=get_object(data, "registration_address", Address.from_dict),
            identification_expiry_date=get_str(data, "identification_expiry_date"),
            identification_issue_date=get_str(data, "identification_issue_date"),
        )


@dataclass
class IdentificationDocuments:
    front: str = ""
    back: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IdentificationDocuments:
        return cls(
            front=get_str(data, "front"),
            back=get_str(data, "back"),
            type=get_str(data, "type"),
        )


@dataclass
class Identification:
    type: str = ""
    id_number: str = ""
    documents: IdentificationDocuments | None = None
    identification_expiry_date: str = ""
    identification_issue_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Identification:
        return cls(
            type=get_str(data, "type"),
            id_number=get_str(data, "id_number"),
            documents=get_object(data, "documents", IdentificationDocuments.from_dict),
            identification_expiry_date=get_str(data, "identification_expiry_date"),
            identification_issue_date=get_str(data, "identification_issue_date"),
        )


@dataclass
class Representative:
    """Director, owner or other person attached to an account."""

    representative_id: str = ""
    roles: str = ""
    first_name: str = ""
    last_name: str = ""
    local_name: str = ""
    nationality: str = ""
    date_of_birth: str = ""
    share_percentage: str = ""
    area_code: str = ""
    phone_number: str = ""
    email: str = ""
    tax_number: str = ""
    identification: Identification | None = None
    residential_address: Address | None = None
    is_applicant: bool = False
    as_applicant: bool = False
    idv_status: str = ""
    idv_id: str = ""
    citizenship_status: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Representative:
        return cls(
            representative_id=get_str(data, "representative_id"),
            roles=get_str(data, "roles"),
            first_name=get_str(data, "first_name"),
            last_name=get_str(data, "last_name"),
            local_name=get_str(data, "local_name"),
            nationality=get_str(data, "nationality"),
            date_of_birth=get_str(data, "date_of_birth"),
            share_percentage=get_str(data, "share_percentage"),
            area_code=get_str(data, "area_code"),
            phone_number=get_str(data, "phone_number"),
            email=get_str(data, "email"),
            tax_number=get_str(data, "tax_number"),
            identification=get_object(data, "identification", Identification.from_dict),
            residential_address=get_object(data, "residential_address", Address.from_dict),
            is_applicant=get_bool(data, "is_applicant"),
            as_applicant=get_bool(data, "as_applicant"),
            idv_status=get_str(data, "idv_status"),
            idv_id=get_str(data, "idv_id"),
            citizenship_status=get_int(data, "citizenship_status"),
        )


@dataclass
class AccountData(WebhookPayload):
    """Account payload of onboarding.account.create / onboarding.account.update."""

    EVENT_TYPES = ACCOUNT_EVENTS
    CATEGORY = "account"

    account_id: str = ""
    direct_id: str = ""
    short_reference_id: str = ""
    email: str = ""
    account_name: str = ""
    country: str = ""
    status: str = ""
    idv_status: str = ""
    verification_status: str = ""
    review_reason: str = ""
    entity_type: str = ""
    contact_details: ContactDetails | None = None
    business_details: BusinessDetails | None = None
    registration_address: Address | None = None
    business_address: list[Address] = field(default_factory=list)
    representatives: list[Representative] = field(default_factory=list)
    source: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccountData:
        return cls(
            account_id=get_str(data, "account_id"),
            direct_id=get_str(data, "direct_id"),
            short_reference_id=get_str(data, "short_reference_id"),
            email=get_str(data, "email"),
            account_name=get_str(data, "account_name"),
            country=get_str(data, "country"),
            status=get_str(data, "status"),
            idv_status=get_str(data, "idv_status"),
            verification_status=get_str(data, "verification_status"),
            review_reason=get_str(data, "review_reason"),
            entity_type=get_str(data, "entity_type"),
            contact_details=get_object(data, "contact_details", ContactDetails.from_dict),
            business_details=get_object(data, "business_details", BusinessDetails.from_dict),
            registration_address=get_object(data, "registration_address", Address.from_dict),
            business_address=get_object_list(data, "business_address", Address.from_dict),
            representatives=get_object_list(data, "representatives", Representative.from_dict),
            source=get_str(data, "source"),
        )

    def is_company(self) -> bool:
        return self.entity_type == EntityType.COMPANY.value

    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE.value
