"""
Beneficiary webhook payloads (``beneficiary.*``).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from uqpay.core.exceptions import MalformedPayloadError
from uqpay.webhooks.base import WebhookPayload, get_str, require_object
from uqpay.webhooks.event_types import BENEFICIARY_EVENTS


class BeneficiaryStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    REJECTED = "REJECTED"


class BeneficiaryEntityType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    COMPANY = "COMPANY"


class PaymentType(str, Enum):
    LOCAL = "LOCAL"
    INTERNATIONAL = "INTERNATIONAL"


@dataclass
class BeneficiaryAddress:
    nationality: str = ""
    country_code: str = ""
    city: str = ""
    state: str = ""
    street_address: str = ""
    postal_code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BeneficiaryAddress:
        return cls(
            nationality=get_str(data, "nationality"),
            country_code=get_str(data, "country_code"),
            city=get_str(data, "city"),
            state=get_str(data, "state"),
            street_address=get_str(data, "street_address"),
            postal_code=get_str(data, "postal_code"),
        )


@dataclass
class BeneficiaryBankDetails:
    bank_name: str = ""
    bank_address: str = ""
    bank_country_code: str = ""
    account_holder: str = ""
    account_currency_code: str = ""
    account_number: str = ""
    iban: str = ""
    swift_code: str = ""
    clearing_system: str = ""
    routing_code_type1: str = ""
    routing_code_value1: str = ""
    routing_code_type2: str = ""
    routing_code_value2: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BeneficiaryBankDetails:
        return cls(
            bank_name=get_str(data, "bank_name"),
            bank_address=get_str(data, "bank_address"),
            bank_country_code=get_str(data, "bank_country_code"),
            account_holder=get_str(data, "account_holder"),
            account_currency_code=get_str(data, "account_currency_code"),
            account_number=get_str(data, "account_number"),
            iban=get_str(data, "iban"),
            swift_code=get_str(data, "swift_code"),
            clearing_system=get_str(data, "clearing_system"),
            routing_code_type1=get_str(data, "routing_code_type1"),
            routing_code_value1=get_str(data, "routing_code_value1"),
            routing_code_type2=get_str(data, "routing_code_type2"),
            routing_code_value2=get_str(data, "routing_code_value2"),
        )


def _decode_embedded(raw: str, what: str) -> dict[str, Any] | None:
    # Address and bank details arrive as JSON documents inside a string field
    if not raw:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"{what} is not valid JSON: {e}") from e
    return require_object(value, what)


@dataclass
class BeneficiaryData(WebhookPayload):
    """
    Payload of beneficiary.successful / failed / pending events.

    ``beneficiary_address`` and ``beneficiary_bank_details`` hold JSON
    strings; decode them with get_beneficiary_address() and
    get_beneficiary_bank_details().
    """

    EVENT_TYPES = BENEFICIARY_EVENTS
    CATEGORY = "beneficiary"

    account_id: str = ""
    account_number: str = ""
    account_currency_code: str = ""
    beneficiary_id: str = ""
    beneficiary_first_name: str = ""
    beneficiary_last_name: str = ""
    beneficiary_nickname: str = ""
    beneficiary_company_name: str = ""
    beneficiary_email: str = ""
    beneficiary_entity_type: str = ""
    beneficiary_status: str = ""
    beneficiary_address: str = ""
    beneficiary_bank_details: str = ""
    bank_country_code: str = ""
    payment_type: str = ""
    short_reference_id: str = ""
    direct_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BeneficiaryData:
        return cls(
            account_id=get_str(data, "account_id"),
            account_number=get_str(data, "account_number"),
            account_currency_code=get_str(data, "account_currency_code"),
            beneficiary_id=get_str(data, "beneficiary_id"),
            beneficiary_first_name=get_str(data, "beneficiary_first_name"),
            beneficiary_last_name=get_str(data, "beneficiary_last_name"),
            beneficiary_nickname=get_str(data, "beneficiary_nickname"),
            beneficiary_company_name=get_str(data, "beneficiary_company_name"),
            beneficiary_email=get_str(data, "beneficiary_email"),
            beneficiary_entity_type=get_str(data, "beneficiary_entity_type"),
            beneficiary_status=get_str(data, "beneficiary_status"),
            beneficiary_address=get_str(data, "beneficiary_address"),
            beneficiary_bank_details=get_str(data, "beneficiary_bank_details"),
            bank_country_code=get_str(data, "bank_country_code"),
            payment_type=get_str(data, "payment_type"),
            short_reference_id=get_str(data, "short_reference_id"),
            direct_id=get_str(data, "direct_id"),
        )

    def get_beneficiary_address(self) -> BeneficiaryAddress | None:
        """Decoded address, or None when the event carries none."""
        data = _decode_embedded(self.beneficiary_address, "beneficiary_address")
        return BeneficiaryAddress.from_dict(data) if data is not None else None

    def get_beneficiary_bank_details(self) -> BeneficiaryBankDetails | None:
        """Decoded bank details, or None when the event carries none."""
        data = _decode_embedded(self.beneficiary_bank_details, "beneficiary_bank_details")
        return BeneficiaryBankDetails.from_dict(data) if data is not None else None

    def get_full_name(self) -> str:
        return " ".join(
            part for part in (self.beneficiary_first_name, self.beneficiary_last_name) if part
        )

    def is_individual(self) -> bool:
        return self.beneficiary_entity_type == BeneficiaryEntityType.INDIVIDUAL.value

    def is_company(self) -> bool:
        return self.beneficiary_entity_type == BeneficiaryEntityType.COMPANY.value

    def is_active(self) -> bool:
        return self.beneficiary_status == BeneficiaryStatus.ACTIVE.value

    def is_local_payment(self) -> bool:
        return self.payment_type == PaymentType.LOCAL.value

    def is_international_payment(self) -> bool:
        return self.payment_type == PaymentType.INTERNATIONAL.value
