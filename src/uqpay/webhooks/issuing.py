"""
Issuing webhook payloads: cards, card status, activation codes, recharges
and card transactions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from uqpay.webhooks.base import (
    WebhookPayload,
    get_int,
    get_object,
    get_object_list,
    get_str,
    get_str_map,
)
from uqpay.webhooks.event_types import (
    CARD_ACTIVATION_CODE_EVENTS,
    CARD_CREATE_OR_UPDATE_EVENTS,
    CARD_RECHARGE_EVENTS,
    CARD_STATUS_UPDATE_EVENTS,
    CARD_TRANSACTION_EVENTS,
)


class CardStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    BLOCKED = "BLOCKED"
    FROZEN = "FROZEN"
    PRE_CANCEL = "PRE_CANCEL"
    CLOSED = "CLOSED"
    PENDING = "PENDING"


class CardScheme(str, Enum):
    VISA = "VISA"
    MASTERCARD = "MASTERCARD"
    UNIONPAY = "UNIONPAY"


class FormFactor(str, Enum):
    VIRTUAL = "VIRTUAL"
    PHYSICAL = "PHYSICAL"


class ModeType(str, Enum):
    SINGLE = "SINGLE"
    MULTI = "MULTI"


class SpendingInterval(str, Enum):
    PER_TRANSACTION = "PER_TRANSACTION"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    ALL_TIME = "ALL_TIME"


class CardholderStatus(str, Enum):
    SUCCESS = "SUCCESS"
    PENDING = "PENDING"
    FAILED = "FAILED"


class TransactionStatus(str, Enum):
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    PENDING = "PENDING"
    REVERSED = "REVERSED"


class TransactionType(str, Enum):
    FEE = "FEE"
    PURCHASE = "PURCHASE"
    REFUND = "REFUND"
    WITHDRAWAL = "WITHDRAWAL"
    TOPUP = "TOPUP"


@dataclass
class SpendingLimit:
    amount: str = ""
    interval: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpendingLimit:
        return cls(amount=get_str(data, "amount"), interval=get_str(data, "interval"))


@dataclass
class RiskControl:
    """Per-channel switches, "Y" or "N"."""

    allow_3ds_transactions: str = ""
    allow_online_transactions: str = ""
    allow_atm_transactions: str = ""
    allow_contactless_transactions: str = ""
    allow_international_transactions: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RiskControl:
        return cls(
            allow_3ds_transactions=get_str(data, "allow_3ds_transactions"),
            allow_online_transactions=get_str(data, "allow_online_transactions"),
            allow_atm_transactions=get_str(data, "allow_atm_transactions"),
            allow_contactless_transactions=get_str(data, "allow_contactless_transactions"),
            allow_international_transactions=get_str(data, "allow_international_transactions"),
        )


@dataclass
class Cardholder:
    cardholder_id: str = ""
    cardholder_status: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    country_code: str = ""
    date_of_birth: str = ""
    number_of_cards: int = 0
    create_time: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cardholder:
        return cls(
            cardholder_id=get_str(data, "cardholder_id"),
            cardholder_status=get_str(data, "cardholder_status"),
            first_name=get_str(data, "first_name"),
            last_name=get_str(data, "last_name"),
            email=get_str(data, "email"),
            phone_number=get_str(data, "phone_number"),
            country_code=get_str(data, "country_code"),
            date_of_birth=get_str(data, "date_of_birth"),
            number_of_cards=get_int(data, "number_of_cards"),
            create_time=get_str(data, "create_time"),
        )


@dataclass
class CardData(WebhookPayload):
    """
    Card payload of card.create.* and card.update.* events.

    Create and update events report the same quantities under different
    names: the balance arrives as ``card_available_balance`` on create and
    ``available_balance`` on update, the limits as ``spending_limits`` on
    create and ``spending_controls`` on update. Use get_available_balance()
    and get_spending_limits() instead of reading those fields directly.
    """

    EVENT_TYPES = CARD_CREATE_OR_UPDATE_EVENTS
    CATEGORY = "card create/update"

    card_id: str = ""
    card_product_id: str = ""
    card_order_id: str = ""
    card_number: str = ""
    card_bin: str = ""
    card_scheme: str = ""
    card_status: str = ""
    card_currency: str = ""
    card_limit: str = ""
    card_available_balance: str = ""
    available_balance: str = ""
    form_factor: str = ""
    mode_type: str = ""
    order_status: str = ""
    no_pin_payment_amount: str = ""
    cardholder: Cardholder | None = None
    spending_limits: list[SpendingLimit] = field(default_factory=list)
    spending_controls: list[SpendingLimit] = field(default_factory=list)
    risk_control: RiskControl | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardData:
        return cls(
            card_id=get_str(data, "card_id"),
            card_product_id=get_str(data, "card_product_id"),
            card_order_id=get_str(data, "card_order_id"),
            card_number=get_str(data, "card_number"),
            card_bin=get_str(data, "card_bin"),
            card_scheme=get_str(data, "card_scheme"),
            card_status=get_str(data, "card_status"),
            card_currency=get_str(data, "card_currency"),
            card_limit=get_str(data, "card_limit"),
            card_available_balance=get_str(data, "card_available_balance"),
            available_balance=get_str(data, "available_balance"),
            form_factor=get_str(data, "form_factor"),
            mode_type=get_str(data, "mode_type"),
            order_status=get_str(data, "order_status"),
            no_pin_payment_amount=get_str(data, "no_pin_payment_amount"),
            cardholder=get_object(data, "cardholder", Cardholder.from_dict),
            spending_limits=get_object_list(data, "spending_limits", SpendingLimit.from_dict),
            spending_controls=get_object_list(data, "spending_controls", SpendingLimit.from_dict),
            risk_control=get_object(data, "risk_control", RiskControl.from_dict),
            metadata=get_str_map(data, "metadata"),
        )

    def get_available_balance(self) -> str:
        """Available balance, whichever field the event populated."""
        if self.available_balance:
            return self.available_balance
        return self.card_available_balance

    def get_spending_limits(self) -> list[SpendingLimit]:
        """Spending limits, whichever field the event populated."""
        if self.spending_controls:
            return self.spending_controls
        return self.spending_limits


@dataclass
class CardStatusUpdateData(WebhookPayload):
    """Payload of card.status.update.* events."""

    EVENT_TYPES = CARD_STATUS_UPDATE_EVENTS
    CATEGORY = "card status update"

    card_id: str = ""
    card_number: str = ""
    card_status: str = ""
    update_reason: str = ""
    update_time: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardStatusUpdateData:
        return cls(
            card_id=get_str(data, "card_id"),
            card_number=get_str(data, "card_number"),
            card_status=get_str(data, "card_status"),
            update_reason=get_str(data, "update_reason"),
            update_time=get_str(data, "update_time"),
        )


@dataclass
class CardActivationCodeData(WebhookPayload):
    """Payload of card.activation.code events."""

    EVENT_TYPES = CARD_ACTIVATION_CODE_EVENTS
    CATEGORY = "card activation code"

    card_id: str = ""
    card_number: str = ""
    activation_code: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardActivationCodeData:
        return cls(
            card_id=get_str(data, "card_id"),
            card_number=get_str(data, "card_number"),
            activation_code=get_str(data, "activation_code"),
        )


@dataclass
class CardRechargeData(WebhookPayload):
    """Payload of card.recharge.* (top-up) events."""

    EVENT_TYPES = CARD_RECHARGE_EVENTS
    CATEGORY = "card recharge"

    card_id: str = ""
    amount: str = ""
    card_currency: str = ""
    card_available_balance: str = ""
    card_status: str = ""
    order_status: str = ""
    complete_time: str = ""
    update_time: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardRechargeData:
        return cls(
            card_id=get_str(data, "card_id"),
            amount=get_str(data, "amount"),
            card_currency=get_str(data, "card_currency"),
            card_available_balance=get_str(data, "card_available_balance"),
            card_status=get_str(data, "card_status"),
            order_status=get_str(data, "order_status"),
            complete_time=get_str(data, "complete_time"),
            update_time=get_str(data, "update_time"),
        )


@dataclass
class CardTransactionData(WebhookPayload):
    """Payload of card transaction events such as issuing.fee.card."""

    EVENT_TYPES = CARD_TRANSACTION_EVENTS
    CATEGORY = "card transaction"

    card_id: str = ""
    card_number: str = ""
    cardholder_id: str = ""
    card_available_balance: str = ""
    transaction_amount: str = ""
    transaction_currency: str = ""
    billing_amount: str = ""
    billing_currency: str = ""
    transaction_status: str = ""
    transaction_type: str = ""
    transaction_time: str = ""
    posted_time: str = ""
    reference_id: str = ""
    short_reference_id: str = ""
    remark: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardTransactionData:
        return cls(
            card_id=get_str(data, "card_id"),
            card_number=get_str(data, "card_number"),
            cardholder_id=get_str(data, "cardholder_id"),
            card_available_balance=get_str(data, "card_available_balance"),
            transaction_amount=get_str(data, "transaction_amount"),
            transaction_currency=get_str(data, "transaction_currency"),
            billing_amount=get_str(data, "billing_amount"),
            billing_currency=get_str(data, "billing_currency"),
            transaction_status=get_str(data, "transaction_status"),
            transaction_type=get_str(data, "transaction_type"),
            transaction_time=get_str(data, "transaction_time"),
            posted_time=get_str(data, "posted_time"),
            reference_id=get_str(data, "reference_id"),
            short_reference_id=get_str(data, "short_reference_id"),
            remark=get_str(data, "remark"),
        )
