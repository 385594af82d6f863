"""
Acquiring webhook payloads: payment intents, payment attempts and refunds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from uqpay.webhooks.base import (
    WebhookPayload,
    get_int,
    get_object,
    get_optional_str,
    get_str,
    get_str_map,
)
from uqpay.webhooks.event_types import (
    PAYMENT_ATTEMPT_EVENTS,
    PAYMENT_INTENT_EVENTS,
    REFUND_EVENTS,
)


class IntentStatus(str, Enum):
    REQUIRES_PAYMENT_METHOD = "REQUIRES_PAYMENT_METHOD"
    REQUIRES_CONFIRMATION = "REQUIRES_CONFIRMATION"
    REQUIRES_ACTION = "REQUIRES_ACTION"
    PROCESSING = "PROCESSING"
    SUCCEEDED = "SUCCEEDED"
    CANCELED = "CANCELED"
    FAILED = "FAILED"


class AttemptStatus(str, Enum):
    INITIATED = "INITIATED"
    PENDING = "PENDING"
    CAPTURE_REQUESTED = "CAPTURE_REQUESTED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CANCELED = "CANCELED"


@dataclass
class CardDetails:
    brand: str = ""
    last4: str = ""
    exp_month: int = 0
    exp_year: int = 0
    funding: str = ""
    country: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardDetails:
        return cls(
            brand=get_str(data, "brand"),
            last4=get_str(data, "last4"),
            exp_month=get_int(data, "exp_month"),
            exp_year=get_int(data, "exp_year"),
            funding=get_str(data, "funding"),
            country=get_str(data, "country"),
        )


@dataclass
class WalletDetails:
    """Redirect flow details shared by the wallet payment methods."""

    flow: str = ""
    os_type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WalletDetails:
        return cls(flow=get_str(data, "flow"), os_type=get_str(data, "os_type"))


@dataclass
class PaymentMethod:
    type: str = ""
    card: CardDetails | None = None
    alipaycn: WalletDetails | None = None
    alipayhk: WalletDetails | None = None
    grabpay: WalletDetails | None = None
    wechatpay: WalletDetails | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaymentMethod:
        return cls(
            type=get_str(data, "type"),
            card=get_object(data, "card", CardDetails.from_dict),
            alipaycn=get_object(data, "alipaycn", WalletDetails.from_dict),
            alipayhk=get_object(data, "alipayhk", WalletDetails.from_dict),
            grabpay=get_object(data, "grabpay", WalletDetails.from_dict),
            wechatpay=get_object(data, "wechatpay", WalletDetails.from_dict),
        )


@dataclass
class PaymentIntentData(WebhookPayload):
    """Payload of acquiring.payment_intent.* events."""

    EVENT_TYPES = PAYMENT_INTENT_EVENTS
    CATEGORY = "payment intent"

    payment_intent_id: str = ""
    amount: str = ""
    currency: str = ""
    description: str = ""
    intent_status: str = ""
    merchant_order_id: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    payment_method: PaymentMethod | None = None
    create_time: str = ""
    complete_time: str | None = None
    cancel_time: str | None = None
    cancellation_reason: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaymentIntentData:
        return cls(
            payment_intent_id=get_str(data, "payment_intent_id"),
            amount=get_str(data, "amount"),
            currency=get_str(data, "currency"),
            description=get_str(data, "description"),
            intent_status=get_str(data, "intent_status"),
            merchant_order_id=get_str(data, "merchant_order_id"),
            metadata=get_str_map(data, "metadata"),
            payment_method=get_object(data, "payment_method", PaymentMethod.from_dict),
            create_time=get_str(data, "create_time"),
            complete_time=get_optional_str(data, "complete_time"),
            cancel_time=get_optional_str(data, "cancel_time"),
            cancellation_reason=get_str(data, "cancellation_reason"),
        )

    def is_succeeded(self) -> bool:
        return self.intent_status == IntentStatus.SUCCEEDED.value


@dataclass
class PaymentAttemptData(WebhookPayload):
    """Payload of acquiring.payment_attempt.* events."""

    EVENT_TYPES = PAYMENT_ATTEMPT_EVENTS
    CATEGORY = "payment attempt"

    payment_attempt_id: str = ""
    payment_intent_id: str = ""
    amount: str = ""
    currency: str = ""
    attempt_status: str = ""
    merchant_order_id: str = ""
    payment_method: PaymentMethod | None = None
    captured_amount: str = ""
    refunded_amount: str = ""
    failure_code: str = ""
    create_time: str = ""
    complete_time: str | None = None
    cancel_time: str | None = None
    cancellation_reason: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaymentAttemptData:
        return cls(
            payment_attempt_id=get_str(data, "payment_attempt_id"),
            payment_intent_id=get_str(data, "payment_intent_id"),
            amount=get_str(data, "amount"),
            currency=get_str(data, "currency"),
            attempt_status=get_str(data, "attempt_status"),
            merchant_order_id=get_str(data, "merchant_order_id"),
            payment_method=get_object(data, "payment_method", PaymentMethod.from_dict),
            captured_amount=get_str(data, "captured_amount"),
            refunded_amount=get_str(data, "refunded_amount"),
            failure_code=get_str(data, "failure_code"),
            create_time=get_str(data, "create_time"),
            complete_time=get_optional_str(data, "complete_time"),
            cancel_time=get_optional_str(data, "cancel_time"),
            cancellation_reason=get_str(data, "cancellation_reason"),
        )


@dataclass
class RefundData(WebhookPayload):
    """Payload of acquiring.refund.* events."""

    EVENT_TYPES = REFUND_EVENTS
    CATEGORY = "refund"

    payment_refund_id: str = ""
    payment_intent_id: str = ""
    payment_attempt_id: str = ""
    amount: str = ""
    currency: str = ""
    refund_status: str = ""
    reason: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    create_time: str = ""
    update_time: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RefundData:
        return cls(
            payment_refund_id=get_str(data, "payment_refund_id"),
            payment_intent_id=get_str(data, "payment_intent_id"),
            payment_attempt_id=get_str(data, "payment_attempt_id"),
            amount=get_str(data, "amount"),
            currency=get_str(data, "currency"),
            refund_status=get_str(data, "refund_status"),
            reason=get_str(data, "reason"),
            metadata=get_str_map(data, "metadata"),
            create_time=get_str(data, "create_time"),
            update_time=get_str(data, "update_time"),
        )
