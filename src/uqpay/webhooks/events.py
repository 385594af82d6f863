"""
Webhook event envelope.

Every UQPAY notification shares one envelope::

    {"version": "V1.6.0", "event_name": "ISSUING", "event_type": "card.create.succeeded",
     "event_id": "...", "source_id": "...", "data": {...}}

The shape of ``data`` is determined by ``event_type``. The envelope is decoded
eagerly; ``data`` stays undecoded until a typed payload is requested.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from uqpay.core.exceptions import (
    MalformedEnvelopeError,
    MalformedPayloadError,
    WrongEventTypeError,
)
from uqpay.webhooks.acquiring import PaymentAttemptData, PaymentIntentData, RefundData
from uqpay.webhooks.base import WebhookPayload, json_type, require_object
from uqpay.webhooks.beneficiary import BeneficiaryData
from uqpay.webhooks.conversion import ConversionData
from uqpay.webhooks.event_types import (
    ACCOUNT_EVENTS,
    BENEFICIARY_EVENTS,
    CARD_ACTIVATION_CODE_EVENTS,
    CARD_CREATE_OR_UPDATE_EVENTS,
    CARD_EVENTS,
    CARD_RECHARGE_EVENTS,
    CARD_STATUS_UPDATE_EVENTS,
    CARD_TRANSACTION_EVENTS,
    CONVERSION_EVENTS,
    PAYMENT_ATTEMPT_EVENTS,
    PAYMENT_INTENT_EVENTS,
    REFUND_EVENTS,
    EventName,
    EventType,
)
from uqpay.webhooks.issuing import (
    CardActivationCodeData,
    CardData,
    CardRechargeData,
    CardStatusUpdateData,
    CardTransactionData,
)
from uqpay.webhooks.onboarding import AccountData

P = TypeVar("P", bound=WebhookPayload)

_ENVELOPE_STRING_FIELDS = ("version", "event_name", "event_id", "source_id")


@dataclass(frozen=True)
class WebhookEvent:
    """
    Decoded webhook envelope.

    Dispatch with the ``is_*`` predicates, then call the matching
    ``parse_*`` method. Parsing is pure and can be repeated.
    """

    version: str
    event_name: str
    event_type: str
    event_id: str
    source_id: str
    data: Any = None
    raw_payload: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # ==================== Typed payloads ====================

    def parse(self, payload_type: type[P]) -> P:
        """
        Decode ``data`` into payload_type.

        Raises:
            WrongEventTypeError: If event_type is not one payload_type accepts
            MalformedPayloadError: If data does not decode into payload_type
        """
        if not payload_type.accepts(self.event_type):
            raise WrongEventTypeError(
                actual=self.event_type,
                expected=payload_type.EVENT_TYPES,
                category=payload_type.CATEGORY,
            )

        try:
            return payload_type.from_dict(require_object(self.data, "data"))
        except MalformedPayloadError as e:
            raise MalformedPayloadError(
                f"failed to parse {payload_type.CATEGORY} data: {e.message}",
                event_type=self.event_type,
                details={"event_id": self.event_id},
            ) from e

    def maybe_parse(self, payload_type: type[P]) -> P | None:
        """Like parse(), but returns None when the event type does not match."""
        if not payload_type.accepts(self.event_type):
            return None
        return self.parse(payload_type)

    def parse_account_data(self) -> AccountData:
        return self.parse(AccountData)

    def parse_payment_intent_data(self) -> PaymentIntentData:
        return self.parse(PaymentIntentData)

    def parse_payment_attempt_data(self) -> PaymentAttemptData:
        return self.parse(PaymentAttemptData)

    def parse_refund_data(self) -> RefundData:
        return self.parse(RefundData)

    def parse_conversion_data(self) -> ConversionData:
        return self.parse(ConversionData)

    def parse_card_data(self) -> CardData:
        return self.parse(CardData)

    def parse_card_status_update_data(self) -> CardStatusUpdateData:
        return self.parse(CardStatusUpdateData)

    def parse_card_activation_code_data(self) -> CardActivationCodeData:
        return self.parse(CardActivationCodeData)

    def parse_card_recharge_data(self) -> CardRechargeData:
        return self.parse(CardRechargeData)

    def parse_card_transaction_data(self) -> CardTransactionData:
        return self.parse(CardTransactionData)

    def parse_beneficiary_data(self) -> BeneficiaryData:
        return self.parse(BeneficiaryData)

    # ==================== Predicates ====================

    def is_onboarding_event(self) -> bool:
        return self.event_name == EventName.ONBOARDING.value

    def is_account_create_event(self) -> bool:
        return self.event_type == EventType.ACCOUNT_CREATE.value

    def is_account_update_event(self) -> bool:
        return self.event_type == EventType.ACCOUNT_UPDATE.value

    def is_account_event(self) -> bool:
        return self.event_type in ACCOUNT_EVENTS

    def is_acquiring_event(self) -> bool:
        return self.event_name == EventName.ACQUIRING.value

    def is_payment_intent_event(self) -> bool:
        return self.event_type in PAYMENT_INTENT_EVENTS

    def is_payment_attempt_event(self) -> bool:
        return self.event_type in PAYMENT_ATTEMPT_EVENTS

    def is_refund_event(self) -> bool:
        return self.event_type in REFUND_EVENTS

    def is_conversion_event(self) -> bool:
        return self.event_name == EventName.CONVERSION.value

    def is_conversion_trade_settled_event(self) -> bool:
        return self.event_type == EventType.CONVERSION_TRADE_SETTLED.value

    def is_conversion_data_event(self) -> bool:
        return self.event_type in CONVERSION_EVENTS

    def is_issuing_event(self) -> bool:
        return self.event_name == EventName.ISSUING.value

    def is_card_event(self) -> bool:
        return self.event_type in CARD_EVENTS

    def is_card_create_or_update_event(self) -> bool:
        return self.event_type in CARD_CREATE_OR_UPDATE_EVENTS

    def is_card_status_update_event(self) -> bool:
        return self.event_type in CARD_STATUS_UPDATE_EVENTS

    def is_card_recharge_event(self) -> bool:
        return self.event_type in CARD_RECHARGE_EVENTS

    def is_card_activation_code_event(self) -> bool:
        return self.event_type in CARD_ACTIVATION_CODE_EVENTS

    def is_card_transaction_event(self) -> bool:
        return self.event_type in CARD_TRANSACTION_EVENTS

    def is_beneficiary_event(self) -> bool:
        return self.event_name == EventName.BENEFICIARY.value

    def is_beneficiary_data_event(self) -> bool:
        return self.event_type in BENEFICIARY_EVENTS

    def is_beneficiary_successful_event(self) -> bool:
        return self.event_type == EventType.BENEFICIARY_SUCCESSFUL.value

    def is_beneficiary_failed_event(self) -> bool:
        return self.event_type == EventType.BENEFICIARY_FAILED.value


def decode_envelope(raw: str | bytes | Mapping[str, Any]) -> WebhookEvent:
    """
    Decode a webhook body into a WebhookEvent.

    Args:
        raw: Raw body (bytes/str) or an already parsed JSON object

    Returns:
        WebhookEvent with ``data`` left undecoded

    Raises:
        MalformedEnvelopeError: If the body is not a JSON object, event_type
            is missing, or an envelope field has the wrong type
    """
    if isinstance(raw, (str, bytes)):
        try:
            body = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedEnvelopeError(f"Invalid JSON payload: {e}") from e
    else:
        body = raw

    if not isinstance(body, Mapping):
        raise MalformedEnvelopeError(
            f"webhook payload must be a JSON object, got {json_type(body)}"
        )
    body = dict(body)

    event_type = body.get("event_type")
    if not isinstance(event_type, str) or not event_type:
        raise MalformedEnvelopeError("Missing 'event_type' in payload")

    fields: dict[str, str] = {}
    for name in _ENVELOPE_STRING_FIELDS:
        value = body.get(name)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise MalformedEnvelopeError(
                f"envelope field {name!r} must be a string, got {json_type(value)}"
            )
        fields[name] = value

    return WebhookEvent(
        version=fields["version"],
        event_name=fields["event_name"],
        event_type=event_type,
        event_id=fields["event_id"],
        source_id=fields["source_id"],
        data=body.get("data"),
        raw_payload=body,
    )
