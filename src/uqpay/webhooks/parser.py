"""
Webhook Parser Infrastructure.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from uqpay.core.exceptions import WebhookError
from uqpay.core.logging import get_logger
from uqpay.webhooks.acquiring import PaymentAttemptData, PaymentIntentData, RefundData
from uqpay.webhooks.base import WebhookPayload
from uqpay.webhooks.beneficiary import BeneficiaryData
from uqpay.webhooks.conversion import ConversionData
from uqpay.webhooks.events import WebhookEvent, decode_envelope
from uqpay.webhooks.issuing import (
    CardActivationCodeData,
    CardData,
    CardRechargeData,
    CardStatusUpdateData,
    CardTransactionData,
)
from uqpay.webhooks.onboarding import AccountData

PAYLOAD_TYPES: tuple[type[WebhookPayload], ...] = (
    AccountData,
    PaymentIntentData,
    PaymentAttemptData,
    RefundData,
    ConversionData,
    CardData,
    CardStatusUpdateData,
    CardActivationCodeData,
    CardRechargeData,
    CardTransactionData,
    BeneficiaryData,
)

# event_type -> payload type; the discriminator sets are disjoint
_PAYLOAD_TYPE_BY_EVENT: dict[str, type[WebhookPayload]] = {
    event_type: payload_type
    for payload_type in PAYLOAD_TYPES
    for event_type in payload_type.EVENT_TYPES
}

logger = get_logger("webhooks")


def payload_type_for(event_type: str) -> type[WebhookPayload] | None:
    """Payload type registered for a discriminator value, if any."""
    return _PAYLOAD_TYPE_BY_EVENT.get(event_type)


class WebhookParser:
    """
    Framework-agnostic webhook parser.

    Converts raw payloads into WebhookEvents and their typed data.
    Does NOT handle HTTP transport - that is the application's responsibility.
    A parse error should be answered with a 4xx rather than processed.

    Example:
        >>> parser = WebhookParser()
        >>> event = parser.parse(request_body)
        >>> if event.is_card_event():
        ...     data = parser.parse_data(event)
    """

    def parse(self, payload: str | bytes | Mapping[str, Any]) -> WebhookEvent:
        """
        Decode the envelope of a webhook delivery.

        Raises:
            MalformedEnvelopeError: If payload is not a valid envelope
        """
        event = decode_envelope(payload)
        if payload_type_for(event.event_type) is None:
            logger.debug(f"Webhook {event.event_id} has no typed payload ({event.event_type})")
        return event

    def parse_data(self, event: WebhookEvent) -> WebhookPayload:
        """
        Decode an event's data into the payload type registered for its event_type.

        Raises:
            WebhookError: If no payload type is registered for the event type
            MalformedPayloadError: If data does not decode
        """
        payload_type = payload_type_for(event.event_type)
        if payload_type is None:
            raise WebhookError(
                f"event type {event.event_type} has no typed payload",
                details={"event_id": event.event_id},
            )
        return event.parse(payload_type)
