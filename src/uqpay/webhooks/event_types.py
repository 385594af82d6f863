"""
Webhook event categories and discriminator values.
"""

from enum import Enum


class EventName(str, Enum):
    """Event category carried in ``event_name``."""

    ONBOARDING = "ONBOARDING"
    ACQUIRING = "ACQUIRING"
    CONVERSION = "CONVERSION"
    ISSUING = "ISSUING"
    BENEFICIARY = "BENEFICIARY"


class EventType(str, Enum):
    """Fully-qualified event discriminator carried in ``event_type``."""

    # Onboarding
    ACCOUNT_CREATE = "onboarding.account.create"
    ACCOUNT_UPDATE = "onboarding.account.update"

    # Acquiring: payment intents
    PAYMENT_INTENT_CREATED = "acquiring.payment_intent.created"
    PAYMENT_INTENT_SUCCEEDED = "acquiring.payment_intent.succeeded"
    PAYMENT_INTENT_FAILED = "acquiring.payment_intent.failed"
    PAYMENT_INTENT_CANCELED = "acquiring.payment_intent.canceled"

    # Acquiring: payment attempts
    PAYMENT_ATTEMPT_CREATED = "acquiring.payment_attempt.created"
    PAYMENT_ATTEMPT_CAPTURE_REQUESTED = "acquiring.payment_attempt.capture_requested"
    PAYMENT_ATTEMPT_SUCCEEDED = "acquiring.payment_attempt.succeeded"
    PAYMENT_ATTEMPT_FAILED = "acquiring.payment_attempt.failed"
    PAYMENT_ATTEMPT_CANCELED = "acquiring.payment_attempt.canceled"

    # Acquiring: refunds
    REFUND_CREATED = "acquiring.refund.created"
    REFUND_SUCCEEDED = "acquiring.refund.succeeded"
    REFUND_FAILED = "acquiring.refund.failed"

    # Conversion
    CONVERSION_TRADE_SETTLED = "conversion.trade.settled"
    CONVERSION_FUNDS_AWAITING = "conversion.funds.awaiting"
    CONVERSION_FUNDS_ARRIVED = "conversion.funds.arrived"

    # Issuing: cards
    CARD_CREATE_SUCCEEDED = "card.create.succeeded"
    CARD_CREATE_FAILED = "card.create.failed"
    CARD_UPDATE_SUCCEEDED = "card.update.succeeded"
    CARD_UPDATE_FAILED = "card.update.failed"
    CARD_RECHARGE_SUCCEEDED = "card.recharge.succeeded"
    CARD_RECHARGE_FAILED = "card.recharge.failed"
    CARD_ACTIVATION_CODE = "card.activation.code"
    CARD_ACTIVATED = "card.activated"
    CARD_SUSPENDED = "card.suspended"
    CARD_CLOSED = "card.closed"
    CARD_STATUS_UPDATE_SUCCEEDED = "card.status.update.succeeded"
    CARD_STATUS_UPDATE_FAILED = "card.status.update.failed"

    # Issuing: card transactions
    ISSUING_FEE_CARD = "issuing.fee.card"

    # Beneficiary
    BENEFICIARY_SUCCESSFUL = "beneficiary.successful"
    BENEFICIARY_FAILED = "beneficiary.failed"
    BENEFICIARY_PENDING = "beneficiary.pending"


def event_types(*members: EventType) -> frozenset[str]:
    """Discriminator set as plain strings, for membership tests on raw values."""
    return frozenset(member.value for member in members)


ACCOUNT_EVENTS = event_types(EventType.ACCOUNT_CREATE, EventType.ACCOUNT_UPDATE)

PAYMENT_INTENT_EVENTS = event_types(
    EventType.PAYMENT_INTENT_CREATED,
    EventType.PAYMENT_INTENT_SUCCEEDED,
    EventType.PAYMENT_INTENT_FAILED,
    EventType.PAYMENT_INTENT_CANCELED,
)

PAYMENT_ATTEMPT_EVENTS = event_types(
    EventType.PAYMENT_ATTEMPT_CREATED,
    EventType.PAYMENT_ATTEMPT_CAPTURE_REQUESTED,
    EventType.PAYMENT_ATTEMPT_SUCCEEDED,
    EventType.PAYMENT_ATTEMPT_FAILED,
    EventType.PAYMENT_ATTEMPT_CANCELED,
)

REFUND_EVENTS = event_types(
    EventType.REFUND_CREATED,
    EventType.REFUND_SUCCEEDED,
    EventType.REFUND_FAILED,
)

CONVERSION_EVENTS = event_types(
    EventType.CONVERSION_TRADE_SETTLED,
    EventType.CONVERSION_FUNDS_AWAITING,
    EventType.CONVERSION_FUNDS_ARRIVED,
)

CARD_CREATE_OR_UPDATE_EVENTS = event_types(
    EventType.CARD_CREATE_SUCCEEDED,
    EventType.CARD_CREATE_FAILED,
    EventType.CARD_UPDATE_SUCCEEDED,
    EventType.CARD_UPDATE_FAILED,
)

CARD_RECHARGE_EVENTS = event_types(
    EventType.CARD_RECHARGE_SUCCEEDED,
    EventType.CARD_RECHARGE_FAILED,
)

CARD_STATUS_UPDATE_EVENTS = event_types(
    EventType.CARD_STATUS_UPDATE_SUCCEEDED,
    EventType.CARD_STATUS_UPDATE_FAILED,
)

CARD_ACTIVATION_CODE_EVENTS = event_types(EventType.CARD_ACTIVATION_CODE)

CARD_EVENTS = (
    CARD_CREATE_OR_UPDATE_EVENTS
    | CARD_RECHARGE_EVENTS
    | CARD_STATUS_UPDATE_EVENTS
    | CARD_ACTIVATION_CODE_EVENTS
    | event_types(EventType.CARD_ACTIVATED, EventType.CARD_SUSPENDED, EventType.CARD_CLOSED)
)

CARD_TRANSACTION_EVENTS = event_types(EventType.ISSUING_FEE_CARD)

BENEFICIARY_EVENTS = event_types(
    EventType.BENEFICIARY_SUCCESSFUL,
    EventType.BENEFICIARY_FAILED,
    EventType.BENEFICIARY_PENDING,
)
