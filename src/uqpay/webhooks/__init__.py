"""
Webhook events for the UQPAY API.
"""

from .acquiring import (
    AttemptStatus,
    CardDetails,
    IntentStatus,
    PaymentAttemptData,
    PaymentIntentData,
    PaymentMethod,
    RefundData,
    WalletDetails,
)
from .base import WebhookPayload
from .beneficiary import (
    BeneficiaryAddress,
    BeneficiaryBankDetails,
    BeneficiaryData,
    BeneficiaryEntityType,
    BeneficiaryStatus,
    PaymentType,
)
from .conversion import ConversionData, ConversionStatus, ConversionWay
from .event_types import EventName, EventType
from .events import WebhookEvent, decode_envelope
from .issuing import (
    CardActivationCodeData,
    CardData,
    Cardholder,
    CardholderStatus,
    CardRechargeData,
    CardScheme,
    CardStatus,
    CardStatusUpdateData,
    CardTransactionData,
    FormFactor,
    ModeType,
    RiskControl,
    SpendingInterval,
    SpendingLimit,
    TransactionStatus,
    TransactionType,
)
from .onboarding import (
    AccountData,
    AccountStatus,
    Address,
    BusinessDetails,
    BusinessStructure,
    ContactDetails,
    EntityType,
    Identification,
    IdentificationDocuments,
    IdentificationType,
    Identifier,
    MonthlyEstimatedRevenue,
    Representative,
    RepresentativeRole,
    VerificationStatus,
)
from .parser import PAYLOAD_TYPES, WebhookParser, payload_type_for

__all__ = [
    # Envelope
    "WebhookEvent",
    "WebhookParser",
    "WebhookPayload",
    "decode_envelope",
    "payload_type_for",
    "PAYLOAD_TYPES",
    "EventName",
    "EventType",
    # Onboarding
    "AccountData",
    "AccountStatus",
    "Address",
    "BusinessDetails",
    "BusinessStructure",
    "ContactDetails",
    "EntityType",
    "Identification",
    "IdentificationDocuments",
    "IdentificationType",
    "Identifier",
    "MonthlyEstimatedRevenue",
    "Representative",
    "RepresentativeRole",
    "VerificationStatus",
    # Acquiring
    "AttemptStatus",
    "CardDetails",
    "IntentStatus",
    "PaymentAttemptData",
    "PaymentIntentData",
    "PaymentMethod",
    "RefundData",
    "WalletDetails",
    # Conversion
    "ConversionData",
    "ConversionStatus",
    "ConversionWay",
    # Issuing
    "CardActivationCodeData",
    "CardData",
    "Cardholder",
    "CardholderStatus",
    "CardRechargeData",
    "CardScheme",
    "CardStatus",
    "CardStatusUpdateData",
    "CardTransactionData",
    "FormFactor",
    "ModeType",
    "RiskControl",
    "SpendingInterval",
    "SpendingLimit",
    "TransactionStatus",
    "TransactionType",
    # Beneficiary
    "BeneficiaryAddress",
    "BeneficiaryBankDetails",
    "BeneficiaryData",
    "BeneficiaryEntityType",
    "BeneficiaryStatus",
    "PaymentType",
]
