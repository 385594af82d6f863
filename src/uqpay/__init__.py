"""
UQPAY - Python SDK for the UQPAY payments API

Bearer tokens are cached and refreshed on demand; webhook notifications are
decoded into typed payloads.

Usage:
    >>> from uqpay import UQPay
    >>>
    >>> client = UQPay()  # credentials from UQPAY_* environment variables
    >>> cards = client.api.get("/v1/issuing/cards")
    >>>
    >>> event = client.webhooks.parse(request_body)
    >>> if event.is_card_activation_code_event():
    ...     code = event.parse_card_activation_code_data().activation_code
"""

from uqpay.auth import CachedToken, TokenProvider, TokenSource
from uqpay.client import UQPay
from uqpay.core.api_client import APIClient
from uqpay.core.config import Config
from uqpay.core.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    MalformedEnvelopeError,
    MalformedPayloadError,
    NetworkError,
    UQPayError,
    ValidationError,
    WebhookError,
    WrongEventTypeError,
)
from uqpay.core.logging import configure_logging, get_logger
from uqpay.webhooks import (
    EventName,
    EventType,
    WebhookEvent,
    WebhookParser,
    WebhookPayload,
    decode_envelope,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "UQPay",
    "Config",
    "APIClient",
    # Auth
    "CachedToken",
    "TokenProvider",
    "TokenSource",
    # Webhooks
    "EventName",
    "EventType",
    "WebhookEvent",
    "WebhookParser",
    "WebhookPayload",
    "decode_envelope",
    # Exceptions
    "UQPayError",
    "ConfigurationError",
    "ValidationError",
    "NetworkError",
    "AuthenticationError",
    "DecodeError",
    "APIError",
    "WebhookError",
    "MalformedEnvelopeError",
    "WrongEventTypeError",
    "MalformedPayloadError",
    # Logging
    "configure_logging",
    "get_logger",
]
