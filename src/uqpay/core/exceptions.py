"""
Exception hierarchy for the UQPAY SDK.

All SDK-specific exceptions inherit from UQPayError for easy catching.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class UQPayError(Exception):
    """
    Base exception for all UQPAY SDK errors.

    Catch this to handle any SDK-related exception.

    Example:
        >>> try:
        ...     client.api.get("/v1/issuing/cards")
        ... except UQPayError as e:
        ...     print(f"UQPAY SDK error: {e}")
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(UQPayError):
    """
    Configuration is missing or invalid.

    Raised when:
    - Required credentials or base URLs are not provided
    - A request cannot be built from the configured values
    """

    pass


class ValidationError(UQPayError):
    """
    Input validation error.

    Raised when:
    - Required parameters are missing
    - Parameter values are invalid
    """

    pass


class NetworkError(UQPayError):
    """
    Network or transport error.

    Raised when:
    - The HTTP request could not be sent or completed (connection error)
    - The request exceeded its timeout
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
        timeout: bool = False,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.url = url
        self.timeout = timeout

    def is_timeout(self) -> bool:
        """Check if the request failed because it timed out."""
        return self.timeout

    def is_rate_limited(self) -> bool:
        """Check if this is a rate limit error."""
        return self.status_code == 429

    def is_server_error(self) -> bool:
        """Check if this is a server-side error."""
        return self.status_code is not None and 500 <= self.status_code < 600


class AuthenticationError(UQPayError):
    """
    The token endpoint rejected the credentials or failed.

    Raised when:
    - POST /v1/connect/token answers with a non-2xx status

    The response body is kept for context and is never parsed as a token.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.body = body
        self.url = url

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code}): {self.body}"


class DecodeError(UQPayError):
    """
    A response body could not be decoded.

    Raised when:
    - The server answered 2xx but the body is not the expected JSON document
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url


class APIError(UQPayError):
    """
    The UQPAY API returned an error response.

    Raised when:
    - Any resource endpoint answers with status >= 400

    Example:
        >>> try:
        ...     client.api.get("/v1/issuing/cards/unknown")
        ... except APIError as e:
        ...     if e.is_not_found():
        ...         ...
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {self.message} (HTTP {self.status_code})"

    def is_not_found(self) -> bool:
        return self.status_code == 404

    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    def is_bad_request(self) -> bool:
        return self.status_code == 400


class WebhookError(ValidationError):
    """Base class for webhook decoding errors."""

    pass


class MalformedEnvelopeError(WebhookError):
    """
    The webhook body is not a valid notification envelope.

    Raised when:
    - The body is not JSON or not a JSON object
    - The event_type discriminator is missing
    - An envelope field has the wrong type
    """

    pass


class WrongEventTypeError(WebhookError):
    """
    A typed payload was requested for an event of another type.

    This is a programming error on the caller side: dispatch on the event
    predicates before calling the matching parse method.
    """

    def __init__(
        self,
        actual: str,
        expected: Iterable[str],
        category: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.actual = actual
        self.expected = tuple(sorted(expected))
        self.category = category
        super().__init__(
            f"event type {actual} is not a {category} event "
            f"(expected one of: {', '.join(self.expected)})",
            details,
        )


class MalformedPayloadError(WebhookError):
    """
    The event data could not be decoded into its payload type.

    Raised when:
    - data is missing, null, or not a JSON object
    - A payload field has the wrong JSON type
    """

    def __init__(
        self,
        message: str,
        event_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.event_type = event_type
