"""Unit tests for logging helpers."""

import logging

from uqpay.core.logging import (
    LOGGER_NAME,
    SENSITIVE_HEADERS,
    configure_logging,
    get_logger,
    mask_secret,
    redact_headers,
)


class TestLogging:
    """Tests for logger setup."""

    def test_configure_logging_is_idempotent(self) -> None:
        """Reconfiguring replaces the handler instead of adding one."""
        configure_logging("DEBUG")
        logger = configure_logging(logging.WARNING)

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_get_logger_returns_children(self) -> None:
        """Named loggers live under the SDK logger."""
        assert get_logger("auth.token").name == "uqpay.auth.token"
        assert get_logger().name == "uqpay"

    def test_mask_secret(self) -> None:
        """Secrets are masked for log output."""
        assert mask_secret("sk_live_1234567890abcdef") == "sk_l...cdef"
        assert mask_secret("12345678") == "****"
        assert mask_secret("") == "****"

    def test_redact_headers_masks_credentials(self) -> None:
        """API key, client id and bearer token are masked; other headers pass through."""
        headers = {
            "x-api-key": "secret-api-key-123456",
            "x-auth-token": "Bearer abcdefghijklmnop",
            "x-client-id": "client-123456789",
            "Accept": "application/json",
        }

        redacted = redact_headers(headers)

        assert redacted == {
            "x-api-key": "secr...3456",
            "x-auth-token": "Bearer abcd...mnop",
            "x-client-id": "clie...6789",
            "Accept": "application/json",
        }
        assert headers["x-api-key"] == "secret-api-key-123456"

    def test_redact_headers_ignores_name_case(self) -> None:
        """Header names match regardless of case."""
        redacted = redact_headers({"X-Api-Key": "secret-api-key-123456", "X-Auth-Token": "short"})

        assert redacted == {"X-Api-Key": "secr...3456", "X-Auth-Token": "****"}
        assert "x-idempotency-key" not in SENSITIVE_HEADERS
