import logging
import sys
from collections.abc import Mapping

# Default Logger Name
LOGGER_NAME = "uqpay"

# Credential-bearing headers of the UQPAY API
SENSITIVE_HEADERS = frozenset({"x-api-key", "x-auth-token", "x-client-id"})


def configure_logging(level: int | str = logging.INFO, json_format: bool = False) -> logging.Logger:
    """
    Configure the UQPAY SDK logger.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG")
        json_format: Whether to emit JSON logs (good for Datadog/Splunk)

    Returns:
        The configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates if re-configured
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if json_format:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
        )
    else:
        # Human readable format
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Don't propagate to root logger to avoid double printing if user has their own setup
    logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a child logger of uqpay."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def mask_secret(value: str) -> str:
    """Return a secret with most characters masked for safe logging."""
    if len(value) <= 8:
        return "****"
    return value[:4] + "..." + value[-4:]


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """
    Copy of request headers that is safe to log.

    API keys, client ids and bearer tokens are masked; the ``Bearer`` prefix
    of x-auth-token is kept so malformed auth headers remain visible.
    """
    redacted: dict[str, str] = {}
    for name, value in headers.items():
        if name.lower() not in SENSITIVE_HEADERS:
            redacted[name] = value
        elif value.startswith("Bearer "):
            redacted[name] = "Bearer " + mask_secret(value[len("Bearer "):])
        else:
            redacted[name] = mask_secret(value)
    return redacted
