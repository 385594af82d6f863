"""
Configuration management for the UQPAY SDK.

Handles loading configuration from environment variables and validation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

from uqpay.core.logging import mask_secret


def _get_env_var(name: str, default: str | None = None, required: bool = False) -> str | None:
    """Get environment variable with optional default."""
    value = os.environ.get(name, default)
    if required and not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


@dataclass(frozen=True)
class Config:
    """SDK configuration."""

    client_id: str
    api_key: str
    base_url: str
    # Files API lives on its own host; falls back to base_url
    files_base_url: str | None = None

    # Token cache
    token_refresh_skew: float = 300.0  # refresh 5 minutes before expired_at
    token_timeout: float = 10.0  # bound on the token endpoint call

    # Resource requests
    request_timeout: float = 30.0

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ValueError("client_id is required")
        if not self.api_key:
            raise ValueError("api_key is required")
        if not self.base_url:
            raise ValueError("base_url is required")
        if self.token_refresh_skew < 0:
            raise ValueError("token_refresh_skew must not be negative")
        if self.token_timeout <= 0 or self.request_timeout <= 0:
            raise ValueError("timeouts must be positive")

        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        files_base_url = self.files_base_url or self.base_url
        object.__setattr__(self, "files_base_url", files_base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> Config:
        """Load configuration from environment variables."""
        client_id = overrides.get("client_id") or _get_env_var("UQPAY_CLIENT_ID", required=True)
        api_key = overrides.get("api_key") or _get_env_var("UQPAY_API_KEY", required=True)
        base_url = overrides.get("base_url") or _get_env_var("UQPAY_BASE_URL", required=True)
        files_base_url = overrides.get("files_base_url") or _get_env_var("UQPAY_FILES_BASE_URL")

        log_level = overrides.get("log_level") or _get_env_var("UQPAY_LOG_LEVEL", default="INFO")

        return cls(
            client_id=client_id,  # type: ignore
            api_key=api_key,  # type: ignore
            base_url=base_url,  # type: ignore
            files_base_url=files_base_url,
            token_refresh_skew=overrides.get("token_refresh_skew", cls.token_refresh_skew),
            token_timeout=overrides.get("token_timeout", cls.token_timeout),
            request_timeout=overrides.get("request_timeout", cls.request_timeout),
            log_level=log_level,  # type: ignore
        )

    def with_updates(self, **updates: Any) -> Config:
        """Create a new Config with updated values."""
        return replace(self, **updates)

    def masked_api_key(self) -> str:
        """Return API key with most characters masked for safe logging."""
        return mask_secret(self.api_key)
