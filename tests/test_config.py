"""Unit tests for config module."""

import os
from unittest.mock import patch

import pytest

from uqpay.core.config import Config


class TestConfig:
    """Tests for Config class."""

    def test_create_config_directly(self) -> None:
        """Test creating config with direct values."""
        config = Config(
            client_id="client-123",
            api_key="test_api_key_123",
            base_url="https://api-sandbox.uqpaytech.com",
        )

        assert config.client_id == "client-123"
        assert config.token_refresh_skew == 300.0  # default
        assert config.token_timeout == 10.0
        assert config.request_timeout == 30.0
        assert config.files_base_url == "https://api-sandbox.uqpaytech.com"

    def test_trailing_slash_is_stripped(self) -> None:
        """Base URLs are normalised."""
        config = Config(
            client_id="id",
            api_key="key",
            base_url="https://api.example.com/",
            files_base_url="https://files.example.com/",
        )

        assert config.base_url == "https://api.example.com"
        assert config.files_base_url == "https://files.example.com"

    def test_config_is_immutable(self) -> None:
        """Test that config is frozen (immutable)."""
        config = Config(client_id="id", api_key="key", base_url="https://x")

        with pytest.raises(AttributeError):
            config.api_key = "new_key"  # type: ignore

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"client_id": ""}, "client_id is required"),
            ({"api_key": ""}, "api_key is required"),
            ({"base_url": ""}, "base_url is required"),
            ({"token_refresh_skew": -1.0}, "token_refresh_skew"),
            ({"token_timeout": 0.0}, "timeouts must be positive"),
            ({"request_timeout": -5.0}, "timeouts must be positive"),
        ],
    )
    def test_invalid_values_raise(self, kwargs, message) -> None:
        """Test validation in __post_init__."""
        values = {"client_id": "id", "api_key": "key", "base_url": "https://x", **kwargs}

        with pytest.raises(ValueError, match=message):
            Config(**values)

    def test_from_env(self) -> None:
        """Test loading config from environment variables."""
        env = {
            "UQPAY_CLIENT_ID": "env-client",
            "UQPAY_API_KEY": "env_api_key",
            "UQPAY_BASE_URL": "https://api.env.example.com",
            "UQPAY_FILES_BASE_URL": "https://files.env.example.com",
            "UQPAY_LOG_LEVEL": "DEBUG",
        }

        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()

        assert config.client_id == "env-client"
        assert config.api_key == "env_api_key"
        assert config.files_base_url == "https://files.env.example.com"
        assert config.log_level == "DEBUG"

    def test_from_env_with_overrides(self) -> None:
        """Test that overrides take precedence over env vars."""
        env = {
            "UQPAY_CLIENT_ID": "env-client",
            "UQPAY_API_KEY": "env_api_key",
            "UQPAY_BASE_URL": "https://api.env.example.com",
        }

        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env(api_key="override_key", token_refresh_skew=60.0)

        assert config.api_key == "override_key"
        assert config.client_id == "env-client"
        assert config.token_refresh_skew == 60.0

    def test_from_env_missing_required(self) -> None:
        """Test that missing required env vars raise error."""
        with patch.dict(os.environ, {"UQPAY_CLIENT_ID": "id"}, clear=True):
            with pytest.raises(ValueError, match="UQPAY_API_KEY"):
                Config.from_env()

    def test_with_updates(self) -> None:
        """Test creating updated config."""
        original = Config(client_id="id", api_key="key", base_url="https://x")

        updated = original.with_updates(request_timeout=5.0)

        assert original.request_timeout == 30.0
        assert updated.request_timeout == 5.0
        assert updated.api_key == "key"

    def test_masked_api_key(self) -> None:
        """Test API key masking for logging."""
        config = Config(client_id="id", api_key="sk_live_1234567890abcdef", base_url="https://x")

        assert config.masked_api_key() == "sk_l...cdef"
        assert "1234567890" not in config.masked_api_key()

    def test_masked_short_api_key(self) -> None:
        """Short keys are fully masked."""
        config = Config(client_id="id", api_key="short", base_url="https://x")

        assert config.masked_api_key() == "****"
