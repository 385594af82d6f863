"""
Unit tests for the UQPay client.

Tests the main SDK entry point wiring: config, token caches and API clients.
"""

import os
from unittest.mock import patch

import httpx
import pytest

from uqpay import UQPay
from uqpay.core.config import Config
from uqpay.webhooks import WebhookParser


@pytest.fixture
def mock_env():
    """Set up mock environment variables."""
    with patch.dict(
        os.environ,
        {
            "UQPAY_CLIENT_ID": "env-client",
            "UQPAY_API_KEY": "env_api_key_123",
            "UQPAY_BASE_URL": "https://api.env.example.com",
        },
        clear=True,
    ):
        yield


class TestClientInitialization:
    """Tests for client initialization."""

    def test_init_with_explicit_credentials(self) -> None:
        client = UQPay(
            client_id="explicit-client",
            api_key="explicit_key",
            base_url="https://api.example.com",
        )

        assert client.config.client_id == "explicit-client"
        assert client.api.base_url == "https://api.example.com"
        client.close()

    def test_init_with_env_vars(self, mock_env) -> None:
        with UQPay() as client:
            assert client.config.api_key == "env_api_key_123"
            assert client.token_provider.token_url == "https://api.env.example.com/v1/connect/token"

    def test_init_with_config(self) -> None:
        config = Config(client_id="id", api_key="key", base_url="https://x", token_refresh_skew=60.0)

        with UQPay(config=config) as client:
            assert client.config is config
            assert client.token_provider.refresh_skew == 60.0

    def test_missing_credentials_raise(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="UQPAY_CLIENT_ID"):
                UQPay()

    def test_webhooks_parser(self, mock_env) -> None:
        with UQPay() as client:
            assert isinstance(client.webhooks, WebhookParser)


class TestFilesHost:
    """Tests for the separate Files API host."""

    def test_files_api_shares_token_cache_on_same_host(self, mock_env) -> None:
        """Without a files host, both clients use the same token cache."""
        with UQPay() as client:
            assert client.files_api.base_url == client.api.base_url
            assert client.files_token_provider is client.token_provider

    def test_files_api_uses_own_host(self, mock_env) -> None:
        """A distinct files host gets its own token cache."""
        with UQPay(files_base_url="https://files.env.example.com") as client:
            assert client.files_api.base_url == "https://files.env.example.com"
            assert (
                client.files_token_provider.token_url
                == "https://files.env.example.com/v1/connect/token"
            )
            assert client.files_token_provider is not client.token_provider


class TestClientLifecycle:
    """Tests for resource cleanup."""

    def test_close_releases_http_client(self, mock_env) -> None:
        client = UQPay()
        client.close()

        assert client._http_client.is_closed is True

    def test_requests_use_shared_token(self, mock_env) -> None:
        """Resource requests authenticate with the cached token."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/v1/connect/token":
                return httpx.Response(200, json={"auth_token": "tok-1", "expired_at": 4_000_000_000})
            return httpx.Response(200, json={"data": []})

        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        with UQPay(http_client=http_client) as client:
            client.api.get("/v1/issuing/cards")
            client.api.get("/v1/issuing/cards")

        paths = [r.url.path for r in seen]
        assert paths == ["/v1/connect/token", "/v1/issuing/cards", "/v1/issuing/cards"]
        assert seen[1].headers["x-auth-token"] == "Bearer tok-1"

    def test_injected_http_client_is_not_closed(self, mock_env) -> None:
        """close() leaves a caller-owned HTTP client open."""
        http_client = httpx.Client()

        UQPay(http_client=http_client).close()

        assert http_client.is_closed is False
        http_client.close()
