"""Unit tests for the bearer token cache."""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from uqpay.auth.token import CachedToken, TokenProvider
from uqpay.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    UQPayError,
)


class TestCachedToken:
    """Tests for the token snapshot."""

    def test_empty_token_is_stale(self) -> None:
        """An empty snapshot is never fresh."""
        assert CachedToken().is_fresh(0.0, 0.0) is False

    def test_fresh_strictly_before_skew_window(self) -> None:
        """Fresh only while now + skew < expires_at."""
        token = CachedToken("abc", expires_at=1000.0)

        assert token.is_fresh(699.0, 300.0) is True
        assert token.is_fresh(700.0, 300.0) is False
        assert token.is_fresh(1000.0, 0.0) is False

    def test_is_immutable(self) -> None:
        """Snapshots are replaced, never modified."""
        token = CachedToken("abc", 1000.0)
        with pytest.raises(AttributeError):
            token.value = "other"  # type: ignore


class TestTokenProviderInit:
    """Tests for provider construction."""

    @pytest.mark.parametrize(
        "base_url,client_id,api_key",
        [("", "id", "key"), ("https://x", "", "key"), ("https://x", "id", "")],
    )
    def test_missing_values_raise(self, base_url, client_id, api_key) -> None:
        """base_url, client_id and api_key are all required."""
        with pytest.raises(ConfigurationError):
            TokenProvider(base_url, client_id, api_key)

    def test_negative_skew_raises(self) -> None:
        """A negative refresh skew is rejected."""
        with pytest.raises(ConfigurationError, match="refresh_skew"):
            TokenProvider("https://x", "id", "key", refresh_skew=-1)

    def test_token_url(self) -> None:
        """Token URL is derived from the base URL."""
        provider = TokenProvider("https://api.example.com/", "id", "key")
        assert provider.token_url == "https://api.example.com/v1/connect/token"
        assert provider.refresh_skew == 300.0
        provider.close()


class TestGetToken:
    """Tests for the lazy refresh behaviour."""

    def test_first_call_fetches_token(self, make_provider, token_endpoint) -> None:
        """The first call hits the token endpoint with the credential headers."""
        provider = make_provider(token_endpoint)

        assert provider.get_token() == "token-1"
        assert token_endpoint.calls == 1

        request = token_endpoint.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/connect/token"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["x-client-id"] == "client-123"
        assert request.headers["x-api-key"] == "secret-api-key"

    def test_debug_log_masks_credentials(self, make_provider, token_endpoint) -> None:
        """The refresh is logged without the API key."""
        records: list[logging.LogRecord] = []
        handler = logging.Handler()
        handler.emit = records.append  # type: ignore[method-assign]
        logger = logging.getLogger("uqpay.auth.token")
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            make_provider(token_endpoint).get_token()
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        messages = " ".join(r.getMessage() for r in records)
        assert "Refreshing auth token" in messages
        assert "secret-api-key" not in messages
        assert "secr...-key" in messages

    def test_fresh_token_is_served_from_cache(self, make_provider, token_endpoint) -> None:
        """Repeated calls on a fresh token do no network access."""
        provider = make_provider(token_endpoint)

        for _ in range(5):
            assert provider.get_token() == "token-1"
        assert token_endpoint.calls == 1

    def test_cached_token_snapshot(self, make_provider, token_endpoint, clock) -> None:
        """cached_token exposes the stored value and expiry."""
        provider = make_provider(token_endpoint)
        assert provider.cached_token == CachedToken()

        provider.get_token()
        assert provider.cached_token.value == "token-1"
        assert provider.cached_token.expires_at == clock() + 3600

    def test_refresh_inside_skew_window(self, make_provider, token_endpoint, clock) -> None:
        """expired_at = now + 600 with skew 300 stays cached for 300 seconds."""
        token_endpoint.lifetime = 600
        provider = make_provider(token_endpoint, refresh_skew=300)

        assert provider.get_token() == "token-1"
        assert provider.get_token() == "token-1"
        assert token_endpoint.calls == 1

        clock.advance(299)
        assert provider.get_token() == "token-1"
        assert token_endpoint.calls == 1

        clock.advance(1)
        assert provider.get_token() == "token-2"
        assert token_endpoint.calls == 2

    def test_returned_token_is_never_stale(self, make_provider, token_endpoint, clock) -> None:
        """Whatever get_token returns satisfies now + skew < expires_at."""
        provider = make_provider(token_endpoint)

        for _ in range(20):
            provider.get_token()
            assert clock() + provider.refresh_skew < provider.cached_token.expires_at
            clock.advance(700)

    def test_concurrent_callers_share_one_refresh(self, make_provider, token_endpoint) -> None:
        """N callers racing on an empty cache trigger exactly one auth call."""
        release = threading.Event()
        token_endpoint.delay = release
        provider = make_provider(token_endpoint)

        with ThreadPoolExecutor(max_workers=16) as pool:
            futures = [pool.submit(provider.get_token) for _ in range(16)]
            time.sleep(0.1)
            release.set()
            results = [f.result(timeout=5) for f in futures]

        assert results == ["token-1"] * 16
        assert token_endpoint.calls == 1

    def test_concurrent_callers_share_refresh_of_stale_token(
        self, make_provider, token_endpoint, clock
    ) -> None:
        """Racing callers on a stale token also coalesce into one refresh."""
        provider = make_provider(token_endpoint)
        provider.get_token()
        clock.advance(3600)

        release = threading.Event()
        token_endpoint.delay = release
        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(provider.get_token) for _ in range(8)]
            time.sleep(0.1)
            release.set()
            results = {f.result(timeout=5) for f in futures}

        assert results == {"token-2"}
        assert token_endpoint.calls == 2


class TestGetTokenFailures:
    """Tests for token endpoint failures."""

    def test_non_success_status_raises_authentication_error(
        self, make_provider, token_endpoint
    ) -> None:
        """A 401 carries its status and body and is not parsed as a token."""
        token_endpoint.status_code = 401
        token_endpoint.body = '{"auth_token": "should-not-be-used", "expired_at": 9999999999}'
        provider = make_provider(token_endpoint)

        with pytest.raises(AuthenticationError) as exc_info:
            provider.get_token()

        assert exc_info.value.status_code == 401
        assert "should-not-be-used" in exc_info.value.body
        assert "HTTP 401" in str(exc_info.value)
        assert provider.cached_token.value == ""

    def test_failure_keeps_previous_token(self, make_provider, token_endpoint, clock) -> None:
        """A failed refresh leaves the cached token untouched."""
        provider = make_provider(token_endpoint)
        provider.get_token()
        clock.advance(3400)

        token_endpoint.status_code = 500
        token_endpoint.body = "internal error"
        with pytest.raises(AuthenticationError):
            provider.get_token()

        assert provider.cached_token.value == "token-1"

    @pytest.mark.parametrize(
        "body",
        [
            "not json",
            "[]",
            '{"expired_at": 1900000000}',
            '{"auth_token": "", "expired_at": 1900000000}',
            '{"auth_token": "abc", "expired_at": "1900000000"}',
            '{"auth_token": "abc", "expired_at": 1900000000.5}',
            '{"auth_token": "abc", "expired_at": true}',
            '{"auth_token": "abc"}',
            '{"auth_token": "abc", "expired_at": 1' + "0" * 400 + '}',
        ],
    )
    def test_malformed_body_raises_decode_error(self, make_provider, token_endpoint, body) -> None:
        """2xx responses that are not a token document are decode errors."""
        token_endpoint.body = body
        provider = make_provider(token_endpoint)

        with pytest.raises(DecodeError):
            provider.get_token()
        assert provider.cached_token.value == ""

    def test_already_expired_token_raises(self, make_provider, token_endpoint) -> None:
        """An expired_at in the past is rejected."""
        token_endpoint.lifetime = 0
        provider = make_provider(token_endpoint)

        with pytest.raises(DecodeError, match="already expired"):
            provider.get_token()

    def test_timeout_raises_network_error(self, make_provider) -> None:
        """A timeout is a NetworkError flagged as such."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        provider = make_provider(handler)

        with pytest.raises(NetworkError) as exc_info:
            provider.get_token()
        assert exc_info.value.is_timeout() is True

    def test_connection_error_raises_network_error(self, make_provider) -> None:
        """Transport failures are NetworkErrors that are not timeouts."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = make_provider(handler)

        with pytest.raises(NetworkError) as exc_info:
            provider.get_token()
        assert exc_info.value.is_timeout() is False
        assert isinstance(exc_info.value, UQPayError)

    def test_next_call_retries_after_failure(self, make_provider, token_endpoint) -> None:
        """Failures are not cached; the next caller tries again."""
        token_endpoint.status_code = 503
        token_endpoint.body = "unavailable"
        provider = make_provider(token_endpoint)

        with pytest.raises(AuthenticationError):
            provider.get_token()

        token_endpoint.status_code = 200
        token_endpoint.body = None
        assert provider.get_token() == "token-2"
