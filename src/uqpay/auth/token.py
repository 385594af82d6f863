"""
Bearer token cache for the UQPAY API.

Every UQPAY request carries ``x-auth-token: Bearer {token}``. Tokens are
issued by ``POST {base_url}/v1/connect/token`` and expire at the absolute
time given by ``expired_at``. TokenProvider keeps the current token and
refreshes it lazily on the first ``get_token()`` call that finds it within
``refresh_skew`` of its expiry.
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from uqpay.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    NetworkError,
)
from uqpay.core.logging import get_logger, redact_headers

TOKEN_PATH = "/v1/connect/token"

DEFAULT_REFRESH_SKEW = 300.0  # seconds
DEFAULT_TIMEOUT = 10.0  # seconds

logger = get_logger("auth.token")


class TokenSource(ABC):
    """Anything that can hand out a bearer token for outbound requests."""

    @abstractmethod
    def get_token(self) -> str:
        """Return a valid bearer token."""
        ...


@dataclass(frozen=True)
class CachedToken:
    """The currently known credential. Replaced as a whole on refresh."""

    value: str = ""
    expires_at: float = 0.0  # Unix seconds

    def is_fresh(self, now: float, refresh_skew: float) -> bool:
        """True while the token is usable for at least refresh_skew more seconds."""
        return bool(self.value) and now + refresh_skew < self.expires_at


class TokenProvider(TokenSource):
    """
    Thread-safe, lazily refreshed bearer token.

    Readers take the current CachedToken snapshot without locking. A caller
    that finds the token stale takes the refresh lock, checks staleness
    again, and only then calls the token endpoint; callers queued behind it
    see the new snapshot and return without a second network call.

    Example:
        >>> provider = TokenProvider("https://api.example.com", "client-id", "api-key")
        >>> headers = {"x-auth-token": f"Bearer {provider.get_token()}"}
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        api_key: str,
        http_client: httpx.Client | None = None,
        refresh_skew: float = DEFAULT_REFRESH_SKEW,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the provider.

        Args:
            base_url: Base URL of the API host that issues tokens
            client_id: Value of the x-client-id header
            api_key: Value of the x-api-key header
            http_client: Optional shared httpx.Client (one is created if None)
            refresh_skew: Seconds before expired_at at which the token counts as stale
            timeout: Timeout in seconds for the token endpoint call
            clock: Returns the current Unix time; injectable for tests
        """
        if not base_url:
            raise ConfigurationError("base_url is required for the token provider")
        if not client_id or not api_key:
            raise ConfigurationError(
                "client_id and api_key are required for the token provider",
                details={"client_id": client_id or None},
            )
        if refresh_skew < 0:
            raise ConfigurationError("refresh_skew must not be negative")

        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._api_key = api_key
        self._refresh_skew = refresh_skew
        self._timeout = timeout
        self._clock = clock

        self._owns_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=timeout)

        self._token = CachedToken()
        self._refresh_lock = threading.Lock()

    @property
    def token_url(self) -> str:
        return f"{self._base_url}{TOKEN_PATH}"

    @property
    def refresh_skew(self) -> float:
        return self._refresh_skew

    @property
    def cached_token(self) -> CachedToken:
        """Current token snapshot (empty until the first successful refresh)."""
        return self._token

    def get_token(self) -> str:
        """
        Return a valid bearer token, refreshing it if necessary.

        Returns:
            A non-empty token that is not within refresh_skew of its expiry

        Raises:
            ConfigurationError: If the token request cannot be built
            NetworkError: On connection failure or timeout
            AuthenticationError: If the token endpoint answers non-2xx
            DecodeError: If the token response is malformed
        """
        token = self._token
        if token.is_fresh(self._clock(), self._refresh_skew):
            return token.value

        with self._refresh_lock:
            # Another caller may have refreshed while we waited for the lock
            token = self._token
            if token.is_fresh(self._clock(), self._refresh_skew):
                return token.value

            token = self._fetch_token()
            self._token = token
            return token.value

    def _fetch_token(self) -> CachedToken:
        url = self.token_url
        headers = {
            "Accept": "application/json",
            "x-client-id": self._client_id,
            "x-api-key": self._api_key,
        }

        try:
            request = self._http_client.build_request(
                "POST", url, headers=headers, timeout=self._timeout
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise ConfigurationError(
                f"failed to create token request: {e}", details={"url": url}
            ) from e

        logger.debug(f"Refreshing auth token: POST {url} headers={redact_headers(headers)}")

        try:
            response = self._http_client.send(request)
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"token request timed out after {self._timeout}s", url=url, timeout=True
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"failed to get token: {e}", url=url) from e

        if not response.is_success:
            logger.warning(f"Token endpoint returned status {response.status_code}")
            raise AuthenticationError(
                "failed to get token",
                status_code=response.status_code,
                body=response.text,
                url=url,
            )

        token = self._decode_token_response(response, url)
        if token.expires_at <= self._clock():
            raise DecodeError(
                "token endpoint returned an already expired token",
                url=url,
                details={"expired_at": int(token.expires_at)},
            )
        logger.debug(f"Auth token refreshed, expires at {token.expires_at:.0f}")
        return token

    @staticmethod
    def _decode_token_response(response: httpx.Response, url: str) -> CachedToken:
        try:
            body: Any = response.json()
        except ValueError as e:
            raise DecodeError(f"failed to decode token response: {e}", url=url) from e

        if not isinstance(body, dict):
            raise DecodeError("failed to decode token response: expected a JSON object", url=url)

        auth_token = body.get("auth_token")
        expired_at = body.get("expired_at")

        if not isinstance(auth_token, str) or not auth_token:
            raise DecodeError("failed to decode token response: missing auth_token", url=url)
        # bool is an int subclass; reject it explicitly
        if not isinstance(expired_at, int) or isinstance(expired_at, bool):
            raise DecodeError(
                "failed to decode token response: expired_at must be an integer",
                url=url,
                details={"expired_at": expired_at},
            )

        try:
            expires_at = float(expired_at)
        except OverflowError as e:
            raise DecodeError(
                "failed to decode token response: expired_at is out of range", url=url
            ) from e

        return CachedToken(value=auth_token, expires_at=expires_at)

    def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            self._http_client.close()
