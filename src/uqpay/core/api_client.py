"""
HTTP transport shared by all UQPAY resource clients.

Each request is authenticated with a bearer token from a TokenSource and
carries a fresh idempotency key.
"""

from __future__ import annotations

import uuid
from typing import Any

import httpx

from uqpay.auth.token import TokenSource
from uqpay.core.exceptions import APIError, DecodeError, NetworkError
from uqpay.core.logging import get_logger, redact_headers

AUTH_HEADER = "x-auth-token"
IDEMPOTENCY_HEADER = "x-idempotency-key"


def _flexible_code(value: Any) -> str:
    """Error codes arrive as strings or numbers; normalise to str."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class APIClient:
    """
    Authenticated JSON client for one UQPAY API host.

    Example:
        >>> api = APIClient("https://api.example.com", token_provider)
        >>> cards = api.get("/v1/issuing/cards")
    """

    def __init__(
        self,
        base_url: str,
        token_source: TokenSource,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize API client.

        Args:
            base_url: API host base URL
            token_source: Supplies the bearer token for each request
            http_client: Optional shared httpx.Client (one is created if None)
            timeout: Request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._token_source = token_source
        self._timeout = timeout
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=timeout)
        self._logger = get_logger("api")

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self, accept: str | None = None) -> dict[str, str]:
        # A token failure aborts the request before anything is sent
        token = self._token_source.get_token()
        headers = {
            "Content-Type": "application/json",
            AUTH_HEADER: f"Bearer {token}",
            IDEMPOTENCY_HEADER: str(uuid.uuid4()),
        }
        if accept:
            headers["Accept"] = accept
        return headers

    def _send(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        self._logger.debug(f"{method} {url} headers={redact_headers(headers)}")

        try:
            response = self._http_client.request(
                method,
                url,
                headers=headers,
                json=json,
                params=params,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"request timed out after {self._timeout}s", url=url, timeout=True
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"request failed: {e}", url=url) from e

        if response.status_code >= 400:
            raise self._api_error(response)
        return response

    @staticmethod
    def _api_error(response: httpx.Response) -> APIError:
        status = response.status_code
        try:
            body = response.json()
        except ValueError:
            return APIError(f"request failed with status {status}", status_code=status)

        if not isinstance(body, dict):
            return APIError(f"request failed with status {status}", status_code=status)

        return APIError(
            str(body.get("message") or f"request failed with status {status}"),
            status_code=status,
            code=_flexible_code(body.get("code")),
            details={"body": body},
        )

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send an authenticated request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the base URL (e.g. "/v1/issuing/cards")
            json: Optional request body
            params: Optional query parameters

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            NetworkError: On transport failure
            APIError: If the API answers with status >= 400
            DecodeError: If a successful response is not JSON
        """
        response = self._send(method, path, self._headers(), json=json, params=params)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"failed to decode response: {e}", url=str(response.request.url)
            ) from e

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self.request("POST", path, json=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.request("PUT", path, json=body)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def get_raw(self, path: str) -> bytes:
        """GET a binary resource (file downloads)."""
        headers = self._headers(accept="application/octet-stream")
        headers.pop("Content-Type")
        response = self._send("GET", path, headers)
        return response.content

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_client:
            self._http_client.close()
