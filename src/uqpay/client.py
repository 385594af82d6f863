"""UQPay - Main SDK entry point."""

from __future__ import annotations

from typing import Any

import httpx

from uqpay.auth.token import TokenProvider
from uqpay.core.api_client import APIClient
from uqpay.core.config import Config
from uqpay.core.logging import configure_logging, get_logger
from uqpay.webhooks import WebhookParser


class UQPay:
    """
    Main client for the UQPAY SDK.

    Holds one token cache and API client per host: the main API host and the
    Files API host. Both share a single connection pool.

    Example:
        >>> with UQPay(client_id="...", api_key="...", base_url="https://api-sandbox.uqpaytech.com") as client:
        ...     cards = client.api.get("/v1/issuing/cards")
    """

    def __init__(
        self,
        client_id: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        files_base_url: str | None = None,
        config: Config | None = None,
        log_level: int | str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize UQPay client.

        Args:
            client_id: UQPAY client id (or from UQPAY_CLIENT_ID env)
            api_key: UQPAY API key (or from UQPAY_API_KEY env)
            base_url: API host (or from UQPAY_BASE_URL env)
            files_base_url: Files API host (or from UQPAY_FILES_BASE_URL env, default base_url)
            config: Complete configuration; explicit arguments are ignored when given
            log_level: Logging level (default from config). Set to logging.DEBUG for full traceability.
            http_client: Optional httpx.Client shared by all hosts (one is created if None)
        """
        if config is None:
            overrides: dict[str, Any] = {
                "client_id": client_id,
                "api_key": api_key,
                "base_url": base_url,
                "files_base_url": files_base_url,
            }
            config = Config.from_env(**{k: v for k, v in overrides.items() if v})
        self._config = config

        configure_logging(level=log_level if log_level is not None else config.log_level)
        self._logger = get_logger("client")
        self._logger.info(
            f"Initializing UQPay SDK (host: {config.base_url}, key: {config.masked_api_key()})"
        )

        self._owns_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=config.request_timeout)

        self._token_provider = self._create_token_provider(config.base_url)
        self._api = APIClient(
            config.base_url,
            self._token_provider,
            http_client=self._http_client,
            timeout=config.request_timeout,
        )

        files_base_url = config.files_base_url or config.base_url
        if files_base_url == config.base_url:
            self._files_token_provider = self._token_provider
        else:
            self._files_token_provider = self._create_token_provider(files_base_url)
        self._files_api = APIClient(
            files_base_url,
            self._files_token_provider,
            http_client=self._http_client,
            timeout=config.request_timeout,
        )

        self._webhooks = WebhookParser()

    def _create_token_provider(self, base_url: str) -> TokenProvider:
        return TokenProvider(
            base_url,
            self._config.client_id,
            self._config.api_key,
            http_client=self._http_client,
            refresh_skew=self._config.token_refresh_skew,
            timeout=self._config.token_timeout,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def token_provider(self) -> TokenProvider:
        return self._token_provider

    @property
    def files_token_provider(self) -> TokenProvider:
        return self._files_token_provider

    @property
    def api(self) -> APIClient:
        """Client for the main API host."""
        return self._api

    @property
    def files_api(self) -> APIClient:
        """Client for the Files API host."""
        return self._files_api

    @property
    def webhooks(self) -> WebhookParser:
        return self._webhooks

    def close(self) -> None:
        """Release the shared HTTP connection pool if this client created it."""
        if self._owns_client:
            self._http_client.close()

    def __enter__(self) -> UQPay:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
