import json
import threading
from collections.abc import Callable

import httpx
import pytest

from uqpay.auth.token import TokenProvider

BASE_URL = "https://api.test.uqpay.local"
NOW = 1_700_000_000.0


class FakeClock:
    """Manually advanced clock returning Unix seconds."""

    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TokenEndpoint:
    """MockTransport handler for POST /v1/connect/token that counts calls."""

    def __init__(self, clock: FakeClock, lifetime: int = 3600) -> None:
        self.clock = clock
        self.lifetime = lifetime
        self.calls = 0
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str | None = None
        self.delay: threading.Event | None = None
        self._lock = threading.Lock()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.calls += 1
            self.requests.append(request)
            n = self.calls
        if self.delay is not None:
            self.delay.wait(timeout=5)
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(
            self.status_code,
            json={
                "auth_token": f"token-{n}",
                "expired_at": int(self.clock()) + self.lifetime,
            },
        )


def envelope(event_type: str, data=None, event_name: str = "", **extra) -> str:
    """Serialized webhook delivery."""
    body = {
        "version": "V1.6.0",
        "event_name": event_name,
        "event_type": event_type,
        "event_id": "evt-0001",
        "source_id": "src-0001",
        **extra,
    }
    if data is not None:
        body["data"] = data
    return json.dumps(body)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_endpoint(clock: FakeClock) -> TokenEndpoint:
    return TokenEndpoint(clock)


@pytest.fixture
def make_provider(clock: FakeClock) -> Callable[..., TokenProvider]:
    """Build a TokenProvider whose HTTP client is served by the given handler."""

    def _make(handler, **kwargs) -> TokenProvider:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        kwargs.setdefault("clock", clock)
        return TokenProvider(BASE_URL, "client-123", "secret-api-key", http_client=http_client, **kwargs)

    return _make


@pytest.fixture
def make_envelope() -> Callable[..., str]:
    return envelope
