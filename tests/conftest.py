"""
Pytest configuration and shared fixtures.

No test touches the network: transports are either in-memory recorders that
hand back canned JSON bodies, or real clients wired to ``httpx.MockTransport``.
"""

import json
import os
from typing import Any, Callable

import httpx
import pytest

# Settings are read once at import time, so the environment must be in place
# before any stripekit module is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("STRIPE_API_KEY", "sk_test_123")
os.environ["DEBUG"] = "true"


class RecordingTransport:
    """Async transport that records each call and replies with queued bodies."""

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def _next(self, **call: Any) -> bytes:
        self.calls.append(call)
        body = self.responses.pop(0)
        if isinstance(body, bytes):
            return body
        return json.dumps(body).encode()

    async def send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> bytes:
        return self._next(
            method=method,
            path=path,
            params=params,
            idempotency_key=idempotency_key,
            stripe_account=stripe_account,
        )


class RecordingBlockingTransport(RecordingTransport):
    def send(  # type: ignore[override]
        self,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> bytes:
        return self._next(
            method=method,
            path=path,
            params=params,
            idempotency_key=idempotency_key,
            stripe_account=stripe_account,
        )


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory: ``recording_transport(body1, body2, ...)``."""

    def _make(*responses: Any) -> RecordingTransport:
        return RecordingTransport(list(responses))

    return _make


@pytest.fixture
def recording_blocking_transport() -> Callable[..., RecordingBlockingTransport]:
    def _make(*responses: Any) -> RecordingBlockingTransport:
        return RecordingBlockingTransport(list(responses))

    return _make


@pytest.fixture
def client_options() -> dict[str, Any]:
    """Client overrides that keep retries instant and deterministic."""
    return {
        "api_key": "sk_test_123",
        "base_url": "https://api.stripe.test/v1",
        "max_attempts": 3,
        "backoff_base": 0.0,
        "backoff_max": 0.0,
        "jitter": 0.0,
    }


@pytest.fixture
def mock_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def customer_payload() -> dict[str, Any]:
    return {
        "id": "cus_123",
        "object": "customer",
        "address": {"city": "Lagos", "country": "NG", "line1": "1 Marina"},
        "balance": 0,
        "created": 1700000000,
        "currency": "usd",
        "delinquent": False,
        "email": "jenny@example.com",
        "invoice_settings": {
            "custom_fields": None,
            "default_payment_method": None,
            "footer": None,
            "rendering_options": None,
        },
        "livemode": False,
        "metadata": {"user_id": "42"},
        "name": "Jenny Rosen",
        "preferred_locales": ["en"],
        "tax_exempt": "none",
        "test_clock": None,
    }


@pytest.fixture
def payment_method_payload() -> dict[str, Any]:
    return {
        "id": "pm_123",
        "object": "payment_method",
        "allow_redisplay": "always",
        "billing_details": {"email": "jenny@example.com", "name": "Jenny Rosen"},
        "card": {
            "brand": "visa",
            "country": "US",
            "exp_month": 8,
            "exp_year": 2030,
            "funding": "credit",
            "last4": "4242",
        },
        "created": 1700000000,
        "customer": "cus_123",
        "livemode": False,
        "metadata": {},
        "type": "card",
    }


def list_body(items: list[dict[str, Any]], has_more: bool, url: str = "/v1/customers") -> dict[str, Any]:
    return {"object": "list", "data": items, "has_more": has_more, "url": url}


@pytest.fixture
def make_list() -> Callable[..., dict[str, Any]]:
    """Factory for list envelopes: ``make_list(items, has_more=False)``."""

    def _make(items: list[dict[str, Any]], has_more: bool = False, url: str = "/v1/customers") -> dict[str, Any]:
        return list_body(items, has_more, url)

    return _make
