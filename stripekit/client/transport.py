import asyncio
import random
import time
from typing import Any, Protocol, runtime_checkable

import httpx

from stripekit.core.config import get_settings, stripe_logger
from stripekit.core.exceptions.types import (
    AuthenticationException,
    IdempotencyException,
    NotFoundException,
    PermissionException,
    RateLimitException,
    StripeAPIException,
    StripeCardException,
    StripeConnectionException,
    StripeException,
)


@runtime_checkable
class StripeTransport(Protocol):
    """Anything that can send one encoded request and return the raw body."""

    async def send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> bytes: ...


@runtime_checkable
class StripeBlockingTransport(Protocol):
    def send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> bytes: ...


class _BaseClient:
    """Configuration, headers and error mapping shared by both clients."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        max_attempts: int | None = None,
        backoff_base: float | None = None,
        backoff_max: float | None = None,
        jitter: float | None = None,
        transport: Any = None,
    ):
        settings = get_settings()
        self._api_key: str = api_key if api_key is not None else settings.STRIPE_API_KEY
        settings.check_api_key(self._api_key)
        self._base_url: str = (base_url or settings.STRIPE_API_BASE_URL).rstrip("/")
        self._api_version = api_version or settings.STRIPE_API_VERSION
        self._timeout = timeout if timeout is not None else settings.STRIPE_TIMEOUT
        self._max_attempts = max(
            1, max_attempts if max_attempts is not None else settings.STRIPE_MAX_ATTEMPTS
        )

        # Bounded retries + backoff
        self._backoff_base = (
            backoff_base if backoff_base is not None else settings.STRIPE_BACKOFF_BASE
        )
        self._backoff_max = (
            backoff_max if backoff_max is not None else settings.STRIPE_BACKOFF_MAX
        )
        self._jitter = jitter if jitter is not None else settings.STRIPE_JITTER

        # Optional httpx transport (httpx.MockTransport in tests)
        self._transport = transport

    def _check_api_key(self) -> None:
        """Validate that a Stripe API key has been configured.

        Performs no network calls; it only ensures the configuration value is
        present.

        Raises
        ------
            AuthenticationException
                If the API key is missing or contains only whitespace. The key
                is expected as a constructor argument or through the
                STRIPE_API_KEY environment variable or a .env file.
        """
        if not self._api_key.strip():
            raise AuthenticationException(
                "Stripe API key is not set. Pass api_key or set STRIPE_API_KEY in the environment variables or .env file."
            )

    def _client_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "base_url": self._base_url,
            "timeout": httpx.Timeout(self._timeout),
            "auth": httpx.BasicAuth(self._api_key, ""),
        }
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    def _compute_backoff(self, attempt: int) -> float:
        """
        Compute the backoff time with jitter for a given retry attempt.

        Parameters
        ----------
            attempt : int
                The current retry attempt number (1-based).

        Returns
        -------
            float
                The computed backoff time in seconds.
        """
        base = min(self._backoff_base * (2 ** (attempt - 1)), self._backoff_max)
        jitter = random.uniform(1 - self._jitter, 1 + self._jitter)
        return base * jitter

    def _headers(
        self, idempotency_key: str | None, stripe_account: str | None
    ) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self._api_version:
            headers["Stripe-Version"] = self._api_version
        if stripe_account:
            headers["Stripe-Account"] = stripe_account
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    @staticmethod
    def _request_kwargs(method: str, params: dict[str, str]) -> dict[str, Any]:
        if method.upper() == "POST":
            return {"data": params or None}
        return {"params": params or None}

    @staticmethod
    def _is_retryable(status: int) -> bool:
        return status == 429 or 500 <= status < 600

    @staticmethod
    def _error_from_response(resp: httpx.Response) -> StripeException:
        """
        Map a non-2xx Stripe response to the library exception taxonomy.

        Stripe error structure: {error: {type, code, message, param, decline_code}}.
        See https://docs.stripe.com/api/errors.
        """
        status = resp.status_code
        request_id = resp.headers.get("Request-Id")

        # Safely extract error body
        try:
            err_body = resp.json()
        except ValueError:
            err_body = {"error": {"message": resp.text}}
        if not isinstance(err_body, dict):
            err_body = {"error": {"message": resp.text}}

        error_data = err_body.get("error") or {}
        error_type = error_data.get("type")
        error_code = error_data.get("code")
        error_message = error_data.get("message") or f"Stripe API error {status}"
        error_param = error_data.get("param")
        decline_code = error_data.get("decline_code")

        # Log with Request-Id for Stripe support debugging
        stripe_logger.error(
            f"Stripe error: {status} {error_type or 'unknown'} | "
            f"Code: {error_code or 'N/A'} | Request-Id: {request_id or 'N/A'} | "
            f"Message: {error_message}"
        )

        if status == 429:
            return RateLimitException(
                message=error_message,
                details={
                    "code": error_code,
                    "type": error_type or "rate_limit_error",
                    "request_id": request_id,
                    **err_body,
                },
            )

        if status == 409 or error_type == "idempotency_error":
            # Caller reused a key with different params
            return IdempotencyException(
                message=error_message,
                request_id=request_id,
                details={
                    "code": error_code,
                    "type": error_type,
                    "param": error_param,
                    **err_body,
                },
            )

        if error_type == "card_error":
            return StripeCardException(
                message=error_message,
                stripe_code=error_code,
                decline_code=decline_code,
                param=error_param,
                request_id=request_id,
                details=err_body,
            )

        common = {
            "stripe_code": error_code,
            "param": error_param,
            "request_id": request_id,
            "details": err_body,
        }
        if status == 401:
            return AuthenticationException(error_message, **common)
        if status == 403:
            return PermissionException(error_message, **common)
        if status == 404:
            return NotFoundException(error_message, **common)
        if status == 402:
            # Parameters were valid but the request failed
            return StripeAPIException(
                message=error_message,
                status_code=status,
                error_type=error_type or "request_failed",
                **common,
            )
        if status == 424:
            # Failure in a system Stripe depends on
            return StripeAPIException(
                message=error_message,
                status_code=status,
                error_type=error_type or "external_dependency_failed",
                **common,
            )
        return StripeAPIException(
            message=error_message,
            status_code=status,
            error_type=error_type or "api_error",
            **common,
        )

    def _log_success(self, method: str, path: str, resp: httpx.Response) -> None:
        stripe_logger.info(
            f"Stripe {method} {path} succeeded (Request-Id: {resp.headers.get('Request-Id', 'N/A')})"
        )

    def _log_retry(self, reason: str, attempt: int, wait: float, detail: str) -> None:
        stripe_logger.warning(
            f"{reason}; attempt {attempt}/{self._max_attempts}; wait={wait:.1f}s; {detail}"
        )

    def _connection_error(self, exc: Exception) -> StripeConnectionException:
        stripe_logger.error(f"Network error after {self._max_attempts} attempts: {exc}")
        return StripeConnectionException(
            details={"error": str(exc), "type": "network_error"},
        )


class StripeClient(_BaseClient):
    """
    Asynchronous Stripe transport built on ``httpx.AsyncClient``.

    Retries 5xx, 429 and network errors with exponential backoff and jitter,
    up to ``max_attempts`` attempts; all other errors fail immediately. Returns
    the raw response body and never decodes it.

    Usage:
        async with StripeClient(api_key="sk_test_...") as client:
            customer = await RetrieveCustomer("cus_123").send(client)
    """

    def __init__(self, api_key: str | None = None, **options: Any):
        super().__init__(api_key, **options)
        self._client: httpx.AsyncClient | None = None

    def _init_client(self) -> None:
        """Lazily construct the ``httpx.AsyncClient``; a no-op when it already exists."""
        self._check_api_key()
        if self._client is None:
            self._client = httpx.AsyncClient(**self._client_options())
            stripe_logger.info("Stripe HTTP client initialized")

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        headers: dict[str, str],
    ) -> httpx.Response:
        """
        Makes an asynchronous HTTP request to the Stripe API with retry logic.

        Raises
        ------
            StripeCardException
                For card_error type errors (declined cards, etc.)
            IdempotencyException
                For idempotency_error type errors (409 conflicts)
            RateLimitException
                For rate limiting errors after all retries exhausted
            AuthenticationException, PermissionException, NotFoundException
                For 401, 403 and 404 responses
            StripeAPIException
                For other Stripe API errors, including 5xx after all retries
            StripeConnectionException
                For network errors after all retries exhausted
        """
        if self._client is None:
            self._init_client()

        # Assert client is initialized (for type checker)
        assert self._client is not None, "HTTP client should be initialized"

        for attempt in range(1, self._max_attempts + 1):
            try:
                resp = await self._client.request(
                    method,
                    path,
                    headers=headers,
                    **self._request_kwargs(method, params),
                )
            except (httpx.TimeoutException, httpx.TransportError) as exc:
                wait = self._compute_backoff(attempt)
                self._log_retry(
                    "Network error",
                    attempt,
                    wait,
                    f"error={exc.__class__.__name__}: {exc}",
                )
                if attempt < self._max_attempts:
                    await asyncio.sleep(wait)
                    continue
                raise self._connection_error(exc) from exc

            if resp.is_success:
                self._log_success(method, path, resp)
                return resp

            if self._is_retryable(resp.status_code) and attempt < self._max_attempts:
                wait = self._compute_backoff(attempt)
                self._log_retry(
                    f"{resp.status_code} from Stripe",
                    attempt,
                    wait,
                    f"Request-Id={resp.headers.get('Request-Id')}",
                )
                await asyncio.sleep(wait)
                continue

            raise self._error_from_response(resp)

        # max_attempts is at least 1, so the loop always returns or raises
        raise StripeConnectionException("Unexpected error in Stripe request loop")

    async def send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> bytes:
        resp = await self._request(
            method.upper(),
            path,
            params,
            self._headers(idempotency_key, stripe_account),
        )
        return resp.content

    async def aclose(self) -> None:
        """Close the underlying HTTP client, if it was initialized."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            stripe_logger.info("Stripe HTTP client closed")

    async def __aenter__(self) -> "StripeClient":
        self._init_client()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


class StripeBlockingClient(_BaseClient):
    """Blocking counterpart of ``StripeClient`` built on ``httpx.Client``."""

    def __init__(self, api_key: str | None = None, **options: Any):
        super().__init__(api_key, **options)
        self._client: httpx.Client | None = None

    def _init_client(self) -> None:
        self._check_api_key()
        if self._client is None:
            self._client = httpx.Client(**self._client_options())
            stripe_logger.info("Stripe blocking HTTP client initialized")

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        headers: dict[str, str],
    ) -> httpx.Response:
        if self._client is None:
            self._init_client()

        assert self._client is not None, "HTTP client should be initialized"

        for attempt in range(1, self._max_attempts + 1):
            try:
                resp = self._client.request(
                    method,
                    path,
                    headers=headers,
                    **self._request_kwargs(method, params),
                )
            except (httpx.TimeoutException, httpx.TransportError) as exc:
                wait = self._compute_backoff(attempt)
                self._log_retry(
                    "Network error",
                    attempt,
                    wait,
                    f"error={exc.__class__.__name__}: {exc}",
                )
                if attempt < self._max_attempts:
                    time.sleep(wait)
                    continue
                raise self._connection_error(exc) from exc

            if resp.is_success:
                self._log_success(method, path, resp)
                return resp

            if self._is_retryable(resp.status_code) and attempt < self._max_attempts:
                wait = self._compute_backoff(attempt)
                self._log_retry(
                    f"{resp.status_code} from Stripe",
                    attempt,
                    wait,
                    f"Request-Id={resp.headers.get('Request-Id')}",
                )
                time.sleep(wait)
                continue

            raise self._error_from_response(resp)

        raise StripeConnectionException("Unexpected error in Stripe request loop")

    def send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        *,
        idempotency_key: str | None = None,
        stripe_account: str | None = None,
    ) -> bytes:
        resp = self._request(
            method.upper(),
            path,
            params,
            self._headers(idempotency_key, stripe_account),
        )
        return resp.content

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            stripe_logger.info("Stripe blocking HTTP client closed")

    def __enter__(self) -> "StripeBlockingClient":
        self._init_client()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "StripeTransport",
    "StripeBlockingTransport",
    "StripeClient",
    "StripeBlockingClient",
]
