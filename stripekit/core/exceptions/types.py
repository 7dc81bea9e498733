from typing import Any

from httpx import codes as status


class StripeException(Exception):
    """Base library exception."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class StripeParseError(StripeException):
    """Exception raised when a string is not a member of a strict vocabulary."""

    def __init__(
        self,
        message: str = "Unknown value for enumeration.",
        enum_name: str | None = None,
        value: Any = None,
    ):
        super().__init__(message, details={"enum": enum_name, "value": value})
        self.enum_name = enum_name
        self.value = value


class StripeDecodeError(StripeException):
    """Exception raised when a response body cannot be decoded into the expected shape."""

    def __init__(
        self,
        message: str = "Unable to decode Stripe response.",
        target: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message, details={"target": target, "errors": errors or []})
        self.target = target
        self.errors = errors or []


class StripeAPIException(StripeException):
    """Exception raised for Stripe API errors."""

    def __init__(
        self,
        message: str = "A Stripe API error occurred.",
        status_code: int = status.BAD_GATEWAY,
        stripe_code: str | None = None,
        error_type: str = "api_error",
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status_code, details)
        self.stripe_code = stripe_code
        self.error_type = error_type
        self.param = param
        self.request_id = request_id


class AuthenticationException(StripeAPIException):
    """Exception raised when the API key is missing, invalid or revoked."""

    def __init__(self, message: str = "Invalid API key provided.", **kwargs: Any):
        kwargs.setdefault("error_type", "invalid_request_error")
        super().__init__(message, status.UNAUTHORIZED, **kwargs)


class PermissionException(StripeAPIException):
    """Exception raised when the API key lacks permission for the operation."""

    def __init__(
        self,
        message: str = "API key doesn't have permission for this operation.",
        **kwargs: Any,
    ):
        kwargs.setdefault("error_type", "permission_error")
        super().__init__(message, status.FORBIDDEN, **kwargs)


class NotFoundException(StripeAPIException):
    """Exception raised when the requested object does not exist."""

    def __init__(self, message: str = "No such object.", **kwargs: Any):
        kwargs.setdefault("error_type", "invalid_request_error")
        super().__init__(message, status.NOT_FOUND, **kwargs)


class StripeCardException(StripeException):
    """Exception raised for Stripe card errors (declined, invalid, etc.)."""

    def __init__(
        self,
        message: str = "Card was declined.",
        stripe_code: str | None = None,
        decline_code: str | None = None,
        param: str | None = None,
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status.PAYMENT_REQUIRED, details)
        self.stripe_code = stripe_code
        self.decline_code = decline_code
        self.param = param
        self.request_id = request_id


class IdempotencyException(StripeException):
    """Exception raised for Stripe idempotency errors."""

    def __init__(
        self,
        message: str = "Idempotency key was used with different parameters.",
        request_id: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status.CONFLICT, details)
        self.request_id = request_id


class RateLimitException(StripeException):
    """Exception raised when Stripe rate limit is exceeded."""

    def __init__(
        self,
        message: str = "Stripe rate limit exceeded. Please try again later.",
        details: dict | None = None,
    ):
        super().__init__(message, status.TOO_MANY_REQUESTS, details)


class StripeConnectionException(StripeException):
    """Exception raised when Stripe cannot be reached after all retries."""

    def __init__(
        self,
        message: str = "Unable to connect to Stripe. Please try again later.",
        details: dict | None = None,
    ):
        super().__init__(message, status.SERVICE_UNAVAILABLE, details)


__all__ = [
    "StripeException",
    "StripeParseError",
    "StripeDecodeError",
    "StripeAPIException",
    "AuthenticationException",
    "PermissionException",
    "NotFoundException",
    "StripeCardException",
    "IdempotencyException",
    "RateLimitException",
    "StripeConnectionException",
]
