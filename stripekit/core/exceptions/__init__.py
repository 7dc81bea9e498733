from stripekit.core.exceptions.types import (
    AuthenticationException,
    IdempotencyException,
    NotFoundException,
    PermissionException,
    RateLimitException,
    StripeAPIException,
    StripeCardException,
    StripeConnectionException,
    StripeDecodeError,
    StripeException,
    StripeParseError,
)

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
