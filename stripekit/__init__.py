"""
stripekit: typed request builders and response models for the Stripe API.

Example usage:
    from stripekit import StripeClient
    from stripekit.resources.customer import CreateCustomer, ListCustomer

    async with StripeClient(api_key="sk_test_...") as client:
        customer = await CreateCustomer().email("jenny@example.com").send(
            client, idempotency_key="signup-42"
        )
        page = await ListCustomer().limit(5).send(client)
"""

from stripekit.client import (
    ListPaginator,
    RequestBuilder,
    RequestParams,
    StripeBlockingClient,
    StripeClient,
    StripeRequest,
)
from stripekit.core.enums import LenientStripeEnum, StripeEnum, StripeMethod
from stripekit.core.exceptions import (
    StripeAPIException,
    StripeDecodeError,
    StripeException,
    StripeParseError,
)
from stripekit.types import ListResponse, MaybeDeleted, SearchResult

__version__ = "1.0.0"

__all__ = [
    "ListPaginator",
    "RequestBuilder",
    "RequestParams",
    "StripeBlockingClient",
    "StripeClient",
    "StripeRequest",
    "LenientStripeEnum",
    "StripeEnum",
    "StripeMethod",
    "StripeAPIException",
    "StripeDecodeError",
    "StripeException",
    "StripeParseError",
    "ListResponse",
    "MaybeDeleted",
    "SearchResult",
]
