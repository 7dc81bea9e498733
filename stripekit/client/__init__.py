from stripekit.client.encoding import encode_params, flatten_to_payload
from stripekit.client.pagination import ListPaginator
from stripekit.client.request import RequestBuilder, RequestParams, StripeRequest
from stripekit.client.transport import (
    StripeBlockingClient,
    StripeBlockingTransport,
    StripeClient,
    StripeTransport,
)

__all__ = [
    "encode_params",
    "flatten_to_payload",
    "ListPaginator",
    "RequestBuilder",
    "RequestParams",
    "StripeRequest",
    "StripeClient",
    "StripeBlockingClient",
    "StripeTransport",
    "StripeBlockingTransport",
]
