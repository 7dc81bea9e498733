import copy
from collections.abc import AsyncIterator, Iterator
from typing import Any, Generic, TypeVar

from stripekit.client.request import StripeRequest
from stripekit.client.transport import StripeBlockingTransport, StripeTransport
from stripekit.core.config import stripe_logger
from stripekit.types.common import ListResponse, SearchResult

T = TypeVar("T")

Page = ListResponse[Any] | SearchResult[Any]


class ListPaginator(Generic[T]):
    """
    Walks every page of a list or search endpoint.

    Each page is fetched by a copy of the original builder with the cursor
    taken from the previous page: ``starting_after`` by default, ``ending_before``
    when the original request set only ``ending_before`` (walking backwards),
    and ``page`` for search endpoints. The original builder is never mutated.
    Retries are left to the transport.

    Usage:
        async for customer in ListPaginator(ListCustomer().limit(100)).items(client):
            ...
    """

    def __init__(self, request: StripeRequest[Any]):
        self._request = request
        self._search = request.has_param("page") and not request.has_param("starting_after")
        self._backward = (
            not self._search
            and request.is_set("ending_before")
            and not request.is_set("starting_after")
        )

    def _next_request(self, page: Page) -> StripeRequest[Any] | None:
        if not page.has_more:
            return None

        if isinstance(page, SearchResult):
            if not page.next_page:
                return None
            return copy.deepcopy(self._request)._set(page=page.next_page)

        if self._backward:
            cursor = page.previous_cursor
            field, opposite = "ending_before", "starting_after"
        else:
            cursor = page.next_cursor
            field, opposite = "starting_after", "ending_before"
        if cursor is None:
            return None
        stripe_logger.debug(f"Paginating {type(self._request).__name__}: {field}={cursor}")
        # Stripe rejects a request carrying both cursors
        return copy.deepcopy(self._request)._unset(opposite)._set(**{field: cursor})

    async def pages(
        self,
        client: StripeTransport,
        *,
        stripe_account: str | None = None,
    ) -> AsyncIterator[Page]:
        request: StripeRequest[Any] | None = self._request
        while request is not None:
            page = await request.send(client, stripe_account=stripe_account)
            yield page
            request = self._next_request(page)

    async def items(
        self,
        client: StripeTransport,
        *,
        stripe_account: str | None = None,
    ) -> AsyncIterator[T]:
        async for page in self.pages(client, stripe_account=stripe_account):
            for item in page.data:
                yield item

    def pages_blocking(
        self,
        client: StripeBlockingTransport,
        *,
        stripe_account: str | None = None,
    ) -> Iterator[Page]:
        request: StripeRequest[Any] | None = self._request
        while request is not None:
            page = request.send_blocking(client, stripe_account=stripe_account)
            yield page
            request = self._next_request(page)

    def items_blocking(
        self,
        client: StripeBlockingTransport,
        *,
        stripe_account: str | None = None,
    ) -> Iterator[T]:
        for page in self.pages_blocking(client, stripe_account=stripe_account):
            yield from page.data


__all__ = ["ListPaginator"]
