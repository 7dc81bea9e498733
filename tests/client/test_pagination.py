"""
Tests for ListPaginator.
"""

import pytest

from stripekit.client.pagination import ListPaginator
from stripekit.resources.customer import ListCustomer, SearchCustomer


def customer(id_: str) -> dict:
    return {"id": id_, "object": "customer"}


def search_body(items, has_more, next_page=None):
    return {
        "object": "search_result",
        "data": items,
        "has_more": has_more,
        "next_page": next_page,
        "url": "/v1/customers/search",
        "total_count": 3,
    }


class TestForwardPagination:

    @pytest.mark.asyncio
    async def test_walks_all_pages(self, recording_transport, make_list):
        transport = recording_transport(
            make_list([customer("cus_1"), customer("cus_2")], has_more=True),
            make_list([customer("cus_3")], has_more=False),
        )

        ids = [c.id async for c in ListPaginator(ListCustomer().limit(2)).items(transport)]

        assert ids == ["cus_1", "cus_2", "cus_3"]
        assert [call["params"] for call in transport.calls] == [
            {"limit": "2"},
            {"limit": "2", "starting_after": "cus_2"},
        ]

    @pytest.mark.asyncio
    async def test_original_request_is_not_mutated(self, recording_transport, make_list):
        request = ListCustomer().limit(2)
        transport = recording_transport(
            make_list([customer("cus_1")], has_more=True),
            make_list([], has_more=False),
        )

        pages = [page async for page in ListPaginator(request).pages(transport)]

        assert len(pages) == 2
        assert request.params() == {"limit": 2}

    @pytest.mark.asyncio
    async def test_single_page(self, recording_transport, make_list):
        transport = recording_transport(make_list([customer("cus_1")], has_more=False))

        pages = [page async for page in ListPaginator(ListCustomer()).pages(transport)]

        assert len(pages) == 1
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_stripe_account_is_forwarded(self, recording_transport, make_list):
        transport = recording_transport(make_list([], has_more=False))

        async for _ in ListPaginator(ListCustomer()).pages(transport, stripe_account="acct_1"):
            pass

        assert transport.calls[0]["stripe_account"] == "acct_1"


    @pytest.mark.asyncio
    async def test_both_cursors_set_walks_forward_with_one_cursor(self, recording_transport, make_list):
        transport = recording_transport(
            make_list([customer("cus_b"), customer("cus_c")], has_more=True),
            make_list([customer("cus_d")], has_more=False),
        )
        request = ListCustomer().starting_after("cus_a").ending_before("cus_z")

        ids = [c.id async for c in ListPaginator(request).items(transport)]

        assert ids == ["cus_b", "cus_c", "cus_d"]
        assert transport.calls[0]["params"] == {"ending_before": "cus_z", "starting_after": "cus_a"}
        assert transport.calls[1]["params"] == {"starting_after": "cus_c"}
        assert request.params() == {"ending_before": "cus_z", "starting_after": "cus_a"}


class TestBackwardPagination:

    @pytest.mark.asyncio
    async def test_uses_ending_before(self, recording_transport, make_list):
        transport = recording_transport(
            make_list([customer("cus_8"), customer("cus_7")], has_more=True),
            make_list([customer("cus_6")], has_more=False),
        )

        request = ListCustomer().ending_before("cus_9")
        ids = [c.id async for c in ListPaginator(request).items(transport)]

        assert ids == ["cus_8", "cus_7", "cus_6"]
        assert transport.calls[1]["params"] == {"ending_before": "cus_8"}


class TestSearchPagination:

    @pytest.mark.asyncio
    async def test_advances_with_page(self, recording_transport):
        transport = recording_transport(
            search_body([customer("cus_1")], has_more=True, next_page="page_2"),
            search_body([customer("cus_2")], has_more=False),
        )

        ids = [c.id async for c in ListPaginator(SearchCustomer("email:'a@b.com'")).items(transport)]

        assert ids == ["cus_1", "cus_2"]
        assert transport.calls[1]["params"] == {"query": "email:'a@b.com'", "page": "page_2"}

    @pytest.mark.asyncio
    async def test_stops_without_next_page(self, recording_transport):
        transport = recording_transport(search_body([customer("cus_1")], has_more=True))

        pages = [page async for page in ListPaginator(SearchCustomer("name:'x'")).pages(transport)]

        assert len(pages) == 1


class TestBlockingPagination:

    def test_items_blocking(self, recording_blocking_transport, make_list):
        transport = recording_blocking_transport(
            make_list([customer("cus_1")], has_more=True),
            make_list([customer("cus_2")], has_more=False),
        )

        ids = [c.id for c in ListPaginator(ListCustomer()).items_blocking(transport)]

        assert ids == ["cus_1", "cus_2"]
        assert transport.calls[1]["params"] == {"starting_after": "cus_1"}

    def test_pages_blocking(self, recording_blocking_transport, make_list):
        transport = recording_blocking_transport(make_list([], has_more=False))

        pages = list(ListPaginator(ListCustomer()).pages_blocking(transport))

        assert pages[0].has_more is False
