from datetime import datetime, timezone
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, Field

T = TypeVar("T")


def coerce_timestamp_to_datetime(ts: Any) -> Any:
    """Converts a Unix timestamp (in seconds) to a timezone-aware UTC datetime."""
    if isinstance(ts, bool):
        return ts
    if isinstance(ts, (int, float)):
        return datetime.fromtimestamp(ts, tz=timezone.utc)
    return ts


Timestamp = Annotated[datetime, BeforeValidator(coerce_timestamp_to_datetime)]


class RangeQueryTs(BaseModel):
    """Timestamp range filter used by list endpoints (``created[gte]=...``)."""

    gt: Annotated[
        int | None, Field(description="Minimum value to filter by (exclusive).")
    ] = None
    gte: Annotated[
        int | None, Field(description="Minimum value to filter by (inclusive).")
    ] = None
    lt: Annotated[
        int | None, Field(description="Maximum value to filter by (exclusive).")
    ] = None
    lte: Annotated[
        int | None, Field(description="Maximum value to filter by (inclusive).")
    ] = None


class ListResponse(BaseModel, Generic[T]):
    """One page of a cursor-paginated list endpoint."""

    object: Annotated[
        Literal["list"],
        Field(description="String representing the object's type. Always 'list'."),
    ] = "list"
    data: Annotated[list[T], Field(description="The items on this page.")]
    has_more: Annotated[
        bool,
        Field(
            description="True if this list has another page of items after this one that can be fetched."
        ),
    ]
    url: Annotated[str, Field(description="The URL where this list can be accessed.")]

    @property
    def next_cursor(self) -> str | None:
        """Id to pass as ``starting_after`` for the next page, or None on the last page."""
        if not self.has_more or not self.data:
            return None
        return _item_id(self.data[-1])

    @property
    def previous_cursor(self) -> str | None:
        """Id to pass as ``ending_before`` to walk backwards from this page."""
        if not self.data:
            return None
        return _item_id(self.data[0])


class SearchResult(BaseModel, Generic[T]):
    """One page of a search endpoint. Search pages advance with ``next_page``."""

    object: Annotated[
        Literal["search_result"],
        Field(
            description="String representing the object's type. Always 'search_result'."
        ),
    ] = "search_result"
    data: Annotated[list[T], Field(description="The items on this page.")]
    has_more: Annotated[
        bool, Field(description="True if another page of results is available.")
    ]
    next_page: Annotated[
        str | None,
        Field(description="Cursor to pass as ``page`` to fetch the next page."),
    ] = None
    url: Annotated[str, Field(description="The URL where this search can be accessed.")]
    total_count: Annotated[
        int | None,
        Field(
            description="The total number of objects that match the query, only accurate up to 10,000."
        ),
    ] = None


def _item_id(item: Any) -> str | None:
    if isinstance(item, dict):
        return item.get("id")
    return getattr(item, "id", None)


__all__ = [
    "Timestamp",
    "coerce_timestamp_to_datetime",
    "RangeQueryTs",
    "ListResponse",
    "SearchResult",
]
