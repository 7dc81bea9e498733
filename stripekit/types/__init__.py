from stripekit.types.common import (
    ListResponse,
    RangeQueryTs,
    SearchResult,
    Timestamp,
    coerce_timestamp_to_datetime,
)
from stripekit.types.polymorphic import (
    MaybeDeleted,
    decode_response,
    deleted_discriminator,
    describe_type,
)

__all__ = [
    "ListResponse",
    "SearchResult",
    "RangeQueryTs",
    "Timestamp",
    "coerce_timestamp_to_datetime",
    "MaybeDeleted",
    "decode_response",
    "deleted_discriminator",
    "describe_type",
]
