from decimal import Decimal
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, Field

from stripekit.client.request import RequestParams, StripeRequest
from stripekit.core.enums import LenientStripeEnum, StripeMethod, param_enum
from stripekit.resources.product import Product
from stripekit.types.common import ListResponse, RangeQueryTs, Timestamp


class RecurringInterval(LenientStripeEnum):
    DAY = "day"
    MONTH = "month"
    WEEK = "week"
    YEAR = "year"
    UNKNOWN = "unknown"


class UsageType(LenientStripeEnum):
    LICENSED = "licensed"
    METERED = "metered"
    UNKNOWN = "unknown"


class TaxBehavior(LenientStripeEnum):
    EXCLUSIVE = "exclusive"
    INCLUSIVE = "inclusive"
    UNSPECIFIED = "unspecified"
    UNKNOWN = "unknown"


class PriceType(LenientStripeEnum):
    ONE_TIME = "one_time"
    RECURRING = "recurring"
    UNKNOWN = "unknown"


class BillingScheme(LenientStripeEnum):
    PER_UNIT = "per_unit"
    TIERED = "tiered"
    UNKNOWN = "unknown"


class TiersMode(LenientStripeEnum):
    GRADUATED = "graduated"
    VOLUME = "volume"
    UNKNOWN = "unknown"


class TransformQuantityRound(LenientStripeEnum):
    DOWN = "down"
    UP = "up"
    UNKNOWN = "unknown"


class Recurring(BaseModel):
    interval: Annotated[
        RecurringInterval,
        Field(description="The frequency at which a subscription is billed."),
    ]
    interval_count: Annotated[
        int,
        Field(description="The number of intervals between subscription billings."),
    ] = 1
    meter: str | None = None
    usage_type: UsageType = UsageType.LICENSED


class CustomUnitAmount(BaseModel):
    maximum: int | None = None
    minimum: int | None = None
    preset: int | None = None


class Tier(BaseModel):
    flat_amount: int | None = None
    flat_amount_decimal: Decimal | None = None
    unit_amount: int | None = None
    unit_amount_decimal: Decimal | None = None
    up_to: Annotated[
        int | None,
        Field(description="Upper bound of this tier; None for the last, unbounded tier."),
    ] = None


class TransformQuantity(BaseModel):
    divide_by: int
    round: TransformQuantityRound


class Price(BaseModel):
    """Stripe Price object."""

    id: str
    object: Literal["price"] = "price"
    active: bool
    billing_scheme: BillingScheme | None = None
    created: Timestamp | None = None
    currency: Annotated[
        str, Field(description="Three-letter ISO currency code, in lowercase.")
    ]
    custom_unit_amount: CustomUnitAmount | None = None
    livemode: bool | None = None
    lookup_key: str | None = None
    metadata: dict[str, str] = {}
    nickname: str | None = None
    product: str | Product
    recurring: Recurring | None = None
    tax_behavior: TaxBehavior | None = None
    tiers: list[Tier] | None = None
    tiers_mode: TiersMode | None = None
    transform_quantity: TransformQuantity | None = None
    type: PriceType
    unit_amount: Annotated[
        int | None,
        Field(description="The unit amount in cents to be charged."),
    ] = None
    unit_amount_decimal: Decimal | None = None


class RecurringParams(RequestParams):
    interval: param_enum(RecurringInterval)
    interval_count: int | None = None
    meter: str | None = None
    usage_type: param_enum(UsageType) | None = None


class ListRecurringParams(RequestParams):
    interval: param_enum(RecurringInterval) | None = None
    meter: str | None = None
    usage_type: param_enum(UsageType) | None = None


class CustomUnitAmountParams(RequestParams):
    enabled: bool
    maximum: int | None = None
    minimum: int | None = None
    preset: int | None = None


class TierParams(RequestParams):
    flat_amount: int | None = None
    flat_amount_decimal: Decimal | None = None
    unit_amount: int | None = None
    unit_amount_decimal: Decimal | None = None
    up_to: int | Literal["inf"]


class TransformQuantityParams(RequestParams):
    divide_by: int
    round: param_enum(TransformQuantityRound)


class ProductDataParams(RequestParams):
    name: str
    active: bool | None = None
    id: str | None = None
    metadata: dict[str, str] | None = None
    statement_descriptor: str | None = None
    tax_code: str | None = None
    unit_label: str | None = None


class ListPriceParams(RequestParams):
    active: bool | None = None
    created: RangeQueryTs | int | None = None
    currency: str | None = None
    ending_before: str | None = None
    expand: list[str] | None = None
    limit: int | None = None
    lookup_keys: list[str] | None = None
    product: str | None = None
    recurring: ListRecurringParams | None = None
    starting_after: str | None = None
    type_: Annotated[param_enum(PriceType) | None, Field(alias="type")] = None


class CreatePriceParams(RequestParams):
    active: bool | None = None
    billing_scheme: param_enum(BillingScheme) | None = None
    currency: str
    custom_unit_amount: CustomUnitAmountParams | None = None
    expand: list[str] | None = None
    lookup_key: str | None = None
    metadata: dict[str, str] | None = None
    nickname: str | None = None
    product: str | None = None
    product_data: ProductDataParams | None = None
    recurring: RecurringParams | None = None
    tax_behavior: param_enum(TaxBehavior) | None = None
    tiers: list[TierParams] | None = None
    tiers_mode: param_enum(TiersMode) | None = None
    transfer_lookup_key: bool | None = None
    transform_quantity: TransformQuantityParams | None = None
    unit_amount: int | None = None
    unit_amount_decimal: Decimal | None = None


class UpdatePriceParams(RequestParams):
    active: bool | None = None
    expand: list[str] | None = None
    lookup_key: str | None = None
    metadata: dict[str, str] | None = None
    nickname: str | None = None
    tax_behavior: param_enum(TaxBehavior) | None = None
    transfer_lookup_key: bool | None = None


class RetrievePriceParams(RequestParams):
    expand: list[str] | None = None


class RetrievePrice(StripeRequest[Price]):
    method = StripeMethod.GET
    output = Price
    params_model = RetrievePriceParams

    def __init__(self, price: str):
        super().__init__()
        self.price = price

    def path(self) -> str:
        return f"/prices/{self.price}"

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)


class ListPrice(StripeRequest[ListResponse[Price]]):
    """Returns a list of your active prices, excluding inline prices, unless ``active`` is set."""

    method = StripeMethod.GET
    output = ListResponse[Price]
    params_model = ListPriceParams

    def path(self) -> str:
        return "/prices"

    def active(self, active: bool) -> Self:
        return self._set(active=active)

    def created(self, created: RangeQueryTs | int) -> Self:
        return self._set(created=created)

    def currency(self, currency: str) -> Self:
        return self._set(currency=currency)

    def ending_before(self, ending_before: str) -> Self:
        return self._set(ending_before=ending_before)

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)

    def limit(self, limit: int) -> Self:
        return self._set(limit=limit)

    def lookup_keys(self, lookup_keys: list[str]) -> Self:
        return self._set(lookup_keys=lookup_keys)

    def product(self, product: str) -> Self:
        return self._set(product=product)

    def recurring(self, recurring: ListRecurringParams) -> Self:
        return self._set(recurring=recurring)

    def starting_after(self, starting_after: str) -> Self:
        return self._set(starting_after=starting_after)

    def type_(self, type_: PriceType | str) -> Self:
        return self._set(type_=type_)


class CreatePrice(StripeRequest[Price]):
    """
    Creates a new price for an existing product, or for a product described
    inline through ``product_data``.
    """

    method = StripeMethod.POST
    output = Price
    params_model = CreatePriceParams

    def __init__(self, currency: str):
        super().__init__(currency=currency)

    def path(self) -> str:
        return "/prices"

    def active(self, active: bool) -> Self:
        return self._set(active=active)

    def billing_scheme(self, billing_scheme: BillingScheme | str) -> Self:
        return self._set(billing_scheme=billing_scheme)

    def custom_unit_amount(self, custom_unit_amount: CustomUnitAmountParams) -> Self:
        return self._set(custom_unit_amount=custom_unit_amount)

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)

    def lookup_key(self, lookup_key: str) -> Self:
        return self._set(lookup_key=lookup_key)

    def metadata(self, metadata: dict[str, str]) -> Self:
        return self._set(metadata=metadata)

    def nickname(self, nickname: str) -> Self:
        return self._set(nickname=nickname)

    def product(self, product: str) -> Self:
        return self._set(product=product)

    def product_data(self, product_data: ProductDataParams) -> Self:
        return self._set(product_data=product_data)

    def recurring(self, recurring: RecurringParams) -> Self:
        return self._set(recurring=recurring)

    def tax_behavior(self, tax_behavior: TaxBehavior | str) -> Self:
        return self._set(tax_behavior=tax_behavior)

    def tiers(self, tiers: list[TierParams]) -> Self:
        return self._set(tiers=tiers)

    def tiers_mode(self, tiers_mode: TiersMode | str) -> Self:
        return self._set(tiers_mode=tiers_mode)

    def transfer_lookup_key(self, transfer_lookup_key: bool) -> Self:
        return self._set(transfer_lookup_key=transfer_lookup_key)

    def transform_quantity(self, transform_quantity: TransformQuantityParams) -> Self:
        return self._set(transform_quantity=transform_quantity)

    def unit_amount(self, unit_amount: int) -> Self:
        return self._set(unit_amount=unit_amount)

    def unit_amount_decimal(self, unit_amount_decimal: Decimal | str) -> Self:
        return self._set(unit_amount_decimal=unit_amount_decimal)


class UpdatePrice(StripeRequest[Price]):
    """Updates the specified price. Amounts and currency cannot change once created."""

    method = StripeMethod.POST
    output = Price
    params_model = UpdatePriceParams

    def __init__(self, price: str):
        super().__init__()
        self.price = price

    def path(self) -> str:
        return f"/prices/{self.price}"

    def active(self, active: bool) -> Self:
        return self._set(active=active)

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)

    def lookup_key(self, lookup_key: str | None) -> Self:
        return self._set(lookup_key=lookup_key)

    def metadata(self, metadata: dict[str, str] | None) -> Self:
        return self._set(metadata=metadata)

    def nickname(self, nickname: str | None) -> Self:
        return self._set(nickname=nickname)

    def tax_behavior(self, tax_behavior: TaxBehavior | str) -> Self:
        return self._set(tax_behavior=tax_behavior)

    def transfer_lookup_key(self, transfer_lookup_key: bool) -> Self:
        return self._set(transfer_lookup_key=transfer_lookup_key)


__all__ = [
    "RecurringInterval",
    "UsageType",
    "TaxBehavior",
    "PriceType",
    "BillingScheme",
    "TiersMode",
    "TransformQuantityRound",
    "Recurring",
    "CustomUnitAmount",
    "Tier",
    "TransformQuantity",
    "Price",
    "RecurringParams",
    "ListRecurringParams",
    "CustomUnitAmountParams",
    "TierParams",
    "TransformQuantityParams",
    "ProductDataParams",
    "ListPriceParams",
    "CreatePriceParams",
    "UpdatePriceParams",
    "RetrievePriceParams",
    "RetrievePrice",
    "ListPrice",
    "CreatePrice",
    "UpdatePrice",
]
