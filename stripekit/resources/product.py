from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, Field

from stripekit.client.request import RequestParams, StripeRequest
from stripekit.core.enums import StripeMethod
from stripekit.types.common import ListResponse, RangeQueryTs, Timestamp


class Product(BaseModel):
    """Stripe Product object."""

    id: Annotated[str, Field(description="Unique identifier for the product.")]
    object: Literal["product"] = "product"
    name: Annotated[str, Field(description="The product's name, displayed to the customer.")]
    description: str | None = None
    active: Annotated[
        bool, Field(description="Whether the product is currently available for purchase.")
    ] = True
    default_price: Annotated[
        str | dict[str, Any] | None,
        Field(description="The ID of the Price object that is the default price for this product."),
    ] = None
    images: list[str] = []
    metadata: dict[str, str] = {}
    statement_descriptor: str | None = None
    tax_code: str | dict[str, Any] | None = None
    unit_label: str | None = None
    url: str | None = None
    livemode: bool | None = None
    created: Timestamp | None = None
    updated: Timestamp | None = None


class DeletedProduct(BaseModel):
    id: str
    object: Literal["product"] = "product"
    deleted: Literal[True] = True


class ListProductParams(RequestParams):
    active: bool | None = None
    created: RangeQueryTs | int | None = None
    ending_before: str | None = None
    expand: list[str] | None = None
    ids: list[str] | None = None
    limit: int | None = None
    shippable: bool | None = None
    starting_after: str | None = None
    url: str | None = None


class _ProductWriteParams(RequestParams):
    active: bool | None = None
    description: str | None = None
    expand: list[str] | None = None
    images: list[str] | None = None
    metadata: dict[str, str] | None = None
    statement_descriptor: str | None = None
    tax_code: str | None = None
    unit_label: str | None = None
    url: str | None = None


class CreateProductParams(_ProductWriteParams):
    id: str | None = None
    name: str
    shippable: bool | None = None


class UpdateProductParams(_ProductWriteParams):
    default_price: str | None = None
    name: str | None = None


class RetrieveProductParams(RequestParams):
    expand: list[str] | None = None


class RetrieveProduct(StripeRequest[Product]):
    method = StripeMethod.GET
    output = Product
    params_model = RetrieveProductParams

    def __init__(self, product: str):
        super().__init__()
        self.product = product

    def path(self) -> str:
        return f"/products/{self.product}"

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)


class ListProduct(StripeRequest[ListResponse[Product]]):
    """Returns a list of your products, most recently created first."""

    method = StripeMethod.GET
    output = ListResponse[Product]
    params_model = ListProductParams

    def path(self) -> str:
        return "/products"

    def active(self, active: bool) -> Self:
        return self._set(active=active)

    def created(self, created: RangeQueryTs | int) -> Self:
        return self._set(created=created)

    def ending_before(self, ending_before: str) -> Self:
        return self._set(ending_before=ending_before)

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)

    def ids(self, ids: list[str]) -> Self:
        return self._set(ids=ids)

    def limit(self, limit: int) -> Self:
        return self._set(limit=limit)

    def shippable(self, shippable: bool) -> Self:
        return self._set(shippable=shippable)

    def starting_after(self, starting_after: str) -> Self:
        return self._set(starting_after=starting_after)

    def url(self, url: str) -> Self:
        return self._set(url=url)


class _ProductWriteMixin:
    def active(self, active: bool) -> Self:
        return self._set(active=active)  # type: ignore[attr-defined]

    def description(self, description: str | None) -> Self:
        return self._set(description=description)  # type: ignore[attr-defined]

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)  # type: ignore[attr-defined]

    def images(self, images: list[str]) -> Self:
        return self._set(images=images)  # type: ignore[attr-defined]

    def metadata(self, metadata: dict[str, str] | None) -> Self:
        return self._set(metadata=metadata)  # type: ignore[attr-defined]

    def statement_descriptor(self, statement_descriptor: str) -> Self:
        """Shown on the customer's card statement; at most 22 characters."""
        return self._set(statement_descriptor=statement_descriptor)  # type: ignore[attr-defined]

    def tax_code(self, tax_code: str) -> Self:
        return self._set(tax_code=tax_code)  # type: ignore[attr-defined]

    def unit_label(self, unit_label: str | None) -> Self:
        return self._set(unit_label=unit_label)  # type: ignore[attr-defined]

    def url(self, url: str | None) -> Self:
        return self._set(url=url)  # type: ignore[attr-defined]


class CreateProduct(_ProductWriteMixin, StripeRequest[Product]):
    """Creates a new product object."""

    method = StripeMethod.POST
    output = Product
    params_model = CreateProductParams

    def __init__(self, name: str):
        super().__init__(name=name)

    def path(self) -> str:
        return "/products"

    def id(self, id: str) -> Self:
        """An identifier for the product; generated by Stripe when omitted."""
        return self._set(id=id)

    def shippable(self, shippable: bool) -> Self:
        return self._set(shippable=shippable)


class UpdateProduct(_ProductWriteMixin, StripeRequest[Product]):
    method = StripeMethod.POST
    output = Product
    params_model = UpdateProductParams

    def __init__(self, product: str):
        super().__init__()
        self.product = product

    def path(self) -> str:
        return f"/products/{self.product}"

    def default_price(self, default_price: str) -> Self:
        return self._set(default_price=default_price)

    def name(self, name: str) -> Self:
        return self._set(name=name)


class DeleteProduct(StripeRequest[DeletedProduct]):
    """Delete a product. Only possible when the product has no prices."""

    method = StripeMethod.DELETE
    output = DeletedProduct

    def __init__(self, product: str):
        super().__init__()
        self.product = product

    def path(self) -> str:
        return f"/products/{self.product}"


__all__ = [
    "Product",
    "DeletedProduct",
    "ListProductParams",
    "CreateProductParams",
    "UpdateProductParams",
    "RetrieveProductParams",
    "RetrieveProduct",
    "ListProduct",
    "CreateProduct",
    "UpdateProduct",
    "DeleteProduct",
]
