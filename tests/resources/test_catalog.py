"""
Tests for product and price endpoints.
"""

from decimal import Decimal

import pytest

from stripekit.core.enums import StripeMethod
from stripekit.core.exceptions import StripeParseError
from stripekit.resources.price import (
    BillingScheme,
    CreatePrice,
    ListPrice,
    ListRecurringParams,
    Price,
    PriceType,
    ProductDataParams,
    RecurringInterval,
    RecurringParams,
    RetrievePrice,
    TaxBehavior,
    TierParams,
    TiersMode,
    UpdatePrice,
    UsageType,
)
from stripekit.resources.product import (
    CreateProduct,
    DeletedProduct,
    DeleteProduct,
    ListProduct,
    Product,
    RetrieveProduct,
    UpdateProduct,
)


@pytest.fixture
def price_payload():
    return {
        "id": "price_1",
        "object": "price",
        "active": True,
        "billing_scheme": "per_unit",
        "created": 1700000000,
        "currency": "usd",
        "livemode": False,
        "metadata": {},
        "product": "prod_1",
        "recurring": {"interval": "month", "interval_count": 1, "usage_type": "licensed"},
        "tax_behavior": "unspecified",
        "type": "recurring",
        "unit_amount": 2000,
        "unit_amount_decimal": "2000",
    }


class TestProductRequests:

    @pytest.mark.parametrize(
        "request_,method,path",
        [
            (RetrieveProduct("prod_1"), StripeMethod.GET, "/products/prod_1"),
            (ListProduct(), StripeMethod.GET, "/products"),
            (CreateProduct("Pro plan"), StripeMethod.POST, "/products"),
            (UpdateProduct("prod_1"), StripeMethod.POST, "/products/prod_1"),
            (DeleteProduct("prod_1"), StripeMethod.DELETE, "/products/prod_1"),
        ],
    )
    def test_build(self, request_, method, path):
        built = request_.build()

        assert built.method == method
        assert built.path == path

    def test_create(self):
        request = CreateProduct("Pro plan").id("pro").images(["https://img/1.png"]).shippable(False)

        assert request.build().encode() == {
            "id": "pro",
            "images[0]": "https://img/1.png",
            "name": "Pro plan",
            "shippable": "false",
        }

    def test_update_clears_unit_label(self):
        request = UpdateProduct("prod_1").unit_label(None).name("Team plan")

        assert request.build().encode() == {"name": "Team plan", "unit_label": ""}

    def test_list_filters(self):
        request = ListProduct().active(True).ids(["prod_1", "prod_2"]).limit(3)

        assert request.build().encode() == {
            "active": "true",
            "ids[0]": "prod_1",
            "ids[1]": "prod_2",
            "limit": "3",
        }

    def test_delete_takes_no_parameters(self):
        assert DeleteProduct("prod_1").params() == {}

        with pytest.raises(TypeError):
            DeleteProduct("prod_1")._set(expand=["x"])


class TestProductDecoding:

    def test_product(self):
        product = RetrieveProduct.decode(
            {"id": "prod_1", "object": "product", "name": "Pro", "active": True, "created": 1700000000}
        )

        assert isinstance(product, Product)
        assert product.name == "Pro"
        assert product.metadata == {}

    def test_deleted_product(self):
        deleted = DeleteProduct.decode(b'{"id": "prod_1", "object": "product", "deleted": true}')

        assert deleted == DeletedProduct(id="prod_1")


class TestPriceRequests:

    @pytest.mark.parametrize(
        "request_,method,path",
        [
            (RetrievePrice("price_1"), StripeMethod.GET, "/prices/price_1"),
            (ListPrice(), StripeMethod.GET, "/prices"),
            (CreatePrice("usd"), StripeMethod.POST, "/prices"),
            (UpdatePrice("price_1"), StripeMethod.POST, "/prices/price_1"),
        ],
    )
    def test_build(self, request_, method, path):
        built = request_.build()

        assert built.method == method
        assert built.path == path

    def test_create_recurring(self):
        request = (
            CreatePrice("usd")
            .product("prod_1")
            .unit_amount(2000)
            .recurring(RecurringParams(interval="month", usage_type=UsageType.LICENSED))
            .tax_behavior("exclusive")
        )

        assert request.build().encode() == {
            "currency": "usd",
            "product": "prod_1",
            "recurring[interval]": "month",
            "recurring[usage_type]": "licensed",
            "tax_behavior": "exclusive",
            "unit_amount": "2000",
        }

    def test_create_tiered_with_inline_product(self):
        request = (
            CreatePrice("eur")
            .product_data(ProductDataParams(name="Seats"))
            .billing_scheme(BillingScheme.TIERED)
            .tiers_mode(TiersMode.GRADUATED)
            .tiers(
                [
                    TierParams(up_to=10, unit_amount=500),
                    TierParams(up_to="inf", unit_amount_decimal=Decimal("412.5")),
                ]
            )
        )

        assert request.build().encode() == {
            "billing_scheme": "tiered",
            "currency": "eur",
            "product_data[name]": "Seats",
            "tiers[0][unit_amount]": "500",
            "tiers[0][up_to]": "10",
            "tiers[1][unit_amount_decimal]": "412.5",
            "tiers[1][up_to]": "inf",
            "tiers_mode": "graduated",
        }

    def test_strict_enums(self):
        with pytest.raises(StripeParseError):
            RecurringParams(interval="fortnight")

        with pytest.raises(StripeParseError):
            CreatePrice("usd").tax_behavior(TaxBehavior.UNKNOWN)

    def test_list_filters(self):
        request = (
            ListPrice()
            .type_(PriceType.RECURRING)
            .recurring(ListRecurringParams(interval=RecurringInterval.YEAR))
            .lookup_keys(["pro_yearly"])
        )

        assert request.build().encode() == {
            "lookup_keys[0]": "pro_yearly",
            "recurring[interval]": "year",
            "type": "recurring",
        }

    def test_update(self):
        assert UpdatePrice("price_1").nickname(None).active(False).params() == {
            "active": False,
            "nickname": None,
        }


class TestPriceDecoding:

    def test_price(self, price_payload):
        price = RetrievePrice.decode(price_payload)

        assert isinstance(price, Price)
        assert price.type is PriceType.RECURRING
        assert price.recurring.interval is RecurringInterval.MONTH
        assert price.unit_amount_decimal == Decimal("2000")

    def test_expanded_product(self, price_payload):
        price_payload["product"] = {"id": "prod_1", "object": "product", "name": "Pro"}

        price = RetrievePrice.decode(price_payload)

        assert isinstance(price.product, Product)

    def test_unknown_values_are_tolerated(self, price_payload):
        price_payload["recurring"]["interval"] = "quarter"
        price_payload["tax_behavior"] = "automatic"

        price = RetrievePrice.decode(price_payload)

        assert price.recurring.interval is RecurringInterval.UNKNOWN
        assert price.tax_behavior is TaxBehavior.UNKNOWN

    def test_list(self, price_payload, make_list):
        page = ListPrice.decode(make_list([price_payload], url="/v1/prices"))

        assert page.data[0].id == "price_1"
