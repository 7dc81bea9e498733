"""Parameter structs for the customer endpoints."""

from typing import Annotated

from pydantic import Field

from stripekit.client.request import RequestParams
from stripekit.core.enums import StripeEnum, param_enum
from stripekit.resources.customer.models import CustomerTaxExempt, TaxIdType
from stripekit.resources.payment_method import AllowRedisplay, PaymentMethodType
from stripekit.types.common import RangeQueryTs


class ReconciliationMode(StripeEnum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"
    MERCHANT_DEFAULT = "merchant_default"


class AmountTaxDisplay(StripeEnum):
    EXCLUDE_TAX = "exclude_tax"
    INCLUDE_INCLUSIVE_TAX = "include_inclusive_tax"


class CreateTaxValidateLocation(StripeEnum):
    DEFERRED = "deferred"
    IMMEDIATELY = "immediately"


class UpdateTaxValidateLocation(StripeEnum):
    AUTO = "auto"
    DEFERRED = "deferred"
    IMMEDIATELY = "immediately"


class BankTransferType(StripeEnum):
    EU_BANK_TRANSFER = "eu_bank_transfer"
    GB_BANK_TRANSFER = "gb_bank_transfer"
    JP_BANK_TRANSFER = "jp_bank_transfer"
    MX_BANK_TRANSFER = "mx_bank_transfer"
    US_BANK_TRANSFER = "us_bank_transfer"


class RequestedAddressType(StripeEnum):
    IBAN = "iban"
    SORT_CODE = "sort_code"
    SPEI = "spei"
    ZENGIN = "zengin"


class FundingType(StripeEnum):
    BANK_TRANSFER = "bank_transfer"


class OptionalFieldsAddress(RequestParams):
    city: Annotated[
        str | None, Field(description="City, district, suburb, town, or village.")
    ] = None
    country: Annotated[
        str | None, Field(description="Two-letter country code (ISO 3166-1 alpha-2).")
    ] = None
    line1: str | None = None
    line2: str | None = None
    postal_code: Annotated[str | None, Field(description="ZIP or postal code.")] = None
    state: str | None = None


class CustomFieldParams(RequestParams):
    name: Annotated[
        str, Field(description="The name of the custom field. This may be up to 40 characters.")
    ]
    value: Annotated[
        str,
        Field(description="The value of the custom field. This may be up to 140 characters."),
    ]


class CustomerShipping(RequestParams):
    address: Annotated[
        OptionalFieldsAddress, Field(description="Customer shipping address.")
    ]
    name: Annotated[str, Field(description="Customer name.")]
    phone: Annotated[
        str | None, Field(description="Customer phone (including extension).")
    ] = None


class CashBalanceSettings(RequestParams):
    reconciliation_mode: Annotated[
        param_enum(ReconciliationMode) | None,
        Field(
            description="Controls how funds transferred by the customer are applied to payment intents and invoices."
        ),
    ] = None


class CashBalance(RequestParams):
    settings: CashBalanceSettings | None = None


class InvoiceRenderingOptions(RequestParams):
    amount_tax_display: Annotated[
        param_enum(AmountTaxDisplay) | None,
        Field(
            description="How line-item prices and amounts will be displayed with respect to tax on invoice PDFs."
        ),
    ] = None


class InvoiceSettings(RequestParams):
    custom_fields: list[CustomFieldParams] | None = None
    default_payment_method: str | None = None
    footer: str | None = None
    rendering_options: InvoiceRenderingOptions | None = None


class CreateCustomerTax(RequestParams):
    ip_address: Annotated[
        str | None,
        Field(
            description="A recent IP address of the customer used for tax reporting and tax location inference."
        ),
    ] = None
    validate_location: param_enum(CreateTaxValidateLocation) | None = None


class UpdateCustomerTax(RequestParams):
    ip_address: str | None = None
    validate_location: param_enum(UpdateTaxValidateLocation) | None = None


class TaxIdData(RequestParams):
    type_: Annotated[param_enum(TaxIdType), Field(alias="type")]
    value: str


class EuBankTransfer(RequestParams):
    country: Annotated[
        str,
        Field(
            description="The desired country code of the bank account information: BE, DE, ES, FR, IE, or NL."
        ),
    ]


class BankTransfer(RequestParams):
    eu_bank_transfer: EuBankTransfer | None = None
    requested_address_types: list[param_enum(RequestedAddressType)] | None = None
    type_: Annotated[param_enum(BankTransferType), Field(alias="type")]


class ListCustomerParams(RequestParams):
    created: RangeQueryTs | int | None = None
    email: str | None = None
    ending_before: str | None = None
    expand: list[str] | None = None
    limit: int | None = None
    starting_after: str | None = None
    test_clock: str | None = None


class ExpandParams(RequestParams):
    expand: list[str] | None = None


class BalanceTransactionsCustomerParams(RequestParams):
    ending_before: str | None = None
    expand: list[str] | None = None
    limit: int | None = None
    starting_after: str | None = None


class ListPaymentMethodsCustomerParams(RequestParams):
    allow_redisplay: param_enum(AllowRedisplay) | None = None
    ending_before: str | None = None
    expand: list[str] | None = None
    limit: int | None = None
    starting_after: str | None = None
    type_: Annotated[param_enum(PaymentMethodType) | None, Field(alias="type")] = None


class SearchCustomerParams(RequestParams):
    expand: list[str] | None = None
    limit: int | None = None
    page: str | None = None
    query: str


class _CustomerWriteParams(RequestParams):
    address: OptionalFieldsAddress | None = None
    balance: int | None = None
    cash_balance: CashBalance | None = None
    coupon: str | None = None
    description: str | None = None
    email: str | None = None
    expand: list[str] | None = None
    invoice_prefix: str | None = None
    invoice_settings: InvoiceSettings | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    next_invoice_sequence: int | None = None
    phone: str | None = None
    preferred_locales: list[str] | None = None
    promotion_code: str | None = None
    shipping: CustomerShipping | None = None
    source: str | None = None
    tax_exempt: param_enum(CustomerTaxExempt) | None = None
    validate_: Annotated[bool | None, Field(alias="validate")] = None


class CreateCustomerParams(_CustomerWriteParams):
    payment_method: str | None = None
    tax: CreateCustomerTax | None = None
    tax_id_data: list[TaxIdData] | None = None
    test_clock: str | None = None


class UpdateCustomerParams(_CustomerWriteParams):
    default_source: str | None = None
    tax: UpdateCustomerTax | None = None


class CreateFundingInstructionsCustomerParams(RequestParams):
    bank_transfer: BankTransfer
    currency: str
    expand: list[str] | None = None
    funding_type: param_enum(FundingType)


class FundCashBalanceCustomerParams(RequestParams):
    amount: int
    currency: str
    expand: list[str] | None = None
    reference: str | None = None


__all__ = [
    "ReconciliationMode",
    "AmountTaxDisplay",
    "CreateTaxValidateLocation",
    "UpdateTaxValidateLocation",
    "BankTransferType",
    "RequestedAddressType",
    "FundingType",
    "OptionalFieldsAddress",
    "CustomFieldParams",
    "CustomerShipping",
    "CashBalanceSettings",
    "CashBalance",
    "InvoiceRenderingOptions",
    "InvoiceSettings",
    "CreateCustomerTax",
    "UpdateCustomerTax",
    "TaxIdData",
    "EuBankTransfer",
    "BankTransfer",
    "ListCustomerParams",
    "ExpandParams",
    "BalanceTransactionsCustomerParams",
    "ListPaymentMethodsCustomerParams",
    "SearchCustomerParams",
    "CreateCustomerParams",
    "UpdateCustomerParams",
    "CreateFundingInstructionsCustomerParams",
    "FundCashBalanceCustomerParams",
]
