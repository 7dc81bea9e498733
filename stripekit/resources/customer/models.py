from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from stripekit.core.enums import LenientStripeEnum
from stripekit.types.common import ListResponse, Timestamp


class CustomerTaxExempt(LenientStripeEnum):
    """The customer's tax exemption."""

    EXEMPT = "exempt"
    NONE = "none"
    REVERSE = "reverse"
    UNKNOWN = "unknown"


class TaxIdType(LenientStripeEnum):
    """Type of a tax ID, e.g. ``eu_vat`` or ``us_ein``."""

    AD_NRT = "ad_nrt"
    AE_TRN = "ae_trn"
    AR_CUIT = "ar_cuit"
    AU_ABN = "au_abn"
    AU_ARN = "au_arn"
    BG_UIC = "bg_uic"
    BH_VAT = "bh_vat"
    BO_TIN = "bo_tin"
    BR_CNPJ = "br_cnpj"
    BR_CPF = "br_cpf"
    CA_BN = "ca_bn"
    CA_GST_HST = "ca_gst_hst"
    CA_PST_BC = "ca_pst_bc"
    CA_PST_MB = "ca_pst_mb"
    CA_PST_SK = "ca_pst_sk"
    CA_QST = "ca_qst"
    CH_VAT = "ch_vat"
    CL_TIN = "cl_tin"
    CN_TIN = "cn_tin"
    CO_NIT = "co_nit"
    CR_TIN = "cr_tin"
    DO_RCN = "do_rcn"
    EC_RUC = "ec_ruc"
    EG_TIN = "eg_tin"
    ES_CIF = "es_cif"
    EU_OSS_VAT = "eu_oss_vat"
    EU_VAT = "eu_vat"
    GB_VAT = "gb_vat"
    GE_VAT = "ge_vat"
    HK_BR = "hk_br"
    HU_TIN = "hu_tin"
    ID_NPWP = "id_npwp"
    IL_VAT = "il_vat"
    IN_GST = "in_gst"
    IS_VAT = "is_vat"
    JP_CN = "jp_cn"
    JP_RN = "jp_rn"
    JP_TRN = "jp_trn"
    KE_PIN = "ke_pin"
    KR_BRN = "kr_brn"
    KZ_BIN = "kz_bin"
    LI_UID = "li_uid"
    MX_RFC = "mx_rfc"
    MY_FRP = "my_frp"
    MY_ITN = "my_itn"
    MY_SST = "my_sst"
    NG_TIN = "ng_tin"
    NO_VAT = "no_vat"
    NO_VOEC = "no_voec"
    NZ_GST = "nz_gst"
    OM_VAT = "om_vat"
    PE_RUC = "pe_ruc"
    PH_TIN = "ph_tin"
    RO_TIN = "ro_tin"
    RS_PIB = "rs_pib"
    RU_INN = "ru_inn"
    RU_KPP = "ru_kpp"
    SA_VAT = "sa_vat"
    SG_GST = "sg_gst"
    SG_UEN = "sg_uen"
    SI_TIN = "si_tin"
    SV_NIT = "sv_nit"
    TH_VAT = "th_vat"
    TR_TIN = "tr_tin"
    TW_VAT = "tw_vat"
    UA_VAT = "ua_vat"
    US_EIN = "us_ein"
    UY_RUC = "uy_ruc"
    VE_RIF = "ve_rif"
    VN_TIN = "vn_tin"
    ZA_VAT = "za_vat"
    UNKNOWN = "unknown"


class CustomerBalanceTransactionType(LenientStripeEnum):
    ADJUSTMENT = "adjustment"
    APPLIED_TO_INVOICE = "applied_to_invoice"
    CREDIT_NOTE = "credit_note"
    INITIAL = "initial"
    INVOICE_OVERPAID = "invoice_overpaid"
    INVOICE_TOO_LARGE = "invoice_too_large"
    INVOICE_TOO_SMALL = "invoice_too_small"
    MIGRATION = "migration"
    UNAPPLIED_FROM_INVOICE = "unapplied_from_invoice"
    UNSPENT_RECEIVER_CREDIT = "unspent_receiver_credit"
    UNKNOWN = "unknown"


class CustomerCashBalanceTransactionType(LenientStripeEnum):
    ADJUSTED_FOR_OVERDRAFT = "adjusted_for_overdraft"
    APPLIED_TO_PAYMENT = "applied_to_payment"
    FUNDED = "funded"
    FUNDING_REVERSED = "funding_reversed"
    REFUNDED_FROM_PAYMENT = "refunded_from_payment"
    RETURN_CANCELED = "return_canceled"
    RETURN_INITIATED = "return_initiated"
    TRANSFERRED_TO_BALANCE = "transferred_to_balance"
    UNAPPLIED_FROM_PAYMENT = "unapplied_from_payment"
    UNKNOWN = "unknown"


class FundingInstructionsBankTransferType(LenientStripeEnum):
    EU_BANK_TRANSFER = "eu_bank_transfer"
    JP_BANK_TRANSFER = "jp_bank_transfer"
    UNKNOWN = "unknown"


class Address(BaseModel):
    """Customer address details."""

    city: Annotated[
        str | None, Field(description="City, district, suburb, town, or village.")
    ] = None
    country: Annotated[
        str | None, Field(description="Two-letter country code (ISO 3166-1 alpha-2).")
    ] = None
    line1: Annotated[
        str | None,
        Field(
            description="Address line 1, such as the street, PO Box, or company name."
        ),
    ] = None
    line2: Annotated[
        str | None,
        Field(
            description="Address line 2, such as the apartment, suite, unit, or building."
        ),
    ] = None
    postal_code: Annotated[str | None, Field(description="ZIP or postal code.")] = None
    state: Annotated[
        str | None, Field(description="State, county, province, or region.")
    ] = None


class Shipping(BaseModel):
    address: Address | None = None
    carrier: str | None = None
    name: str | None = None
    phone: str | None = None
    tracking_number: str | None = None


class InvoiceSettingCustomField(BaseModel):
    name: str
    value: str


class InvoiceSettingCustomerRenderingOptions(BaseModel):
    amount_tax_display: str | None = None


class InvoiceSettingCustomerSetting(BaseModel):
    """The customer's default invoice settings."""

    custom_fields: list[InvoiceSettingCustomField] | None = None
    default_payment_method: Annotated[
        str | dict[str, Any] | None,
        Field(
            description="ID of a payment method that's attached to the customer, used as the default for invoices."
        ),
    ] = None
    footer: str | None = None
    rendering_options: InvoiceSettingCustomerRenderingOptions | None = None


class TaxId(BaseModel):
    id: Annotated[str, Field(description="Unique identifier for the object.")]
    object: Literal["tax_id"] = "tax_id"
    country: str | None = None
    created: Timestamp | None = None
    customer: str | None = None
    livemode: bool | None = None
    type: Annotated[TaxIdType, Field(description="Type of the tax ID.")]
    value: Annotated[str, Field(description="Value of the tax ID.")]
    verification: dict[str, Any] | None = None


class Customer(BaseModel):
    """Stripe Customer object. Only ``id`` is guaranteed; Stripe omits fields the key cannot see."""

    id: Annotated[str, Field(description="Unique identifier for the customer.")]
    object: Annotated[
        Literal["customer"],
        Field(description="String representing the object's type. Always 'customer'."),
    ] = "customer"
    address: Annotated[
        Address | None, Field(description="The customer's address.")
    ] = None
    balance: Annotated[
        int | None,
        Field(
            description="The current balance, if any, that's stored on the customer, in cents."
        ),
    ] = None
    created: Annotated[
        Timestamp | None,
        Field(
            description="Time at which the object was created. Measured in seconds since the Unix epoch."
        ),
    ] = None
    currency: Annotated[
        str | None,
        Field(
            description="Three-letter ISO code for the currency the customer can be charged in for recurring billing purposes."
        ),
    ] = None
    default_source: Annotated[
        str | dict[str, Any] | None,
        Field(description="ID of the default payment source for the customer."),
    ] = None
    delinquent: Annotated[
        bool | None,
        Field(
            description="Whether the customer's latest invoice is past due or its latest charge failed."
        ),
    ] = None
    description: str | None = None
    discount: dict[str, Any] | None = None
    email: Annotated[
        str | None,
        Field(description="The customer's email address."),
    ] = None
    invoice_prefix: str | None = None
    invoice_settings: Annotated[
        InvoiceSettingCustomerSetting | None,
        Field(description="The customer's default invoice settings."),
    ] = None
    livemode: Annotated[
        bool | None,
        Field(
            description="Has the value true if the object exists in live mode or the value false if the object exists in test mode."
        ),
    ] = None
    metadata: Annotated[
        dict[str, str] | None,
        Field(description="Set of key-value pairs attached to the object."),
    ] = None
    name: Annotated[
        str | None,
        Field(description="The customer's full name or business name."),
    ] = None
    next_invoice_sequence: int | None = None
    phone: str | None = None
    preferred_locales: list[str] | None = None
    shipping: Shipping | None = None
    tax_exempt: CustomerTaxExempt | None = None
    tax_ids: ListResponse[TaxId] | None = None
    test_clock: str | dict[str, Any] | None = None


class DeletedCustomer(BaseModel):
    id: Annotated[str, Field(description="Unique identifier for the customer.")]
    object: Literal["customer"] = "customer"
    deleted: Annotated[
        Literal[True], Field(description="Always true for a deleted object.")
    ] = True


class DeletedDiscount(BaseModel):
    """Stub returned when a customer's discount is removed."""

    id: Annotated[str, Field(description="The ID of the discount object.")]
    object: Literal["discount"] = "discount"
    deleted: Literal[True] = True
    checkout_session: str | None = None
    coupon: dict[str, Any] | None = None
    customer: str | dict[str, Any] | None = None
    invoice: str | None = None
    invoice_item: str | None = None
    promotion_code: str | dict[str, Any] | None = None
    start: Annotated[
        Timestamp | None, Field(description="Date that the coupon was applied.")
    ] = None
    subscription: str | None = None
    subscription_item: str | None = None


class CustomerBalanceTransaction(BaseModel):
    """An increment or decrement of a customer's credit balance."""

    id: str
    object: Literal["customer_balance_transaction"] = "customer_balance_transaction"
    amount: Annotated[
        int,
        Field(
            description="The amount of the transaction. A negative value is a credit for the customer's balance."
        ),
    ]
    created: Timestamp
    credit_note: str | None = None
    currency: str
    customer: str | dict[str, Any]
    description: str | None = None
    ending_balance: Annotated[
        int,
        Field(
            description="The customer's balance after the transaction was applied."
        ),
    ]
    invoice: str | None = None
    livemode: bool
    metadata: dict[str, str] | None = None
    type: CustomerBalanceTransactionType


class CustomerCashBalanceTransaction(BaseModel):
    """An increase or decrease of a customer's cash balance."""

    id: str
    object: Literal["customer_cash_balance_transaction"] = (
        "customer_cash_balance_transaction"
    )
    created: Timestamp
    currency: str
    customer: str | dict[str, Any]
    ending_balance: Annotated[
        int,
        Field(description="The customer's cash balance after the transaction, in cents."),
    ]
    funded: dict[str, Any] | None = None
    livemode: bool
    net_amount: Annotated[
        int,
        Field(
            description="The amount by which the cash balance changed. Positive values increase the balance."
        ),
    ]
    type: CustomerCashBalanceTransactionType


class FundingInstructionsBankTransfer(BaseModel):
    country: str
    financial_addresses: list[dict[str, Any]] = []
    type: FundingInstructionsBankTransferType


class FundingInstructions(BaseModel):
    """Bank details a customer can use to fund their cash balance."""

    object: Literal["funding_instructions"] = "funding_instructions"
    bank_transfer: FundingInstructionsBankTransfer
    currency: str
    funding_type: Literal["bank_transfer"] = "bank_transfer"
    livemode: bool


__all__ = [
    "CustomerTaxExempt",
    "TaxIdType",
    "CustomerBalanceTransactionType",
    "CustomerCashBalanceTransactionType",
    "FundingInstructionsBankTransferType",
    "Address",
    "Shipping",
    "InvoiceSettingCustomField",
    "InvoiceSettingCustomerRenderingOptions",
    "InvoiceSettingCustomerSetting",
    "TaxId",
    "Customer",
    "DeletedCustomer",
    "DeletedDiscount",
    "CustomerBalanceTransaction",
    "CustomerCashBalanceTransaction",
    "FundingInstructionsBankTransfer",
    "FundingInstructions",
]
