from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from stripekit.core.enums import LenientStripeEnum
from stripekit.types.common import Timestamp


class PaymentMethodType(LenientStripeEnum):
    ACSS_DEBIT = "acss_debit"
    AFFIRM = "affirm"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    AMAZON_PAY = "amazon_pay"
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BLIK = "blik"
    BOLETO = "boleto"
    CARD = "card"
    CARD_PRESENT = "card_present"
    CASHAPP = "cashapp"
    CUSTOMER_BALANCE = "customer_balance"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    INTERAC_PRESENT = "interac_present"
    KLARNA = "klarna"
    KONBINI = "konbini"
    LINK = "link"
    MOBILEPAY = "mobilepay"
    OXXO = "oxxo"
    P24 = "p24"
    PAYNOW = "paynow"
    PAYPAL = "paypal"
    PIX = "pix"
    PROMPTPAY = "promptpay"
    REVOLUT_PAY = "revolut_pay"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    SWISH = "swish"
    US_BANK_ACCOUNT = "us_bank_account"
    WECHAT_PAY = "wechat_pay"
    ZIP = "zip"
    UNKNOWN = "unknown"


class AllowRedisplay(LenientStripeEnum):
    """Whether a saved payment method may be shown to the customer in a checkout flow."""

    ALWAYS = "always"
    LIMITED = "limited"
    UNSPECIFIED = "unspecified"
    UNKNOWN = "unknown"


class PaymentMethodAddress(BaseModel):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class BillingDetails(BaseModel):
    """Billing information associated with the payment method."""

    address: Annotated[
        PaymentMethodAddress | None, Field(description="Billing address.")
    ] = None
    email: Annotated[str | None, Field(description="Email address.")] = None
    name: Annotated[str | None, Field(description="Full name.")] = None
    phone: Annotated[
        str | None, Field(description="Billing phone number (including extension).")
    ] = None


class PaymentMethodCard(BaseModel):
    brand: Annotated[
        str, Field(description="Card brand, e.g. 'visa', 'mastercard' or 'amex'.")
    ]
    country: str | None = None
    exp_month: Annotated[
        int, Field(description="Two-digit number representing the card's expiration month.")
    ]
    exp_year: Annotated[
        int, Field(description="Four-digit number representing the card's expiration year.")
    ]
    fingerprint: str | None = None
    funding: Annotated[
        str | None,
        Field(description="Card funding type: 'credit', 'debit', 'prepaid' or 'unknown'."),
    ] = None
    last4: Annotated[str, Field(description="The last four digits of the card.")]


class PaymentMethod(BaseModel):
    """Stripe PaymentMethod object. Per-type details other than ``card`` are kept as raw mappings."""

    id: Annotated[str, Field(description="Unique identifier for the object.")]
    object: Annotated[
        Literal["payment_method"],
        Field(
            description="String representing the object's type. Always 'payment_method'."
        ),
    ] = "payment_method"
    allow_redisplay: AllowRedisplay | None = None
    billing_details: BillingDetails | None = None
    card: PaymentMethodCard | None = None
    created: Annotated[
        Timestamp | None,
        Field(
            description="Time at which the object was created. Measured in seconds since the Unix epoch."
        ),
    ] = None
    customer: Annotated[
        str | None,
        Field(description="The ID of the Customer to which this PaymentMethod is saved."),
    ] = None
    livemode: bool | None = None
    metadata: dict[str, str] | None = None
    type: Annotated[
        PaymentMethodType,
        Field(description="The type of the PaymentMethod."),
    ]
    sepa_debit: dict[str, Any] | None = None
    us_bank_account: dict[str, Any] | None = None


__all__ = [
    "PaymentMethodType",
    "AllowRedisplay",
    "PaymentMethodAddress",
    "BillingDetails",
    "PaymentMethodCard",
    "PaymentMethod",
]
