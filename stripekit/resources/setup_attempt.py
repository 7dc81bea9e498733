from typing import Annotated, Any

from pydantic import BaseModel, Field


class SetupAttemptPaymentMethodDetailsCardChecks(BaseModel):
    address_line1_check: str | None = None
    address_postal_code_check: str | None = None
    cvc_check: str | None = None


class SetupAttemptPaymentMethodDetailsCard(BaseModel):
    brand: str | None = None
    checks: SetupAttemptPaymentMethodDetailsCardChecks | None = None
    country: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    fingerprint: str | None = None
    funding: str | None = None
    last4: str | None = None
    network: str | None = None
    three_d_secure: dict[str, Any] | None = None
    wallet: dict[str, Any] | None = None


class SetupAttemptPaymentMethodDetailsCardPresent(BaseModel):
    generated_card: str | dict[str, Any] | None = None
    offline: dict[str, Any] | None = None


class SetupAttemptPaymentMethodDetailsBankRedirect(BaseModel):
    """Details shared by bank-redirect methods that generate a SEPA Direct Debit mandate."""

    bank: str | None = None
    bank_code: str | None = None
    bank_name: str | None = None
    bic: str | None = None
    generated_sepa_debit: str | dict[str, Any] | None = None
    generated_sepa_debit_mandate: str | dict[str, Any] | None = None
    iban_last4: str | None = None
    preferred_language: str | None = None
    verified_name: str | None = None


class SetupAttemptPaymentMethodDetailsEmpty(BaseModel):
    """Methods whose setup attempts carry no additional details."""


class SetupAttemptPaymentMethodDetails(BaseModel):
    acss_debit: SetupAttemptPaymentMethodDetailsEmpty | None = None
    amazon_pay: SetupAttemptPaymentMethodDetailsEmpty | None = None
    au_becs_debit: SetupAttemptPaymentMethodDetailsEmpty | None = None
    bacs_debit: SetupAttemptPaymentMethodDetailsEmpty | None = None
    bancontact: SetupAttemptPaymentMethodDetailsBankRedirect | None = None
    boleto: SetupAttemptPaymentMethodDetailsEmpty | None = None
    card: SetupAttemptPaymentMethodDetailsCard | None = None
    card_present: SetupAttemptPaymentMethodDetailsCardPresent | None = None
    cashapp: SetupAttemptPaymentMethodDetailsEmpty | None = None
    ideal: SetupAttemptPaymentMethodDetailsBankRedirect | None = None
    klarna: SetupAttemptPaymentMethodDetailsEmpty | None = None
    link: SetupAttemptPaymentMethodDetailsEmpty | None = None
    paypal: SetupAttemptPaymentMethodDetailsEmpty | None = None
    revolut_pay: SetupAttemptPaymentMethodDetailsEmpty | None = None
    sepa_debit: SetupAttemptPaymentMethodDetailsEmpty | None = None
    sofort: SetupAttemptPaymentMethodDetailsBankRedirect | None = None
    type: Annotated[
        str,
        Field(
            description="The type of the payment method used in the SetupIntent (e.g., `card`). An additional hash is included with a name matching this value."
        ),
    ]
    us_bank_account: SetupAttemptPaymentMethodDetailsEmpty | None = None

    @property
    def details(self) -> BaseModel | None:
        """The detail object matching ``type``, if this version knows about it."""
        value = getattr(self, self.type, None) if self.type in type(self).model_fields else None
        return value if isinstance(value, BaseModel) else None


__all__ = [
    "SetupAttemptPaymentMethodDetailsCardChecks",
    "SetupAttemptPaymentMethodDetailsCard",
    "SetupAttemptPaymentMethodDetailsCardPresent",
    "SetupAttemptPaymentMethodDetailsBankRedirect",
    "SetupAttemptPaymentMethodDetailsEmpty",
    "SetupAttemptPaymentMethodDetails",
]
