from typing import Any, Self

from stripekit.client.request import StripeRequest
from stripekit.core.enums import StripeMethod
from stripekit.resources.customer.models import (
    Customer,
    CustomerBalanceTransaction,
    CustomerCashBalanceTransaction,
    CustomerTaxExempt,
    DeletedCustomer,
    DeletedDiscount,
    FundingInstructions,
)
from stripekit.resources.customer.params import (
    BalanceTransactionsCustomerParams,
    BankTransfer,
    CashBalance,
    CreateCustomerParams,
    CreateCustomerTax,
    CreateFundingInstructionsCustomerParams,
    CustomerShipping,
    ExpandParams,
    FundCashBalanceCustomerParams,
    FundingType,
    InvoiceSettings,
    ListCustomerParams,
    ListPaymentMethodsCustomerParams,
    OptionalFieldsAddress,
    SearchCustomerParams,
    TaxIdData,
    UpdateCustomerParams,
    UpdateCustomerTax,
)
from stripekit.resources.payment_method import (
    AllowRedisplay,
    PaymentMethod,
    PaymentMethodType,
)
from stripekit.types.common import ListResponse, RangeQueryTs, SearchResult
from stripekit.types.polymorphic import MaybeDeleted

RetrieveCustomerReturned = MaybeDeleted(Customer, DeletedCustomer)


class _ExpandMixin:
    def expand(self, expand: list[str]) -> Self:
        """Specifies which fields in the response should be expanded."""
        return self._set(expand=expand)  # type: ignore[attr-defined]


class _CursorMixin(_ExpandMixin):
    def ending_before(self, ending_before: str) -> Self:
        """Cursor for the previous page: an object ID that defines your place in the list."""
        return self._set(ending_before=ending_before)  # type: ignore[attr-defined]

    def limit(self, limit: int) -> Self:
        """Number of objects to return, between 1 and 100 (Stripe's default is 10)."""
        return self._set(limit=limit)  # type: ignore[attr-defined]

    def starting_after(self, starting_after: str) -> Self:
        """Cursor for the next page: an object ID that defines your place in the list."""
        return self._set(starting_after=starting_after)  # type: ignore[attr-defined]


class DeleteCustomer(StripeRequest[DeletedCustomer]):
    """
    Permanently deletes a customer. It cannot be undone.

    Also immediately cancels any active subscriptions on the customer.
    """

    method = StripeMethod.DELETE
    output = DeletedCustomer

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}"


class DeleteDiscountCustomer(StripeRequest[DeletedDiscount]):
    """Removes the currently applied discount on a customer."""

    method = StripeMethod.DELETE
    output = DeletedDiscount

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}/discount"


class ListCustomer(_CursorMixin, StripeRequest[ListResponse[Customer]]):
    """
    Returns a list of your customers.

    The customers are returned sorted by creation date, with the most recent
    customers appearing first.
    """

    method = StripeMethod.GET
    output = ListResponse[Customer]
    params_model = ListCustomerParams

    def path(self) -> str:
        return "/customers"

    def created(self, created: RangeQueryTs | int) -> Self:
        """Only return customers that were created during the given date interval."""
        return self._set(created=created)

    def email(self, email: str) -> Self:
        """A case-sensitive filter on the list based on the customer's ``email`` field."""
        return self._set(email=email)

    def test_clock(self, test_clock: str) -> Self:
        """Only return customers associated with the specified test clock."""
        return self._set(test_clock=test_clock)


class RetrieveCustomer(_ExpandMixin, StripeRequest[Any]):
    """Retrieves a Customer object, or the deleted stub when the customer was deleted."""

    method = StripeMethod.GET
    output = RetrieveCustomerReturned
    params_model = ExpandParams

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}"


class BalanceTransactionsCustomer(
    _CursorMixin, StripeRequest[ListResponse[CustomerBalanceTransaction]]
):
    """Returns a list of transactions that updated the customer's balances."""

    method = StripeMethod.GET
    output = ListResponse[CustomerBalanceTransaction]
    params_model = BalanceTransactionsCustomerParams

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}/balance_transactions"


class ListPaymentMethodsCustomer(
    _CursorMixin, StripeRequest[ListResponse[PaymentMethod]]
):
    """Returns a list of PaymentMethods for a given Customer."""

    method = StripeMethod.GET
    output = ListResponse[PaymentMethod]
    params_model = ListPaymentMethodsCustomerParams

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}/payment_methods"

    def allow_redisplay(self, allow_redisplay: AllowRedisplay | str) -> Self:
        """Only return payment methods with this ``allow_redisplay`` value."""
        return self._set(allow_redisplay=allow_redisplay)

    def type_(self, type_: PaymentMethodType | str) -> Self:
        """Only return payment methods of this type."""
        return self._set(type_=type_)


class RetrievePaymentMethodCustomer(_ExpandMixin, StripeRequest[PaymentMethod]):
    """Retrieves a PaymentMethod object for a given Customer."""

    method = StripeMethod.GET
    output = PaymentMethod
    params_model = ExpandParams

    def __init__(self, customer: str, payment_method: str):
        super().__init__()
        self.customer = customer
        self.payment_method = payment_method

    def path(self) -> str:
        return f"/customers/{self.customer}/payment_methods/{self.payment_method}"


class SearchCustomer(_ExpandMixin, StripeRequest[SearchResult[Customer]]):
    """
    Search for customers you've previously created using Stripe's Search Query Language.

    Don't use search in read-after-write flows where strict consistency is
    necessary; data is usually searchable within a minute.
    """

    method = StripeMethod.GET
    output = SearchResult[Customer]
    params_model = SearchCustomerParams

    def __init__(self, query: str):
        super().__init__(query=query)

    def path(self) -> str:
        return "/customers/search"

    def limit(self, limit: int) -> Self:
        return self._set(limit=limit)

    def page(self, page: str) -> Self:
        """Cursor for pagination across multiple pages of results, from a previous ``next_page``."""
        return self._set(page=page)


class _CustomerWriteMixin(_ExpandMixin):
    """Setters shared by ``CreateCustomer`` and ``UpdateCustomer``."""

    def address(self, address: OptionalFieldsAddress | None) -> Self:
        return self._set(address=address)  # type: ignore[attr-defined]

    def balance(self, balance: int) -> Self:
        """Customer balance in cents; negative values are a credit applied to future invoices."""
        return self._set(balance=balance)  # type: ignore[attr-defined]

    def cash_balance(self, cash_balance: CashBalance) -> Self:
        return self._set(cash_balance=cash_balance)  # type: ignore[attr-defined]

    def coupon(self, coupon: str) -> Self:
        return self._set(coupon=coupon)  # type: ignore[attr-defined]

    def description(self, description: str | None) -> Self:
        return self._set(description=description)  # type: ignore[attr-defined]

    def email(self, email: str | None) -> Self:
        return self._set(email=email)  # type: ignore[attr-defined]

    def invoice_prefix(self, invoice_prefix: str) -> Self:
        return self._set(invoice_prefix=invoice_prefix)  # type: ignore[attr-defined]

    def invoice_settings(self, invoice_settings: InvoiceSettings) -> Self:
        return self._set(invoice_settings=invoice_settings)  # type: ignore[attr-defined]

    def metadata(self, metadata: dict[str, str] | None) -> Self:
        """Key-value pairs to attach. An empty value for a key unsets that key."""
        return self._set(metadata=metadata)  # type: ignore[attr-defined]

    def name(self, name: str | None) -> Self:
        return self._set(name=name)  # type: ignore[attr-defined]

    def next_invoice_sequence(self, next_invoice_sequence: int) -> Self:
        return self._set(next_invoice_sequence=next_invoice_sequence)  # type: ignore[attr-defined]

    def phone(self, phone: str | None) -> Self:
        return self._set(phone=phone)  # type: ignore[attr-defined]

    def preferred_locales(self, preferred_locales: list[str]) -> Self:
        return self._set(preferred_locales=preferred_locales)  # type: ignore[attr-defined]

    def promotion_code(self, promotion_code: str) -> Self:
        return self._set(promotion_code=promotion_code)  # type: ignore[attr-defined]

    def shipping(self, shipping: CustomerShipping | None) -> Self:
        return self._set(shipping=shipping)  # type: ignore[attr-defined]

    def source(self, source: str) -> Self:
        return self._set(source=source)  # type: ignore[attr-defined]

    def tax_exempt(self, tax_exempt: CustomerTaxExempt | str | None) -> Self:
        """One of ``none``, ``exempt`` or ``reverse``."""
        return self._set(tax_exempt=tax_exempt)  # type: ignore[attr-defined]

    def validate(self, validate: bool) -> Self:
        return self._set(validate_=validate)  # type: ignore[attr-defined]


class CreateCustomer(_CustomerWriteMixin, StripeRequest[Customer]):
    """Creates a new customer object."""

    method = StripeMethod.POST
    output = Customer
    params_model = CreateCustomerParams

    def path(self) -> str:
        return "/customers"

    def payment_method(self, payment_method: str) -> Self:
        return self._set(payment_method=payment_method)

    def tax(self, tax: CreateCustomerTax) -> Self:
        return self._set(tax=tax)

    def tax_id_data(self, tax_id_data: list[TaxIdData]) -> Self:
        return self._set(tax_id_data=tax_id_data)

    def test_clock(self, test_clock: str) -> Self:
        return self._set(test_clock=test_clock)


class UpdateCustomer(_CustomerWriteMixin, StripeRequest[Customer]):
    """
    Updates the specified customer by setting the values of the parameters passed.

    Any parameters not provided are left unchanged.
    """

    method = StripeMethod.POST
    output = Customer
    params_model = UpdateCustomerParams

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}"

    def default_source(self, default_source: str) -> Self:
        return self._set(default_source=default_source)

    def tax(self, tax: UpdateCustomerTax) -> Self:
        return self._set(tax=tax)


class CreateFundingInstructionsCustomer(
    _ExpandMixin, StripeRequest[FundingInstructions]
):
    """
    Retrieve funding instructions for a customer cash balance.

    If funding instructions do not yet exist for the customer, new ones are
    created; otherwise the same instructions are returned each time.
    """

    method = StripeMethod.POST
    output = FundingInstructions
    params_model = CreateFundingInstructionsCustomerParams

    def __init__(
        self,
        customer: str,
        bank_transfer: BankTransfer,
        currency: str,
        funding_type: FundingType | str = FundingType.BANK_TRANSFER,
    ):
        super().__init__(
            bank_transfer=bank_transfer, currency=currency, funding_type=funding_type
        )
        self.customer = customer

    def path(self) -> str:
        return f"/customers/{self.customer}/funding_instructions"


class FundCashBalanceCustomer(
    _ExpandMixin, StripeRequest[CustomerCashBalanceTransaction]
):
    """Create an incoming testmode bank transfer. Test mode only."""

    method = StripeMethod.POST
    output = CustomerCashBalanceTransaction
    params_model = FundCashBalanceCustomerParams

    def __init__(self, customer: str, amount: int, currency: str):
        super().__init__(amount=amount, currency=currency)
        self.customer = customer

    def path(self) -> str:
        return f"/test_helpers/customers/{self.customer}/fund_cash_balance"

    def reference(self, reference: str) -> Self:
        """A description of the test funding, like an IBAN reference for eu_bank_transfer funding."""
        return self._set(reference=reference)


__all__ = [
    "RetrieveCustomerReturned",
    "DeleteCustomer",
    "DeleteDiscountCustomer",
    "ListCustomer",
    "RetrieveCustomer",
    "BalanceTransactionsCustomer",
    "ListPaymentMethodsCustomer",
    "RetrievePaymentMethodCustomer",
    "SearchCustomer",
    "CreateCustomer",
    "UpdateCustomer",
    "CreateFundingInstructionsCustomer",
    "FundCashBalanceCustomer",
]
