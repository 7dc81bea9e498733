"""
Customer endpoints.

Example usage:
    from stripekit.resources.customer import ListCustomer, RetrieveCustomer

    page = await ListCustomer().limit(5).send(client)
    customer = await RetrieveCustomer("cus_123").send(client)
    if isinstance(customer, DeletedCustomer):
        ...
"""

from stripekit.resources.customer.models import (
    Address,
    Customer,
    CustomerBalanceTransaction,
    CustomerBalanceTransactionType,
    CustomerCashBalanceTransaction,
    CustomerCashBalanceTransactionType,
    CustomerTaxExempt,
    DeletedCustomer,
    DeletedDiscount,
    FundingInstructions,
    FundingInstructionsBankTransfer,
    FundingInstructionsBankTransferType,
    InvoiceSettingCustomerSetting,
    Shipping,
    TaxId,
    TaxIdType,
)
from stripekit.resources.customer.params import (
    AmountTaxDisplay,
    BankTransfer,
    BankTransferType,
    CashBalance,
    CashBalanceSettings,
    CreateCustomerTax,
    CreateTaxValidateLocation,
    CustomFieldParams,
    CustomerShipping,
    EuBankTransfer,
    FundingType,
    InvoiceRenderingOptions,
    InvoiceSettings,
    OptionalFieldsAddress,
    ReconciliationMode,
    RequestedAddressType,
    TaxIdData,
    UpdateCustomerTax,
    UpdateTaxValidateLocation,
)
from stripekit.resources.customer.requests import (
    BalanceTransactionsCustomer,
    CreateCustomer,
    CreateFundingInstructionsCustomer,
    DeleteCustomer,
    DeleteDiscountCustomer,
    FundCashBalanceCustomer,
    ListCustomer,
    ListPaymentMethodsCustomer,
    RetrieveCustomer,
    RetrieveCustomerReturned,
    RetrievePaymentMethodCustomer,
    SearchCustomer,
    UpdateCustomer,
)

__all__ = [
    # Models
    "Address",
    "Customer",
    "CustomerBalanceTransaction",
    "CustomerBalanceTransactionType",
    "CustomerCashBalanceTransaction",
    "CustomerCashBalanceTransactionType",
    "CustomerTaxExempt",
    "DeletedCustomer",
    "DeletedDiscount",
    "FundingInstructions",
    "FundingInstructionsBankTransfer",
    "FundingInstructionsBankTransferType",
    "InvoiceSettingCustomerSetting",
    "Shipping",
    "TaxId",
    "TaxIdType",
    # Params
    "AmountTaxDisplay",
    "BankTransfer",
    "BankTransferType",
    "CashBalance",
    "CashBalanceSettings",
    "CreateCustomerTax",
    "CreateTaxValidateLocation",
    "CustomFieldParams",
    "CustomerShipping",
    "EuBankTransfer",
    "FundingType",
    "InvoiceRenderingOptions",
    "InvoiceSettings",
    "OptionalFieldsAddress",
    "ReconciliationMode",
    "RequestedAddressType",
    "TaxIdData",
    "UpdateCustomerTax",
    "UpdateTaxValidateLocation",
    # Requests
    "BalanceTransactionsCustomer",
    "CreateCustomer",
    "CreateFundingInstructionsCustomer",
    "DeleteCustomer",
    "DeleteDiscountCustomer",
    "FundCashBalanceCustomer",
    "ListCustomer",
    "ListPaymentMethodsCustomer",
    "RetrieveCustomer",
    "RetrieveCustomerReturned",
    "RetrievePaymentMethodCustomer",
    "SearchCustomer",
    "UpdateCustomer",
]
