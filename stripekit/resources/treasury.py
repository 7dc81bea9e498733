from pydantic import BaseModel

from stripekit.core.enums import LenientStripeEnum


class ClosedReason(LenientStripeEnum):
    ACCOUNT_REJECTED = "account_rejected"
    CLOSED_BY_PLATFORM = "closed_by_platform"
    OTHER = "other"
    UNKNOWN = "unknown"


class TreasuryFinancialAccountsResourceClosedStatusDetails(BaseModel):
    reasons: list[ClosedReason]


class TreasuryFinancialAccountsResourceStatusDetails(BaseModel):
    """Details related to the closure of a FinancialAccount. Set only when the account is closed."""

    closed: TreasuryFinancialAccountsResourceClosedStatusDetails | None = None


__all__ = [
    "ClosedReason",
    "TreasuryFinancialAccountsResourceClosedStatusDetails",
    "TreasuryFinancialAccountsResourceStatusDetails",
]
