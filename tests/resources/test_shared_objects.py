"""
Tests for login links and the response-only objects shared across endpoints.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from stripekit.core.enums import StripeMethod
from stripekit.resources.billing_portal import (
    PortalFlowsAfterCompletion,
    PortalFlowsAfterCompletionType,
)
from stripekit.resources.login_link import CreateAccountLoginLink, LoginLink
from stripekit.resources.payment_method import (
    AllowRedisplay,
    PaymentMethod,
    PaymentMethodType,
)
from stripekit.resources.setup_attempt import (
    SetupAttemptPaymentMethodDetails,
    SetupAttemptPaymentMethodDetailsBankRedirect,
    SetupAttemptPaymentMethodDetailsCard,
    SetupAttemptPaymentMethodDetailsEmpty,
)
from stripekit.resources.treasury import (
    ClosedReason,
    TreasuryFinancialAccountsResourceStatusDetails,
)


class TestCreateAccountLoginLink:

    def test_build(self):
        built = CreateAccountLoginLink("acct_1").build()

        assert built.method == StripeMethod.POST
        assert built.path == "/accounts/acct_1/login_links"
        assert built.encoding == "form"
        assert built.params == {}

    def test_expand(self):
        assert CreateAccountLoginLink("acct_1").expand(["x"]).build().encode() == {"expand[0]": "x"}

    @pytest.mark.asyncio
    async def test_send(self, recording_transport):
        transport = recording_transport(
            {"object": "login_link", "created": 1700000000, "url": "https://connect.stripe.com/express/abc"}
        )

        link = await CreateAccountLoginLink("acct_1").send(transport, idempotency_key="key-1")

        assert isinstance(link, LoginLink)
        assert link.created == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert transport.calls[0]["path"] == "/accounts/acct_1/login_links"
        assert transport.calls[0]["idempotency_key"] == "key-1"


class TestPortalFlowsAfterCompletion:

    def test_redirect(self):
        flow = PortalFlowsAfterCompletion.model_validate(
            {"type": "redirect", "redirect": {"return_url": "https://example.com/done"}, "hosted_confirmation": None}
        )

        assert flow.type is PortalFlowsAfterCompletionType.REDIRECT
        assert flow.redirect.return_url == "https://example.com/done"

    def test_hosted_confirmation(self):
        flow = PortalFlowsAfterCompletion.model_validate(
            {"type": "hosted_confirmation", "hosted_confirmation": {"custom_message": "Thanks!"}}
        )

        assert flow.hosted_confirmation.custom_message == "Thanks!"
        assert flow.redirect is None

    def test_new_type_is_tolerated(self):
        flow = PortalFlowsAfterCompletion.model_validate({"type": "survey"})

        assert flow.type is PortalFlowsAfterCompletionType.UNKNOWN

    def test_redirect_requires_url(self):
        with pytest.raises(ValidationError):
            PortalFlowsAfterCompletion.model_validate({"type": "redirect", "redirect": {}})


class TestSetupAttemptPaymentMethodDetails:

    def test_card(self):
        details = SetupAttemptPaymentMethodDetails.model_validate(
            {
                "type": "card",
                "card": {"brand": "visa", "last4": "4242", "checks": {"cvc_check": "pass"}},
            }
        )

        assert isinstance(details.details, SetupAttemptPaymentMethodDetailsCard)
        assert details.card.checks.cvc_check == "pass"

    def test_bank_redirect(self):
        details = SetupAttemptPaymentMethodDetails.model_validate(
            {"type": "ideal", "ideal": {"bank": "ing", "iban_last4": "1234"}}
        )

        assert isinstance(details.details, SetupAttemptPaymentMethodDetailsBankRedirect)
        assert details.ideal.iban_last4 == "1234"

    def test_empty_details(self):
        details = SetupAttemptPaymentMethodDetails.model_validate({"type": "link", "link": {}})

        assert isinstance(details.details, SetupAttemptPaymentMethodDetailsEmpty)

    def test_type_without_known_details(self):
        details = SetupAttemptPaymentMethodDetails.model_validate({"type": "twint", "twint": {}})

        assert details.type == "twint"
        assert details.details is None


class TestTreasuryStatusDetails:

    def test_closed(self):
        status = TreasuryFinancialAccountsResourceStatusDetails.model_validate(
            {"closed": {"reasons": ["account_rejected", "some_new_reason"]}}
        )

        assert status.closed.reasons == [ClosedReason.ACCOUNT_REJECTED, ClosedReason.UNKNOWN]

    def test_open_account(self):
        assert TreasuryFinancialAccountsResourceStatusDetails.model_validate({"closed": None}).closed is None


class TestPaymentMethod:

    def test_card(self, payment_method_payload):
        payment_method = PaymentMethod.model_validate(payment_method_payload)

        assert payment_method.type is PaymentMethodType.CARD
        assert payment_method.allow_redisplay is AllowRedisplay.ALWAYS
        assert payment_method.billing_details.name == "Jenny Rosen"
        assert payment_method.card.exp_year == 2030

    def test_type_required(self, payment_method_payload):
        del payment_method_payload["type"]

        with pytest.raises(ValidationError):
            PaymentMethod.model_validate(payment_method_payload)

    def test_raw_details_for_other_types(self, payment_method_payload):
        payment_method_payload.update(type="sepa_debit", card=None, sepa_debit={"last4": "3000"})

        payment_method = PaymentMethod.model_validate(payment_method_payload)

        assert payment_method.type is PaymentMethodType.SEPA_DEBIT
        assert payment_method.sepa_debit == {"last4": "3000"}
