"""
Test suite for the exception taxonomy.

Run tests:
    pytest tests/core/exceptions/test_exceptions.py -v
"""

from httpx import codes as status

from stripekit.core.exceptions import (
    AuthenticationException,
    IdempotencyException,
    NotFoundException,
    PermissionException,
    RateLimitException,
    StripeAPIException,
    StripeCardException,
    StripeConnectionException,
    StripeDecodeError,
    StripeException,
    StripeParseError,
)


class TestStripeException:

    def test_with_message_only(self):
        exc = StripeException("Test error")

        assert exc.message == "Test error"
        assert exc.status_code is None
        assert exc.details is None
        assert str(exc) == "Test error"

    def test_inheritance(self):
        assert isinstance(StripeException("x"), Exception)


class TestStripeParseError:

    def test_carries_enum_and_value(self):
        exc = StripeParseError("bad", enum_name="FundingType", value="wire")

        assert exc.enum_name == "FundingType"
        assert exc.value == "wire"
        assert exc.details == {"enum": "FundingType", "value": "wire"}

    def test_is_not_a_value_error(self):
        assert not isinstance(StripeParseError(), ValueError)


class TestStripeDecodeError:

    def test_defaults(self):
        exc = StripeDecodeError()

        assert exc.message == "Unable to decode Stripe response."
        assert exc.errors == []
        assert exc.target is None

    def test_carries_errors(self):
        errors = [{"type": "missing", "loc": ("id",), "msg": "Field required"}]
        exc = StripeDecodeError("nope", target="Customer", errors=errors)

        assert exc.errors == errors
        assert exc.details["target"] == "Customer"


class TestStripeAPIException:

    def test_defaults(self):
        exc = StripeAPIException()

        assert exc.status_code == status.BAD_GATEWAY
        assert exc.error_type == "api_error"
        assert exc.request_id is None

    def test_custom_fields(self):
        exc = StripeAPIException(
            "Missing param",
            status_code=400,
            stripe_code="parameter_missing",
            error_type="invalid_request_error",
            param="email",
            request_id="req_1",
        )

        assert exc.status_code == 400
        assert exc.stripe_code == "parameter_missing"
        assert exc.param == "email"
        assert exc.request_id == "req_1"


class TestStatusSubclasses:

    def test_authentication(self):
        exc = AuthenticationException()

        assert exc.status_code == status.UNAUTHORIZED
        assert exc.error_type == "invalid_request_error"
        assert isinstance(exc, StripeAPIException)

    def test_permission(self):
        exc = PermissionException(request_id="req_2")

        assert exc.status_code == status.FORBIDDEN
        assert exc.error_type == "permission_error"
        assert exc.request_id == "req_2"

    def test_not_found(self):
        exc = NotFoundException("No such customer: 'cus_x'", param="id")

        assert exc.status_code == status.NOT_FOUND
        assert exc.param == "id"

    def test_error_type_can_be_overridden(self):
        exc = NotFoundException(error_type="resource_missing")

        assert exc.error_type == "resource_missing"


class TestOtherExceptions:

    def test_card(self):
        exc = StripeCardException(decline_code="insufficient_funds")

        assert exc.status_code == status.PAYMENT_REQUIRED
        assert exc.decline_code == "insufficient_funds"

    def test_idempotency(self):
        exc = IdempotencyException(request_id="req_3")

        assert exc.status_code == status.CONFLICT
        assert exc.request_id == "req_3"

    def test_rate_limit(self):
        assert RateLimitException().status_code == status.TOO_MANY_REQUESTS

    def test_connection(self):
        assert StripeConnectionException().status_code == status.SERVICE_UNAVAILABLE
