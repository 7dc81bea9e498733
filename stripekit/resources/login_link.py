from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field

from stripekit.client.request import RequestParams, StripeRequest
from stripekit.core.enums import StripeMethod
from stripekit.types.common import Timestamp


class LoginLink(BaseModel):
    """Single-use link to the Express Dashboard of a connected account."""

    object: Literal["login_link"] = "login_link"
    created: Annotated[
        Timestamp,
        Field(
            description="Time at which the object was created. Measured in seconds since the Unix epoch."
        ),
    ]
    url: Annotated[str, Field(description="The URL for the login link.")]


class CreateAccountLoginLinkParams(RequestParams):
    expand: list[str] | None = None


class CreateAccountLoginLink(StripeRequest[LoginLink]):
    """
    Creates a single-use login link for a connected account to access the Express Dashboard.

    Only available for accounts that use the Express Dashboard and are
    connected to your platform.
    """

    method = StripeMethod.POST
    output = LoginLink
    params_model = CreateAccountLoginLinkParams

    def __init__(self, account: str):
        super().__init__()
        self.account = account

    def path(self) -> str:
        return f"/accounts/{self.account}/login_links"

    def expand(self, expand: list[str]) -> Self:
        return self._set(expand=expand)


__all__ = ["LoginLink", "CreateAccountLoginLinkParams", "CreateAccountLoginLink"]
