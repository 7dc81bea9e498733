from typing import Annotated

from pydantic import BaseModel, Field

from stripekit.core.enums import LenientStripeEnum


class PortalFlowsAfterCompletionType(LenientStripeEnum):
    HOSTED_CONFIRMATION = "hosted_confirmation"
    PORTAL_HOMEPAGE = "portal_homepage"
    REDIRECT = "redirect"
    UNKNOWN = "unknown"


class PortalFlowsAfterCompletionHostedConfirmation(BaseModel):
    custom_message: Annotated[
        str | None,
        Field(
            description="A custom message to display to the customer after the flow is completed."
        ),
    ] = None


class PortalFlowsAfterCompletionRedirect(BaseModel):
    return_url: Annotated[
        str,
        Field(description="The URL the customer will be redirected to after the flow is completed."),
    ]


class PortalFlowsAfterCompletion(BaseModel):
    """Behavior after a customer portal flow is completed."""

    hosted_confirmation: PortalFlowsAfterCompletionHostedConfirmation | None = None
    redirect: PortalFlowsAfterCompletionRedirect | None = None
    type: Annotated[
        PortalFlowsAfterCompletionType,
        Field(description="The specified type of behavior after the flow is completed."),
    ]


__all__ = [
    "PortalFlowsAfterCompletionType",
    "PortalFlowsAfterCompletionHostedConfirmation",
    "PortalFlowsAfterCompletionRedirect",
    "PortalFlowsAfterCompletion",
]
