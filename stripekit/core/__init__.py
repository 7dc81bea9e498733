from stripekit.core.config import Settings, get_settings, settings
from stripekit.core.enums import LenientStripeEnum, StripeEnum, StripeMethod, param_enum

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "StripeEnum",
    "LenientStripeEnum",
    "StripeMethod",
    "param_enum",
]
