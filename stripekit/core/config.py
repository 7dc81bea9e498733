from functools import lru_cache
import logging
import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from stripekit.core.exceptions.types import AuthenticationException
from stripekit.core.logger import init_sentry, setup_logger


class Settings(BaseSettings):
    # Library settings
    ENVIRONMENT: str = "development"  # Options: development, test, production
    DEBUG: bool = False

    # Stripe settings
    STRIPE_API_KEY: str = ""
    STRIPE_API_BASE_URL: str = "https://api.stripe.com/v1"
    STRIPE_API_VERSION: str | None = None
    STRIPE_TIMEOUT: float = 80.0  # seconds

    # Bounded retries + backoff
    STRIPE_MAX_ATTEMPTS: int = 3
    STRIPE_BACKOFF_BASE: float = 0.5  # seconds before the first retry
    STRIPE_BACKOFF_MAX: float = 8.0  # cap per wait
    STRIPE_JITTER: float = 0.2  # +/-20%

    # Logging settings
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    # Sentry settings
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "development"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    model_config: SettingsConfigDict = SettingsConfigDict(  # type: ignore
        env_file=".env",
        extra="ignore",
    )

    def check_api_key(self, api_key: str) -> None:
        """
        Refuse a missing or test-mode API key in production.

        Called by the clients with the key they will actually use.

        Raises
        ------
            AuthenticationException
                If ENVIRONMENT is "production" and the key is empty or a test-mode key.
        """
        if self.ENVIRONMENT != "production":
            return

        if not api_key.strip():
            raise AuthenticationException(
                "ENVIRONMENT is 'production' but no Stripe API key was given. "
                "Pass api_key or set STRIPE_API_KEY via environment variables or .env file."
            )
        if api_key.startswith(("sk_test_", "rk_test_")):
            raise AuthenticationException(
                "ENVIRONMENT is 'production' but the Stripe API key is a test-mode key."
            )

    def log_file(self, name: str) -> str | None:
        """Path of the log file for ``name``, or None when file logging is off."""
        if not self.LOG_TO_FILE:
            return None
        return os.path.join(self.LOG_DIR, f"{name}.log")


@lru_cache()
def get_settings() -> Settings:
    return Settings()  # type: ignore


settings = get_settings()

if not settings.DEBUG:
    init_sentry(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
    )

_level = logging.getLevelName(settings.LOG_LEVEL)

# HTTP traffic, retries and Stripe error bodies
stripe_logger = setup_logger(
    name="stripe_logger",
    log_file=settings.log_file("stripe"),
    level=_level,
    sentry_tag="stripe",
)
# Response bodies that fail to decode into the expected shape
decode_logger = setup_logger(
    name="decode_logger",
    log_file=settings.log_file("decode"),
    level=_level,
    sentry_tag="decode",
)

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "stripe_logger",
    "decode_logger",
]
