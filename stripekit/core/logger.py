import logging
from logging.handlers import RotatingFileHandler
import os
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Track if Sentry has been initialized (global singleton)
_sentry_initialized = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init_sentry(
    dsn: str,
    environment: str = "development",
    traces_sample_rate: float = 1.0,
) -> bool:
    """
    Initialize Sentry SDK globally (called once, when the settings are loaded).

    Sentry SDK is a global singleton, so repeated calls are no-ops. An empty DSN
    disables error reporting entirely, which is the default for a library install.

    Args:
        dsn (str): Sentry DSN for error tracking.
        environment (str): Sentry environment name (development/production).
        traces_sample_rate (float): Performance monitoring sample rate (0.0 to 1.0).

    Returns:
        bool: True if Sentry was initialized, False if already initialized or no DSN given.
    """
    global _sentry_initialized

    if _sentry_initialized:
        return False

    if not dsn:
        return False

    sentry_logging = LoggingIntegration(
        level=logging.INFO,  # Capture info and above as breadcrumbs
        event_level=logging.ERROR,  # Send errors as events
    )

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=traces_sample_rate,
        integrations=[sentry_logging, AsyncioIntegration()],
    )

    _sentry_initialized = True
    return True


def setup_logger(
    name: str,
    log_file: str | None = None,
    level: int = logging.INFO,
    sentry_tag: Optional[str] = None,
) -> logging.Logger:
    """
    Sets up a logger with a specified name, optional log file, and logging level.

    The logger always writes to the console. When ``log_file`` is given it also
    writes to a rotating file (5 MB, 3 backups); the parent directory is created
    on demand. Calling this twice for the same name does not stack handlers.

    Args:
        name (str): The name of the logger.
        log_file (str | None): File path for the rotating file handler, or None for console only.
        level (int, optional): The logging level. Defaults to logging.INFO.
        sentry_tag (str, optional): Tag to identify this component in Sentry (e.g., "transport").

    Returns:
        logging.Logger: The configured logger instance.
    """
    if sentry_tag and _sentry_initialized:
        sentry_sdk.set_tag("component", sentry_tag)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = []
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    for handler in handlers:
        logger.addHandler(handler)

    return logger
