"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire

from frontline import __version__
from frontline.config import Settings

logger = logging.getLogger(__name__)

_initialized = False


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire with instrumentation.

    Call at startup, before the first database session is opened, so that
    SQLAlchemy engines created afterwards are traced. Later calls are no-ops.

    Instruments:
    - SQLAlchemy (every round, player and account query)
    - Python logging (bridged to Logfire)

    Returns:
        True if Logfire was configured, False if it was skipped or failed.
    """
    global _initialized
    if _initialized:
        return True

    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="frontline",
            service_version=__version__,
            environment=settings.environment,
        )

        logfire.instrument_sqlalchemy()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        _initialized = True
        logger.info("Logfire cloud tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
