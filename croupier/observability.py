"""Logfire cloud observability initialization."""

import logging

import logfire

from croupier import __version__
from croupier.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire and bridge stdlib logging into it.

    Must be called ONCE at startup, before the table opens.

    Configures Logfire cloud tracking and:
    - Bridges Python logging (bets, rejections, round results) to Logfire
    - Collects system metrics when the extra is installed

    Round passes open their own ``logfire.span`` in the scheduler.

    Args:
        settings: Application settings containing the Logfire token

    Returns:
        True if Logfire was configured, False if it stays disabled.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="croupier",
            service_version=__version__,
            environment=settings.environment,
        )

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        try:
            logfire.instrument_system_metrics()
        except Exception as metrics_error:
            logger.debug(f"System metrics instrumentation skipped: {metrics_error}")

        logger.info("✓ Logfire cloud tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
