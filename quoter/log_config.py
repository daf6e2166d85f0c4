"""structlog setup for the quoter's entry points."""

import logging
import os

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog with console output.

    Args:
        verbose: Log at DEBUG instead of INFO. The QUOTER_LOG_VERBOSE
            environment variable turns this on as well.
    """
    if os.environ.get("QUOTER_LOG_VERBOSE", "false").lower() in ("true", "1", "yes"):
        verbose = True

    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
