"""Logging setup for the command line."""

import logging
import sys

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_level: str = "WARNING"):
    """Configure logging for interactive-actions.

    Logs go to stderr so stdout stays free for scripts and results.
    Only the first call has an effect.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    if hasattr(configure_logging, "has_run"):
        return

    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        force=True,
        handlers=[handler],
    )

    configure_logging.has_run = True
    logger.debug("Logging configured at level: %s", log_level)
