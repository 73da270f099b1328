"""
Shared helpers.
"""
import logging

from app.core import config


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger, configuring the root handler on first use.

    Usage:
        log = get_logger(__name__)
        log.info("Initializing server")
    """
    global _configured
    if not _configured:
        logging.basicConfig(level=config.LOG_LEVEL, format=LOG_FORMAT)
        _configured = True
    return logging.getLogger(name)
