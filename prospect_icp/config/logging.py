"""
Logging helpers for the Prospect ICP Engine

Usage:
    from prospect_icp.config.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Scored %s prospects", count)
"""

import logging
import time

from .settings import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger with a single stream handler and UTC timestamps.

    Args:
        name: Logger name (use the module's __name__)

    Returns:
        Configured logger at the level set by ICP_LOG_LEVEL
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        logger.propagate = False
    return logger
