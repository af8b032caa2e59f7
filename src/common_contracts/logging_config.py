"""Structured logger setup shared across the contract modules."""

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Violations are logged at DEBUG and new loggers start at WARNING, so the
    library stays quiet until a caller passes a lower ``level``. A level
    given on a later call replaces the current one.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        if level is not None:
            logger.setLevel(level)
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING if level is None else level)
    logger.propagate = False
    return logger
