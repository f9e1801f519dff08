"""Logging configuration for applications embedding folio.

The library itself only creates per-module loggers; handlers are installed
here, once, by whoever owns the process.
"""

import logging
from typing import Optional, Union

from .config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the ``folio`` logger and set its level"""
    global _configured
    logger = logging.getLogger("folio")
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        _configured = True

    logger.setLevel(level)
    return logger
