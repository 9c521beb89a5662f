"""Structured logging for claimmint."""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

LOGGER_NAME = "claimmint"


def get_logger(name: str = LOGGER_NAME) -> BoundLogger:
    """Return the structlog logger used by claimmint components.

    Parameters
    ----------
    name
        Name of the underlying standard library logger.

    Returns
    -------
    structlog.stdlib.BoundLogger
        Logger backed by the standard library logger ``name``, so levels,
        handlers and propagation follow the logging configuration of the
        application.  Debug and info events are dropped until the
        application configures a handler or calls `configure_logging`.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)


def configure_logging(loglevel: str = "INFO") -> None:
    """Send claimmint logs to standard output as JSON.

    Applications that already configure structlog should not call this.

    Parameters
    ----------
    loglevel
        Log level for the ``claimmint`` logger.  Default is ``INFO``.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(loglevel.upper())
    logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
