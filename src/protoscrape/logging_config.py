"""structlog setup for the protoscrape CLI."""

from __future__ import annotations

import logging
import sys

import structlog

from protoscrape.config import ReflectConfig


def configure_logging(debug: bool | None = None) -> None:
    """Configure structlog to render to stderr.

    Logs at INFO and above unless debug is set, or PROTOSCRAPE_DEBUG is set
    when debug is None.
    """
    if debug is None:
        debug = ReflectConfig.from_env().debug
    level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
