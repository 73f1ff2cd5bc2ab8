"""
Logging Setup - Phi Emergence Service
phi_emergence/logging_config.py

Configures structlog once per process from LOG_LEVEL / LOG_FORMAT.
"""

import logging
from typing import Optional

import structlog

from phi_emergence.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog (and the stdlib root logger) for the service."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(level=level, format="%(message)s")

    if settings.LOG_FORMAT == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
