"""
Structured Logging Setup

DESIGN DECISION: All log output goes through structlog on top of the
standard logging module. Events are named in snake_case and carry their
context as key/value pairs, so a load can be traced from the log alone.

The renderer is JSON by default and a human console renderer when
BILLCONF_LOG_JSON is false.
"""

import logging
import sys
from typing import Optional

import structlog

from billconf.config import Settings, get_settings


_configured = False


def configure_logging(settings: Optional[Settings] = None, force: bool = False) -> None:
    """
    Configure structlog and the root stdlib handler.
    
    Safe to call more than once; only the first call (or a forced call)
    changes the configuration.
    """
    global _configured
    if _configured and not force:
        return
    
    settings = settings or get_settings()
    
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.log_level_number,
        force=force,
    )
    logging.getLogger().setLevel(settings.log_level_number)
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, configuring logging on first use."""
    configure_logging()
    return structlog.get_logger(name)
