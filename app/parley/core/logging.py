"""parley structured logging module.

parley never configures logging on import; module loggers are lazy structlog
proxies that pick up whatever configuration the host application installs.
configure_logging() is an opt-in helper for hosts without their own setup.
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from parley.core.config import settings

logger: BoundLogger = structlog.stdlib.get_logger("parley")


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger for a standalone host.

    Args:
        log_level: Level name, defaults to settings.LOG_LEVEL.
        json_output: Render JSON lines instead of console output. Defaults
            to settings.is_production.

    Returns:
        The root bound logger.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a lazy logger carrying the calling module's name."""
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module is None:
        return structlog.stdlib.get_logger("parley", component="unknown")

    return structlog.stdlib.get_logger(
        module.__name__,
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
