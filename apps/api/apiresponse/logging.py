"""
Configuración de logging estructurado con structlog.
El logging nunca debe cambiar el comportamiento del programa.
"""

import logging
import sys

import structlog
from structlog import contextvars

from apiresponse.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Configura stdlib logging + structlog.
    Sin argumento usa LOG_LEVEL de los settings.
    """
    settings = get_settings()
    level = (level or settings.LOG_LEVEL).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging"]
