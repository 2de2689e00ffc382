"""Structured logging configuration using structlog.

value-guard only emits log events; it never configures logging on import.
Library loggers wrap stdlib loggers (see get_logger), so the host
application's logging levels decide what is emitted. Applications that
want the library's events rendered by structlog call configure_logging()
once at startup.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, WrappedLogger

from .config import settings


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Library logger backed by the stdlib logger `name`.

    Events pass through the structlog processors configured at call time and
    are then filtered by stdlib levels, so nothing is printed until the host
    enables the `value_guard` loggers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every log event with the library name."""
    event_dict.setdefault("app", "value-guard")
    return event_dict


def build_processors(is_production: bool) -> list[structlog.types.Processor]:
    """Processors shared by structlog and foreign (stdlib) log records."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)
    return processors


def configure_logging(
    log_level: Optional[str] = None, environment: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level name; defaults to settings.LOG_LEVEL
        environment: "production" for JSON output, anything else for
            colored console output; defaults to settings.ENVIRONMENT
    """
    log_level = log_level or settings.LOG_LEVEL
    environment = environment or settings.ENVIRONMENT
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    is_production = environment.lower() == "production"
    shared_processors = build_processors(is_production)

    if is_production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level_int)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )
