"""
Structured logging configuration using structlog.

Provides JSON or console logging with ISO timestamps and stdlib
compatibility. Logs go to stderr so that CLI results on stdout stay clean.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import FilteringBoundLogger

from .settings import settings


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog with JSON or console output and stdlib compatibility.

    Args:
        log_level: Override log level from settings
        log_format: Override log format from settings (production
            defaults to json)
    """
    config = settings()
    level = (log_level or config.log_level).upper()
    format_type = (log_format or config.log_format).lower()

    # Production output is always machine readable unless overridden
    if log_format is None and config.is_production():
        format_type = "json"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
    )

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.contextvars.merge_contextvars,

        # Add service metadata
        lambda _, __, event_dict: {
            **event_dict,
            "service": config.service_name,
            "environment": config.environment,
        },
    ]

    if format_type == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_command(
    logger: FilteringBoundLogger,
    command: str,
    value: str,
    result: Any = None,
    error: Optional[Exception] = None,
    **extra_context
) -> None:
    """
    Log the outcome of a CLI command with structured information.

    Args:
        logger: Logger instance
        command: Command name (dv, validate, format)
        value: RUT value the command received
        result: Command result, if it succeeded
        error: Exception raised by the command, if it failed
        **extra_context: Additional context to include
    """
    context = {
        "command": command,
        "value": value,
        **extra_context
    }

    if error is not None:
        context["error"] = str(error)
        context["error_type"] = type(error).__name__
        logger.info("RUT command rejected", **context)
        return

    context["result"] = result
    logger.debug("RUT command completed", **context)
