"""
Structured logging configuration using structlog.

Provides JSON or console logging with ISO timestamps. Nothing is configured
on import; the CLI calls configure_logging() and library callers keep their
own structlog setup.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger

from .settings import settings


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structlog with JSON or console output.

    Args:
        log_level: Override log level from settings
        log_format: Override log format from settings
    """
    config = settings()
    level = (log_level or config.log_level).upper()
    format_type = (log_format or config.log_format).lower()

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
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level)
        ),
        # stdout carries CLI results
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
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


def log_batch_summary(
    logger: FilteringBoundLogger,
    command: str,
    items_processed: int,
    items_failed: int = 0,
    **extra_context
) -> None:
    """
    Log the outcome of a CLI command over several inputs.

    Args:
        logger: Logger instance
        command: CLI command name
        items_processed: Number of inputs accepted
        items_failed: Number of inputs rejected
        **extra_context: Additional context to include
    """
    total = items_processed + items_failed
    context = {
        "command": command,
        "items_processed": items_processed,
        "items_failed": items_failed,
        "success_rate": round(items_processed / total * 100, 2) if total > 0 else 0,
        **extra_context
    }

    if items_failed > 0:
        logger.warning("Command completed with rejected inputs", **context)
    else:
        logger.info("Command completed successfully", **context)

