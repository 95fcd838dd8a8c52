"""Structured logging configuration using structlog.

Binds the source image and target size of a crop run to every log event
and supports JSON (for pipelines) or colored console (for humans) output.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from smartcrop.config import settings

# Context variables for the crop currently in progress
_source: ContextVar[str | None] = ContextVar("source", default=None)
_target: ContextVar[str | None] = ContextVar("target", default=None)


def bind_crop_context(
    source: str | None = None,
    target: str | None = None,
) -> None:
    """Attach crop identifiers to log events in the current context.

    Args:
        source: Input image path (or another label for in-memory images).
        target: Requested size, e.g. "800x600" or "square".
    """
    if source is not None:
        _source.set(source)
    if target is not None:
        _target.set(target)


def clear_crop_context() -> None:
    """Clear all crop context variables."""
    _source.set(None)
    _target.set(None)


def _add_crop_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding the crop context to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    source = _source.get()
    target = _target.get()

    if source is not None:
        event_dict["source"] = source
    if target is not None:
        event_dict["target"] = target

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_crop_context,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # basicConfig is a no-op once handlers exist, so set the level explicitly
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )
    logging.getLogger().setLevel(getattr(logging, level.upper()))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
