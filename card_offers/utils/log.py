"""Logging configuration using structlog."""

import logging
import sys
import time
from typing import Any, Dict, Optional

import structlog

from .config import settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None):
    """Configure structured logging.

    Logs go to stderr so CLI output on stdout stays clean. ``log_format``
    selects the JSON renderer ("json") or structlog's console renderer
    ("console"); both default to the configured settings.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    renderer = (
        structlog.dev.ConsoleRenderer()
        if (log_format or settings.LOG_FORMAT) == "console"
        else structlog.processors.JSONRenderer()
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )

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
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin giving a class a structlog logger plus timed start/success/error events."""

    @property
    def logger(self) -> structlog.BoundLogger:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    def log_start(self, event: str, **kwargs: Any) -> Dict[str, Any]:
        """Log the start of ``event`` and return the context to pass to log_success/log_error."""
        context = {"event": event, "start_time": time.perf_counter(), **kwargs}
        self.logger.info(f"{event} started", **_without_event(context))
        return context

    def log_success(self, context: Dict[str, Any], **kwargs: Any):
        self.logger.info(
            f"{context.get('event', 'operation')} completed",
            **_without_event(context),
            **_elapsed(context),
            **kwargs,
        )

    def log_error(self, context: Dict[str, Any], error: Exception, **kwargs: Any):
        self.logger.error(
            f"{context.get('event', 'operation')} failed",
            **_without_event(context),
            **_elapsed(context),
            error=str(error),
            error_type=type(error).__name__,
            **kwargs,
        )


def _without_event(context: Dict[str, Any]) -> Dict[str, Any]:
    # "event" is structlog's positional message key
    return {k: v for k, v in context.items() if k not in ("event", "start_time")}


def _elapsed(context: Dict[str, Any]) -> Dict[str, int]:
    if "start_time" not in context:
        return {}
    return {"duration_ms": int((time.perf_counter() - context["start_time"]) * 1000)}
