"""Structured logging configuration for the release retainer.

This module configures structlog on top of the standard library logging
module and tracks a correlation ID so that diagnostics emitted during one
retention calculation can be grouped together.
"""

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import FilteringBoundLogger

from release_retainer.config import Settings, get_settings

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class StructuredLogger:
    """Structured logging manager.

    Configures structlog once per process, with JSON output for production
    and a console renderer for development.

    Example:
        >>> logger = StructuredLogger()
        >>> logger.setup_logging(json_format=False)
        >>> log = logger.get_logger("release_retainer")
        >>> log.info("retention_calculated", retained=3)
    """

    def __init__(self):
        """Initialize the structured logger."""
        self._configured = False

    def setup_logging(
        self,
        json_format: bool = True,
        log_level: str = "INFO",
    ) -> None:
        """Setup structured logging configuration.

        Args:
            json_format: Whether to output JSON format (vs. console)
            log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        if self._configured:
            return

        level = getattr(logging, log_level.upper())
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=level,
        )
        # basicConfig is a no-op once the root logger has handlers
        logging.getLogger().setLevel(level)

        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            self._add_correlation_id,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        if json_format:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        self._configured = True

    def _add_correlation_id(
        self,
        logger: FilteringBoundLogger,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        """Add correlation ID to log events.

        Args:
            logger: Logger instance
            method_name: Method being called
            event_dict: Event dictionary being built

        Returns:
            Updated event dictionary
        """
        corr_id = _correlation_id.get()
        if corr_id:
            event_dict["correlation_id"] = corr_id
        return event_dict

    def get_logger(self, name: str) -> FilteringBoundLogger:
        """Get a logger instance.

        Args:
            name: Logger name (usually module name)

        Returns:
            Configured structlog logger
        """
        if not self._configured:
            self.setup_logging()
        return structlog.get_logger(name)


# Global logger instance
_structured_logger: StructuredLogger | None = None


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    global _structured_logger
    if _structured_logger is None:
        _structured_logger = StructuredLogger()
    return _structured_logger.get_logger(name)


def setup_logging(
    json_format: bool = True,
    log_level: str = "INFO",
    **kwargs: Any,
) -> StructuredLogger:
    """Setup structured logging globally.

    Args:
        json_format: Whether to output JSON
        log_level: Minimum log level
        **kwargs: Additional configuration

    Returns:
        Configured StructuredLogger
    """
    global _structured_logger
    _structured_logger = StructuredLogger()
    _structured_logger.setup_logging(
        json_format=json_format,
        log_level=log_level,
        **kwargs,
    )
    return _structured_logger


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return _correlation_id.get()


@contextmanager
def correlation_id_scope(correlation_id: str) -> Generator[None, None, None]:
    """Context manager for correlation ID scope.

    Args:
        correlation_id: Correlation ID to set

    Yields:
        None

    Example:
        >>> with correlation_id_scope("customer-42"):
        ...     logger.info("retention_started")
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id.reset(token)


def setup_logging_from_settings(settings: Settings | None = None) -> StructuredLogger:
    """Setup structured logging from the observability settings.

    Args:
        settings: Application settings (defaults to ``get_settings()``)

    Returns:
        Configured StructuredLogger
    """
    settings = settings or get_settings()
    return setup_logging(
        json_format=settings.observability.format == "json",
        log_level=settings.observability.level,
    )
