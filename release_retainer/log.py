"""Diagnostic sink used by the retention core.

The core never writes output itself. It reports through a ``RetentionLog``
supplied by the caller, which makes silent or capturing sinks trivial.
"""

from typing import Any, Optional, Protocol

from release_retainer.observability.logging import get_logger


class RetentionLog(Protocol):
    """Protocol for retention diagnostic sinks."""

    def info(self, message: str) -> None:
        """Report progress, such as a retained release."""
        ...

    def error(self, message: str) -> None:
        """Report invalid input or a broken reference."""
        ...


class StructlogRetentionLog:
    """Retention sink backed by a structlog logger.

    Example:
        >>> log = StructlogRetentionLog()
        >>> log.error("Release Id 'R9' does not exist.")
    """

    def __init__(self, logger: Optional[Any] = None, name: str = "release_retainer.retention"):
        """Initialize the sink.

        Args:
            logger: Bound structlog logger (defaults to ``get_logger(name)``)
            name: Logger name used when no logger is given
        """
        self._logger = logger if logger is not None else get_logger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


class NullLog:
    """Sink that discards every message."""

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass
