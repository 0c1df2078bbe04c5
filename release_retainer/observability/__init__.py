"""Observability helpers for the release retainer."""

from release_retainer.observability.logging import (
    StructuredLogger,
    correlation_id_scope,
    get_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
    setup_logging_from_settings,
)

__all__ = [
    "StructuredLogger",
    "correlation_id_scope",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
    "setup_logging",
    "setup_logging_from_settings",
]
