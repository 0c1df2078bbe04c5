"""Release retention calculator.

This module wires validation, grouping and ranking into the single
operation callers use to find the releases a customer must keep.
"""

from contextlib import nullcontext
from typing import List, Optional

from release_retainer.config import Settings, get_settings
from release_retainer.log import RetentionLog, StructlogRetentionLog
from release_retainer.models import CustomerModel
from release_retainer.observability.logging import correlation_id_scope, get_logger
from release_retainer.retention.grouper import group_by_project_environment
from release_retainer.retention.ranker import rank_and_deduplicate
from release_retainer.retention.validator import validate

logger = get_logger(__name__)


class ReleaseRetentionCalculator:
    """Calculates the releases to retain for a customer.

    Retention rule: for each project/environment pairing keep the
    ``max_results`` most recently deployed distinct releases, then merge
    all pairings without duplicates.

    The calculator holds no per-call state, so one instance can serve many
    customers as long as each call gets its own input snapshot.

    Example:
        calculator = ReleaseRetentionCalculator(log=NullLog())
        release_ids = calculator.compute_retained_releases(2, customer_model)
    """

    def __init__(
        self,
        log: Optional[RetentionLog] = None,
        default_max_results: int = 3,
    ):
        """Initialize the calculator.

        Args:
            log: Diagnostic sink (defaults to a structlog-backed sink)
            default_max_results: Used by ``compute_with_defaults``
        """
        self.log = log if log is not None else StructlogRetentionLog()
        self.default_max_results = default_max_results

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        log: Optional[RetentionLog] = None,
    ) -> "ReleaseRetentionCalculator":
        """Create a calculator from application settings."""
        settings = settings or get_settings()
        return cls(log=log, default_max_results=settings.retention.default_max_results)

    def compute_retained_releases(
        self,
        max_results: int,
        customer_model: Optional[CustomerModel],
        correlation_id: Optional[str] = None,
    ) -> List[str]:
        """Get the release ids to retain.

        Invalid input is reported through the sink and yields an empty
        list; nothing is raised.

        Args:
            max_results: Distinct releases to keep per project/environment
            customer_model: Customer deployment data
            correlation_id: Optional ID tagging every log event of this call

        Returns:
            Distinct release ids, in first-retained order
        """
        scope = correlation_id_scope(correlation_id) if correlation_id else nullcontext()
        with scope:
            if not validate(max_results, customer_model, self.log):
                return []

            buckets = group_by_project_environment(customer_model, self.log)
            retained = rank_and_deduplicate(customer_model, max_results, buckets, self.log)

            logger.info(
                "retention_calculated",
                max_results=max_results,
                buckets=len(buckets),
                retained=len(retained),
            )
            return retained

    def compute_with_defaults(
        self,
        customer_model: Optional[CustomerModel],
        correlation_id: Optional[str] = None,
    ) -> List[str]:
        """Same as ``compute_retained_releases`` using the configured count."""
        return self.compute_retained_releases(
            self.default_max_results,
            customer_model,
            correlation_id=correlation_id,
        )


# Global calculator instance
_retention_calculator: Optional[ReleaseRetentionCalculator] = None


def get_retention_calculator() -> ReleaseRetentionCalculator:
    """Get global retention calculator instance.

    Returns:
        Retention calculator singleton
    """
    global _retention_calculator
    if _retention_calculator is None:
        _retention_calculator = ReleaseRetentionCalculator.from_settings()
    return _retention_calculator


def set_retention_calculator(calculator: Optional[ReleaseRetentionCalculator]) -> None:
    """Set the global retention calculator.

    Args:
        calculator: Calculator instance, or None to rebuild from settings
    """
    global _retention_calculator
    _retention_calculator = calculator


def compute_retained_releases(
    max_results: int,
    customer_model: Optional[CustomerModel],
    log: Optional[RetentionLog] = None,
    correlation_id: Optional[str] = None,
) -> List[str]:
    """Get the release ids to retain for a customer.

    Args:
        max_results: Distinct releases to keep per project/environment
        customer_model: Customer deployment data
        log: Diagnostic sink; the global calculator's sink when omitted
        correlation_id: Optional ID tagging every log event of this call

    Returns:
        Distinct release ids to retain, empty on invalid input
    """
    calculator = ReleaseRetentionCalculator(log=log) if log is not None else get_retention_calculator()
    return calculator.compute_retained_releases(
        max_results,
        customer_model,
        correlation_id=correlation_id,
    )
