"""Input validation for the retention calculation."""

from typing import Optional

from release_retainer.log import RetentionLog
from release_retainer.models import CustomerModel


def validate(
    max_results: int,
    customer_model: Optional[CustomerModel],
    log: RetentionLog,
) -> bool:
    """Check that the calculation can run at all.

    Conditions are checked in order and the first failure is reported
    through ``log.error``:

    1. ``max_results`` must be positive
    2. ``customer_model`` must be given
    3. releases, deployments, environments and projects must each be
       present and non-empty

    Args:
        max_results: Number of releases to keep per project/environment
        customer_model: Customer deployment data
        log: Diagnostic sink

    Returns:
        True if processing can continue, False if it must stop
    """
    if max_results <= 0:
        log.error(f"Invalid maxResults parameter value '{max_results}'.")
        return False

    if customer_model is None:
        log.error("Invalid customerModel parameter value 'None'.")
        return False

    collections = (
        ("releases", customer_model.releases),
        ("deployments", customer_model.deployments),
        ("environments", customer_model.environments),
        ("projects", customer_model.projects),
    )
    for name, collection in collections:
        if not collection:
            log.error(f"Invalid customerModel.{name} parameter value.")
            return False

    return True
