"""Release retention calculation.

Validation, grouping by project/environment and ranking of deployments
into the set of releases a customer must keep.
"""

from release_retainer.retention.calculator import (
    ReleaseRetentionCalculator,
    compute_retained_releases,
    get_retention_calculator,
    set_retention_calculator,
)
from release_retainer.retention.grouper import ProjectEnvironmentKey, group_by_project_environment
from release_retainer.retention.ranker import rank_and_deduplicate
from release_retainer.retention.validator import validate

__all__ = [
    "ProjectEnvironmentKey",
    "ReleaseRetentionCalculator",
    "compute_retained_releases",
    "get_retention_calculator",
    "group_by_project_environment",
    "rank_and_deduplicate",
    "set_retention_calculator",
    "validate",
]
