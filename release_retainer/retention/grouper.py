"""Grouping of deployments by project/environment pairing."""

from typing import Dict, List, NamedTuple

from release_retainer.log import RetentionLog
from release_retainer.models import CustomerModel, Deployment


class ProjectEnvironmentKey(NamedTuple):
    """Bucket key for one project/environment pairing."""

    project_id: str
    environment_id: str


Buckets = Dict[ProjectEnvironmentKey, List[Deployment]]


def _is_blank(value) -> bool:
    return value is None or not value.strip()


def group_by_project_environment(
    customer_model: CustomerModel,
    log: RetentionLog,
) -> Buckets:
    """Partition deployments into project/environment buckets.

    A deployment is dropped, with an error reported, when its release,
    the release's project or its environment is blank or unknown. The
    referenced records stay valid for every other deployment.

    Buckets are created in the order their first deployment is seen and
    keep deployments in input order.

    Args:
        customer_model: Validated customer data
        log: Diagnostic sink

    Returns:
        Deployments keyed by (project id, environment id)
    """
    buckets: Buckets = {}

    for deployment in customer_model.deployments.values():
        release = None
        if not _is_blank(deployment.release_id):
            release = customer_model.releases.get(deployment.release_id)
        if release is None:
            log.error(
                f"Release Id '{deployment.release_id}' from Deployment "
                f"'{deployment.id}' does not exist. Release will not be retained."
            )
            continue

        if _is_blank(release.project_id) or release.project_id not in customer_model.projects:
            log.error(
                f"Project Id '{release.project_id}' does not exist. Release "
                f"'{release.id}' from Deployment '{deployment.id}' will not be retained."
            )
            continue

        if (
            _is_blank(deployment.environment_id)
            or deployment.environment_id not in customer_model.environments
        ):
            log.error(
                f"Environment Id '{deployment.environment_id}' does not exist. Release "
                f"'{release.id}' from Deployment '{deployment.id}' will not be retained."
            )
            continue

        key = ProjectEnvironmentKey(release.project_id, deployment.environment_id)
        buckets.setdefault(key, []).append(deployment)

    return buckets
