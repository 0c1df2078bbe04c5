"""Ranking and deduplication of retained releases."""

from typing import List

from release_retainer.log import RetentionLog
from release_retainer.models import CustomerModel, Deployment
from release_retainer.retention.grouper import Buckets


def _deployed_at_key(deployment: Deployment):
    # Missing timestamps rank below every real one
    return (deployment.deployed_at is not None, deployment.deployed_at or "")


def rank_and_deduplicate(
    customer_model: CustomerModel,
    max_results: int,
    buckets: Buckets,
    log: RetentionLog,
) -> List[str]:
    """Collect the most recently deployed releases of every bucket.

    Each bucket is walked newest first (raw timestamp strings compared
    descending, ties kept in append order) collecting distinct release
    ids until ``max_results`` are held. Bucket results are concatenated
    in bucket order and deduplicated, keeping first occurrences.

    Args:
        customer_model: Customer data the buckets were built from
        max_results: Distinct releases to keep per bucket
        buckets: Output of ``group_by_project_environment``

    Returns:
        Distinct release ids to retain
    """
    releases_to_return: List[str] = []

    for key, deployments in buckets.items():
        retained: List[str] = []

        for deployment in sorted(deployments, key=_deployed_at_key, reverse=True):
            release = customer_model.releases[deployment.release_id]
            log.info(
                f"Retaining Release '{deployment.release_id}'. Version '{release.version}'. "
                f"Most recently deployed for Project/Environment "
                f"'{key.project_id}/{key.environment_id}' at '{deployment.deployed_at}'."
            )

            if deployment.release_id not in retained:
                retained.append(deployment.release_id)

            if len(retained) >= max_results:
                break

        releases_to_return.extend(retained)

    return list(dict.fromkeys(releases_to_return))
