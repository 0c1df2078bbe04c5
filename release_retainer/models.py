"""Data model for customer deployment histories.

Records are plain pydantic models keyed by opaque string identifiers.
References between them (deployment -> release, deployment -> environment,
release -> project) are soft: the referenced identifier may be blank or
may not exist in the corresponding collection.
"""

from typing import Callable, Dict, Iterable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from release_retainer.exceptions import DuplicateIdentifierError

T = TypeVar("T")


class RecordModel(BaseModel):
    """Base for all customer records.

    Accepts both the PascalCase keys of exported record files
    (``Id``, ``ProjectId``...) and snake_case field names.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    id: str


class Project(RecordModel):
    """A project owning releases."""

    name: Optional[str] = None


class Environment(RecordModel):
    """A deployment target such as Staging or Production."""

    name: Optional[str] = None


class Release(RecordModel):
    """A versioned build artifact belonging to one project.

    Attributes:
        id: Release identifier
        project_id: Owning project identifier (soft reference)
        version: Version label, informational only
        created: Creation timestamp, informational only
    """

    project_id: Optional[str] = None
    version: Optional[str] = None
    created: Optional[str] = None


class Deployment(RecordModel):
    """One release deployed to one environment at one time.

    Attributes:
        id: Deployment identifier
        release_id: Deployed release identifier (soft reference)
        environment_id: Target environment identifier (soft reference)
        deployed_at: Lexicographically sortable timestamp (ISO-8601)
    """

    release_id: Optional[str] = None
    environment_id: Optional[str] = None
    deployed_at: Optional[str] = None


class CustomerModel(BaseModel):
    """All deployment data of one customer.

    Each collection maps identifier to record. A collection may be
    ``None`` (absent) or empty; the validator rejects both.
    """

    releases: Optional[Dict[str, Release]] = Field(default_factory=dict)
    projects: Optional[Dict[str, Project]] = Field(default_factory=dict)
    environments: Optional[Dict[str, Environment]] = Field(default_factory=dict)
    deployments: Optional[Dict[str, Deployment]] = Field(default_factory=dict)


def add_all(
    mapping: Dict[str, T],
    items: Iterable[T],
    key_fn: Callable[[T], str],
) -> Dict[str, T]:
    """Insert items into a mapping keyed by ``key_fn``.

    Args:
        mapping: Target mapping, modified in place
        items: Items to insert, in order
        key_fn: Extracts the key of an item

    Returns:
        The same mapping, for chaining

    Raises:
        DuplicateIdentifierError: If a key is already present
    """
    for item in items:
        key = key_fn(item)
        if key in mapping:
            raise DuplicateIdentifierError(key)
        mapping[key] = item
    return mapping


def record_id(record: RecordModel) -> str:
    """Key function for record collections."""
    return record.id
