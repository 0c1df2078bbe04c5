"""Loading of customer records into a ``CustomerModel``.

Record files are exported per entity (``Releases.json``, ``Projects.json``,
``Environments.json``, ``Deployments.json`` or their ``.yaml`` variants),
each holding a list of records.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError

from release_retainer.config import Settings, get_settings
from release_retainer.exceptions import RecordLoadError
from release_retainer.models import (
    CustomerModel,
    Deployment,
    Environment,
    Project,
    RecordModel,
    Release,
    add_all,
    record_id,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RecordModel)

RECORD_FILES = {
    "releases": ("Releases", Release),
    "projects": ("Projects", Project),
    "environments": ("Environments", Environment),
    "deployments": ("Deployments", Deployment),
}

SUFFIXES = {
    "json": (".json",),
    "yaml": (".yaml", ".yml"),
}


def parse_records(
    raw_records: Any,
    model: Type[R],
    source: str = "<records>",
) -> List[R]:
    """Validate decoded records against a record model.

    Args:
        raw_records: Decoded file content, expected to be a list of mappings
        model: Record model class
        source: Name used in error messages

    Returns:
        Parsed records in input order

    Raises:
        RecordLoadError: If the content is not a list of valid records
    """
    if raw_records is None:
        return []
    if not isinstance(raw_records, list):
        raise RecordLoadError(
            f"Expected a list of records in {source}, got {type(raw_records).__name__}",
            source=source,
        )

    records = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            raise RecordLoadError(f"Record {index} in {source} is not a mapping", source=source)
        try:
            records.append(model.model_validate(raw))
        except ValidationError as e:
            raise RecordLoadError(f"Invalid record {index} in {source}: {e}", source=source) from e
    return records


def _build_customer_model(decoded: Dict[str, Any]) -> CustomerModel:
    customer_model = CustomerModel()
    for attr, (entity_name, model) in RECORD_FILES.items():
        records = parse_records(decoded.get(attr), model, entity_name)
        add_all(getattr(customer_model, attr), records, record_id)
    return customer_model


def load_customer_model_from_records(
    releases: Optional[Iterable[Dict[str, Any]]] = None,
    projects: Optional[Iterable[Dict[str, Any]]] = None,
    environments: Optional[Iterable[Dict[str, Any]]] = None,
    deployments: Optional[Iterable[Dict[str, Any]]] = None,
) -> CustomerModel:
    """Build a customer model from decoded record lists.

    Raises:
        RecordLoadError: If a record does not match the model shape
        DuplicateIdentifierError: If an identifier repeats within an entity
    """
    raw = {
        "releases": releases,
        "projects": projects,
        "environments": environments,
        "deployments": deployments,
    }
    return _build_customer_model(
        {attr: list(items) if items is not None else None for attr, items in raw.items()}
    )


def _find_record_file(directory: Path, entity_name: str, record_format: str) -> Optional[Path]:
    for suffix in SUFFIXES[record_format]:
        path = directory / f"{entity_name}{suffix}"
        if path.exists():
            return path
    return None


def _read_record_file(path: Path, record_format: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            if record_format == "yaml":
                return yaml.safe_load(f)
            return json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RecordLoadError(f"Failed to decode {path}: {e}", source=str(path)) from e


def load_customer_model(
    directory: Path | str,
    record_format: str = "json",
) -> CustomerModel:
    """Load a customer model from a directory of record files.

    A missing entity file leaves that collection empty, so the calculator
    reports it instead of the loader.

    Args:
        directory: Directory holding the record files
        record_format: ``json`` or ``yaml``

    Returns:
        Customer model with all four collections

    Raises:
        RecordLoadError: If a file cannot be decoded or a record is malformed
        DuplicateIdentifierError: If an identifier repeats within an entity
    """
    record_format = record_format.lower()
    if record_format not in SUFFIXES:
        raise RecordLoadError(f"Unsupported record format: {record_format}")

    directory = Path(directory)
    decoded: Dict[str, Any] = {}
    for attr, (entity_name, _model) in RECORD_FILES.items():
        path = _find_record_file(directory, entity_name, record_format)
        if path is None:
            logger.warning(f"No {entity_name} record file in {directory}")
            decoded[attr] = None
            continue
        decoded[attr] = _read_record_file(path, record_format)

    customer_model = _build_customer_model(decoded)

    logger.info(
        f"Loaded {len(customer_model.releases)} releases, {len(customer_model.projects)} projects, "
        f"{len(customer_model.environments)} environments and "
        f"{len(customer_model.deployments)} deployments from {directory}"
    )
    return customer_model


def load_customer_model_from_settings(settings: Optional[Settings] = None) -> CustomerModel:
    """Load a customer model from the configured data directory.

    Args:
        settings: Application settings (defaults to ``get_settings()``)

    Returns:
        Customer model loaded from ``retention.data_dir``
    """
    settings = settings or get_settings()
    return load_customer_model(
        settings.retention.data_dir,
        record_format=settings.retention.record_format,
    )
