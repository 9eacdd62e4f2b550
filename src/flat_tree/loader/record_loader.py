# src/flat_tree/loader/record_loader.py

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List

import yaml

from flat_tree.builder.entity import Entity
from flat_tree.core.exceptions import RecordLoadError
from flat_tree.logging import get_logger

log = get_logger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def resolve_input_path(path: str | Path | None) -> Path | None:
    """
    Absolutize and validate a record file path.

    Returns None when no path was given. Raises FileNotFoundError for a
    missing path and ValueError for anything that is not a regular file.
    """
    if path is None:
        return None

    resolved = Path(path).expanduser().resolve()
    if not resolved.exists():
        log.error("Input file does not exist: %s", resolved)
        raise FileNotFoundError(f"Input file not found: {resolved}")
    if not resolved.is_file():
        log.error("Input path is not a file: %s", resolved)
        raise ValueError(f"Input path is not a file: {resolved}")

    return resolved


def _parse_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RecordLoadError(f"Could not parse {path}: {exc}") from exc

    raise RecordLoadError(
        f"Unsupported record file type {suffix!r} for {path} "
        f"(expected one of {sorted(JSON_SUFFIXES | YAML_SUFFIXES)})"
    )


def load_records(path: str | Path | None) -> List[Dict[str, Any]]:
    """
    Read a flat list of records from a JSON or YAML file.

    Accepted shapes:

        [ {"id": 1, "parent_id": 0, ...}, ... ]
        {"records": [ ... ]}

    Every record must be a mapping. Order is preserved.
    """
    resolved = resolve_input_path(path)
    if resolved is None:
        raise RecordLoadError("No record file given")

    document = _parse_document(resolved)

    if isinstance(document, dict) and "records" in document:
        document = document["records"]

    if not isinstance(document, list):
        raise RecordLoadError(
            f"{resolved} must contain a list of records, got {type(document).__name__}"
        )

    for index, record in enumerate(document):
        if not isinstance(record, dict):
            raise RecordLoadError(
                f"Record #{index} in {resolved} is a {type(record).__name__}, expected a mapping"
            )

    log.info("Loaded %d records from %s", len(document), resolved)
    return document


def mapping_entity_initializer(
    id_field: str = "id",
    parent_field: str = "parent_id",
) -> Callable[[Dict[str, Any]], Entity[Dict[str, Any]]]:
    """
    Return an entity initializer for mapping records.

    A record without ``id_field`` is rejected. A record without
    ``parent_field`` gets ``None`` as parent id.
    """

    def _initialize(record: Dict[str, Any]) -> Entity[Dict[str, Any]]:
        if id_field not in record:
            raise RecordLoadError(f"Record has no {id_field!r} field: {record!r}")
        return Entity(
            id=record[id_field],
            parent_id=record.get(parent_field),
            payload=record,
        )

    return _initialize


def summarize_entities(entities: Iterable[Entity[Any]]) -> Dict[str, int]:
    """
    Count what a builder was given.

    top_level counts entities whose parent id is not the id of any entity,
    i.e. the natural roots of the forest.
    """
    entities = list(entities)
    id_counts = Counter(entity.id for entity in entities)
    known_ids = set(id_counts)

    return {
        "records": len(entities),
        "unique_ids": len(known_ids),
        "duplicate_ids": sum(1 for count in id_counts.values() if count > 1),
        "top_level": sum(1 for entity in entities if entity.parent_id not in known_ids),
    }
