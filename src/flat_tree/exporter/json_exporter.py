"""
json_exporter.py
JSON exporter for built trees.

This exporter:
- Converts nodes (dataclasses, objects, mappings) to dictionaries, not strings
- Uses a node's own ``to_dict()`` when it has one
- Is deterministic: key order follows the node, child order follows the tree
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

from flat_tree.logging import get_logger

log = get_logger(__name__)


def tree_to_dict(obj: Any) -> Any:
    """
    Recursively convert a tree (or any node value) into JSON-compatible data.

    Rules:
    - Primitives pass through
    - objects with a callable ``to_dict`` -> its result (recursively)
    - dataclasses -> dict (recursively, field by field)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Unknown objects -> __dict__ if present, else str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict) and not isinstance(obj, type):
        return tree_to_dict(to_dict())

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: tree_to_dict(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): tree_to_dict(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [tree_to_dict(v) for v in obj]

    if hasattr(obj, "__dict__"):
        return {k: tree_to_dict(v) for k, v in vars(obj).items()}

    return str(obj)


def serialize_tree_to_json_string(tree: Any, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(tree_to_dict(tree), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(tree_to_dict(tree), indent=indent, ensure_ascii=False)


def export_tree_json(tree: Any, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info("Exporting tree JSON to: %s", output_path)

    json_str = serialize_tree_to_json_string(tree, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
