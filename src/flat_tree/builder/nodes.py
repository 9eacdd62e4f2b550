"""
Ready-made node types and the functions that wire them into a TreeBuilder.

Two flavours live here:

* ``RecordNode`` wraps a plain mapping (what the JSON/YAML loader produces)
  and is what the CLI builds.
* ``ExampleData`` / ``ExampleTree`` are a small typed domain used by the
  sample data set and as a reference for writing your own collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from flat_tree.core.exceptions import RecordLoadError

from .entity import Entity


# ---------------------------------------------------------------------- #
# Mapping records
# ---------------------------------------------------------------------- #

@dataclass
class RecordNode:
    record: Dict[str, Any]
    children: List["RecordNode"] = field(default_factory=list)
    children_key: str = "children"

    def to_dict(self) -> Dict[str, Any]:
        if self.children_key in self.record:
            raise RecordLoadError(
                f"Record already has a {self.children_key!r} field: {self.record!r}"
            )
        data = dict(self.record)
        data[self.children_key] = [child.to_dict() for child in self.children]
        return data


def record_node_constructor(
    skip: Optional[Mapping[str, Any]] = None,
    children_key: str = "children",
):
    """
    Return a node constructor for mapping records.

    A record whose value equals ``skip[field]`` for any listed field is
    suppressed, which drops its whole subtree from the result. Values are
    compared both as-is and as strings so command-line input matches
    numeric fields.

    A record that already carries ``children_key`` is rejected with
    RecordLoadError; pick another key for such data.
    """
    rules = dict(skip or {})

    def _construct(record: Dict[str, Any]) -> Optional[RecordNode]:
        for key, expected in rules.items():
            if key not in record:
                continue
            value = record[key]
            if value == expected or str(value) == str(expected):
                return None
        if children_key in record:
            raise RecordLoadError(
                f"Record already has a {children_key!r} field: {record!r}"
            )
        return RecordNode(record=dict(record), children_key=children_key)

    return _construct


def attach_record_children(parent: RecordNode, children: List[RecordNode]) -> None:
    parent.children.extend(children)


# ---------------------------------------------------------------------- #
# Example domain
# ---------------------------------------------------------------------- #

@dataclass
class ExampleData:
    id: int
    parent_id: int
    name: str


@dataclass
class ExampleTree:
    id: int
    parent_id: int
    name: str
    children: Optional[List["ExampleTree"]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "parent_id": self.parent_id,
            "name": self.name,
            "children": (
                None if self.children is None
                else [child.to_dict() for child in self.children]
            ),
        }


def example_records() -> List[ExampleData]:
    """Six records forming one tree under id 1 (0 means "no parent")."""
    return [
        ExampleData(id=1, parent_id=0, name="01"),
        ExampleData(id=2, parent_id=1, name="01-02"),
        ExampleData(id=3, parent_id=1, name="01-03"),
        ExampleData(id=4, parent_id=2, name="01-02-04"),
        ExampleData(id=5, parent_id=2, name="01-02-05"),
        ExampleData(id=6, parent_id=5, name="01-02-05-06"),
    ]


def example_node(data: ExampleData) -> ExampleTree:
    return ExampleTree(id=data.id, parent_id=data.parent_id, name=data.name)


def example_attach(parent: ExampleTree, children: List[ExampleTree]) -> None:
    if parent.children is None:
        parent.children = []
    parent.children.extend(children)


def example_entity(data: ExampleData) -> Entity[ExampleData]:
    return Entity(id=int(data.id), parent_id=int(data.parent_id), payload=data)
