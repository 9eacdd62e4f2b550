from __future__ import annotations

import pytest

from flat_tree.builder import (
    Entity,
    ExampleData,
    ExampleTree,
    RecordNode,
    attach_record_children,
    example_attach,
    example_entity,
    example_records,
    record_node_constructor,
)
from flat_tree.core.exceptions import RecordLoadError


def test_example_records_match_sample_layout() -> None:
    records = example_records()

    assert [(r.id, r.parent_id, r.name) for r in records] == [
        (1, 0, "01"),
        (2, 1, "01-02"),
        (3, 1, "01-03"),
        (4, 2, "01-02-04"),
        (5, 2, "01-02-05"),
        (6, 5, "01-02-05-06"),
    ]


def test_example_entity_wraps_payload() -> None:
    data = ExampleData(id=7, parent_id=3, name="x")
    entity = example_entity(data)

    assert entity == Entity(id=7, parent_id=3, payload=data)


def test_example_attach_appends_to_existing_children() -> None:
    parent = ExampleTree(id=1, parent_id=0, name="p")
    example_attach(parent, [ExampleTree(id=2, parent_id=1, name="a")])
    example_attach(parent, [ExampleTree(id=3, parent_id=1, name="b")])

    assert [c.name for c in parent.children] == ["a", "b"]


def test_example_tree_to_dict_keeps_null_children_for_leaves() -> None:
    parent = ExampleTree(id=1, parent_id=0, name="p")
    example_attach(parent, [ExampleTree(id=2, parent_id=1, name="a")])

    assert parent.to_dict() == {
        "id": 1,
        "parent_id": 0,
        "name": "p",
        "children": [{"id": 2, "parent_id": 1, "name": "a", "children": None}],
    }


def test_record_node_constructor_copies_record() -> None:
    record = {"id": 1, "name": "a"}
    node = record_node_constructor()(record)
    record["name"] = "changed"

    assert node == RecordNode(record={"id": 1, "name": "a"})


def test_record_node_constructor_skip_matches_strings_and_numbers() -> None:
    construct = record_node_constructor({"status": "hidden", "id": "3"})

    assert construct({"id": 1, "status": "hidden"}) is None
    assert construct({"id": 3}) is None
    assert construct({"id": 4, "status": "shown"}) is not None
    assert construct({"id": 5}) is not None


def test_record_node_to_dict_nests_children() -> None:
    parent = RecordNode(record={"id": 1})
    attach_record_children(parent, [RecordNode(record={"id": 2})])

    assert parent.to_dict() == {"id": 1, "children": [{"id": 2, "children": []}]}


def test_record_node_custom_children_key() -> None:
    construct = record_node_constructor(children_key="items")
    parent = construct({"id": 1})
    attach_record_children(parent, [construct({"id": 2})])

    assert parent.to_dict() == {"id": 1, "items": [{"id": 2, "items": []}]}


def test_record_with_children_field_is_rejected() -> None:
    with pytest.raises(RecordLoadError, match="'children'"):
        record_node_constructor()({"id": 1, "children": 3})


def test_record_with_children_field_kept_under_other_key() -> None:
    node = record_node_constructor(children_key="kids")({"id": 1, "children": 3})

    assert node.to_dict() == {"id": 1, "children": 3, "kids": []}


def test_record_node_to_dict_refuses_to_overwrite_field() -> None:
    node = RecordNode(record={"id": 1, "children": 3})

    with pytest.raises(RecordLoadError):
        node.to_dict()
