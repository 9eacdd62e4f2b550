"""
Public interface for the tree builder.

    from flat_tree.builder import Entity, TreeBuilder

    builder = TreeBuilder(items, node_constructor, attach_children, entity_initializer)
    tree = builder.build_tree(root_id)
"""

from __future__ import annotations

from .entity import Entity
from .nodes import (
    ExampleData,
    ExampleTree,
    RecordNode,
    attach_record_children,
    example_attach,
    example_entity,
    example_node,
    example_records,
    record_node_constructor,
)
from .tree_builder import DUPLICATE_POLICIES, TreeBuilder

__all__ = [
    "DUPLICATE_POLICIES",
    "Entity",
    "ExampleData",
    "ExampleTree",
    "RecordNode",
    "TreeBuilder",
    "attach_record_children",
    "example_attach",
    "example_entity",
    "example_node",
    "example_records",
    "record_node_constructor",
]
