# src/flat_tree/loader/__init__.py

"""
Public interface for the record loader.

    from flat_tree.loader import (
        load_records,
        mapping_entity_initializer,
        resolve_input_path,
        summarize_entities,
    )
"""

from __future__ import annotations

from .record_loader import load_records, mapping_entity_initializer, resolve_input_path, summarize_entities

__all__ = [
    "load_records",
    "mapping_entity_initializer",
    "resolve_input_path",
    "summarize_entities",
]
