"""Rebuild trees from flat parent-referencing records."""

from flat_tree.builder import Entity, TreeBuilder
from flat_tree.core.exceptions import (
    BuilderError,
    CycleDetectedError,
    DuplicateIdError,
    FlatTreeError,
    PipelineError,
    RecordLoadError,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderError",
    "CycleDetectedError",
    "DuplicateIdError",
    "Entity",
    "FlatTreeError",
    "PipelineError",
    "RecordLoadError",
    "TreeBuilder",
]
