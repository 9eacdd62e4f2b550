from __future__ import annotations

from typing import Hashable, Sequence


class FlatTreeError(Exception):
    """Base exception for flat-tree failures."""


class BuilderError(FlatTreeError):
    """Raised when the entity list cannot be turned into a tree."""


class DuplicateIdError(BuilderError):
    """Raised when an id occurs twice and duplicates are not allowed."""

    def __init__(self, entity_id: Hashable, first_index: int, index: int):
        self.entity_id = entity_id
        self.first_index = first_index
        self.index = index
        super().__init__(
            f"Duplicate entity id {entity_id!r} at position {index} "
            f"(first seen at position {first_index})"
        )


class CycleDetectedError(BuilderError):
    """Raised when an id reappears on its own ancestor path."""

    def __init__(self, path: Sequence[Hashable]):
        self.path = tuple(path)
        chain = " -> ".join(repr(p) for p in self.path)
        super().__init__(f"Parent cycle detected: {chain}")


class RecordLoadError(FlatTreeError):
    """Raised when an input file does not hold a usable record list."""


class PipelineError(FlatTreeError):
    """Raised when the load/build/export pipeline fails."""
