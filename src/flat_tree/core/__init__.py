from flat_tree.core.exceptions import (
    BuilderError,
    CycleDetectedError,
    DuplicateIdError,
    FlatTreeError,
    PipelineError,
    RecordLoadError,
)

__all__ = [
    "BuilderError",
    "CycleDetectedError",
    "DuplicateIdError",
    "FlatTreeError",
    "PipelineError",
    "RecordLoadError",
]
