from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional


@dataclass
class BuildContext:
    """
    Shared run context.
    Carries everything one load -> build -> export run needs.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    root_id: Optional[Hashable] = None
    output_path: Optional[str] = None

    id_field: Optional[str] = None
    parent_field: Optional[str] = None
    children_key: Optional[str] = None
    skip: Dict[str, Any] = field(default_factory=dict)
    indent: Optional[int] = 2

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
