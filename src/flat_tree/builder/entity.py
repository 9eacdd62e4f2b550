from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Optional, TypeVar

P = TypeVar("P")


@dataclass(frozen=True)
class Entity(Generic[P]):
    """
    Internal record derived from one caller-supplied item.

    Attributes:
        id:
            Opaque, hashable key. Expected to be unique within one builder.
        parent_id:
            Id of the containing entity, or whatever sentinel the caller uses
            for "no parent" (``0``, ``None``, ...).
        payload:
            The original caller data. Never inspected by the builder.
    """

    id: Hashable
    parent_id: Optional[Hashable]
    payload: P
