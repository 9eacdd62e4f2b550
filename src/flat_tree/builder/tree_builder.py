# src/flat_tree/builder/tree_builder.py

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from flat_tree.core.exceptions import CycleDetectedError, DuplicateIdError
from flat_tree.logging import get_logger

from .entity import Entity

log = get_logger(__name__)

T = TypeVar("T")
P = TypeVar("P")
N = TypeVar("N")

DUPLICATE_POLICIES = ("first", "error")


class TreeBuilder(Generic[T, P, N]):
    """
    Rebuild a tree from a flat list of parent-referencing records.

    The builder never looks inside the caller's types. It is wired to them
    through three functions:

        entity_initializer(item) -> Entity
            Called exactly once per input item, in input order, at
            construction time.
        node_constructor(payload) -> node | None
            Called once per materialized entity on every ``build_tree`` call.
            Returning None suppresses the entity together with its whole
            subtree.
        attach_children(parent, children) -> None
            Mutates ``parent``. Called once per node that ends up with at
            least one child, with the complete ordered child list.

    Entities are indexed once (id -> first entity, parent id -> children in
    input order), so ``build_tree`` can be called any number of times and
    each call produces an independent tree.
    """

    def __init__(
        self,
        items: Iterable[T],
        node_constructor: Callable[[P], Optional[N]],
        attach_children: Callable[[N, List[N]], None],
        entity_initializer: Callable[[T], Entity[P]],
        *,
        duplicate_ids: str = "first",
        detect_cycles: bool = True,
    ) -> None:
        if duplicate_ids not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_ids must be one of {DUPLICATE_POLICIES}, got {duplicate_ids!r}"
            )

        self._node_constructor = node_constructor
        self._attach_children = attach_children
        self._detect_cycles = detect_cycles

        self._entities: Tuple[Entity[P], ...] = tuple(
            entity_initializer(item) for item in items
        )

        by_id: Dict[Hashable, Entity[P]] = {}
        first_index: Dict[Hashable, int] = {}
        by_parent: Dict[Hashable, List[Entity[P]]] = {}

        for index, entity in enumerate(self._entities):
            if entity.id in by_id:
                if duplicate_ids == "error":
                    raise DuplicateIdError(entity.id, first_index[entity.id], index)
                log.debug("Duplicate id %r at position %d ignored for lookup", entity.id, index)
            else:
                by_id[entity.id] = entity
                first_index[entity.id] = index

            by_parent.setdefault(entity.parent_id, []).append(entity)

        self._by_id = by_id
        self._by_parent = by_parent

        log.debug(
            "TreeBuilder ready: entities=%d unique_ids=%d parents=%d",
            len(self._entities),
            len(by_id),
            len(by_parent),
        )

    # ------------------------------------------------------------------ #
    # Index accessors
    # ------------------------------------------------------------------ #

    @property
    def entities(self) -> Tuple[Entity[P], ...]:
        """All entities, in input order."""
        return self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def get_entity(self, entity_id: Hashable) -> Optional[Entity[P]]:
        """Return the first entity carrying ``entity_id``, if any."""
        return self._by_id.get(entity_id)

    def children_of(self, parent_id: Hashable) -> Tuple[Entity[P], ...]:
        return tuple(self._by_parent.get(parent_id, ()))

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def build_tree(self, root_id: Hashable) -> Optional[N]:
        """
        Materialize the subtree reachable from ``root_id``.

        Returns None when no entity has that id, or when the node
        constructor declines the root payload. Neither case is an error.

        Raises:
            CycleDetectedError: an id reappears on its own ancestor path
                (only when cycle detection is enabled).
        """
        entity = self._by_id.get(root_id)
        if entity is None:
            log.debug("Root %r not found among %d entities", root_id, len(self._entities))
            return None

        root = self._node_constructor(entity.payload)
        if root is None:
            log.debug("Root %r suppressed by node constructor", root_id)
            return None

        path: List[Hashable] = [entity.id]
        children = self._assemble_children(entity.id, path)
        if children:
            self._attach_children(root, children)
        return root

    def _assemble_children(self, parent_id: Hashable, path: List[Hashable]) -> List[N]:
        nodes: List[N] = []

        for entity in self._by_parent.get(parent_id, ()):
            node = self._node_constructor(entity.payload)
            if node is None:
                continue

            if self._detect_cycles and entity.id in path:
                raise CycleDetectedError([*path, entity.id])

            path.append(entity.id)
            try:
                children = self._assemble_children(entity.id, path)
            finally:
                path.pop()

            if children:
                self._attach_children(node, children)
            nodes.append(node)

        return nodes
