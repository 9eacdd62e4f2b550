from __future__ import annotations

from typing import Hashable, Optional

from flat_tree.builder import (
    RecordNode,
    TreeBuilder,
    attach_record_children,
    record_node_constructor,
)
from flat_tree.core.context import BuildContext
from flat_tree.core.exceptions import PipelineError
from flat_tree.exporter import export_tree_json
from flat_tree.loader import load_records, mapping_entity_initializer, summarize_entities


class Pipeline:
    """
    Orchestrates load -> build -> export.
    No tree logic lives here.
    """

    def __init__(self, context: BuildContext):
        self.ctx = context
        self.log = context.logger

    def _field(self, name: str) -> str:
        override = getattr(self.ctx, name)
        return override or self.ctx.config.loader[name]

    def load(self) -> TreeBuilder:
        records = load_records(self.ctx.input_path)
        builder_cfg = self.ctx.config.builder

        builder = TreeBuilder(
            records,
            record_node_constructor(self.ctx.skip, children_key=self._field("children_key")),
            attach_record_children,
            mapping_entity_initializer(
                id_field=self._field("id_field"),
                parent_field=self._field("parent_field"),
            ),
            duplicate_ids=builder_cfg.get("duplicate_ids", "first"),
            detect_cycles=bool(builder_cfg.get("detect_cycles", True)),
        )
        self.ctx.stats.update(summarize_entities(builder.entities))
        return builder

    def resolve_root(self, builder: TreeBuilder) -> Hashable:
        """
        Match the requested root against the builder's ids.

        Command-line ids arrive coerced to int; files may store them as strings.
        """
        root_id = self.ctx.root_id
        candidates = [root_id]
        if isinstance(root_id, int) and not isinstance(root_id, bool):
            candidates.append(str(root_id))

        for candidate in candidates:
            if builder.get_entity(candidate) is not None:
                return candidate
        return root_id

    def run(self) -> Optional[RecordNode]:
        self.log.info("Pipeline starting")

        try:
            builder = self.load()
            tree = builder.build_tree(self.resolve_root(builder))
            self.ctx.stats["found"] = tree is not None

            if tree is None:
                self.log.warning("No tree for root %r", self.ctx.root_id)
            elif self.ctx.output_path:
                export_tree_json(tree, self.ctx.output_path, indent=self.ctx.indent)

            self.log.info("Pipeline completed successfully")

            return tree

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineError(str(exc)) from exc
