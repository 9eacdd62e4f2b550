from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional

import typer
from rich.console import Console

from flat_tree.config import get_config
from flat_tree.core.context import BuildContext
from flat_tree.logging import get_logger, set_debug

console = Console(stderr=True)


def coerce_id(raw: str) -> Hashable:
    """Command-line ids are strings; numeric ones become ints to match JSON/YAML data."""
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        return text


def parse_skip_rules(rules: Optional[List[str]]) -> Dict[str, Any]:
    """
    Turn ``FIELD=VALUE`` options into a skip mapping.
    """
    parsed: Dict[str, Any] = {}
    for rule in rules or []:
        key, sep, value = rule.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected FIELD=VALUE, got {rule!r}", param_hint="--skip")
        parsed[key.strip()] = value.strip()
    return parsed


def make_context(
    records: Path,
    *,
    root: Optional[str] = None,
    out: Optional[Path] = None,
    id_field: Optional[str] = None,
    parent_field: Optional[str] = None,
    children_key: Optional[str] = None,
    skip: Optional[List[str]] = None,
    pretty: bool = False,
    verbose: bool = False,
) -> BuildContext:
    cfg = get_config()
    if verbose:
        set_debug(True)

    return BuildContext(
        config=cfg,
        logger=get_logger("cli"),
        input_path=str(records),
        root_id=coerce_id(root) if root is not None else None,
        output_path=str(out) if out else None,
        id_field=id_field,
        parent_field=parent_field,
        children_key=children_key,
        skip=parse_skip_rules(skip),
        indent=2 if pretty else None,
        debug=verbose or bool(cfg.debug),
    )
