from __future__ import annotations

import json
from pathlib import Path

import pytest

from flat_tree.config import get_config
from flat_tree.core.context import BuildContext
from flat_tree.core.exceptions import CycleDetectedError, PipelineError, RecordLoadError
from flat_tree.core.pipeline import Pipeline
from flat_tree.logging import get_logger


def _ctx(path: Path, root, **kwargs) -> BuildContext:
    return BuildContext(
        config=get_config(),
        logger=get_logger("tests.pipeline"),
        input_path=str(path),
        root_id=root,
        **kwargs,
    )


def test_pipeline_builds_record_tree(data_dir: Path) -> None:
    ctx = _ctx(data_dir / "records.json", 1)

    tree = Pipeline(ctx).run()

    assert tree.record["name"] == "01"
    assert [c.record["name"] for c in tree.children] == ["01-02", "01-03"]
    assert ctx.stats == {
        "records": 6,
        "unique_ids": 6,
        "duplicate_ids": 0,
        "top_level": 1,
        "found": True,
    }


def test_pipeline_field_overrides_and_skip(data_dir: Path) -> None:
    ctx = _ctx(
        data_dir / "records.yml",
        "a",
        id_field="key",
        parent_field="up",
        skip={"title": "Beta"},
    )

    tree = Pipeline(ctx).run()

    assert [c.record["title"] for c in tree.children] == ["Gamma"]


def test_pipeline_missing_root_is_not_an_error(data_dir: Path) -> None:
    ctx = _ctx(data_dir / "records.json", 99)

    assert Pipeline(ctx).run() is None
    assert ctx.stats["found"] is False


def test_pipeline_exports_when_output_path_set(data_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "tree.json"
    ctx = _ctx(data_dir / "records.json", 2, output_path=str(out))

    Pipeline(ctx).run()

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["name"] == "01-02"
    assert [c["name"] for c in data["children"]] == ["01-02-04", "01-02-05"]


def test_pipeline_wraps_load_errors(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"not": "a list"}', encoding="utf-8")

    with pytest.raises(PipelineError) as excinfo:
        Pipeline(_ctx(path, 1)).run()

    assert isinstance(excinfo.value.__cause__, RecordLoadError)


def test_pipeline_wraps_cycles(tmp_path: Path) -> None:
    path = tmp_path / "cycle.json"
    path.write_text(json.dumps([{"id": 1, "parent_id": 1}]), encoding="utf-8")

    with pytest.raises(PipelineError) as excinfo:
        Pipeline(_ctx(path, 1)).run()

    assert isinstance(excinfo.value.__cause__, CycleDetectedError)


def test_pipeline_matches_int_root_against_string_ids(tmp_path: Path) -> None:
    path = tmp_path / "strings.json"
    path.write_text(
        json.dumps([{"id": "1", "parent_id": None}, {"id": "2", "parent_id": "1"}]),
        encoding="utf-8",
    )

    tree = Pipeline(_ctx(path, 1)).run()

    assert tree.record["id"] == "1"
    assert [c.record["id"] for c in tree.children] == ["2"]


def test_pipeline_prefers_exact_root_match(tmp_path: Path) -> None:
    path = tmp_path / "mixed.json"
    path.write_text(
        json.dumps([{"id": 1, "parent_id": 0, "name": "int"}, {"id": "1", "parent_id": 0, "name": "str"}]),
        encoding="utf-8",
    )

    assert Pipeline(_ctx(path, 1)).run().record["name"] == "int"


def test_pipeline_without_input_path() -> None:
    ctx = BuildContext(config=get_config(), logger=get_logger("tests.pipeline"), root_id=1)

    with pytest.raises(PipelineError) as excinfo:
        Pipeline(ctx).run()

    assert isinstance(excinfo.value.__cause__, RecordLoadError)


def test_pipeline_children_key_collision(tmp_path: Path) -> None:
    path = tmp_path / "children.json"
    path.write_text(json.dumps([{"id": 1, "parent_id": 0, "children": 2}]), encoding="utf-8")

    with pytest.raises(PipelineError) as excinfo:
        Pipeline(_ctx(path, 1)).run()
    assert isinstance(excinfo.value.__cause__, RecordLoadError)

    tree = Pipeline(_ctx(path, 1, children_key="nodes")).run()
    assert tree.to_dict() == {"id": 1, "parent_id": 0, "children": 2, "nodes": []}
