"""Tests for atomic write and link helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from skillpack.io import child_path, remove_entry, replace_with_symlink, write_json_atomic, write_text_atomic


def test_write_json_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "registry.json"
    temp_prefix = ".tmp-"
    temp_suffix = ".json"

    with pytest.raises(TypeError):
        write_json_atomic(
            path=out_path,
            payload={"bad": object()},
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_json_atomic_round_trip(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "data.json"

    write_json_atomic(path=out_path, payload={"b": 1, "a": [1, 2]}, temp_prefix=".t-", temp_suffix=".json")

    assert json.loads(out_path.read_text(encoding="utf-8")) == {"b": 1, "a": [1, 2]}


def test_write_text_atomic_replaces_content(tmp_path: Path) -> None:
    path = tmp_path / "SKILL.md"
    path.write_text("old", encoding="utf-8")

    write_text_atomic(path=path, content="new", temp_prefix=".t-", temp_suffix=".md")

    assert path.read_text(encoding="utf-8") == "new"
    assert [item.name for item in tmp_path.iterdir()] == ["SKILL.md"]


def test_remove_entry_handles_every_kind(tmp_path: Path) -> None:
    directory = tmp_path / "dir"
    (directory / "inner").mkdir(parents=True)
    file_path = tmp_path / "file"
    file_path.write_text("x", encoding="utf-8")
    link = tmp_path / "link"
    link.symlink_to(directory, target_is_directory=True)

    remove_entry(link)
    remove_entry(directory)
    remove_entry(file_path)
    remove_entry(tmp_path / "missing")

    assert list(tmp_path.iterdir()) == []


def test_replace_with_symlink_keeps_link_target_contents(tmp_path: Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    (target / "SKILL.md").write_text("keep", encoding="utf-8")
    old_target = tmp_path / "old"
    old_target.mkdir()
    (old_target / "SKILL.md").write_text("keep too", encoding="utf-8")
    link = tmp_path / "dest" / "skill"
    link.parent.mkdir()
    link.symlink_to(old_target, target_is_directory=True)

    replace_with_symlink(link, target)

    assert link.resolve() == target.resolve()
    assert (old_target / "SKILL.md").read_text(encoding="utf-8") == "keep too"


def test_child_path_accepts_direct_child(tmp_path: Path) -> None:
    assert child_path(tmp_path, "ng-a") == tmp_path.resolve() / "ng-a"


@pytest.mark.parametrize(
    "name",
    ["", ".", "..", "../x", "a/b", "/etc"],
    ids=["empty", "dot", "dotdot", "parent", "nested", "absolute"],
)
def test_child_path_rejects_other_names(tmp_path: Path, name: str) -> None:
    with pytest.raises(ValueError):
        child_path(tmp_path, name)
