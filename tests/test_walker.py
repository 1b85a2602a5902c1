"""Tests for recursive file listing."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitemill.errors import DirectoryNotFoundError
from sitemill.walker import walk_files


def test_lists_nested_files_in_sorted_order(tmp_path: Path) -> None:
    (tmp_path / "b" / "c").mkdir(parents=True)
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b" / "z.jinja").write_text("z", encoding="utf-8")
    (tmp_path / "b" / "c" / "d.jinja").write_text("d", encoding="utf-8")

    files = walk_files(tmp_path)

    assert files == sorted(files)
    assert {path.relative_to(tmp_path).as_posix() for path in files} == {
        "a.txt",
        "b/z.jinja",
        "b/c/d.jinja",
    }
    assert all(path.is_absolute() for path in files)


def test_empty_directory_yields_no_files(tmp_path: Path) -> None:
    assert walk_files(tmp_path) == []


def test_missing_directory_raises_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "nope"
    with pytest.raises(DirectoryNotFoundError) as excinfo:
        walk_files(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value, FileNotFoundError)


def test_follows_symlinked_directories(tmp_path: Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    (target / "page.jinja").write_text("p", encoding="utf-8")
    root = tmp_path / "root"
    root.mkdir()
    (root / "linked").symlink_to(target, target_is_directory=True)

    assert walk_files(root) == [root / "linked" / "page.jinja"]
