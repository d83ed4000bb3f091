"""Tests for the local filesystem collaborator and YAML reader."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from pathlocker.core.io import LocalFileSystem, ensure_directory, read_yaml


def test_ensure_directory_creates_nested_paths(tmp_path: Path) -> None:
    target = tmp_path / "level1" / "level2" / "level3"

    assert ensure_directory(target) is True
    assert target.is_dir()


def test_ensure_directory_reports_existing(tmp_path: Path) -> None:
    target = tmp_path / "existing_dir"
    target.mkdir()

    assert ensure_directory(target) is False
    assert ensure_directory(target) is False
    assert target.is_dir()


def test_ensure_directory_rejects_file(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("content", encoding="utf-8")

    with pytest.raises(NotADirectoryError, match="not a directory"):
        ensure_directory(target)


def test_local_filesystem_path_exists(tmp_path: Path) -> None:
    fs = LocalFileSystem()
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    assert fs.path_exists(str(tmp_path))
    assert fs.path_exists(str(tmp_path / "file.txt"))
    assert not fs.path_exists(str(tmp_path / "missing"))


def test_local_filesystem_ensure_directory_accepts_strings(tmp_path: Path) -> None:
    fs = LocalFileSystem()

    assert fs.ensure_directory(str(tmp_path / "a" / "b")) is True
    assert (tmp_path / "a" / "b").is_dir()
    assert fs.ensure_directory(str(tmp_path / "a")) is False


def test_read_yaml_raises_when_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_yaml(tmp_path / "missing.yaml")


def test_read_yaml_parses_mapping(tmp_path: Path) -> None:
    path = tmp_path / "paths.yaml"
    path.write_text("variables:\n  app: demo\n", encoding="utf-8")
    assert read_yaml(path) == {"variables": {"app": "demo"}}


def test_read_yaml_empty_document_is_none(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert read_yaml(path) is None


def test_read_yaml_invalid_content_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("paths: [unclosed\n", encoding="utf-8")

    with pytest.raises(yaml.YAMLError):
        read_yaml(path)
