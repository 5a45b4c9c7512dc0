"""Tests for the filesystem readers."""

import pytest

from prompt_repo_toolkit.errors import ToolkitIOError, YamlParseError
from prompt_repo_toolkit.loader import load_yaml, read_text, walk_files


def test_read_text(tmp_path):
    path = tmp_path / "a.hbs"
    path.write_text("Hi {{> b}}", encoding="utf-8")
    assert read_text(path) == "Hi {{> b}}"


def test_read_text_missing_raises(tmp_path):
    with pytest.raises(ToolkitIOError, match="Failed to read"):
        read_text(tmp_path / "missing.hbs")


def test_read_text_directory_raises(tmp_path):
    with pytest.raises(ToolkitIOError):
        read_text(tmp_path)


def test_load_yaml(tmp_path):
    path = tmp_path / "a.yaml"
    path.write_text("id: a\nargs: {}\n", encoding="utf-8")
    assert load_yaml(path) == {"id": "a", "args": {}}


def test_load_yaml_empty_document(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml(path) is None


def test_load_yaml_invalid_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("id: [unclosed\n", encoding="utf-8")
    with pytest.raises(YamlParseError, match="Invalid YAML"):
        load_yaml(path)


def test_walk_files_is_recursive_and_sorted(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "c.hbs").write_text("", encoding="utf-8")
    (tmp_path / "a.hbs").write_text("", encoding="utf-8")
    files = walk_files(tmp_path)
    assert [p.relative_to(tmp_path).as_posix() for p in files] == ["a.hbs", "b/c.hbs"]


def test_walk_files_missing_directory_raises(tmp_path):
    with pytest.raises(ToolkitIOError, match="not a directory"):
        walk_files(tmp_path / "absent")
