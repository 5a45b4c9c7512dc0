"""Tests for text and JSON rendering."""

import json
from pathlib import Path

from prompt_repo_toolkit.errors import DEFAULT_CATALOG, PARTIAL_CIRCULAR_DEPENDENCY, PARTIAL_NOT_FOUND, PARTIAL_UNUSED
from prompt_repo_toolkit.reporting import errors_to_json, format_errors, write_json


def test_format_no_errors():
    assert "No validation errors found." in format_errors([])


def test_format_groups_by_file():
    errors = [
        DEFAULT_CATALOG.create(PARTIAL_NOT_FOUND, "Partial file not found: x", file="a.yaml", meta={"partial": "x"}),
        DEFAULT_CATALOG.create(PARTIAL_UNUSED, "Partial file is defined but not used: y", file="p/y.hbs"),
        DEFAULT_CATALOG.create(
            PARTIAL_CIRCULAR_DEPENDENCY, "Circular dependency detected", file="a.yaml", meta={"chain": ["x", "y"]}
        ),
    ]
    text = format_errors(errors)
    assert "Found 3 validation issue(s): 2 error(s), 1 warning(s)" in text
    assert text.count("File: a.yaml") == 1
    assert "[ERROR] PARTIAL_NOT_FOUND: Partial file not found: x" in text
    assert "Partial: x" in text
    assert "Chain: x -> y" in text
    assert text.index("File: a.yaml") < text.index("File: p/y.hbs")


def test_format_hint_and_unknown_file():
    error = DEFAULT_CATALOG.create(PARTIAL_NOT_FOUND, hint="Create it")
    text = format_errors([error])
    assert "File: unknown" in text
    assert "Hint: Create it" in text


def test_format_schema_path():
    error = DEFAULT_CATALOG.create(PARTIAL_NOT_FOUND, meta={"path": ["args", "n", "type"], "type": "literal_error"})
    text = format_errors([error])
    assert "Path: args.n.type" in text
    assert "literal_error" not in text


def test_errors_to_json():
    error = DEFAULT_CATALOG.create(PARTIAL_UNUSED, file=Path("p") / "y.hbs", meta={"partial": "y"})
    assert errors_to_json([error]) == [
        {
            "code": PARTIAL_UNUSED,
            "severity": "warning",
            "message": "Partial file is defined but not used",
            "file": str(Path("p") / "y.hbs"),
            "meta": {"partial": "y"},
        }
    ]


def test_write_json_to_file(tmp_path):
    output = tmp_path / "out" / "report.json"
    text = write_json({"passed": True}, output)
    assert json.loads(text) == {"passed": True}
    assert json.loads(output.read_text(encoding="utf-8")) == {"passed": True}


def test_write_json_without_output():
    assert json.loads(write_json({"errors": []})) == {"errors": []}
