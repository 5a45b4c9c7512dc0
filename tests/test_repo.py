"""End-to-end tests for repository validation and partial checks."""

import pytest

from conftest import write_partial, write_prompt, write_registry
from prompt_repo_toolkit.config import ToolkitConfig
from prompt_repo_toolkit.errors import (
    PARTIAL_CIRCULAR_DEPENDENCY,
    PARTIAL_NOT_FOUND,
    PARTIAL_UNUSED,
    PROMPT_SCHEMA_INVALID,
    REGISTRY_FILE_NOT_FOUND,
    REGISTRY_PROMPT_NOT_FOUND,
    REGISTRY_SCHEMA_INVALID,
    REPO_ROOT_NOT_FOUND,
)
from prompt_repo_toolkit.models import Severity
from prompt_repo_toolkit.validators import check_partials, validate_repo


def test_valid_repo_passes(repo):
    report = validate_repo(repo)
    assert report.passed
    assert report.errors == []


def test_missing_partial_end_to_end(repo):
    write_prompt(repo / "common" / "a.yaml", template="Hi {{> x}}")
    report = validate_repo(repo)
    assert not report.passed
    assert len(report.errors) == 1
    error = report.errors[0]
    assert error.code == PARTIAL_NOT_FOUND
    assert error.severity is Severity.ERROR
    assert error.file == repo / "common" / "a.yaml"


def test_cycle_end_to_end(repo):
    write_prompt(repo / "common" / "a.yaml", template="Hi {{> x}}")
    write_partial(repo / "partials", "x", "{{> y}}")
    write_partial(repo / "partials", "y", "{{> x}}")
    report = validate_repo(repo)
    assert [e.code for e in report.errors] == [PARTIAL_CIRCULAR_DEPENDENCY]
    assert list(report.errors[0].meta["chain"]) == ["x", "y"]


def test_repo_validation_never_flags_unused(repo):
    write_partial(repo / "partials", "orphan")
    report = validate_repo(repo, min_severity="info")
    assert PARTIAL_UNUSED not in {e.code for e in report.all_errors}


def test_partials_disabled_skips_partial_checks(tmp_path):
    write_registry(
        tmp_path,
        {"common": {"path": "common", "enabled": True, "prompts": ["a.yaml"]}},
        partials={"enabled": False, "path": "partials"},
    )
    write_prompt(tmp_path / "common" / "a.yaml", template="{{> x}}")
    assert validate_repo(tmp_path).passed


def test_disabled_group_contributes_no_errors(repo):
    write_registry(
        repo,
        {
            "common": {"path": "common", "enabled": True, "prompts": ["a.yaml"]},
            "broken": {"path": "broken", "enabled": False, "prompts": ["bad.yaml"]},
        },
        partials={"enabled": True, "path": "partials"},
    )
    (repo / "broken").mkdir()
    (repo / "broken" / "bad.yaml").write_text("id: [\n", encoding="utf-8")
    report = validate_repo(repo, min_severity="info")
    assert report.passed
    assert report.all_errors == []


def test_invalid_registry_short_circuits(repo):
    write_prompt(repo / "common" / "a.yaml", template="{{> x}}", id="")
    (repo / "registry.yaml").write_text("version: one\ngroups: {}\n", encoding="utf-8")
    report = validate_repo(repo)
    assert not report.passed
    assert {e.code for e in report.all_errors} == {REGISTRY_SCHEMA_INVALID}


def test_missing_prompt_short_circuits(repo):
    write_registry(
        repo,
        {"common": {"path": "common", "enabled": True, "prompts": ["a.yaml", "b.yaml"]}},
        partials={"enabled": True, "path": "partials"},
    )
    write_prompt(repo / "common" / "a.yaml", template="{{> x}}")
    report = validate_repo(repo)
    assert [e.code for e in report.errors] == [REGISTRY_PROMPT_NOT_FOUND]


def test_missing_registry(tmp_path):
    report = validate_repo(tmp_path)
    assert report.has_fatal
    assert [e.code for e in report.errors] == [REGISTRY_FILE_NOT_FOUND]


def test_missing_root(tmp_path):
    report = validate_repo(tmp_path / "absent")
    assert [e.code for e in report.errors] == [REPO_ROOT_NOT_FOUND]


def test_failing_prompt_does_not_stop_siblings(repo):
    write_registry(
        repo,
        {"common": {"path": "common", "enabled": True, "prompts": ["a.yaml", "b.yaml", "c.yaml"]}},
        partials={"enabled": True, "path": "partials"},
    )
    write_prompt(repo / "common" / "a.yaml", title="")
    write_prompt(repo / "common" / "b.yaml", template="{{> x}}")
    write_prompt(repo / "common" / "c.yaml", template="{{> y}}")
    report = validate_repo(repo)
    assert [(e.code, e.file.name) for e in report.errors] == [
        (PROMPT_SCHEMA_INVALID, "a.yaml"),
        (PARTIAL_NOT_FOUND, "b.yaml"),
        (PARTIAL_NOT_FOUND, "c.yaml"),
    ]


def test_errors_are_stamped_with_prompt_file(repo):
    write_prompt(repo / "common" / "a.yaml", description="")
    report = validate_repo(repo)
    assert report.errors[0].file == repo / "common" / "a.yaml"


def test_min_severity_filters_but_summary_counts_all(repo):
    write_prompt(repo / "common" / "a.yaml", template="{{> x}}")
    report = validate_repo(repo, min_severity=Severity.FATAL)
    assert report.passed
    assert report.errors == []
    assert report.summary.error == 1


def test_config_min_severity_is_default(repo):
    write_prompt(repo / "common" / "a.yaml", template="{{> x}}")
    assert validate_repo(repo, config=ToolkitConfig(min_severity="fatal")).passed
    assert not validate_repo(repo, config=ToolkitConfig(min_severity="fatal"), min_severity="error").passed


def test_unresolvable_partial_name_is_reported_not_raised(repo):
    write_prompt(repo / "common" / "a.yaml", template="{{> " + "a" * 300 + "}}")
    report = validate_repo(repo)
    assert [e.code for e in report.errors] == [PARTIAL_NOT_FOUND]


def test_custom_registry_filename(repo):
    (repo / "registry.yaml").rename(repo / "prompts.yaml")
    assert validate_repo(repo, config=ToolkitConfig(registry_filename="prompts.yaml")).passed


def test_check_partials_reports_unused_once(repo):
    write_registry(
        repo,
        {"common": {"path": "common", "enabled": True, "prompts": ["a.yaml", "b.yaml"]}},
        partials={"enabled": True, "path": "partials"},
    )
    write_prompt(repo / "common" / "a.yaml", template="{{> header}}")
    write_prompt(repo / "common" / "b.yaml", template="{{> header}}")
    write_partial(repo / "partials", "header")
    write_partial(repo / "partials", "orphan")
    report = check_partials(repo, min_severity="warning")
    assert [(e.code, e.meta["partial"]) for e in report.errors] == [(PARTIAL_UNUSED, "orphan")]
    assert check_partials(repo).passed


def test_check_partials_reports_missing(repo):
    write_prompt(repo / "common" / "a.yaml", template="{{> nope}}")
    report = check_partials(repo)
    assert [e.code for e in report.errors] == [PARTIAL_NOT_FOUND]


def test_check_partials_without_partials_enabled(tmp_path):
    write_registry(tmp_path, {})
    report = check_partials(tmp_path, min_severity="info")
    assert report.passed
    assert report.all_errors == []


def test_check_partials_invalid_registry(tmp_path):
    report = check_partials(tmp_path)
    assert [e.code for e in report.errors] == [REGISTRY_FILE_NOT_FOUND]


def test_check_partials_survives_symlink_loop(repo):
    try:
        (repo / "partials" / "loop.hbs").symlink_to("loop.hbs")
    except OSError:
        pytest.skip("symlinks not supported")
    report = check_partials(repo, min_severity="info")
    assert report.passed
