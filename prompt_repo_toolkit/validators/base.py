"""Helpers shared by the document validators."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

from prompt_repo_toolkit.errors import ErrorCatalog
from prompt_repo_toolkit.models import Severity, ToolkitError
from prompt_repo_toolkit.schema.result import FieldIssue


def schema_errors(
    issues: Iterable[FieldIssue],
    code_for: Callable[[FieldIssue], str],
    file: Path,
    catalog: ErrorCatalog,
) -> list[ToolkitError]:
    """Convert schema issues into one ToolkitError per field path.

    Parameters
    ----------
    issues : Iterable[FieldIssue]
        Issues from a :class:`~prompt_repo_toolkit.schema.result.SchemaFailure`.
    code_for : Callable[[FieldIssue], str]
        Picks the error code for each issue.
    file : Path
        Document the issues belong to.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    list[ToolkitError]
    """
    return [
        catalog.create(
            code_for(issue),
            f"{issue.dotted_path}: {issue.message}",
            file=file,
            meta={"path": issue.path, "type": issue.kind},
        )
        for issue in issues
    ]


def blocks(errors: Iterable[ToolkitError]) -> bool:
    """Return whether any error is severe enough to fail a document."""
    return any(error.severity.at_least(Severity.ERROR) for error in errors)
