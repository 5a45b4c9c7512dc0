"""Severity filtering and summary counts for error lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from prompt_repo_toolkit.models import Severity, SeveritySummary, ToolkitError, ValidationReport


def filter_by_severity(
    errors: Iterable[ToolkitError],
    min_severity: Severity | str = Severity.ERROR,
) -> list[ToolkitError]:
    """Keep errors at least as severe as *min_severity*, preserving order.

    Parameters
    ----------
    errors : Iterable[ToolkitError]
        Errors in discovery order.
    min_severity : Severity | str
        Threshold; ``info`` keeps everything, ``fatal`` keeps only fatal errors.

    Returns
    -------
    list[ToolkitError]
    """
    threshold = Severity.parse(min_severity)
    return [error for error in errors if error.severity.at_least(threshold)]


def summarize(errors: Iterable[ToolkitError]) -> SeveritySummary:
    """Count errors per severity level."""
    counts = Counter(error.severity for error in errors)
    return SeveritySummary(
        fatal=counts[Severity.FATAL],
        error=counts[Severity.ERROR],
        warning=counts[Severity.WARNING],
        info=counts[Severity.INFO],
    )


def aggregate(
    errors: Iterable[ToolkitError],
    min_severity: Severity | str = Severity.ERROR,
) -> ValidationReport:
    """Build a report exposing both the complete and the filtered error lists.

    The summary counts the complete list so callers keep full visibility
    alongside the filtered view.
    """
    threshold = Severity.parse(min_severity)
    all_errors = list(errors)
    filtered = filter_by_severity(all_errors, threshold)
    return ValidationReport(
        passed=not filtered,
        errors=filtered,
        all_errors=all_errors,
        summary=summarize(all_errors),
        min_severity=threshold,
    )
