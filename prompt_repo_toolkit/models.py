"""Shared data models for prompt repository validation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


class Severity(str, Enum):
    """Severity levels, declared from most to least severe."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Position on the scale; ``0`` is the most severe."""
        return _RANKS[self]

    def at_least(self, threshold: Severity) -> bool:
        """Return whether this severity is as severe as *threshold* or more."""
        return self.rank <= threshold.rank

    @classmethod
    def parse(cls, value: str | Severity) -> Severity:
        """Coerce a case-insensitive level name into a Severity.

        Raises
        ------
        ValueError
            If *value* names no known level.
        """
        if isinstance(value, Severity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(s.value for s in cls)
            msg = f"Unknown severity {value!r}. Available: {available}"
            raise ValueError(msg) from None


_RANKS: dict[Severity, int] = {severity: index for index, severity in enumerate(Severity)}


@dataclass(frozen=True)
class ToolkitError:
    """A single issue emitted by any validation step.

    Parameters
    ----------
    code : str
        Error code from the :class:`~prompt_repo_toolkit.errors.ErrorCatalog`.
    severity : Severity
        Severity of the issue.
    message : str
        Human-readable description.
    file : Path | None
        File the issue originates from, or the path that was probed for
        not-found issues.
    hint : str | None
        Optional suggestion for fixing the issue.
    meta : Mapping[str, Any] | None
        Structured details (e.g. ``partial``, ``chain``, ``path``).
    """

    code: str
    severity: Severity
    message: str
    file: Path | None = None
    hint: str | None = None
    meta: Mapping[str, Any] | None = None

    def __hash__(self) -> int:
        # meta may hold unhashable values
        return hash((self.code, self.severity, self.message, self.file, self.hint))

    def with_file(self, file: str | Path) -> ToolkitError:
        """Return a copy stamped with *file* unless a file is already set."""
        if self.file is not None:
            return self
        return replace(self, file=Path(file))

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON error shape, omitting absent optional keys."""
        data: dict[str, Any] = {
            "code": self.code,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.file is not None:
            data["file"] = str(self.file)
        if self.hint is not None:
            data["hint"] = self.hint
        if self.meta is not None:
            data["meta"] = {key: list(value) if isinstance(value, tuple) else value for key, value in self.meta.items()}
        return data


@dataclass(frozen=True)
class SeveritySummary:
    """Count of errors at each severity level."""

    fatal: int = 0
    error: int = 0
    warning: int = 0
    info: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"fatal": self.fatal, "error": self.error, "warning": self.warning, "info": self.info}


@dataclass
class ValidationReport:
    """Result of validating a repository or one of its components.

    Parameters
    ----------
    passed : bool
        ``True`` iff ``errors`` is empty.
    errors : list[ToolkitError]
        Errors at or above the requested minimum severity, in discovery order.
    all_errors : list[ToolkitError]
        Every error found, before filtering.
    summary : SeveritySummary
        Counts per level, taken from ``all_errors``.
    min_severity : Severity
        Threshold used to build ``errors``.
    """

    passed: bool
    errors: list[ToolkitError] = field(default_factory=list)
    all_errors: list[ToolkitError] = field(default_factory=list)
    summary: SeveritySummary = field(default_factory=SeveritySummary)
    min_severity: Severity = Severity.ERROR

    @property
    def has_fatal(self) -> bool:
        return any(error.severity is Severity.FATAL for error in self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON report shape."""
        return {
            "passed": self.passed,
            "errors": [error.to_dict() for error in self.errors],
            "summary": self.summary.to_dict(),
        }
