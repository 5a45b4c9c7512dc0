"""Error code catalog and exception types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from prompt_repo_toolkit.models import Severity, ToolkitError

# Registry
REGISTRY_FILE_NOT_FOUND = "REGISTRY_FILE_NOT_FOUND"
REGISTRY_SCHEMA_INVALID = "REGISTRY_SCHEMA_INVALID"
REGISTRY_GROUP_NOT_FOUND = "REGISTRY_GROUP_NOT_FOUND"
REGISTRY_PROMPT_NOT_FOUND = "REGISTRY_PROMPT_NOT_FOUND"
REGISTRY_DISABLED_GROUP = "REGISTRY_DISABLED_GROUP"

# Prompt files
PROMPT_SCHEMA_INVALID = "PROMPT_SCHEMA_INVALID"
PROMPT_ARG_INVALID = "PROMPT_ARG_INVALID"
PROMPT_TEMPLATE_EMPTY = "PROMPT_TEMPLATE_EMPTY"

# Partials
PARTIAL_NOT_FOUND = "PARTIAL_NOT_FOUND"
PARTIAL_UNUSED = "PARTIAL_UNUSED"
PARTIAL_CIRCULAR_DEPENDENCY = "PARTIAL_CIRCULAR_DEPENDENCY"
PARTIAL_PATH_INVALID = "PARTIAL_PATH_INVALID"

# Repository and files
REPO_ROOT_NOT_FOUND = "REPO_ROOT_NOT_FOUND"
FILE_READ_FAILED = "FILE_READ_FAILED"
FILE_NOT_YAML = "FILE_NOT_YAML"


class ToolkitException(Exception):
    """Base class for exceptions raised by the low-level readers."""


class ToolkitIOError(ToolkitException):
    """A file could not be read or a directory could not be listed.

    Parameters
    ----------
    path : Path
        The path that failed.
    reason : str
        Description of the underlying ``OSError``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class YamlParseError(ToolkitException):
    """A file was read but is not valid YAML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid YAML in {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class ErrorCodeDefinition:
    """Default severity and message for an error code."""

    code: str
    severity: Severity
    default_message: str


class ErrorCatalog:
    """Immutable lookup table of error code definitions.

    Validators receive a catalog instead of reaching for module state, so
    tests and embedding applications can supply their own.

    Parameters
    ----------
    definitions : Iterable[ErrorCodeDefinition]
        The closed set of codes this catalog knows.
    """

    def __init__(self, definitions: Iterable[ErrorCodeDefinition]) -> None:
        self._definitions: Mapping[str, ErrorCodeDefinition] = MappingProxyType(
            {definition.code: definition for definition in definitions}
        )

    def __contains__(self, code: object) -> bool:
        return code in self._definitions

    def get(self, code: str) -> ErrorCodeDefinition:
        """Return the definition for *code*.

        Raises
        ------
        KeyError
            If *code* is not in the catalog.
        """
        if code not in self._definitions:
            available = ", ".join(sorted(self._definitions)) or "(none)"
            msg = f"Unknown error code {code!r}. Available: {available}"
            raise KeyError(msg)
        return self._definitions[code]

    def codes(self) -> list[str]:
        """Return sorted list of known codes."""
        return sorted(self._definitions)

    def create(
        self,
        code: str,
        message: str | None = None,
        *,
        file: str | Path | None = None,
        meta: Mapping[str, Any] | None = None,
        hint: str | None = None,
    ) -> ToolkitError:
        """Build a ToolkitError carrying the catalog's severity for *code*.

        Parameters
        ----------
        code : str
            Known error code.
        message : str | None
            Overrides the default message.
        file : str | Path | None
            Originating or probed file.
        meta : Mapping[str, Any] | None
            Structured details.
        hint : str | None
            Suggested fix.

        Returns
        -------
        ToolkitError
        """
        definition = self.get(code)
        return ToolkitError(
            code=code,
            severity=definition.severity,
            message=message or definition.default_message,
            file=Path(file) if file is not None else None,
            hint=hint,
            meta=_freeze(meta) if meta is not None else None,
        )


def _freeze(meta: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of *meta* with list values stored as tuples."""
    return MappingProxyType({key: tuple(value) if isinstance(value, list) else value for key, value in meta.items()})


DEFAULT_CATALOG = ErrorCatalog(
    [
        ErrorCodeDefinition(REGISTRY_FILE_NOT_FOUND, Severity.FATAL, "Registry file not found"),
        ErrorCodeDefinition(REGISTRY_SCHEMA_INVALID, Severity.ERROR, "Registry schema validation failed"),
        ErrorCodeDefinition(REGISTRY_GROUP_NOT_FOUND, Severity.ERROR, "Group folder not found"),
        ErrorCodeDefinition(REGISTRY_PROMPT_NOT_FOUND, Severity.ERROR, "Prompt file not found"),
        ErrorCodeDefinition(REGISTRY_DISABLED_GROUP, Severity.INFO, "Group is disabled"),
        ErrorCodeDefinition(PROMPT_SCHEMA_INVALID, Severity.ERROR, "Prompt schema validation failed"),
        ErrorCodeDefinition(PROMPT_ARG_INVALID, Severity.ERROR, "Prompt argument validation failed"),
        ErrorCodeDefinition(PROMPT_TEMPLATE_EMPTY, Severity.ERROR, "Prompt template is empty"),
        ErrorCodeDefinition(PARTIAL_NOT_FOUND, Severity.ERROR, "Partial file not found"),
        ErrorCodeDefinition(PARTIAL_UNUSED, Severity.WARNING, "Partial file is defined but not used"),
        ErrorCodeDefinition(
            PARTIAL_CIRCULAR_DEPENDENCY, Severity.ERROR, "Circular dependency detected in partials"
        ),
        ErrorCodeDefinition(PARTIAL_PATH_INVALID, Severity.ERROR, "Partials path is invalid"),
        ErrorCodeDefinition(REPO_ROOT_NOT_FOUND, Severity.FATAL, "Repository root path not found"),
        ErrorCodeDefinition(FILE_READ_FAILED, Severity.FATAL, "Failed to read file"),
        ErrorCodeDefinition(FILE_NOT_YAML, Severity.ERROR, "File is not a valid YAML file"),
    ]
)
