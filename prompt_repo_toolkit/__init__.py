"""Structural validation for prompt repositories: registry, prompt files, and partials."""

from prompt_repo_toolkit.config import ToolkitConfig, load_config
from prompt_repo_toolkit.errors import DEFAULT_CATALOG, ErrorCatalog, ErrorCodeDefinition
from prompt_repo_toolkit.models import Severity, SeveritySummary, ToolkitError, ValidationReport
from prompt_repo_toolkit.partials import (
    PartialGraphBuilder,
    PartialResolver,
    detect_cycles,
    extract_partials,
    resolve_partial_path,
)
from prompt_repo_toolkit.severity import aggregate, filter_by_severity, summarize
from prompt_repo_toolkit.validators import (
    check_partials,
    list_partials,
    validate_partials_usage,
    validate_prompt_file,
    validate_registry,
    validate_repo,
)

__all__ = [
    "DEFAULT_CATALOG",
    "ErrorCatalog",
    "ErrorCodeDefinition",
    "PartialGraphBuilder",
    "PartialResolver",
    "Severity",
    "SeveritySummary",
    "ToolkitConfig",
    "ToolkitError",
    "ValidationReport",
    "aggregate",
    "check_partials",
    "detect_cycles",
    "extract_partials",
    "filter_by_severity",
    "list_partials",
    "load_config",
    "resolve_partial_path",
    "summarize",
    "validate_partials_usage",
    "validate_prompt_file",
    "validate_registry",
    "validate_repo",
]
