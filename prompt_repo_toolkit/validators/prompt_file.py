"""Validation of a single prompt YAML file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from prompt_repo_toolkit.errors import (
    DEFAULT_CATALOG,
    FILE_NOT_YAML,
    FILE_READ_FAILED,
    PROMPT_ARG_INVALID,
    PROMPT_SCHEMA_INVALID,
    PROMPT_TEMPLATE_EMPTY,
    ErrorCatalog,
    ToolkitIOError,
    YamlParseError,
)
from prompt_repo_toolkit.loader import load_yaml
from prompt_repo_toolkit.models import ToolkitError
from prompt_repo_toolkit.schema.prompt import PromptDefinition, parse_prompt
from prompt_repo_toolkit.schema.result import FieldIssue, SchemaOk
from prompt_repo_toolkit.validators.base import schema_errors

logger = logging.getLogger(__name__)

_EMPTY_TEMPLATE_KINDS = frozenset({"string_too_short", "value_error"})


@dataclass
class PromptValidation:
    """Outcome of validating one prompt file.

    Parameters
    ----------
    success : bool
        ``True`` when the file parsed and matched the prompt schema.
    data : PromptDefinition | None
        The typed prompt when ``success`` is ``True``.
    errors : list[ToolkitError]
        Issues found, each carrying the prompt file path.
    """

    success: bool
    data: PromptDefinition | None = None
    errors: list[ToolkitError] = field(default_factory=list)


def _code_for(issue: FieldIssue) -> str:
    if issue.path[:1] == ("args",):
        return PROMPT_ARG_INVALID
    if issue.path == ("template",) and issue.kind in _EMPTY_TEMPLATE_KINDS:
        return PROMPT_TEMPLATE_EMPTY
    return PROMPT_SCHEMA_INVALID


def validate_prompt_file(path: str | Path, *, catalog: ErrorCatalog = DEFAULT_CATALOG) -> PromptValidation:
    """Parse a prompt file and check it against the prompt schema.

    Parameters
    ----------
    path : str | Path
        Prompt YAML file.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    PromptValidation
    """
    path = Path(path)
    try:
        data = load_yaml(path)
    except ToolkitIOError as exc:
        return PromptValidation(success=False, errors=[catalog.create(FILE_READ_FAILED, str(exc), file=path)])
    except YamlParseError as exc:
        return PromptValidation(success=False, errors=[catalog.create(FILE_NOT_YAML, str(exc), file=path)])

    result = parse_prompt(data)
    if isinstance(result, SchemaOk):
        logger.debug("Prompt %s is valid (id=%s)", path, result.value.id)
        return PromptValidation(success=True, data=result.value)

    errors = schema_errors(result.issues, _code_for, path, catalog)
    logger.debug("Prompt %s failed schema validation with %d issue(s)", path, len(errors))
    return PromptValidation(success=False, errors=errors)
