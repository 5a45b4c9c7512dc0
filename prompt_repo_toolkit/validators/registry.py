"""Validation of the registry manifest and the files it declares."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from prompt_repo_toolkit.errors import (
    DEFAULT_CATALOG,
    FILE_NOT_YAML,
    FILE_READ_FAILED,
    REGISTRY_DISABLED_GROUP,
    REGISTRY_FILE_NOT_FOUND,
    REGISTRY_GROUP_NOT_FOUND,
    REGISTRY_PROMPT_NOT_FOUND,
    REGISTRY_SCHEMA_INVALID,
    ErrorCatalog,
    ToolkitIOError,
    YamlParseError,
)
from prompt_repo_toolkit.loader import load_yaml
from prompt_repo_toolkit.models import ToolkitError
from prompt_repo_toolkit.schema.registry import RegistryDefinition, parse_registry
from prompt_repo_toolkit.schema.result import SchemaFailure
from prompt_repo_toolkit.validators.base import blocks, schema_errors

logger = logging.getLogger(__name__)


@dataclass
class RegistryValidation:
    """Outcome of validating a registry manifest.

    Parameters
    ----------
    success : bool
        ``True`` when the manifest matched the schema and every enabled
        group directory and prompt file exists.
    data : RegistryDefinition | None
        The typed registry whenever the schema check passed.
    errors : list[ToolkitError]
        Issues found, including informational notices.
    """

    success: bool
    data: RegistryDefinition | None = None
    errors: list[ToolkitError] = field(default_factory=list)


def validate_registry(
    registry_path: str | Path,
    repo_root: str | Path,
    *,
    report_disabled: bool = False,
    catalog: ErrorCatalog = DEFAULT_CATALOG,
) -> RegistryValidation:
    """Check the registry schema and the existence of what it declares.

    Disabled groups are not checked on disk and contribute no errors unless
    *report_disabled* asks for an informational notice per group.

    Parameters
    ----------
    registry_path : str | Path
        Path to ``registry.yaml``.
    repo_root : str | Path
        Directory group paths are relative to.
    report_disabled : bool
        Emit a ``REGISTRY_DISABLED_GROUP`` notice for each disabled group.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    RegistryValidation
    """
    registry_path = Path(registry_path)
    repo_root = Path(repo_root)

    if not registry_path.is_file():
        error = catalog.create(
            REGISTRY_FILE_NOT_FOUND,
            f"Registry file not found: {registry_path}",
            file=registry_path,
            hint="Create a registry.yaml at the repository root",
        )
        return RegistryValidation(success=False, errors=[error])

    try:
        raw = load_yaml(registry_path)
    except ToolkitIOError as exc:
        return RegistryValidation(success=False, errors=[catalog.create(FILE_READ_FAILED, str(exc), file=registry_path)])
    except YamlParseError as exc:
        return RegistryValidation(success=False, errors=[catalog.create(FILE_NOT_YAML, str(exc), file=registry_path)])

    result = parse_registry(raw)
    if isinstance(result, SchemaFailure):
        errors = schema_errors(result.issues, lambda _: REGISTRY_SCHEMA_INVALID, registry_path, catalog)
        return RegistryValidation(success=False, errors=errors)

    registry = result.value
    errors: list[ToolkitError] = []
    for name, group in registry.groups.items():
        if not group.enabled:
            logger.info("Group %s is disabled; skipping", name)
            if report_disabled:
                errors.append(
                    catalog.create(
                        REGISTRY_DISABLED_GROUP,
                        f"Group is disabled: {name}",
                        file=registry_path,
                        meta={"group": name},
                    )
                )
            continue

        group_dir = repo_root / group.path
        if not group_dir.is_dir():
            errors.append(
                catalog.create(
                    REGISTRY_GROUP_NOT_FOUND,
                    f"Group folder not found: {name}",
                    file=group_dir,
                    meta={"group": name, "path": group.path},
                )
            )
            continue

        for prompt in group.prompts:
            prompt_path = group_dir / prompt
            if not prompt_path.is_file():
                errors.append(
                    catalog.create(
                        REGISTRY_PROMPT_NOT_FOUND,
                        f"Prompt not found: {name}/{prompt}",
                        file=prompt_path,
                        meta={"group": name, "prompt": prompt},
                    )
                )

    success = not blocks(errors)
    logger.debug("Registry %s: %d group(s), success=%s", registry_path, len(registry.groups), success)
    return RegistryValidation(success=success, data=registry, errors=errors)
