"""Repository-wide validation: registry, prompt files, and partials."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from prompt_repo_toolkit.config import ToolkitConfig
from prompt_repo_toolkit.errors import DEFAULT_CATALOG, REPO_ROOT_NOT_FOUND, ErrorCatalog
from prompt_repo_toolkit.models import Severity, ToolkitError, ValidationReport
from prompt_repo_toolkit.partials import PartialResolver, extract_partials
from prompt_repo_toolkit.schema.registry import RegistryDefinition
from prompt_repo_toolkit.severity import aggregate
from prompt_repo_toolkit.validators.partials import unused_partial_errors, validate_partials_usage
from prompt_repo_toolkit.validators.prompt_file import PromptValidation, validate_prompt_file
from prompt_repo_toolkit.validators.registry import validate_registry

logger = logging.getLogger(__name__)


def validate_repo(
    repo_root: str | Path,
    *,
    min_severity: Severity | str | None = None,
    config: ToolkitConfig | None = None,
    catalog: ErrorCatalog = DEFAULT_CATALOG,
) -> ValidationReport:
    """Validate an entire prompt repository.

    The registry is checked first; if it is invalid, the report holds only
    registry errors. Otherwise every prompt file of every enabled group is
    schema-checked and, when partials are enabled, checked for missing and
    circular partials. Disabled groups are skipped entirely. Errors are
    accumulated in discovery order and a failing file never stops the walk.

    Parameters
    ----------
    repo_root : str | Path
        Repository root containing the registry manifest.
    min_severity : Severity | str | None
        Lowest severity kept in ``errors``; defaults to the config value.
    config : ToolkitConfig | None
        Toolkit settings; defaults to ``ToolkitConfig()``.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    ValidationReport
    """
    config = config or ToolkitConfig()
    threshold = Severity.parse(min_severity or config.min_severity)
    repo_root = Path(repo_root)

    early = _check_root(repo_root, catalog)
    if early is not None:
        return aggregate([early], threshold)

    registry_path = repo_root / config.registry_filename
    registry = validate_registry(registry_path, repo_root, catalog=catalog)
    errors = list(_stamp(registry.errors, registry_path))
    if not registry.success or registry.data is None:
        logger.info("Registry %s is invalid; skipping prompt validation", registry_path)
        return aggregate(errors, threshold)

    partials_root = _partials_root(repo_root, registry.data)

    for path, result in _enabled_prompts(repo_root, registry.data, catalog):
        errors.extend(_stamp(result.errors, path))
        if result.data is None or partials_root is None:
            continue
        usage = validate_partials_usage(
            result.data.template,
            partials_root,
            check_unused=False,
            source_file=path,
            extension=config.partial_extension,
            catalog=catalog,
        )
        errors.extend(_stamp(usage, path))

    report = aggregate(errors, threshold)
    logger.info(
        "Validated %s: passed=%s errors=%d (of %d found)",
        repo_root,
        report.passed,
        len(report.errors),
        len(report.all_errors),
    )
    return report


def check_partials(
    repo_root: str | Path,
    *,
    min_severity: Severity | str | None = None,
    config: ToolkitConfig | None = None,
    catalog: ErrorCatalog = DEFAULT_CATALOG,
) -> ValidationReport:
    """Check partial usage across every enabled prompt of a repository.

    Reports missing and circular partials per prompt, then each partial on
    disk that no enabled prompt references directly, once. Prompt files that
    fail their schema are skipped here; ``validate_repo`` reports them.
    A repository without enabled partials passes with no errors.

    Parameters
    ----------
    repo_root : str | Path
        Repository root containing the registry manifest.
    min_severity : Severity | str | None
        Lowest severity kept in ``errors``; defaults to the config value.
    config : ToolkitConfig | None
        Toolkit settings; defaults to ``ToolkitConfig()``.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    ValidationReport
    """
    config = config or ToolkitConfig()
    threshold = Severity.parse(min_severity or config.min_severity)
    repo_root = Path(repo_root)

    early = _check_root(repo_root, catalog)
    if early is not None:
        return aggregate([early], threshold)

    registry_path = repo_root / config.registry_filename
    registry = validate_registry(registry_path, repo_root, catalog=catalog)
    if not registry.success or registry.data is None:
        return aggregate(_stamp(registry.errors, registry_path), threshold)

    partials_root = _partials_root(repo_root, registry.data)
    if partials_root is None:
        logger.warning("Partials are not enabled in %s", registry_path)
        return aggregate([], threshold)

    errors: list[ToolkitError] = []
    used: list[str] = []
    for path, result in _enabled_prompts(repo_root, registry.data, catalog):
        if result.data is None:
            continue
        used.extend(extract_partials(result.data.template))
        errors.extend(
            validate_partials_usage(
                result.data.template,
                partials_root,
                source_file=path,
                extension=config.partial_extension,
                catalog=catalog,
            )
        )

    resolver = PartialResolver(partials_root, config.partial_extension)
    errors.extend(unused_partial_errors(resolver, used, catalog=catalog))
    return aggregate(errors, threshold)


def _check_root(repo_root: Path, catalog: ErrorCatalog) -> ToolkitError | None:
    if repo_root.is_dir():
        return None
    return catalog.create(REPO_ROOT_NOT_FOUND, f"Repository root not found: {repo_root}", file=repo_root)


def _partials_root(repo_root: Path, registry: RegistryDefinition) -> Path | None:
    if not registry.partials_enabled:
        return None
    return repo_root / registry.partials.path


def _enabled_prompts(
    repo_root: Path,
    registry: RegistryDefinition,
    catalog: ErrorCatalog,
) -> Iterator[tuple[Path, PromptValidation]]:
    """Yield ``(path, validation)`` for each prompt of each enabled group, in declaration order."""
    for name, group in registry.groups.items():
        if not group.enabled:
            logger.debug("Skipping disabled group %s", name)
            continue
        for prompt in group.prompts:
            path = repo_root / group.path / prompt
            yield path, validate_prompt_file(path, catalog=catalog)


def _stamp(errors: Iterable[ToolkitError], file: Path) -> Iterator[ToolkitError]:
    return (error.with_file(file) for error in errors)

