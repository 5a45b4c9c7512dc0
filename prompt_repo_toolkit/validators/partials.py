"""Partial usage checks: missing, circular, and unused partials."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from prompt_repo_toolkit.config import DEFAULT_PARTIAL_EXTENSION
from prompt_repo_toolkit.errors import (
    DEFAULT_CATALOG,
    PARTIAL_CIRCULAR_DEPENDENCY,
    PARTIAL_NOT_FOUND,
    PARTIAL_PATH_INVALID,
    PARTIAL_UNUSED,
    ErrorCatalog,
    ToolkitIOError,
)
from prompt_repo_toolkit.models import ToolkitError
from prompt_repo_toolkit.partials import PartialGraphBuilder, PartialResolver, detect_cycles, extract_partials

logger = logging.getLogger(__name__)


def validate_partials_usage(
    template: str,
    partials_root: str | Path,
    *,
    check_unused: bool = False,
    source_file: str | Path | None = None,
    extension: str = DEFAULT_PARTIAL_EXTENSION,
    catalog: ErrorCatalog = DEFAULT_CATALOG,
) -> list[ToolkitError]:
    """Check the partials a template references.

    Reports each reference that resolves to no file, each dependency cycle
    among the reachable partials, and, with *check_unused*, every partial on
    disk that the template does not reference directly. Only reads the
    filesystem.

    Parameters
    ----------
    template : str
        Template source text.
    partials_root : str | Path
        Directory holding the partial files.
    check_unused : bool
        Also report partials the template never references.
    source_file : str | Path | None
        File the template came from; attached to missing and circular errors.
    extension : str
        Partial file extension.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    list[ToolkitError]
        Missing partials first, then read failures and cycles, then unused partials.
    """
    resolver = PartialResolver(partials_root, extension)
    source = Path(source_file) if source_file is not None else None
    used = extract_partials(template)
    errors: list[ToolkitError] = []
    builder = PartialGraphBuilder(resolver, catalog=catalog)

    for name in used:
        if resolver.resolve(name) is None:
            errors.append(_missing_partial(name, resolver, source, catalog))
            continue
        builder.expand(name)

    errors.extend(builder.errors)

    for cycle in detect_cycles(builder.file_graph()):
        chain = [resolver.name_for(path) for path in cycle]
        errors.append(
            catalog.create(
                PARTIAL_CIRCULAR_DEPENDENCY,
                f"Circular dependency detected: {' -> '.join(chain + chain[:1])}",
                file=source,
                meta={"chain": tuple(chain)},
            )
        )

    if check_unused:
        errors.extend(unused_partial_errors(resolver, used, catalog=catalog))

    return errors


def unused_partial_errors(
    resolver: PartialResolver,
    used_names: Iterable[str],
    *,
    catalog: ErrorCatalog = DEFAULT_CATALOG,
) -> list[ToolkitError]:
    """Report every partial under the resolver's root that is not in *used_names*.

    A partials directory that cannot be listed counts as holding no partials.
    """
    try:
        present = resolver.list_names()
    except ToolkitIOError as exc:
        logger.debug("No partials to check for usage: %s", exc)
        return []

    used: set[str] = set()
    for name in used_names:
        used.add(name)
        path = resolver.resolve(name)
        if path is not None:
            used.add(resolver.name_for(path))

    return [
        catalog.create(
            PARTIAL_UNUSED,
            f"Partial file is defined but not used: {name}",
            file=resolver.root / f"{name}{resolver.extension}",
            meta={"partial": name},
        )
        for name in present
        if name not in used
    ]


@dataclass
class PartialsListing:
    """Partial files found in a repository's partials directory.

    Parameters
    ----------
    success : bool
        ``False`` when the directory is missing or unreadable.
    partials : list[str]
        Partial names, sorted.
    errors : list[ToolkitError]
        Issues found.
    """

    success: bool
    partials: list[str] = field(default_factory=list)
    errors: list[ToolkitError] = field(default_factory=list)


def list_partials(
    repo_root: str | Path,
    partials_path: str | None = "partials",
    *,
    extension: str = DEFAULT_PARTIAL_EXTENSION,
    catalog: ErrorCatalog = DEFAULT_CATALOG,
) -> PartialsListing:
    """List the partials in ``repo_root / partials_path``.

    Parameters
    ----------
    repo_root : str | Path
        Repository root.
    partials_path : str | None
        Partials directory relative to the root; ``None`` means partials are
        not configured and yields an empty, successful listing.
    extension : str
        Partial file extension.
    catalog : ErrorCatalog
        Error code catalog.

    Returns
    -------
    PartialsListing
    """
    if not partials_path:
        return PartialsListing(success=True)

    directory = Path(repo_root) / partials_path
    if not directory.is_dir():
        error = catalog.create(
            PARTIAL_PATH_INVALID,
            f"Partials folder not found: {partials_path}",
            file=directory,
            meta={"path": partials_path},
        )
        return PartialsListing(success=False, errors=[error])

    try:
        names = PartialResolver(directory, extension).list_names()
    except ToolkitIOError as exc:
        return PartialsListing(success=False, errors=[catalog.create(PARTIAL_PATH_INVALID, str(exc), file=directory)])
    return PartialsListing(success=True, partials=names)


def _missing_partial(
    name: str,
    resolver: PartialResolver,
    source: Path | None,
    catalog: ErrorCatalog,
) -> ToolkitError:
    probed = resolver.candidate(name)
    if probed is None:
        hint = "Partial names must be valid relative paths inside the partials directory"
    else:
        hint = f"Create {probed} or fix the reference"
    return catalog.create(
        PARTIAL_NOT_FOUND,
        f"Partial file not found: {name}",
        file=source or probed,
        meta={"partial": name},
        hint=hint,
    )
