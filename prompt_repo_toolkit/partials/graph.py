"""Dependency graph of partials discovered from their own references."""

from __future__ import annotations

import logging
from pathlib import Path

from prompt_repo_toolkit.errors import DEFAULT_CATALOG, FILE_READ_FAILED, ErrorCatalog, ToolkitIOError
from prompt_repo_toolkit.loader import read_text
from prompt_repo_toolkit.models import ToolkitError
from prompt_repo_toolkit.partials.extract import extract_partials
from prompt_repo_toolkit.partials.resolve import PartialResolver

logger = logging.getLogger(__name__)


class PartialGraphBuilder:
    """Expand partial files into ``file -> [referenced names]`` edges.

    Each file is read at most once, keyed by its canonical path, so cyclic
    references terminate. A builder belongs to a single validation call and
    is discarded afterwards.

    Parameters
    ----------
    resolver : PartialResolver
        Resolver for the partials root.
    catalog : ErrorCatalog
        Source of read-failure errors.
    """

    def __init__(self, resolver: PartialResolver, *, catalog: ErrorCatalog = DEFAULT_CATALOG) -> None:
        self._resolver = resolver
        self._catalog = catalog
        self.graph: dict[Path, list[str]] = {}
        self.errors: list[ToolkitError] = []

    def expand(self, name: str) -> None:
        """Add the partial *name* and everything reachable from it."""
        pending = [name]
        while pending:
            current = pending.pop()
            path = self._resolver.resolve(current)
            if path is None or path in self.graph:
                continue
            try:
                text = read_text(path)
            except ToolkitIOError as exc:
                self.graph[path] = []
                self.errors.append(
                    self._catalog.create(FILE_READ_FAILED, str(exc), file=path, meta={"partial": current})
                )
                continue
            references = extract_partials(text)
            self.graph[path] = references
            logger.debug("Partial %s references %s", current, references or "nothing")
            pending.extend(reversed(references))

    def file_graph(self) -> dict[Path, list[Path]]:
        """Return the graph with edge names resolved to files.

        Unresolvable names are dropped; they are reported as missing elsewhere.
        """
        result: dict[Path, list[Path]] = {}
        for path, names in self.graph.items():
            targets = (self._resolver.resolve(name) for name in names)
            result[path] = list(dict.fromkeys(target for target in targets if target is not None))
        return result
