"""Map partial names to files under a partials root."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from prompt_repo_toolkit.config import DEFAULT_PARTIAL_EXTENSION
from prompt_repo_toolkit.loader import walk_files

logger = logging.getLogger(__name__)


class PartialResolver:
    """Resolve slash-separated partial names inside a sandboxed root.

    Parameters
    ----------
    root : str | Path
        The partials directory.
    extension : str
        Extension appended to every partial name.
    """

    def __init__(self, root: str | Path, extension: str = DEFAULT_PARTIAL_EXTENSION) -> None:
        self.root = Path(root).resolve()
        self.extension = extension

    def candidate(self, name: str) -> Path | None:
        """Return the canonical path *name* maps to, or ``None`` if it escapes the root."""
        if not name or "\\" in name:
            return None
        relative = PurePosixPath(name)
        if not relative.parts or relative.is_absolute() or ".." in relative.parts:
            return None
        try:
            path = (self.root / Path(*relative.parts)).with_name(relative.name + self.extension).resolve()
        except (OSError, ValueError, RuntimeError) as exc:
            logger.debug("Cannot resolve partial %r: %s", name, exc)
            return None
        if not path.is_relative_to(self.root):
            logger.warning("Partial %r resolves outside %s", name, self.root)
            return None
        return path

    def resolve(self, name: str) -> Path | None:
        """Return the partial file for *name*, or ``None`` if there is none."""
        path = self.candidate(name)
        if path is None:
            return None
        try:
            exists = path.is_file()
        except (OSError, ValueError) as exc:
            logger.debug("Cannot stat partial %r: %s", name, exc)
            return None
        return path if exists else None

    def name_for(self, path: Path) -> str:
        """Return the partial name of a canonical file path under the root."""
        relative = path.relative_to(self.root).as_posix()
        return relative[: -len(self.extension)] if relative.endswith(self.extension) else relative

    def list_names(self) -> list[str]:
        """Return the names of every partial file under the root, sorted.

        Entries that cannot be resolved, such as symlink loops, are skipped.

        Raises
        ------
        ToolkitIOError
            If the root is missing or cannot be listed.
        """
        names = []
        for path in walk_files(self.root):
            if not path.name.endswith(self.extension):
                continue
            try:
                canonical = path.resolve()
            except (OSError, RuntimeError) as exc:
                logger.warning("Skipping unresolvable partial %s: %s", path, exc)
                continue
            if canonical.is_relative_to(self.root) and canonical.is_file():
                names.append(self.name_for(canonical))
        return sorted(names)


def resolve_partial_path(
    partials_root: str | Path,
    name: str,
    extension: str = DEFAULT_PARTIAL_EXTENSION,
) -> Path | None:
    """Return the file for partial *name* under *partials_root*, or ``None``.

    Never raises for missing files or names that escape the root.
    """
    return PartialResolver(partials_root, extension).resolve(name)
