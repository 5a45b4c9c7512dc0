"""Filesystem readers: the only place OS-level failures are raised."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from prompt_repo_toolkit.errors import ToolkitIOError, YamlParseError

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises
    ------
    ToolkitIOError
        If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ToolkitIOError(path, str(exc)) from exc


def load_yaml(path: Path) -> Any:
    """Parse a YAML file with ``yaml.safe_load``.

    Returns whatever the document holds, which may be ``None`` or a scalar;
    shape checks belong to the schema layer.

    Raises
    ------
    ToolkitIOError
        If the file cannot be read.
    YamlParseError
        If the content is not valid YAML.
    """
    text = read_text(path)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise YamlParseError(path, str(exc)) from exc
    logger.debug("Loaded YAML from %s", path)
    return data


def walk_files(directory: Path) -> list[Path]:
    """Return every file below *directory*, recursively, in sorted order.

    Raises
    ------
    ToolkitIOError
        If *directory* is missing or cannot be listed.
    """
    if not directory.is_dir():
        raise ToolkitIOError(directory, "not a directory")
    results: list[Path] = []
    pending = [directory]
    while pending:
        current = pending.pop()
        try:
            entries = sorted(current.iterdir())
        except OSError as exc:
            raise ToolkitIOError(current, str(exc)) from exc
        for entry in entries:
            if entry.is_dir():
                pending.append(entry)
            else:
                results.append(entry)
    return sorted(results)
