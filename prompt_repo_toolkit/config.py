"""Unified configuration for repository validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from prompt_repo_toolkit.models import Severity

DEFAULT_REGISTRY_FILENAME = "registry.yaml"
DEFAULT_PARTIAL_EXTENSION = ".hbs"


@dataclass
class ToolkitConfig:
    """Settings shared by every validator.

    Parameters
    ----------
    registry_filename : str
        Name of the registry manifest at the repository root.
    partial_extension : str
        File extension appended to partial names, including the dot.
    min_severity : str
        Default minimum severity kept in reports.
    """

    registry_filename: str = DEFAULT_REGISTRY_FILENAME
    partial_extension: str = DEFAULT_PARTIAL_EXTENSION
    min_severity: str = Severity.ERROR.value

    def __post_init__(self) -> None:
        if not self.registry_filename or not self.registry_filename.strip():
            msg = "registry_filename must be a non-empty string"
            raise ValueError(msg)
        if not self.partial_extension.startswith(".") or len(self.partial_extension) < 2:
            msg = f"partial_extension must start with '.', got {self.partial_extension!r}"
            raise ValueError(msg)
        self.min_severity = Severity.parse(self.min_severity).value

    @property
    def severity(self) -> Severity:
        return Severity(self.min_severity)


def load_config(source: str | Path | dict[str, Any] | None = None) -> ToolkitConfig:
    """Load a ToolkitConfig from a YAML file, dict, or environment variables.

    Parameters
    ----------
    source : str | Path | dict | None
        A path to a YAML file, a raw dict, or ``None`` to use only
        environment variable overrides on defaults.

    Returns
    -------
    ToolkitConfig
    """
    raw: dict[str, Any] = {}

    if isinstance(source, dict):
        raw = source
    elif source is not None:
        path = Path(source)
        if path.is_file():
            raw = _load_yaml(path)

    return ToolkitConfig(
        registry_filename=os.environ.get(
            "PROMPT_TOOLKIT_REGISTRY_FILENAME", raw.get("registry_filename", DEFAULT_REGISTRY_FILENAME)
        ),
        partial_extension=os.environ.get(
            "PROMPT_TOOLKIT_PARTIAL_EXTENSION", raw.get("partial_extension", DEFAULT_PARTIAL_EXTENSION)
        ),
        min_severity=os.environ.get("PROMPT_TOOLKIT_MIN_SEVERITY", raw.get("min_severity", Severity.ERROR.value)),
    )


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file using PyYAML."""
    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}
