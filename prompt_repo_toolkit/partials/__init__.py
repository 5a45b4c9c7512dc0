"""Partial reference extraction, resolution, and dependency analysis."""

from prompt_repo_toolkit.partials.cycles import detect_cycles
from prompt_repo_toolkit.partials.extract import extract_partials
from prompt_repo_toolkit.partials.graph import PartialGraphBuilder
from prompt_repo_toolkit.partials.resolve import PartialResolver, resolve_partial_path

__all__ = [
    "PartialGraphBuilder",
    "PartialResolver",
    "detect_cycles",
    "extract_partials",
    "resolve_partial_path",
]
