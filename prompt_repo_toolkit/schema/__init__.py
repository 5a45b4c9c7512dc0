"""Typed schema boundary for registry and prompt documents."""

from prompt_repo_toolkit.schema.prompt import ArgDefinition, PromptDefinition, parse_prompt
from prompt_repo_toolkit.schema.registry import GroupDefinition, PartialsSettings, RegistryDefinition, parse_registry
from prompt_repo_toolkit.schema.result import FieldIssue, SchemaFailure, SchemaOk, SchemaResult, check_schema

__all__ = [
    "ArgDefinition",
    "FieldIssue",
    "GroupDefinition",
    "PartialsSettings",
    "PromptDefinition",
    "RegistryDefinition",
    "SchemaFailure",
    "SchemaOk",
    "SchemaResult",
    "check_schema",
    "parse_prompt",
    "parse_registry",
]
