"""Validators for registries, prompt files, partials, and whole repositories."""

from prompt_repo_toolkit.validators.partials import (
    PartialsListing,
    list_partials,
    unused_partial_errors,
    validate_partials_usage,
)
from prompt_repo_toolkit.validators.prompt_file import PromptValidation, validate_prompt_file
from prompt_repo_toolkit.validators.registry import RegistryValidation, validate_registry
from prompt_repo_toolkit.validators.repo import check_partials, validate_repo

__all__ = [
    "PartialsListing",
    "PromptValidation",
    "RegistryValidation",
    "check_partials",
    "list_partials",
    "unused_partial_errors",
    "validate_partials_usage",
    "validate_prompt_file",
    "validate_registry",
    "validate_repo",
]
