"""Schema for the repository registry manifest."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr

from prompt_repo_toolkit.schema.result import SchemaResult, check_schema


class PartialsSettings(BaseModel):
    """Location of the partials directory, relative to the repository root."""

    model_config = ConfigDict(frozen=True)

    enabled: StrictBool
    path: StrictStr


class GroupDefinition(BaseModel):
    """A directory of prompt files that can be switched on or off."""

    model_config = ConfigDict(frozen=True)

    path: StrictStr
    enabled: StrictBool
    prompts: list[StrictStr]


class RegistryDefinition(BaseModel):
    """Parsed ``registry.yaml``.

    Group declaration order is preserved, and so is the order of each
    group's prompt list.
    """

    model_config = ConfigDict(frozen=True)

    version: StrictInt
    globals: dict[str, StrictStr] | None = None
    partials: PartialsSettings | None = None
    groups: dict[str, GroupDefinition]

    @property
    def partials_enabled(self) -> bool:
        return self.partials is not None and self.partials.enabled


def parse_registry(data: Any) -> SchemaResult[RegistryDefinition]:
    """Check parsed registry YAML against :class:`RegistryDefinition`."""
    return check_schema(RegistryDefinition, data)
