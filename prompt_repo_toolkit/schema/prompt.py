"""Schema for prompt template documents."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from prompt_repo_toolkit.schema.result import SchemaResult, check_schema

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class ArgDefinition(BaseModel):
    """A declared template argument."""

    model_config = ConfigDict(frozen=True)

    type: Literal["string", "number", "boolean", "object"]
    description: StrictStr | None = None
    required: StrictBool | None = None
    default: Any = None


class PromptDefinition(BaseModel):
    """Parsed prompt YAML file."""

    model_config = ConfigDict(frozen=True)

    id: NonEmptyStr
    title: NonEmptyStr
    description: NonEmptyStr
    args: dict[str, ArgDefinition]
    template: NonEmptyStr

    @field_validator("template")
    @classmethod
    def _template_not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "template must not be whitespace only"
            raise ValueError(msg)
        return value


def parse_prompt(data: Any) -> SchemaResult[PromptDefinition]:
    """Check parsed prompt YAML against :class:`PromptDefinition`."""
    return check_schema(PromptDefinition, data)
