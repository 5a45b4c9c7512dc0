"""Tagged result of checking an untyped document against a schema model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class FieldIssue:
    """One schema violation at a field path.

    Parameters
    ----------
    path : tuple[str | int, ...]
        Location of the offending value; empty for the document root.
    message : str
        Description of the violation.
    kind : str
        Machine-readable violation type (e.g. ``"missing"``).
    """

    path: tuple[str | int, ...]
    message: str
    kind: str = ""

    @property
    def dotted_path(self) -> str:
        return ".".join(str(part) for part in self.path) or "<root>"


@dataclass(frozen=True)
class SchemaOk(Generic[ModelT]):
    """The document matched; *value* is the typed model."""

    value: ModelT

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class SchemaFailure:
    """The document did not match; one issue per offending field path."""

    issues: tuple[FieldIssue, ...]

    @property
    def success(self) -> bool:
        return False


SchemaResult = Union[SchemaOk[ModelT], SchemaFailure]


def check_schema(model: type[ModelT], data: Any) -> SchemaResult[ModelT]:
    """Validate *data* against *model* without raising.

    Parameters
    ----------
    model : type[BaseModel]
        Pydantic model describing the document.
    data : Any
        Parsed YAML content.

    Returns
    -------
    SchemaOk | SchemaFailure
    """
    try:
        return SchemaOk(model.model_validate(data))
    except ValidationError as exc:
        issues = tuple(
            FieldIssue(path=tuple(err["loc"]), message=err["msg"], kind=err["type"]) for err in exc.errors()
        )
        return SchemaFailure(issues)
