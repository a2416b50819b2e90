"""Tool schema registry.

A ``SchemaRegistry`` is an immutable name -> ``ToolSchema`` mapping built once
at startup and handed to the dispatcher. Validation is structural: required
fields must be present and primitives must have the declared JSON type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from .errors import ToolValidationError, UnknownToolError

# pydantic error type -> JSON type name shown to callers
_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "number",
    "int_from_float": "number",
    "float_type": "number",
    "bool_type": "boolean",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


@dataclass(frozen=True)
class ToolSchema:
    name: str
    description: str
    operation: str
    input_model: Type[BaseModel]
    examples: Tuple[Mapping[str, Any], ...] = field(default_factory=tuple)

    def input_schema(self) -> Dict[str, Any]:
        schema = self.input_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        if self.examples:
            schema["examples"] = [dict(e) for e in self.examples]
        return schema

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> BaseModel:
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ToolValidationError(
                f"Arguments for {self.name} must be an object"
            )
        try:
            return self.input_model.model_validate(dict(arguments))
        except ValidationError as exc:
            raise validation_error_from(exc) from exc


def _format_loc(loc: Iterable[Any]) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out


def validation_error_from(exc: ValidationError) -> ToolValidationError:
    """Translate the first pydantic error into a caller-facing message."""
    err = exc.errors()[0]
    loc = _format_loc(err.get("loc", ()))
    etype = err.get("type", "")

    if etype == "missing":
        return ToolValidationError(f"Missing required parameter: {loc}", field=loc)

    expected = _EXPECTED_TYPES.get(etype)
    if expected:
        return ToolValidationError(
            f"Invalid type for parameter {loc}: expected {expected}", field=loc
        )

    return ToolValidationError(
        f"Invalid value for parameter {loc}: {err.get('msg', 'invalid')}", field=loc
    )


class SchemaRegistry(Mapping[str, ToolSchema]):
    """Read-only catalog of tool schemas."""

    def __init__(self, schemas: Iterable[ToolSchema]):
        entries: Dict[str, ToolSchema] = {}
        for schema in schemas:
            if schema.name in entries:
                raise ValueError(f"Duplicate tool schema: {schema.name}")
            entries[schema.name] = schema
        self._schemas = MappingProxyType(entries)

    def __getitem__(self, name: str) -> ToolSchema:
        return self._schemas[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def get_schema(self, name: str) -> ToolSchema:
        try:
            return self._schemas[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def validate(self, name: str, arguments: Optional[Mapping[str, Any]]) -> BaseModel:
        return self.get_schema(name).validate(arguments)


__all__ = [
    "ToolSchema",
    "SchemaRegistry",
    "validation_error_from",
]
