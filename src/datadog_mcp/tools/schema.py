"""Declarative tool input schemas, validation, and descriptor building.

A :class:`SchemaDefinition` is plain data: an ordered set of
:class:`FieldSpec` entries.  It can describe itself as JSON Schema for
tool listings (:func:`build_descriptor`) and validate untrusted
arguments into :class:`ValidatedArguments`.  Validation is delegated to
a pydantic model generated once per schema; nothing outside this module
depends on that.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    create_model,
)

from datadog_mcp.core.errors import InvalidArgumentsError, ToolSchemaError
from datadog_mcp.tools.base import ToolDescriptor

_PYTHON_TYPES: dict[str, Any] = {
    "string": StrictStr,
    "integer": StrictInt,
    "number": StrictInt | StrictFloat,
    "boolean": StrictBool,
}

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One accepted argument."""

    type: str
    description: str
    required: bool = True
    default: Any = _MISSING
    non_empty: bool = False
    minimum: int | float | None = None
    maximum: int | float | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING


def optional(type: str, description: str, default: Any = None) -> FieldSpec:
    """Shorthand for an optional field with a default."""
    return FieldSpec(type=type, description=description, required=False, default=default)


# 9999-12-31T23:59:59Z, the last second a datetime can hold
MAX_EPOCH_SECONDS = 253402300799


def epoch_seconds(description: str) -> FieldSpec:
    """Required timestamp in epoch seconds, within datetime range."""
    return FieldSpec("integer", description, minimum=0, maximum=MAX_EPOCH_SECONDS)


class ValidatedArguments(Mapping[str, Any]):
    """Read-only arguments that passed schema validation.

    Only :meth:`SchemaDefinition.validate` creates these.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any], *, _token: object = None) -> None:
        if _token is not _VALIDATED:
            msg = "ValidatedArguments are produced by SchemaDefinition.validate()"
            raise TypeError(msg)
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValidatedArguments({dict(self._values)!r})"


_VALIDATED = object()


@dataclass(frozen=True)
class SchemaDefinition:
    """Ordered mapping of argument name to :class:`FieldSpec`."""

    fields: Mapping[str, FieldSpec]
    _model: type[BaseModel] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "_model", _compile(self.fields))

    def json_schema(self) -> dict[str, Any]:
        """Describe the accepted arguments as a JSON Schema object."""
        properties: dict[str, Any] = {}
        required: list[str] = []
        for name, spec in self.fields.items():
            prop: dict[str, Any] = {"type": spec.type, "description": spec.description}
            if spec.has_default and spec.default is not None:
                prop["default"] = spec.default
            if spec.non_empty:
                prop["minLength"] = 1
            if spec.minimum is not None:
                prop["minimum"] = spec.minimum
            if spec.maximum is not None:
                prop["maximum"] = spec.maximum
            properties[name] = prop
            if spec.required:
                required.append(name)
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def validate(self, tool_name: str, arguments: Any) -> ValidatedArguments:
        """Validate raw arguments, applying defaults.

        Raises:
            InvalidArgumentsError: Naming every offending field.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError(tool_name, {"arguments": "must be an object"})
        try:
            model = self._model.model_validate(dict(arguments))
        except ValidationError as exc:
            raise InvalidArgumentsError(tool_name, _field_errors(exc)) from exc
        return ValidatedArguments(model.model_dump(by_alias=True), _token=_VALIDATED)


def _compile(fields: Mapping[str, FieldSpec]) -> type[BaseModel]:
    """Generate the pydantic model backing a schema.

    Attributes get positional names and the real argument name as alias,
    so names like ``from`` or ``schema`` need no special casing.
    """
    definitions: dict[str, Any] = {}
    for index, (name, spec) in enumerate(fields.items()):
        if not name:
            msg = "Schema field names must be non-empty"
            raise ToolSchemaError(msg)
        if spec.type not in _PYTHON_TYPES:
            msg = f"Unsupported type {spec.type!r} for field {name!r}"
            raise ToolSchemaError(msg)
        if spec.required and spec.has_default:
            msg = f"Required field {name!r} cannot declare a default"
            raise ToolSchemaError(msg)
        if spec.non_empty and spec.type != "string":
            msg = f"non_empty only applies to string fields ({name!r})"
            raise ToolSchemaError(msg)
        bounded = spec.minimum is not None or spec.maximum is not None
        if bounded and spec.type != "integer":
            msg = f"minimum/maximum only apply to integer fields ({name!r})"
            raise ToolSchemaError(msg)

        annotation = _PYTHON_TYPES[spec.type]
        constraints: dict[str, Any] = {"alias": name, "description": spec.description}
        if spec.non_empty:
            constraints["min_length"] = 1
        if spec.minimum is not None:
            constraints["ge"] = spec.minimum
        if spec.maximum is not None:
            constraints["le"] = spec.maximum
        if spec.required:
            definitions[f"field_{index}"] = (annotation, Field(**constraints))
        else:
            default = spec.default if spec.has_default else None
            if default is None:
                annotation = annotation | None
            definitions[f"field_{index}"] = (annotation, Field(default=default, **constraints))

    return create_model(
        "Arguments",
        __config__=ConfigDict(extra="ignore", frozen=True),
        **definitions,
    )


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("arguments",)
        name = str(loc[0])
        errors.setdefault(name, error.get("msg", "invalid value"))
    return errors


def build_descriptor(schema: SchemaDefinition, name: str, description: str) -> ToolDescriptor:
    """Build the introspectable descriptor for a tool.

    Raises:
        ToolSchemaError: On empty name or description.
    """
    if not name or not name.strip():
        msg = "Tool name must be non-empty"
        raise ToolSchemaError(msg)
    if not description or not description.strip():
        msg = f"Tool {name!r} needs a description"
        raise ToolSchemaError(msg)
    return ToolDescriptor(
        name=name,
        description=description,
        input_schema=MappingProxyType(schema.json_schema()),
    )
