"""Convert GraphQL input types to JSON Schema.

Handles:
- NonNull unwrapping (required-ness is recorded by the caller)
- Lists -> array with items
- Enums -> string with allowed values
- Input objects -> nested object with properties/required
- Built-in and DateTime scalars via a fixed table
- Unknown scalars -> string
- Self-referencing input objects (expanded once per path)
"""

from __future__ import annotations

import copy
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
    Undefined,
    value_from_ast_untyped,
)

JSONSchema = dict[str, Any]

SCALAR_TYPE_MAP: dict[str, str] = {
    "String": "string",
    "Int": "integer",
    "Float": "number",
    "Boolean": "boolean",
    "ID": "string",
    "DateTime": "string",
}

DATETIME_DESCRIPTION = "ISO 8601 datetime string (e.g., '2025-03-15T14:30:00Z')"


def _with_description(schema: JSONSchema, description: str | None) -> JSONSchema:
    if description:
        schema["description"] = description
    return schema


def _default_of(source: GraphQLInputField | GraphQLArgument) -> Any:
    """Return the declared default as written in the SDL, or Undefined.

    SDL-built schemas keep the literal on the AST node in every graphql-core
    release, while `default_value` is only filled before 3.3.
    """
    node = getattr(source.ast_node, "default_value", None)
    if node is not None:
        return value_from_ast_untyped(node)
    default = getattr(source, "default_value", Undefined)
    if default is Undefined:
        return Undefined
    return copy.deepcopy(default)


def _attach(
    schema: JSONSchema, source: GraphQLInputField | GraphQLArgument,
) -> JSONSchema:
    """Attach a field's or argument's own description and default to its schema."""
    _with_description(schema, source.description)
    default = _default_of(source)
    if default is not Undefined:
        schema["default"] = default
    return schema


def _map_fields(
    fields: dict[str, GraphQLInputField] | dict[str, GraphQLArgument],
    expanding: frozenset[str],
) -> JSONSchema:
    """Build an object schema from a name -> field/argument mapping."""
    properties: dict[str, JSONSchema] = {}
    required: list[str] = []

    for name, field in fields.items():
        properties[name] = _attach(_map(field.type, expanding), field)
        if isinstance(field.type, GraphQLNonNull):
            required.append(name)

    schema: JSONSchema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _map(type_: GraphQLInputType, expanding: frozenset[str]) -> JSONSchema:
    match type_:
        case GraphQLNonNull(of_type=inner):
            return _map(inner, expanding)

        case GraphQLList(of_type=inner):
            return {"type": "array", "items": _map(inner, expanding)}

        case GraphQLEnumType():
            schema: JSONSchema = {"type": "string", "enum": list(type_.values)}
            return _with_description(schema, type_.description)

        case GraphQLInputObjectType():
            if type_.name in expanding:
                return _with_description({"type": "object"}, type_.description)
            schema = _map_fields(type_.fields, expanding | {type_.name})
            return _with_description(schema, type_.description)

        case GraphQLScalarType(name="DateTime"):
            return {"type": "string", "description": DATETIME_DESCRIPTION}

        case GraphQLScalarType():
            return {"type": SCALAR_TYPE_MAP.get(type_.name, "string")}

        case _:
            return {"type": "string"}


def map_input_type(type_: GraphQLInputType) -> JSONSchema:
    """Convert a GraphQL input type reference to a JSON Schema dict."""
    return _map(type_, frozenset())


def map_arguments(args: dict[str, GraphQLArgument]) -> JSONSchema:
    """Convert a field's arguments to the tool's top-level object schema."""
    return _map_fields(args, frozenset())
