"""Construct GraphQL operation strings from tool calls.

The tool name encodes the operation kind and the root field. Argument
values are rendered inline as GraphQL literals in the order the caller
gave them. Values are not checked against argument types; a mismatch is
left for the API's own validation to report.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Mapping

from graphql import GraphQLSchema

from .errors import ArgumentEncodingError, UnknownField, UnknownOperationKind
from .loader import get_root_type
from .models import ToolCall
from .naming import split_tool_name
from .selection import DEFAULT_POLICY, SelectionPolicy, build_selection

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")


def _name(key: Any) -> str:
    """Return key if it is a valid GraphQL name."""
    if not isinstance(key, str) or not _NAME_RE.fullmatch(key):
        raise ArgumentEncodingError(f"{key!r} is not a valid GraphQL name")
    return key


def to_graphql_literal(value: Any) -> str:
    """Encode a JSON-like value as a GraphQL input literal.

    Same as JSON except object keys are bare names, which is what the
    GraphQL grammar requires.

    >>> to_graphql_literal({"text": "hi", "tags": ["a"], "draft": False})
    '{text: "hi", tags: ["a"], draft: false}'
    """
    if value is None or isinstance(value, (bool, str)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return json.dumps(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ArgumentEncodingError(f"Cannot encode non-finite number {value!r}")
        return json.dumps(value)
    if isinstance(value, Mapping):
        pairs = ", ".join(f"{_name(key)}: {to_graphql_literal(v)}" for key, v in value.items())
        return f"{{{pairs}}}"
    if isinstance(value, (list, tuple)):
        return f"[{', '.join(to_graphql_literal(v) for v in value)}]"
    raise ArgumentEncodingError(
        f"Cannot encode {type(value).__name__} value as a GraphQL literal"
    )


def format_arguments(arguments: Mapping[str, Any]) -> str:
    """Render '(key: literal, ...)', or '' when there are no arguments."""
    if not arguments:
        return ""
    pairs = ", ".join(f"{_name(key)}: {to_graphql_literal(value)}" for key, value in arguments.items())
    return f"({pairs})"


def compile_operation(
    call: ToolCall,
    schema: GraphQLSchema,
    policy: SelectionPolicy = DEFAULT_POLICY,
) -> str:
    """Build the GraphQL operation string for a tool call."""
    kind, field_name = split_tool_name(call.name)

    root_type = get_root_type(schema, kind)
    if root_type is None:
        raise UnknownOperationKind(call.name, kind.prefix)

    field = root_type.fields.get(field_name)
    if field is None:
        raise UnknownField(kind.keyword, field_name)

    selection = build_selection(field.type, 0, policy)
    body = f"{field_name}{format_arguments(call.arguments)}"
    if selection:
        body = f"{body} {selection}"

    operation = f"{kind.keyword} {{ {body} }}"
    logger.debug("Compiled %s -> %s", call.name, operation)
    return operation
