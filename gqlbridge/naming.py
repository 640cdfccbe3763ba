"""Convert root fields to MCP tool names and back.

Pattern: {prefix}_{fieldName}
  - Query field    -> query-tool_{fieldName}
  - Mutation field -> mutation-tool_{fieldName}

The prefix never contains the delimiter, so splitting on the first
underscore recovers the field name even when it contains underscores.

Examples:
  Query.profiles         -> query-tool_profiles
  Mutation.createPost    -> mutation-tool_createPost
  Query.post_stats       -> query-tool_post_stats
"""

from __future__ import annotations

import enum

from .errors import UnknownOperationKind

DELIMITER = "_"


class OperationKind(enum.Enum):
    """Root operation kinds that produce tools."""

    QUERY = ("query", "query-tool")
    MUTATION = ("mutation", "mutation-tool")

    def __init__(self, keyword: str, prefix: str):
        self.keyword = keyword
        self.prefix = prefix


_PREFIXES: dict[str, OperationKind] = {kind.prefix: kind for kind in OperationKind}


def build_tool_name(kind: OperationKind, field_name: str) -> str:
    """Build a tool name like 'query-tool_profiles'."""
    return f"{kind.prefix}{DELIMITER}{field_name}"


def split_tool_name(name: str) -> tuple[OperationKind, str]:
    """Split a tool name into its operation kind and field name."""
    prefix, sep, field_name = name.partition(DELIMITER)
    if not sep:
        raise UnknownOperationKind(name)
    kind = _PREFIXES.get(prefix)
    if kind is None:
        raise UnknownOperationKind(name, prefix)
    return kind, field_name
