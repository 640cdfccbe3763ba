"""Build default selection sets for operation return types.

Leaf fields (scalars and enums) are always selected. Object fields are
expanded only up to ``max_depth`` levels below the root, and never when
they look like pagination connections or are known to be heavy. The depth
bound is what keeps generation finite on self-referencing types.
"""

from __future__ import annotations

from dataclasses import dataclass

from graphql import (
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLOutputType,
    get_named_type,
    is_leaf_type,
)

DEFAULT_MAX_DEPTH = 1
DEFAULT_CONNECTION_SUFFIXES: tuple[str, ...] = ("Connection",)
DEFAULT_EXCLUDED_FIELDS: frozenset[str] = frozenset({"dailyBreakdown"})


@dataclass(frozen=True)
class SelectionPolicy:
    """Limits for automatic field selection."""

    max_depth: int = DEFAULT_MAX_DEPTH
    connection_suffixes: tuple[str, ...] = DEFAULT_CONNECTION_SUFFIXES
    excluded_fields: frozenset[str] = DEFAULT_EXCLUDED_FIELDS

    def allows_nested(self, field_name: str, depth: int) -> bool:
        """Whether a structured field may be expanded at this depth."""
        if depth >= self.max_depth:
            return False
        if field_name in self.excluded_fields:
            return False
        return not any(field_name.endswith(s) for s in self.connection_suffixes)


DEFAULT_POLICY = SelectionPolicy()


def build_selection(
    type_: GraphQLOutputType,
    depth: int = 0,
    policy: SelectionPolicy = DEFAULT_POLICY,
) -> str:
    """Return a selection set like '{ id name stats { likes } }', or ''.

    An empty string means the type needs no selection (scalar/enum) or has
    nothing selectable at this depth; callers omit the braces.
    """
    named = get_named_type(type_)
    if not isinstance(named, (GraphQLObjectType, GraphQLInterfaceType)):
        return ""

    selections: list[str] = []
    for name, field in named.fields.items():
        field_type = get_named_type(field.type)
        if is_leaf_type(field_type):
            selections.append(name)
        elif isinstance(field_type, (GraphQLObjectType, GraphQLInterfaceType)):
            if not policy.allows_nested(name, depth):
                continue
            nested = build_selection(field_type, depth + 1, policy)
            if nested:
                selections.append(f"{name} {nested}")

    return f"{{ {' '.join(selections)} }}" if selections else ""
