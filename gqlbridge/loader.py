"""Load and inspect the GraphQL schema.

Reads schema/schema.graphql (or any SDL file) and exposes the root types
and their fields to the rest of the bridge.
"""

from __future__ import annotations

import logging
from pathlib import Path

from graphql import (
    GraphQLError,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    build_schema,
)

from .errors import SchemaLoadError
from .naming import OperationKind

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.graphql"


def parse_schema(source: str) -> GraphQLSchema:
    """Build a schema from SDL text."""
    try:
        return build_schema(source)
    except (GraphQLError, TypeError) as exc:
        # build_schema reports SDL validation failures as TypeError
        raise SchemaLoadError(f"Invalid schema: {exc}") from exc


def load_schema(path: Path | str | None = None) -> GraphQLSchema:
    """Load the GraphQL schema from disk."""
    schema_file = Path(path) if path else SCHEMA_PATH
    try:
        source = schema_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read schema {schema_file}: {exc}") from exc
    schema = parse_schema(source)
    logger.debug("Loaded schema from %s (%d types)", schema_file, len(schema.type_map))
    return schema


def get_root_type(schema: GraphQLSchema, kind: OperationKind) -> GraphQLObjectType | None:
    """Return the root type for an operation kind, if the schema defines one."""
    if kind is OperationKind.QUERY:
        return schema.query_type
    return schema.mutation_type


def get_root_fields(schema: GraphQLSchema, kind: OperationKind) -> dict[str, GraphQLField]:
    """Return the fields of a root type in declaration order."""
    root = get_root_type(schema, kind)
    if root is None:
        return {}
    return root.fields
