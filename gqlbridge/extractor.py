"""Build MCP tool definitions from the GraphQL schema.

Every Query field becomes a read tool and every Mutation field a write
tool. Names, descriptions and parameter schemas come straight from the
schema; nothing is hand-written per tool.
"""

from __future__ import annotations

import logging

from graphql import GraphQLField, GraphQLSchema

from .loader import get_root_fields
from .models import ToolDefinition
from .naming import OperationKind, build_tool_name
from .type_mapper import map_arguments

logger = logging.getLogger(__name__)


def field_to_tool(field_name: str, field: GraphQLField, kind: OperationKind) -> ToolDefinition:
    """Convert one root field into a tool definition."""
    return ToolDefinition(
        name=build_tool_name(kind, field_name),
        description=field.description or f"{kind.prefix}: {field_name}",
        input_schema=map_arguments(field.args),
    )


def extract_tools(schema: GraphQLSchema) -> list[ToolDefinition]:
    """Extract all tools: queries first, then mutations, in declaration order."""
    tools: list[ToolDefinition] = []

    for kind in (OperationKind.QUERY, OperationKind.MUTATION):
        for field_name, field in get_root_fields(schema, kind).items():
            tools.append(field_to_tool(field_name, field, kind))

    logger.debug("Extracted %d tools", len(tools))
    return tools
