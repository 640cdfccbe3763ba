"""Derive MCP tools from a GraphQL schema and turn tool calls back into operations."""

from .compiler import compile_operation, to_graphql_literal
from .errors import (
    ArgumentEncodingError,
    BridgeError,
    ConfigError,
    SchemaLoadError,
    UnknownField,
    UnknownOperationKind,
)
from .extractor import extract_tools
from .loader import load_schema, parse_schema
from .models import ToolCall, ToolDefinition
from .naming import OperationKind, build_tool_name, split_tool_name
from .selection import SelectionPolicy, build_selection
from .type_mapper import map_arguments, map_input_type

__all__ = [
    "ArgumentEncodingError",
    "BridgeError",
    "ConfigError",
    "OperationKind",
    "SchemaLoadError",
    "SelectionPolicy",
    "ToolCall",
    "ToolDefinition",
    "UnknownField",
    "UnknownOperationKind",
    "build_selection",
    "build_tool_name",
    "compile_operation",
    "extract_tools",
    "load_schema",
    "map_arguments",
    "map_input_type",
    "parse_schema",
    "split_tool_name",
    "to_graphql_literal",
]
