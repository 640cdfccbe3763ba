"""Exception classes for gqlbridge."""

from __future__ import annotations


class BridgeError(Exception):
    """Base exception for all gqlbridge errors."""
    pass


class SchemaLoadError(BridgeError):
    """Raised when the schema file is missing or its SDL is rejected."""


class ConfigError(BridgeError):
    """Raised on an invalid environment setting."""


class UnknownOperationKind(BridgeError):
    """Raised when a tool name prefix does not resolve to a root type."""

    def __init__(self, tool_name: str, prefix: str | None = None):
        if prefix is None:
            message = f"Tool name {tool_name!r} has no operation prefix"
        else:
            message = f"Unknown operation kind {prefix!r} in tool {tool_name!r}"
        super().__init__(message)
        self.tool_name = tool_name
        self.prefix = prefix


class UnknownField(BridgeError):
    """Raised when a tool name does not match any field on its root type."""

    def __init__(self, kind: str, field_name: str):
        super().__init__(f"Unknown {kind} field: {field_name!r}")
        self.kind = kind
        self.field_name = field_name


class ArgumentEncodingError(BridgeError, TypeError):
    """Raised when an argument value has no GraphQL literal form."""
