"""Tool definitions and tool calls exchanged with the tool-serving layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class ToolDefinition:
    """A tool derived from one root query or mutation field."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Render in the MCP tool wire shape."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }

    @property
    def param_count(self) -> int:
        return len(self.input_schema.get("properties", {}))

    @property
    def required_count(self) -> int:
        return len(self.input_schema.get("required", []))


@dataclass(frozen=True)
class ToolCall:
    """A single tool invocation; argument order is preserved."""

    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolCall":
        """Build from the MCP wire shape {"name": ..., "arguments": {...}}."""
        return cls(name=data["name"], arguments=dict(data.get("arguments") or {}))
