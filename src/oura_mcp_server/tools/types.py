"""Type definitions for tools."""

import copy
from dataclasses import dataclass, field
from typing import Any

ToolArguments = dict[str, Any]
ToolResult = dict[str, Any]


@dataclass(frozen=True)
class ToolDescriptor:
    """Static metadata describing a tool.

    The input schema is deep-copied on construction and on serialization, so
    no caller shares a mutable schema with the descriptor.

    Attributes:
        name: Unique tool name used for invocation
        description: Human-readable description of what the tool does
        input_schema: JSON-Schema-like description of the accepted arguments
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_schema", copy.deepcopy(self.input_schema))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the MCP wire shape (camelCase ``inputSchema``)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }
