"""Static registry of the tools exposed by the server."""

import logging
from collections.abc import Iterable
from dataclasses import replace

from oura_mcp_server.tools.types import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Ordered, read-only collection of tool descriptors.

    A registry is built once at startup and handed to the executor and the
    routers. It never changes after construction.
    """

    def __init__(self, descriptors: Iterable[ToolDescriptor]):
        """Initialize the registry.

        Args:
            descriptors: Tool descriptors in listing order.

        Raises:
            ValueError: If two descriptors share a name.
        """
        self._tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in self._tools:
                raise ValueError(f"Duplicate tool name: {descriptor.name}")
            self._tools[descriptor.name] = descriptor

    def list_tools(self) -> list[ToolDescriptor]:
        """Get all registered tools in registration order.

        Returns:
            A new list of descriptor copies on every call.
        """
        return [replace(descriptor) for descriptor in self._tools.values()]

    def get(self, name: str) -> ToolDescriptor | None:
        """Look up a tool by name, returning None if it is not registered."""
        descriptor = self._tools.get(name)
        return replace(descriptor) if descriptor is not None else None

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_default_registry() -> ToolRegistry:
    """Create the registry with the sleep tools."""
    sleep_check = ToolDescriptor(
        name="sleep_check",
        description="Check sleep data and determine if user should rest or train",
        input_schema={
            "type": "object",
            "properties": {
                "forceAlert": {
                    "type": "boolean",
                    "description": "Force an alert regardless of sleep score",
                }
            },
        },
    )
    sleep_summary = ToolDescriptor(
        name="sleep_summary",
        description="Get weekly sleep summary",
        input_schema={"type": "object", "properties": {}},
    )

    registry = ToolRegistry([sleep_check, sleep_summary])
    logger.debug(f"Built tool registry: {registry.names}")
    return registry
