"""Exceptions raised by the tool executor.

All of these describe bad caller input and are meant to be reported back to
the caller, not to crash the server.
"""


class ToolError(Exception):
    """Base class for recoverable tool invocation errors."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(message)
        self.tool_name = tool_name
        self.message = message


class ToolNotFoundError(ToolError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, tool_name: str):
        super().__init__(tool_name, f"Tool '{tool_name}' not found")


class ToolValidationError(ToolError):
    """Raised when tool arguments are malformed.

    Attributes:
        tool_name: The tool that was invoked
        field: The offending argument name
        reason: Why the value was rejected
    """

    def __init__(self, tool_name: str, field: str, reason: str):
        super().__init__(
            tool_name, f"Invalid argument '{field}' for tool '{tool_name}': {reason}"
        )
        self.field = field
        self.reason = reason
