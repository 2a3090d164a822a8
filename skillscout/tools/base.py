"""Tool protocol: name, description, JSON schema for parameters, and callable."""
from typing import Any, Callable

# Tool definition shape: {"name", "description", "inputSchema"} (JSON Schema for the arguments).
# The callable receives the raw argument dict and returns a string result for the agent.
ToolDefinition = dict[str, Any]
ToolCallable = Callable[[dict[str, Any]], str]


class ToolError(Exception):
    """A tool rejected its arguments; the message is returned to the caller as-is."""


def make_tool(
    name: str,
    description: str,
    parameters: dict[str, Any],
    callable_fn: ToolCallable,
) -> tuple[ToolDefinition, ToolCallable]:
    """Build a tool definition and the callable that executes it.
    parameters: JSON Schema for the arguments (e.g. {"type": "object", "properties": {...}, "required": [...]}).
    callable_fn: receives the argument dict, returns a string.
    """
    definition: ToolDefinition = {
        "name": name,
        "description": description,
        "inputSchema": parameters,
    }
    return definition, callable_fn
