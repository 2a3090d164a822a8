"""Tool registry: register tools, list their definitions, execute by name."""
from typing import Any

from skillscout.logging_utils import get_logger, log_tool_call_end, log_tool_call_start
from skillscout.tools.base import ToolCallable, ToolDefinition, ToolError

logger = get_logger(__name__)


class ToolRegistry:
    """Ordered set of tools. execute() never raises: failures come back as "Error: ..." strings."""

    def __init__(self) -> None:
        self._tools: dict[str, tuple[ToolDefinition, ToolCallable]] = {}

    def register(self, definition: ToolDefinition, callable_fn: ToolCallable) -> None:
        """Register a tool. A later registration under the same name replaces the earlier one."""
        self._tools[definition["name"]] = (definition, callable_fn)

    def names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[ToolDefinition]:
        return [definition for definition, _ in self._tools.values()]

    def execute(self, tool_name: str, arguments: dict[str, Any] | None = None) -> str:
        """Execute a tool by name with the given arguments. Returns a string result."""
        entry = self._tools.get(tool_name)
        if entry is None:
            return f"Unknown tool: {tool_name}"
        _, callable_fn = entry
        args = arguments if isinstance(arguments, dict) else {}
        log_tool_call_start(logger, tool_name=tool_name, arguments=args)
        try:
            result = callable_fn(args)
        except ToolError as e:
            result = f"Error: {e!s}"
            log_tool_call_end(logger, tool_name=tool_name, success=False, error=result)
            return result
        except Exception as e:
            logger.exception("tool_call_failed", tool_name=tool_name)
            result = f"Error: Failed to {tool_name.replace('_', ' ')}: {e!s}"
            log_tool_call_end(logger, tool_name=tool_name, success=False, error=result)
            return result
        result = result if isinstance(result, str) else str(result)
        log_tool_call_end(logger, tool_name=tool_name, success=True, result_summary=result[:200])
        return result
