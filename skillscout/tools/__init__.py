"""Tools exposed to the agent: recommend_skills and list_skills."""
from skillscout.tools.registry import ToolRegistry
from skillscout.tools.skills import build_tool_registry, register_skill_tools

__all__ = ["ToolRegistry", "build_tool_registry", "register_skill_tools"]
