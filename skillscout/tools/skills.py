"""recommend_skills and list_skills tools backed by a SkillEngine."""
import json
from typing import Any

from skillscout.skills.engine import SkillEngine
from skillscout.skills.types import ListFilter
from skillscout.tools.base import ToolError, make_tool
from skillscout.tools.registry import ToolRegistry

RECOMMEND_SKILLS_PARAMETERS = {
    "type": "object",
    "properties": {
        "prompt": {
            "type": "string",
            "description": "User prompt to analyze for skill recommendations",
        },
    },
    "required": ["prompt"],
}

LIST_SKILLS_PARAMETERS = {
    "type": "object",
    "properties": {
        "minPriority": {
            "type": "number",
            "description": "Minimum priority threshold (inclusive)",
        },
        "maxPriority": {
            "type": "number",
            "description": "Maximum priority threshold (inclusive)",
        },
    },
    "required": [],
}


def to_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def extract_required_string(args: dict[str, Any], key: str) -> str:
    value = args.get(key)
    if not isinstance(value, str):
        raise ToolError(f"Missing required parameter: {key}")
    return value


def register_skill_tools(registry: ToolRegistry, engine: SkillEngine) -> None:
    """Register recommend_skills and list_skills on registry, both bound to engine."""

    def recommend_skills(args: dict[str, Any]) -> str:
        prompt = extract_required_string(args, "prompt")
        return to_json(engine.recommend_skills(prompt).to_dict())

    def list_skills(args: dict[str, Any]) -> str:
        return to_json(engine.list_skills(ListFilter.from_options(args)).to_dict())

    registry.register(
        *make_tool(
            name="recommend_skills",
            description="Recommend skills based on user prompt with multi-language support",
            parameters=RECOMMEND_SKILLS_PARAMETERS,
            callable_fn=recommend_skills,
        )
    )
    registry.register(
        *make_tool(
            name="list_skills",
            description="List all available skills with optional filtering",
            parameters=LIST_SKILLS_PARAMETERS,
            callable_fn=list_skills,
        )
    )


def build_tool_registry(engine: SkillEngine) -> ToolRegistry:
    registry = ToolRegistry()
    register_skill_tools(registry, engine)
    return registry
