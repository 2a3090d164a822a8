"""Skills: multilingual keyword triggers, recommendation and catalog listing."""
from skillscout.skills.engine import SkillEngine
from skillscout.skills.keywords import SKILL_KEYWORDS, default_registry
from skillscout.skills.loader import RegistryLoadError, load_registry
from skillscout.skills.registry import SkillRegistry
from skillscout.skills.types import (
    ListFilter,
    ListResult,
    Recommendation,
    RecommendResult,
    Skill,
    SkillInfo,
)

__all__ = [
    "ListFilter",
    "ListResult",
    "Recommendation",
    "RecommendResult",
    "RegistryLoadError",
    "SKILL_KEYWORDS",
    "Skill",
    "SkillEngine",
    "SkillInfo",
    "SkillRegistry",
    "default_registry",
    "load_registry",
]
