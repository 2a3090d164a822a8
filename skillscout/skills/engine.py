"""SkillEngine: owns a registry and its trigger cache, answers recommend/list requests."""
from typing import Any

from skillscout.logging_utils import get_logger, log_skills_listed, log_skills_recommended
from skillscout.skills.catalog import list_skills as list_catalog
from skillscout.skills.keywords import default_registry
from skillscout.skills.matcher import match_triggers, rank_matches
from skillscout.skills.registry import SkillRegistry
from skillscout.skills.triggers import CompiledTrigger, TriggerCache
from skillscout.skills.types import ListFilter, ListResult, RecommendResult

logger = get_logger(__name__)


class SkillEngine:
    """Recommendation engine over one immutable SkillRegistry.

    Build one per process and pass it to whoever needs it; tests call reset()
    to drop the compiled triggers.
    """

    def __init__(self, registry: SkillRegistry | None = None):
        self.registry = registry if registry is not None else default_registry()
        self._cache = TriggerCache(self.registry)

    def triggers(self) -> list[CompiledTrigger]:
        return self._cache.get()

    def reset(self) -> None:
        self._cache.reset()

    def recommend_skills(self, prompt: str) -> RecommendResult:
        """Recommend skills for prompt, highest priority first. originalPrompt echoes prompt untouched."""
        if not prompt or not prompt.strip():
            return RecommendResult(recommendations=[], original_prompt=prompt)
        matches = match_triggers(prompt, self.triggers())
        recommendations = rank_matches(matches, self.registry.description_for)
        log_skills_recommended(
            logger,
            prompt=prompt,
            skill_names=[r.skill_name for r in recommendations],
        )
        return RecommendResult(recommendations=recommendations, original_prompt=prompt)

    def list_skills(self, options: Any = None) -> ListResult:
        """List skills, optionally bounded by inclusive min/max priority. Malformed options mean no bound."""
        list_filter = options if isinstance(options, ListFilter) else ListFilter.from_options(options)
        result = list_catalog(self.registry, list_filter)
        log_skills_listed(
            logger,
            min_priority=list_filter.min_priority,
            max_priority=list_filter.max_priority,
            total=result.total,
        )
        return result
