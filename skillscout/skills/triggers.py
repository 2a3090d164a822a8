"""Build compiled skill triggers from a registry and cache them."""
from collections.abc import Iterable
from dataclasses import dataclass

from skillscout.logging_utils import get_logger
from skillscout.skills.patterns import KeywordPattern, compile_pattern
from skillscout.skills.types import Skill

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompiledTrigger:
    """All compiled patterns of one skill, across every concept and language."""

    skill_name: str
    priority: int
    patterns: tuple[KeywordPattern, ...]


def build_trigger(skill: Skill) -> CompiledTrigger:
    patterns: list[KeywordPattern] = []
    for concept, by_language in skill.concepts.items():
        for language, keywords in by_language.items():
            if keywords:
                patterns.append(compile_pattern(keywords, language, concept=concept))
    return CompiledTrigger(skill_name=skill.name, priority=skill.priority, patterns=tuple(patterns))


def build_triggers(skills: Iterable[Skill]) -> list[CompiledTrigger]:
    """One trigger per skill, in registry order."""
    return [build_trigger(skill) for skill in skills]


class TriggerCache:
    """Lazily builds triggers for a registry and keeps them until reset().

    Two threads racing on the first get() may both build; either result is
    equivalent, so the last assignment wins without locking.
    """

    def __init__(self, skills: Iterable[Skill]):
        self._skills = skills
        self._triggers: list[CompiledTrigger] | None = None

    def get(self) -> list[CompiledTrigger]:
        triggers = self._triggers
        if triggers is None:
            triggers = build_triggers(self._skills)
            self._triggers = triggers
            logger.debug(
                "trigger_cache_built",
                skills=len(triggers),
                patterns=sum(len(t.patterns) for t in triggers),
            )
        return triggers

    def reset(self) -> None:
        self._triggers = None

    @property
    def is_built(self) -> bool:
        return self._triggers is not None
