"""Immutable, ordered collection of skills keyed by unique name."""
from collections.abc import Iterable, Iterator

from skillscout.skills.types import Skill


class DuplicateSkillError(ValueError):
    """Raised when two skills in one registry share a name."""


class SkillRegistry:
    """Skills in declaration order. Names are unique; contents never change after construction."""

    def __init__(self, skills: Iterable[Skill]):
        ordered: list[Skill] = []
        by_name: dict[str, Skill] = {}
        for skill in skills:
            if skill.name in by_name:
                raise DuplicateSkillError(f"Duplicate skill name: {skill.name}")
            by_name[skill.name] = skill
            ordered.append(skill)
        self._skills = tuple(ordered)
        self._by_name = by_name

    def __iter__(self) -> Iterator[Skill]:
        return iter(self._skills)

    def __len__(self) -> int:
        return len(self._skills)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Skill | None:
        return self._by_name.get(name)

    def description_for(self, name: str) -> str:
        skill = self._by_name.get(name)
        return skill.description if skill else f"Skill: {name}"

    @property
    def names(self) -> list[str]:
        return [s.name for s in self._skills]
