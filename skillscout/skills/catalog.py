"""Catalog listing of skills with optional inclusive priority bounds."""
from collections.abc import Iterable

from skillscout.skills.matcher import rank_key
from skillscout.skills.types import ListFilter, ListResult, Skill, SkillInfo


def to_skill_info(skill: Skill) -> SkillInfo:
    return SkillInfo(
        name=skill.name,
        priority=skill.priority,
        description=skill.description,
        concepts=skill.concept_names,
    )


def list_skills(skills: Iterable[Skill], list_filter: ListFilter | None = None) -> ListResult:
    """List skills highest priority first; total counts the filtered list."""
    list_filter = list_filter or ListFilter()
    infos = [to_skill_info(s) for s in skills if list_filter.accepts(s.priority)]
    infos.sort(key=lambda info: rank_key(info.priority, info.name))
    return ListResult(skills=infos, total=len(infos))
