"""Load a custom keyword table from YAML into a SkillRegistry.

Expected shape:

    skills:
      - name: systematic-debugging
        priority: 25
        description: Systematic approach to debugging
        concepts:
          error:
            en: [error, bug]
            ko: [에러, 버그]

Malformed entries are skipped with a log warning; an unreadable file or invalid
YAML raises RegistryLoadError.
"""
from pathlib import Path
from typing import Any

import yaml

from skillscout.logging_utils import get_logger
from skillscout.skills.registry import SkillRegistry
from skillscout.skills.types import SUPPORTED_LANGUAGES, Skill

logger = get_logger(__name__)


class RegistryLoadError(Exception):
    """The keyword table file could not be read or parsed."""


def _parse_concepts(name: str, raw: Any) -> dict[str, dict[str, list[str]]]:
    concepts: dict[str, dict[str, list[str]]] = {}
    if not isinstance(raw, dict):
        return concepts
    for concept, by_language in raw.items():
        if not isinstance(by_language, dict):
            logger.warning("skill_concept_invalid", skill=name, concept=str(concept))
            continue
        keywords: dict[str, list[str]] = {}
        for lang, words in by_language.items():
            if lang not in SUPPORTED_LANGUAGES:
                logger.warning("skill_concept_unknown_language", skill=name, concept=str(concept), language=str(lang))
                continue
            if words is None:
                words = []
            if not isinstance(words, list):
                words = [words]
            keywords[lang] = [str(w) for w in words if str(w).strip()]
        concepts[str(concept)] = keywords
    return concepts


def parse_skill(entry: Any) -> Skill | None:
    """Build a Skill from one YAML mapping, or return None (with a warning) if it is unusable."""
    if not isinstance(entry, dict):
        logger.warning("skill_registry_entry_skipped", reason="not_a_mapping")
        return None
    name = entry.get("name")
    if not name or not str(name).strip():
        logger.warning("skill_registry_entry_skipped", reason="missing_name")
        return None
    name = str(name).strip()
    priority = entry.get("priority")
    if isinstance(priority, bool) or not isinstance(priority, int):
        logger.warning("skill_registry_entry_skipped", reason="invalid_priority", skill=name)
        return None
    description = entry.get("description") or ""
    if not str(description).strip():
        logger.warning("skill_missing_description", skill=name)
    skill = Skill(
        name=name,
        priority=priority,
        description=str(description),
        concepts=_parse_concepts(name, entry.get("concepts")),
    )
    if skill.keyword_count() == 0:
        logger.warning("skill_registry_entry_skipped", reason="no_keywords", skill=name)
        return None
    return skill


def parse_registry(data: Any) -> SkillRegistry:
    """Build a registry from already-parsed YAML data. Duplicate names keep the first entry."""
    entries = data.get("skills") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise RegistryLoadError("Keyword table must contain a 'skills' list")
    skills: list[Skill] = []
    seen: set[str] = set()
    for entry in entries:
        skill = parse_skill(entry)
        if skill is None:
            continue
        if skill.name in seen:
            logger.warning("skill_registry_entry_skipped", reason="duplicate_name", skill=skill.name)
            continue
        seen.add(skill.name)
        skills.append(skill)
    return SkillRegistry(skills)


def load_registry(path: Path | str) -> SkillRegistry:
    """Read a YAML keyword table from path."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RegistryLoadError(f"Cannot read keyword table {path}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RegistryLoadError(f"Invalid YAML in keyword table {path}: {e}") from e
    registry = parse_registry(data)
    logger.info("skill_registry_loaded", path=str(path), skills=len(registry))
    return registry
