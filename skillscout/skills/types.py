"""Skill, trigger and recommendation types shared by the recommendation engine."""
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

Language = Literal["en", "ko", "ja", "zh", "es"]
Confidence = Literal["high", "medium", "low"]

SUPPORTED_LANGUAGES: tuple[Language, ...] = ("en", "ko", "ja", "zh", "es")

# Space-delimited languages get \b anchors; agglutinative/isolating ones match as substrings.
WORD_BOUNDARY_LANGUAGES: frozenset[str] = frozenset({"en", "es"})

ConceptKeywords = Mapping[str, tuple[str, ...]]


def uses_word_boundary(language: str) -> bool:
    return language in WORD_BOUNDARY_LANGUAGES


def _keyword_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(k) for k in value)


def normalize_concept(keywords_by_language: Mapping[str, Any]) -> ConceptKeywords:
    """Return a read-only concept map with every supported language present (empty tuple if absent).

    A bare string is one keyword, not a sequence of characters.
    """
    return MappingProxyType(
        {lang: _keyword_tuple(keywords_by_language.get(lang)) for lang in SUPPORTED_LANGUAGES}
    )


@dataclass(frozen=True)
class Skill:
    """A recommendable skill: name, priority, description and per-language concept keywords."""

    name: str
    priority: int
    description: str
    concepts: Mapping[str, ConceptKeywords] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only all the way down: bundled Skill objects are shared by every registry.
        object.__setattr__(
            self,
            "concepts",
            MappingProxyType({concept: normalize_concept(kw) for concept, kw in self.concepts.items()}),
        )

    @property
    def concept_names(self) -> list[str]:
        return list(self.concepts)

    def keyword_count(self) -> int:
        return sum(len(kws) for concept in self.concepts.values() for kws in concept.values())


@dataclass(frozen=True)
class Recommendation:
    skill_name: str
    confidence: Confidence
    matched_patterns: list[str]
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "skillName": self.skill_name,
            "confidence": self.confidence,
            "matchedPatterns": list(self.matched_patterns),
            "description": self.description,
        }


@dataclass(frozen=True)
class SkillInfo:
    """Catalog projection of a Skill: concept names only, no keywords."""

    name: str
    priority: int
    description: str
    concepts: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "priority": self.priority,
            "description": self.description,
            "concepts": list(self.concepts),
        }


@dataclass(frozen=True)
class ListFilter:
    """Inclusive priority bounds; None means unbounded."""

    min_priority: float | None = None
    max_priority: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_priority", _as_bound(self.min_priority))
        object.__setattr__(self, "max_priority", _as_bound(self.max_priority))

    @classmethod
    def from_options(cls, options: Any) -> "ListFilter":
        """Build a filter from loose options; non-mapping options and non-numeric values are treated as absent."""
        if not isinstance(options, Mapping):
            options = {}
        return cls(
            min_priority=_first(options, "min_priority", "minPriority"),
            max_priority=_first(options, "max_priority", "maxPriority"),
        )

    def accepts(self, priority: int) -> bool:
        if self.min_priority is not None and priority < self.min_priority:
            return False
        if self.max_priority is not None and priority > self.max_priority:
            return False
        return True


def _first(options: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if options.get(key) is not None:
            return options[key]
    return None


def _as_bound(value: Any) -> float | None:
    # bool is an int subclass but never a meaningful priority
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value != value:  # NaN
        return None
    return value


@dataclass(frozen=True)
class RecommendResult:
    recommendations: list[Recommendation]
    original_prompt: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "recommendations": [r.to_dict() for r in self.recommendations],
            "originalPrompt": self.original_prompt,
        }


@dataclass(frozen=True)
class ListResult:
    skills: list[SkillInfo]
    total: int

    def to_dict(self) -> dict[str, Any]:
        return {"skills": [s.to_dict() for s in self.skills], "total": self.total}
