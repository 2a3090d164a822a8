"""Match a prompt against compiled triggers, score confidence and rank by priority."""
from collections.abc import Callable
from dataclasses import dataclass

from skillscout.skills.triggers import CompiledTrigger
from skillscout.skills.types import Confidence, Recommendation

HIGH_CONFIDENCE_MIN_MATCHES = 3


@dataclass(frozen=True)
class SkillMatch:
    skill_name: str
    priority: int
    matched_patterns: list[str]


def match_triggers(text: str, triggers: list[CompiledTrigger]) -> dict[str, SkillMatch]:
    """Return matches keyed by skill name, in trigger (registry) order.

    matched_patterns holds the declared keywords found in the text, deduplicated
    across languages. Skills with no match are left out.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return {}
    matches: dict[str, SkillMatch] = {}
    for trigger in triggers:
        if trigger.skill_name in matches:
            continue
        matched: list[str] = []
        for pattern in trigger.patterns:
            for keyword in pattern.matched_keywords(trimmed):
                if keyword not in matched:
                    matched.append(keyword)
        if matched:
            matches[trigger.skill_name] = SkillMatch(
                skill_name=trigger.skill_name,
                priority=trigger.priority,
                matched_patterns=matched,
            )
    return matches


def score_confidence(match_count: int) -> Confidence:
    """3+ distinct matches is high, otherwise medium.

    "low" is reserved: unmatched skills are dropped before scoring, so it is never returned.
    """
    if match_count >= HIGH_CONFIDENCE_MIN_MATCHES:
        return "high"
    return "medium"


def rank_key(priority: int, name: str) -> tuple[int, str]:
    """Sort key: priority descending, then skill name ascending."""
    return (-priority, name)


def rank_matches(
    matches: dict[str, SkillMatch],
    describe: Callable[[str], str],
) -> list[Recommendation]:
    ordered = sorted(matches.values(), key=lambda m: rank_key(m.priority, m.skill_name))
    return [
        Recommendation(
            skill_name=m.skill_name,
            confidence=score_confidence(len(m.matched_patterns)),
            matched_patterns=list(m.matched_patterns),
            description=describe(m.skill_name),
        )
        for m in ordered
    ]
