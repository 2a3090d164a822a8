import pytest

from skillscout.skills.matcher import match_triggers, rank_matches, score_confidence
from skillscout.skills.triggers import build_triggers


@pytest.fixture
def triggers(registry):
    return build_triggers(registry)


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_blank_text_matches_nothing(triggers, text):
    assert match_triggers(text, triggers) == {}


def test_unmatched_skills_are_omitted(triggers):
    matches = match_triggers("There is a bug in the login", triggers)
    assert list(matches) == ["systematic-debugging"]
    assert matches["systematic-debugging"].matched_patterns == ["bug"]


def test_same_keyword_across_languages_counts_once(triggers):
    # "bug" is declared for en, zh and es
    matches = match_triggers("bug", triggers)
    assert matches["systematic-debugging"].matched_patterns == ["bug"]


def test_matches_follow_registry_order(triggers):
    matches = match_triggers("create a plan to fix the button", triggers)
    assert list(matches) == ["systematic-debugging", "writing-plans", "frontend-design", "brainstorming"]


def test_all_keywords_of_a_concept_are_collected(triggers):
    matches = match_triggers("fix this bug error issue", triggers)
    assert matches["systematic-debugging"].matched_patterns == ["bug", "error", "issue", "fix"]


@pytest.mark.parametrize("count,expected", [(1, "medium"), (2, "medium"), (3, "high"), (7, "high")])
def test_confidence_thresholds(count, expected):
    assert score_confidence(count) == expected


def test_rank_by_priority_regardless_of_match_count(registry, triggers):
    matches = match_triggers("fix the button modal popup dropdown component page", triggers)
    ranked = rank_matches(matches, registry.description_for)
    names = [r.skill_name for r in ranked]
    assert names.index("systematic-debugging") < names.index("frontend-design")
    assert ranked[0].confidence == "medium"
    assert ranked[1].confidence == "high"


def test_equal_priority_breaks_ties_by_name(tiny_registry):
    matches = match_triggers("alpha", build_triggers(tiny_registry))
    assert list(matches) == ["zeta-skill", "alpha-skill"]
    ranked = rank_matches(matches, tiny_registry.description_for)
    assert [r.skill_name for r in ranked] == ["alpha-skill", "zeta-skill"]
    assert [r.description for r in ranked] == ["Alpha", "Zeta"]


def test_registry_tie_in_bundled_data_is_stable(registry, triggers):
    matches = match_triggers("run several subagent jobs in parallel", triggers)
    ranked = rank_matches(matches, registry.description_for)
    assert [r.skill_name for r in ranked] == ["dispatching-parallel-agents", "subagent-driven-development"]


def test_skill_seen_twice_is_recorded_once(triggers):
    text = "fix this bug error issue"
    once = match_triggers(text, triggers)
    twice = match_triggers(text, triggers + triggers)
    assert list(twice) == list(once) == ["systematic-debugging"]
    assert twice["systematic-debugging"].matched_patterns == ["bug", "error", "issue", "fix"]
