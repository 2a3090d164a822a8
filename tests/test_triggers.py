import threading

import pytest

from skillscout.skills import SkillEngine, default_registry
from skillscout.skills.triggers import TriggerCache, build_trigger, build_triggers
from skillscout.skills.types import SUPPORTED_LANGUAGES, Skill


def test_one_trigger_per_skill_in_registry_order(registry):
    triggers = build_triggers(registry)
    assert [t.skill_name for t in triggers] == registry.names
    assert [t.priority for t in triggers] == [25, 22, 20, 18, 15, 12, 12, 10]


def test_trigger_aggregates_every_concept_and_language(registry):
    debugging = build_trigger(registry.get("systematic-debugging"))
    # 4 concepts x 5 languages
    assert len(debugging.patterns) == 20
    assert {p.concept for p in debugging.patterns} == {"error", "not_working", "fix", "symptom"}
    assert {p.language for p in debugging.patterns} == set(SUPPORTED_LANGUAGES)


def test_every_bundled_trigger_has_patterns(registry):
    assert all(t.patterns for t in build_triggers(registry))


def test_languages_without_keywords_produce_no_pattern():
    skill = Skill(name="solo", priority=1, description="", concepts={"only": {"en": ["alpha"], "ko": []}})
    assert set(skill.concepts["only"]) == set(SUPPORTED_LANGUAGES)
    trigger = build_trigger(skill)
    assert [(p.concept, p.language) for p in trigger.patterns] == [("only", "en")]


def test_empty_registry_builds_no_triggers():
    assert build_triggers([]) == []


def test_cache_returns_same_list_until_reset(registry):
    cache = TriggerCache(registry)
    assert not cache.is_built
    first = cache.get()
    assert cache.is_built
    assert cache.get() is first

    cache.reset()
    assert not cache.is_built
    rebuilt = cache.get()
    assert rebuilt is not first
    assert [t.skill_name for t in rebuilt] == [t.skill_name for t in first]


def test_engine_owns_its_cache(engine):
    first = engine.triggers()
    assert engine.triggers() is first
    engine.reset()
    assert engine.triggers() is not first


def test_bundled_skills_are_read_only(registry):
    skill = registry.get("systematic-debugging")
    with pytest.raises(TypeError):
        skill.concepts["extra"] = {"en": ("hello",)}
    with pytest.raises(TypeError):
        skill.concepts["error"]["en"] = ("hello",)
    assert SkillEngine().recommend_skills("hello world").recommendations == []
    assert len(build_trigger(default_registry().get("systematic-debugging")).patterns) == 20


def test_bare_string_keyword_is_one_keyword():
    skill = Skill(name="solo", priority=1, description="", concepts={"only": {"en": "bug", "ko": "버그"}})
    assert skill.concepts["only"]["en"] == ("bug",)
    assert skill.concepts["only"]["ko"] == ("버그",)


def test_concurrent_first_build_gives_identical_results():
    engine = SkillEngine()
    prompt = "create a new button component and fix the bug"
    barrier = threading.Barrier(16)
    results = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        payload = engine.recommend_skills(prompt).to_dict()
        with lock:
            results.append(payload)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 16
    assert all(r == results[0] for r in results)
    assert results[0]["recommendations"][0]["skillName"] == "systematic-debugging"
