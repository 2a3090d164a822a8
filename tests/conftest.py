"""
Pytest Configuration and Fixtures
"""

import logging
import sys

import pytest
import structlog

from skillscout.skills import SkillEngine, SkillRegistry, default_registry
from skillscout.skills.types import Skill
from skillscout.tools import build_tool_registry


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Only warnings and above, on stderr, so CLI tests can parse stdout as JSON."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer(ensure_ascii=False)],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def engine() -> SkillEngine:
    """Returns a fresh engine over the bundled keyword table."""
    return SkillEngine()


@pytest.fixture
def registry() -> SkillRegistry:
    return default_registry()


@pytest.fixture
def tools(engine):
    return build_tool_registry(engine)


@pytest.fixture
def tiny_registry() -> SkillRegistry:
    """Two skills sharing a priority, for tie-break and custom table checks."""
    return SkillRegistry(
        [
            Skill(
                name="zeta-skill",
                priority=5,
                description="Zeta",
                concepts={"alpha": {"en": ["alpha"]}, "beta": {"en": ["beta"]}, "gamma": {"ko": ["감마"]}},
            ),
            Skill(
                name="alpha-skill",
                priority=5,
                description="Alpha",
                concepts={"alpha": {"en": ["alpha"], "es": ["alfa"]}},
            ),
        ]
    )
