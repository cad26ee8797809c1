"""
Shared test fixtures for the talentmatch test suite.

Sets environment variables before any talentmatch imports so settings load
in testing mode, then provides factory fixtures for postings and candidates.
"""

import os

# === Set environment BEFORE any talentmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, Optional

import pytest
from loguru import logger

from talentmatch.core.matching.matching_engine import MatchingEngine
from talentmatch.core.matching.skill_scorer import SkillScorer
from talentmatch.data.models import Budget, CandidateProfile, PostingRequirement
from talentmatch.utils.config import MatchingSettings


@pytest.fixture(autouse=True)
def enable_package_logging():
    """Importing talentmatch disables its loggers; tests assert on their output."""
    logger.enable("talentmatch")
    yield
    logger.enable("talentmatch")


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_posting():
    """Factory that returns a callable to build PostingRequirement models."""

    def _factory(
        required_skills: Optional[list[str]] = None,
        budget: Optional[dict[str, Any]] = None,
        id: str = "posting-1",
        title: str = "Mobile App Developer",
        **kwargs,
    ) -> PostingRequirement:
        if required_skills is None:
            required_skills = ["JavaScript", "React", "SQL"]
        return PostingRequirement(
            id=id,
            title=title,
            required_skills=required_skills,
            budget=Budget.model_validate(budget) if budget is not None else None,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build CandidateProfile models."""

    def _factory(
        id: str = "talent-1",
        skills: Optional[list[str]] = None,
        availability: str = "available",
        hourly_rate: Optional[float] = None,
        experience: Optional[list[Any]] = None,
        role: str = "talent",
        **kwargs,
    ) -> CandidateProfile:
        if skills is None:
            skills = ["javascript", "react", "sql"]
        return CandidateProfile(
            id=id,
            skills=skills,
            availability=availability,
            hourly_rate=hourly_rate,
            experience=experience or [],
            role=role,
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_settings() -> MatchingSettings:
    """Matching settings with default values."""
    return MatchingSettings()


@pytest.fixture
def matching_engine(matching_settings) -> MatchingEngine:
    """A MatchingEngine built from default settings."""
    return MatchingEngine(settings=matching_settings)


@pytest.fixture
def skill_scorer(matching_settings) -> SkillScorer:
    """A SkillScorer built from default settings."""
    return SkillScorer(settings=matching_settings)
