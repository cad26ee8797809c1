"""Talent-posting matching engine module."""

from .matching_engine import (
    EligibilityPredicate,
    MatchingEngine,
    get_matching_engine,
)
from .similarity import edit_distance, is_fuzzy_match, similarity
from .skill_scorer import (
    SkillEvaluation,
    SkillScorer,
    matched_skills,
    normalize_skills,
    score_skills,
)

__all__ = [
    "EligibilityPredicate",
    "MatchingEngine",
    "get_matching_engine",
    "edit_distance",
    "is_fuzzy_match",
    "similarity",
    "SkillEvaluation",
    "SkillScorer",
    "matched_skills",
    "normalize_skills",
    "score_skills",
]
