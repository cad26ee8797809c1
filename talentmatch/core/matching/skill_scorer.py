"""
Skill match scoring.

Scores how well a candidate's skill list covers a posting's required skills
on a 0-100 scale, crediting exact hits fully and fuzzy-only hits at a
discount.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from talentmatch.utils.config import MatchingSettings, get_settings

from .similarity import is_fuzzy_match


def normalize_skills(skills: Optional[Sequence[str]]) -> list[str]:
    """Lowercase and trim every token, keeping order and duplicates."""
    if not skills:
        return []
    return [skill.lower().strip() for skill in skills]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


@dataclass
class SkillEvaluation:
    """Result of evaluating one candidate skill list against required skills."""

    score: int = 0
    exact_matches: int = 0
    partial_matches: int = 0
    matched_skills: list[str] = field(default_factory=list)


class SkillScorer:
    """
    Computes skill match scores with configurable weights and threshold.

    Scoring:
    - exact: required skills present verbatim (after normalization)
    - partial: required skills with any fuzzy hit; exact hits count here too
    - total = exact * exact_weight + (partial - exact) * partial_weight
    - score = round(total / len(required) * 100), clamped to [0, 100]
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        """
        Initialize the scorer.

        Args:
            settings: Optional matching settings (defaults to global settings)
        """
        self.settings = settings or get_settings().matching

    def evaluate(
        self,
        required_skills: Optional[Sequence[str]],
        candidate_skills: Optional[Sequence[str]],
    ) -> SkillEvaluation:
        """
        Evaluate candidate skills against required skills.

        Args:
            required_skills: Skills required by the posting
            candidate_skills: Skills listed by the candidate

        Returns:
            SkillEvaluation with score, counts and matched required skills
        """
        if not required_skills or not candidate_skills:
            return SkillEvaluation()

        required = normalize_skills(required_skills)
        candidate = normalize_skills(candidate_skills)
        threshold = self.settings.fuzzy_threshold

        exact = sum(1 for skill in required if skill in candidate)

        fuzzy_hits = [
            any(is_fuzzy_match(skill, other, threshold) for other in candidate)
            for skill in required
        ]
        partial = sum(fuzzy_hits)

        total = (
            exact * self.settings.exact_weight
            + (partial - exact) * self.settings.partial_weight
        )
        score = round_half_up(total / len(required) * 100)
        score = max(0, min(score, 100))

        # Report original spelling, once per distinct normalized skill
        matched: list[str] = []
        seen: set[str] = set()
        for original, normalized, hit in zip(required_skills, required, fuzzy_hits):
            if hit and normalized not in seen:
                matched.append(original)
                seen.add(normalized)

        return SkillEvaluation(
            score=score,
            exact_matches=exact,
            partial_matches=partial,
            matched_skills=matched,
        )

    def score(
        self,
        required_skills: Optional[Sequence[str]],
        candidate_skills: Optional[Sequence[str]],
    ) -> int:
        """Return the 0-100 skill match score."""
        return self.evaluate(required_skills, candidate_skills).score

    def matched_skills(
        self,
        required_skills: Optional[Sequence[str]],
        candidate_skills: Optional[Sequence[str]],
    ) -> list[str]:
        """Return the required skills that have at least one fuzzy hit."""
        return self.evaluate(required_skills, candidate_skills).matched_skills


def score_skills(
    required_skills: Optional[Sequence[str]],
    candidate_skills: Optional[Sequence[str]],
) -> int:
    """Score candidate skills against required skills using default settings."""
    return SkillScorer().score(required_skills, candidate_skills)


def matched_skills(
    required_skills: Optional[Sequence[str]],
    candidate_skills: Optional[Sequence[str]],
) -> list[str]:
    """List matched required skills using default settings."""
    return SkillScorer().matched_skills(required_skills, candidate_skills)
