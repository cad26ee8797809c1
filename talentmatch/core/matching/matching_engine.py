"""
Talent-posting matching engine.

Ranks candidate talent against a posting's requirements by combining a
skill match score with availability, rate compatibility and experience
bonuses, and scores open postings against a single talent's skills for
dashboard display.
"""

from typing import Callable, Optional, Sequence

from talentmatch.data.models import (
    Budget,
    CandidateProfile,
    MatchResult,
    PostingRequirement,
    PostingScore,
)
from talentmatch.utils.config import MatchingSettings, get_settings
from talentmatch.utils.constants import Availability, AuditAction, MatchBadge
from talentmatch.utils.logger import audit_log, get_logger

from .skill_scorer import SkillScorer

logger = get_logger(__name__)

# Externally supplied trust check (e.g. verified account) applied on top of
# the built-in eligibility rules
EligibilityPredicate = Callable[[CandidateProfile], bool]


class MatchingEngine:
    """
    Engine for recommending talent for a posting.

    Pipeline per call:
    - filter ineligible candidates (non-talent, no skills, unavailable,
      rejected by the injected predicate)
    - score each remaining candidate
    - drop candidates whose skill match is not above the relevance floor
    - stable sort by final score, highest first
    - keep the top N
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        """
        Initialize the matching engine.

        Args:
            settings: Optional matching settings (defaults to global settings)
        """
        self.settings = settings or get_settings().matching
        self.scorer = SkillScorer(self.settings)

    def recommend(
        self,
        posting: Optional[PostingRequirement],
        candidates: Optional[Sequence[CandidateProfile]],
        eligibility: Optional[EligibilityPredicate] = None,
    ) -> list[MatchResult]:
        """
        Recommend candidates for a posting.

        Args:
            posting: Posting requirements (required skills, optional budget)
            candidates: Candidate profiles to consider
            eligibility: Optional extra predicate a candidate must satisfy

        Returns:
            At most ``max_recommendations`` results, sorted by final score
        """
        if posting is None or not posting.required_skills or not candidates:
            return []

        eligible = [c for c in candidates if self.is_eligible(c, eligibility)]
        results = [self.score_candidate(posting, c) for c in eligible]

        relevant = [
            r for r in results if r.skill_match_score > self.settings.min_skill_score
        ]
        ranked = self.rank_candidates(relevant)[: self.settings.max_recommendations]

        logger.debug(
            f"Ranked posting {posting.id}: {len(candidates)} candidates, "
            f"{len(eligible)} eligible, {len(relevant)} relevant, {len(ranked)} returned"
        )
        audit_log(
            AuditAction.CANDIDATES_RANKED.value,
            {
                "posting_id": posting.id,
                "candidates_total": len(candidates),
                "candidates_eligible": len(eligible),
                "returned": [(r.candidate_id, r.final_score) for r in ranked],
            },
        )

        return ranked

    def is_eligible(
        self,
        candidate: CandidateProfile,
        eligibility: Optional[EligibilityPredicate] = None,
    ) -> bool:
        """Check whether a candidate may be scored at all."""
        if not candidate.is_talent:
            return False
        if not candidate.skills:
            return False
        if candidate.availability == Availability.UNAVAILABLE:
            return False
        if eligibility is not None and not eligibility(candidate):
            return False
        return True

    def score_candidate(
        self,
        posting: PostingRequirement,
        candidate: CandidateProfile,
    ) -> MatchResult:
        """
        Compute the full score breakdown of one candidate.

        Eligibility is not checked here; see ``is_eligible``.
        """
        evaluation = self.scorer.evaluate(posting.required_skills, candidate.skills)

        availability_score = self.availability_score(candidate.availability)
        rate_compatibility = self.rate_compatibility(posting.budget, candidate.hourly_rate)
        experience_bonus = self.experience_bonus(candidate)

        final_score = min(
            evaluation.score + availability_score + rate_compatibility + experience_bonus,
            100,
        )

        return MatchResult(
            candidate_id=candidate.id,
            final_score=final_score,
            skill_match_score=evaluation.score,
            matched_skills=evaluation.matched_skills,
            availability_score=availability_score,
            rate_compatibility=rate_compatibility,
            experience_bonus=experience_bonus,
        )

    def availability_score(self, availability: str) -> int:
        """Full score for available talent, reduced score for any other state."""
        if availability == Availability.AVAILABLE:
            return self.settings.available_score
        return self.settings.other_availability_score

    def rate_compatibility(
        self,
        budget: Optional[Budget],
        hourly_rate: Optional[float],
    ) -> int:
        """
        Score how a talent's hourly rate fits a posting budget.

        A rate at or below the ceiling (``max``, else ``min``) is compatible;
        it scores higher when also at or above the floor (``min``, else 0).
        Missing (or zero) budget bounds and rates contribute nothing.
        """
        if budget is None or not hourly_rate:
            return 0
        if budget.is_empty:
            return 0

        ceiling = budget.max_amount or budget.min_amount
        floor = budget.min_amount or 0

        if hourly_rate <= ceiling:
            if hourly_rate >= floor:
                return self.settings.rate_within_budget_score
            return self.settings.rate_below_floor_score

        return 0

    def experience_bonus(self, candidate: CandidateProfile) -> int:
        """Bonus per experience entry; capped only by the final clamp."""
        return candidate.experience_count * self.settings.experience_bonus_per_entry

    def rank_candidates(self, results: list[MatchResult]) -> list[MatchResult]:
        """
        Rank results by final score.

        Args:
            results: List of match results

        Returns:
            Sorted list with highest scores first; ties keep input order
        """
        return sorted(results, key=lambda r: r.final_score, reverse=True)

    def score_postings(
        self,
        talent_skills: Optional[Sequence[str]],
        postings: Optional[Sequence[PostingRequirement]],
    ) -> list[PostingScore]:
        """
        Score open postings against one talent's skills.

        No eligibility filtering or truncation is applied: every posting gets
        a percentage and a badge.

        Args:
            talent_skills: The current talent's skills
            postings: Postings to score

        Returns:
            PostingScore per posting, highest score first
        """
        if not postings:
            return []

        scores = []
        for posting in postings:
            score = self.scorer.score(posting.required_skills, talent_skills)
            scores.append(
                PostingScore(
                    posting_id=posting.id,
                    title=posting.title,
                    match_score=score,
                    badge=MatchBadge.from_score(
                        score,
                        high_threshold=self.settings.badge_high_threshold,
                        medium_threshold=self.settings.badge_medium_threshold,
                    ),
                )
            )

        logger.debug(f"Scored {len(scores)} postings against {len(talent_skills or [])} skills")

        return sorted(scores, key=lambda s: s.match_score, reverse=True)


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton instance."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = MatchingEngine()
    return _matching_engine
