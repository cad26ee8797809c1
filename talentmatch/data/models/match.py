"""
Match and scoring data models for talentmatch.

Defines the results returned by the ranker and by dashboard posting scoring.
"""

from typing import Optional, Union

from pydantic import Field

from talentmatch.utils.constants import MatchBadge

from .base import EmbeddedModel


class MatchResult(EmbeddedModel):
    """Score breakdown of one candidate against one posting."""

    candidate_id: Union[str, int]
    final_score: int = Field(ge=0, le=100)
    skill_match_score: int = Field(ge=0, le=100)
    matched_skills: list[str] = Field(default_factory=list)
    availability_score: int = 0
    rate_compatibility: int = 0
    experience_bonus: int = 0

    @property
    def component_total(self) -> int:
        """Sum of all sub-scores before clamping."""
        return (
            self.skill_match_score
            + self.availability_score
            + self.rate_compatibility
            + self.experience_bonus
        )

    @property
    def badge(self) -> MatchBadge:
        """Display level of the final score at the default thresholds."""
        return self.get_badge()

    def get_badge(self, high_threshold: int = 75, medium_threshold: int = 40) -> MatchBadge:
        """Display level of the final score at configured thresholds."""
        return MatchBadge.from_score(
            self.final_score,
            high_threshold=high_threshold,
            medium_threshold=medium_threshold,
        )


class PostingScore(EmbeddedModel):
    """Dashboard match percentage of one posting for the current talent."""

    posting_id: Optional[Union[str, int]] = None
    title: Optional[str] = None
    match_score: int = Field(ge=0, le=100)
    badge: MatchBadge = MatchBadge.LOW
