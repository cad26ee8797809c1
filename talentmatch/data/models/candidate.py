"""
Candidate data models for talentmatch.

Defines the talent profile consumed by the ranker. Optional fields default
to empty/absent so that scoring never has to guard against missing data.
"""

from typing import Any, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from talentmatch.utils.constants import Availability

from .base import EmbeddedModel, none_to_list
from .resume import ParsedResume


class CandidateProfile(EmbeddedModel):
    """A talent record as seen by the matching engine."""

    id: Union[str, int] = Field(validation_alias=AliasChoices("id", "_id"))
    name: Optional[str] = None
    role: Optional[str] = "talent"  # null means no role
    skills: list[str] = Field(default_factory=list)
    availability: Availability = Availability.AVAILABLE
    hourly_rate: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("hourly_rate", "hourlyRate")
    )
    # Only the number of entries matters to the engine
    experience: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("experience", "experienceEntries", "experience_entries"),
    )

    @field_validator("skills", "experience", mode="before")
    @classmethod
    def default_lists(cls, v: Any) -> Any:
        return none_to_list(v)

    @field_validator("availability", mode="before")
    @classmethod
    def default_availability(cls, v: Any) -> Any:
        if v is None:
            return Availability.AVAILABLE
        return v

    @field_validator("hourly_rate")
    @classmethod
    def validate_rate(cls, v: Optional[float]) -> Optional[float]:
        """Validate hourly rate is non-negative."""
        if v is not None and v < 0:
            raise ValueError("Hourly rate cannot be negative")
        return v

    @property
    def experience_count(self) -> int:
        return len(self.experience)

    @property
    def is_talent(self) -> bool:
        return self.role == "talent"

    @classmethod
    def from_parsed_resume(
        cls,
        candidate_id: Union[str, int],
        parsed: ParsedResume,
        **fields: Any,
    ) -> "CandidateProfile":
        """
        Build a profile from a parser result.

        Args:
            candidate_id: Identifier of the talent
            parsed: Output of a resume parser backend
            **fields: Remaining profile fields (availability, hourly_rate, ...)

        Returns:
            CandidateProfile carrying the parsed skills and experience
        """
        return cls(
            id=candidate_id,
            skills=list(parsed.skills),
            experience=list(parsed.experience),
            **fields,
        )

    @classmethod
    def from_user_document(cls, document: dict[str, Any]) -> "CandidateProfile":
        """
        Flatten a marketplace user document into a profile.

        User documents keep talent data under a nested ``talentProfile`` key;
        a document without one yields a profile with no skills.
        """
        talent_profile = document.get("talentProfile") or {}
        return cls.model_validate(
            {
                "id": document.get("_id", document.get("id")),
                "name": document.get("name"),
                "role": document.get("role", "talent"),
                "skills": talent_profile.get("skills"),
                "availability": talent_profile.get("availability"),
                "hourly_rate": talent_profile.get("hourlyRate"),
                "experience": talent_profile.get("experience"),
            }
        )
