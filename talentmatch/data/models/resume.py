"""
Parsed resume data models for talentmatch.

This is the shape every resume parser backend produces. The matching engine
only consumes the skills and the number of experience entries.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from talentmatch.utils.constants import (
    MAX_PARSED_EDUCATION,
    MAX_PARSED_EXPERIENCE,
    MAX_PARSED_SKILLS,
)

from .base import EmbeddedModel


def _as_limited_list(value: Any, limit: int) -> list:
    # Anything that is not a list (missing, null, malformed) becomes empty
    if not isinstance(value, (list, tuple)):
        return []
    return list(value)[:limit]


class ExperienceEntry(EmbeddedModel):
    """A single work experience entry."""

    company: Optional[str] = None
    position: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None


class EducationEntry(EmbeddedModel):
    """A single education entry."""

    institution: Optional[str] = None
    degree: Optional[str] = None
    year: Optional[str] = None

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v: Any) -> Any:
        """Years frequently arrive as integers."""
        if isinstance(v, int):
            return str(v)
        return v


class ParsedResume(EmbeddedModel):
    """Structured data extracted from a resume."""

    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def limit_skills(cls, v: Any) -> list:
        return _as_limited_list(v, MAX_PARSED_SKILLS)

    @field_validator("experience", mode="before")
    @classmethod
    def limit_experience(cls, v: Any) -> list:
        return _as_limited_list(v, MAX_PARSED_EXPERIENCE)

    @field_validator("education", mode="before")
    @classmethod
    def limit_education(cls, v: Any) -> list:
        return _as_limited_list(v, MAX_PARSED_EDUCATION)

    @property
    def is_empty(self) -> bool:
        return not (self.skills or self.experience or self.education)
