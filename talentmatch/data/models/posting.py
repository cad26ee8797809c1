"""
Posting data models for talentmatch.

A posting is a job or project listing: the engine only reads its required
skills and its optional budget.
"""

from typing import Any, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from talentmatch.utils.constants import PostingType

from .base import EmbeddedModel, none_to_list


class Budget(EmbeddedModel):
    """Budget or salary range of a posting. Either bound may be absent."""

    min_amount: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("min_amount", "min")
    )
    max_amount: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("max_amount", "max")
    )
    currency: str = "USD"

    @field_validator("min_amount", "max_amount")
    @classmethod
    def validate_amount(cls, v: Optional[float]) -> Optional[float]:
        """Validate budget amount is non-negative."""
        if v is not None and v < 0:
            raise ValueError("Budget amount must be non-negative")
        return v

    @property
    def is_empty(self) -> bool:
        """True when neither bound carries a usable (non-zero) amount."""
        return not self.min_amount and not self.max_amount


class PostingRequirement(EmbeddedModel):
    """Requirements of a posting as seen by the matching engine."""

    id: Optional[Union[str, int]] = Field(
        default=None, validation_alias=AliasChoices("id", "_id")
    )
    title: Optional[str] = None
    posting_type: PostingType = Field(
        default=PostingType.PROJECT, validation_alias=AliasChoices("posting_type", "type")
    )
    required_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("required_skills", "requiredSkills", "skillsRequired"),
    )
    budget: Optional[Budget] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def default_skills(cls, v: Any) -> Any:
        return none_to_list(v)
