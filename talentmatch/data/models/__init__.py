"""
Pydantic data models for talentmatch.

This module provides the value models consumed and produced by the
matching engine.
"""

# Base models
from .base import EmbeddedModel

# Resume models
from .resume import EducationEntry, ExperienceEntry, ParsedResume

# Candidate models
from .candidate import CandidateProfile

# Posting models
from .posting import Budget, PostingRequirement

# Match models
from .match import MatchResult, PostingScore

__all__ = [
    # Base
    "EmbeddedModel",
    # Resume
    "EducationEntry",
    "ExperienceEntry",
    "ParsedResume",
    # Candidate
    "CandidateProfile",
    # Posting
    "Budget",
    "PostingRequirement",
    # Match
    "MatchResult",
    "PostingScore",
]
