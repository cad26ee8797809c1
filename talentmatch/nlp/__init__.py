"""
Resume parsing for talentmatch.

Provides the parser interface that produces candidate skill and experience
data, plus a keyword-based implementation.
"""

from .resume_parser import BaseResumeParser, KeywordResumeParser, get_resume_parser

__all__ = [
    "BaseResumeParser",
    "KeywordResumeParser",
    "get_resume_parser",
]
