"""
Resume parsing backends.

A parser turns raw resume text into a ParsedResume. The matching engine
never calls a parser itself; parsers produce the skill and experience data
that candidate profiles are built from.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from talentmatch.data.models import ParsedResume
from talentmatch.utils.constants import SKILL_CATEGORIES
from talentmatch.utils.logger import LoggerMixin


class BaseResumeParser(ABC):
    """
    Abstract base class for resume parsers.

    Backends (rule-based, remote model) should inherit from this class and
    must return an empty ParsedResume rather than raise on unusable text.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the backend."""
        pass

    @abstractmethod
    def parse(self, raw_text: str) -> ParsedResume:
        """
        Parse resume text into structured data.

        Args:
            raw_text: Plain resume text

        Returns:
            ParsedResume with skills, experience and education
        """
        pass


class KeywordResumeParser(BaseResumeParser, LoggerMixin):
    """Parser that finds known skills in resume text by keyword lookup."""

    def __init__(self, skill_categories: Optional[dict[str, list[str]]] = None):
        """
        Initialize the parser.

        Args:
            skill_categories: Optional skill vocabulary by category
                (defaults to SKILL_CATEGORIES)
        """
        self.skill_categories = skill_categories or SKILL_CATEGORIES
        self._build_skill_index()

    @property
    def name(self) -> str:
        return "keyword"

    def _build_skill_index(self) -> None:
        """Compile one pattern per known skill, in vocabulary order."""
        self.skill_to_category: dict[str, str] = {}
        self._patterns: list[tuple[str, re.Pattern]] = []

        for category, skills in self.skill_categories.items():
            for skill in skills:
                key = skill.lower()
                if key in self.skill_to_category:
                    continue
                self.skill_to_category[key] = category
                # \b fails next to symbols such as "+" or "#", so use lookarounds
                pattern = re.compile(
                    rf"(?<![\w.]){re.escape(key)}(?![\w])", re.IGNORECASE
                )
                self._patterns.append((skill, pattern))

    def parse(self, raw_text: str) -> ParsedResume:
        if not raw_text or not raw_text.strip():
            return ParsedResume()

        found = [skill for skill, pattern in self._patterns if pattern.search(raw_text)]

        self.logger.debug(f"Keyword parser found {len(found)} skills")

        return ParsedResume(skills=found)

    def get_skill_category(self, skill_name: str) -> Optional[str]:
        """Get the category for a skill."""
        return self.skill_to_category.get(skill_name.lower())


# Singleton instance
_resume_parser: Optional[BaseResumeParser] = None


def get_resume_parser() -> BaseResumeParser:
    """Get the resume parser singleton instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = KeywordResumeParser()
    return _resume_parser
