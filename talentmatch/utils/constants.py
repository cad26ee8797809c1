"""
Application-wide constants for talentmatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "talentmatch"
APP_DISPLAY_NAME: Final[str] = "Talent/Posting Matching Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Skill Vocabulary
# =============================================================================

# Known skills by category, used by the keyword resume parser.
# Spelling here is the display spelling returned to callers.
SKILL_CATEGORIES: Final[dict[str, list[str]]] = {
    "programming_languages": [
        "JavaScript", "TypeScript", "Python", "Java", "PHP", "C++", "C#",
        "Golang", "Rust", "Ruby", "Swift", "Kotlin", "Dart", "SQL",
    ],
    "frontend": [
        "React", "React Native", "Angular", "Vue.js", "Next.js", "HTML",
        "CSS", "Tailwind", "Redux", "Flutter",
    ],
    "backend": [
        "Node.js", "Express.js", "Django", "Flask", "FastAPI", "Laravel",
        "Spring", "GraphQL",
    ],
    "databases": [
        "MongoDB", "MySQL", "PostgreSQL", "Redis", "SQLite", "Firebase",
        "Elasticsearch",
    ],
    "devops": [
        "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Git", "Linux",
        "Terraform", "CI/CD",
    ],
    "design": [
        "Figma", "Photoshop", "Illustrator", "UI/UX",
    ],
}


# =============================================================================
# Parsed Resume Limits
# =============================================================================

MAX_PARSED_SKILLS: Final[int] = 20
MAX_PARSED_EXPERIENCE: Final[int] = 5
MAX_PARSED_EDUCATION: Final[int] = 3


# =============================================================================
# Enums
# =============================================================================


class Availability(str, Enum):
    """Availability status of a talent profile."""

    AVAILABLE = "available"
    BUSY = "busy"
    UNAVAILABLE = "unavailable"


class PostingType(str, Enum):
    """Kind of marketplace posting."""

    JOB = "job"
    PROJECT = "project"


class MatchBadge(str, Enum):
    """Display level for a match percentage."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_score(
        cls,
        score: float,
        high_threshold: float = 75,
        medium_threshold: float = 40,
    ) -> "MatchBadge":
        """Convert a 0-100 match score to a badge level."""
        if score >= high_threshold:
            return cls.HIGH
        elif score >= medium_threshold:
            return cls.MEDIUM
        return cls.LOW


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    CANDIDATES_RANKED = "candidates_ranked"
