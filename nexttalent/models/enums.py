"""Closed status vocabularies stored as plain strings in the database."""
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    EMPLOYER = "employer"
    USER = "user"


class ModerationStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class OperationalStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"


class ApplicationStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class SkillRating(str, Enum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


SUGGESTION_CATEGORIES = (
    "communication",
    "technical",
    "presentation",
    "professional_experience",
    "resume_quality",
)

JOB_REJECTION_REASONS = (
    "Incomplete job details",
    "Invalid salary range",
    "Missing image or branding",
    "Poor grammar or tone",
    "Others",
)

NO_SKILLS_SENTINEL = "no skills provided from company"
