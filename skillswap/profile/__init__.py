"""Profile module for skill-exchange user data."""

from skillswap.profile.models import (
    PROFICIENCY_ORDER,
    ExperiencePreference,
    Location,
    Preferences,
    ProficiencyLevel,
    Skill,
    User,
)

__all__ = [
    "PROFICIENCY_ORDER",
    "ExperiencePreference",
    "Location",
    "Preferences",
    "ProficiencyLevel",
    "Skill",
    "User",
]
