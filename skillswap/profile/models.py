"""Pydantic models for skill-exchange user profiles."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ProficiencyLevel(str, Enum):
    """Skill mastery tier, ordered beginner < intermediate < advanced < expert."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        """Ordinal position of this level (1-4)."""
        return PROFICIENCY_ORDER[self]


# Explicit ordinal lookup; never compare level strings directly
PROFICIENCY_ORDER = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
    ProficiencyLevel.EXPERT: 4,
}


class ExperiencePreference(str, Enum):
    """Experience level a user is looking for in an exchange partner."""

    ANY = "any"
    SIMILAR = "similar"
    HIGHER = "higher"
    LOWER = "lower"


def _normalize_choice(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class Location(BaseModel):
    """Geographic position of a user, in decimal degrees."""

    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")
    description: str = Field("", description="Human-readable place name")


class Preferences(BaseModel):
    """Matching preferences of a user."""

    max_distance: float = Field(
        50.0, gt=0, description="Maximum preferred distance to a partner, in kilometres"
    )
    remote_only: bool = Field(False, description="Willing to exchange without meeting in person")
    experience_level_preference: ExperiencePreference = Field(
        ExperiencePreference.ANY, description="Desired partner experience: any, similar, higher, lower"
    )
    matching_threshold: Optional[int] = Field(
        None, ge=0, le=100, description="Minimum overall score a match must reach"
    )

    @field_validator("experience_level_preference", mode="before")
    @classmethod
    def _lowercase_preference(cls, value: Any) -> Any:
        return _normalize_choice(value)


class Skill(BaseModel):
    """A skill a user offers or wants to learn."""

    id: str = Field(..., description="Skill identifier")
    name: str = Field(..., description="Display name, e.g. 'JavaScript'")
    category: str = Field("", description="Broad category, e.g. 'programming'")
    subcategory: Optional[str] = Field(None, description="Optional finer-grained category")
    description: Optional[str] = Field(None, description="Free-text description")
    proficiency_level: ProficiencyLevel = Field(
        ProficiencyLevel.BEGINNER, description="Self-reported proficiency"
    )
    is_offering: bool = Field(True, description="True when listed as offered, False when wanted")

    @field_validator("proficiency_level", mode="before")
    @classmethod
    def _lowercase_level(cls, value: Any) -> Any:
        return _normalize_choice(value)

    @property
    def level_rank(self) -> int:
        return self.proficiency_level.rank


class User(BaseModel):
    """A marketplace member as seen by the matching engine."""

    id: str = Field(..., description="User identifier")
    username: str = Field("", description="Unique handle")
    display_name: str = Field("", description="Name shown on match cards")
    location: Optional[Location] = Field(None, description="Where the user is based")
    offered_skills: list[Skill] = Field(default_factory=list, description="Skills the user teaches")
    wanted_skills: list[Skill] = Field(default_factory=list, description="Skills the user wants to learn")
    preferences: Optional[Preferences] = Field(None, description="Matching preferences")
    rating: Optional[float] = Field(None, ge=0.0, le=5.0, description="Average rating, 1-5 stars")

    @property
    def name(self) -> str:
        """Best available name for display."""
        return self.display_name or self.username or self.id

    @property
    def is_remote_only(self) -> bool:
        return bool(self.preferences and self.preferences.remote_only)

    def highest_offered_level(self) -> Optional[int]:
        """Ordinal of the most advanced offered skill, or None without offers."""
        if not self.offered_skills:
            return None
        return max(skill.level_rank for skill in self.offered_skills)

    def get_summary(self) -> dict:
        """Get a summary of key profile attributes for display."""
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location.description if self.location else None,
            "offers": [skill.name for skill in self.offered_skills],
            "wants": [skill.name for skill in self.wanted_skills],
            "rating": self.rating,
            "remote_only": self.is_remote_only,
        }
