"""Matching module for skill-exchange compatibility scoring and ranking."""

from skillswap.matching.experience import ExperienceScorer
from skillswap.matching.geo import EARTH_RADIUS_KM, haversine_km
from skillswap.matching.location import LocationScorer
from skillswap.matching.matcher import MatchFinder, SortOrder, filter_by_preferences, sort_matches
from skillswap.matching.rating import RatingScorer
from skillswap.matching.scorer import MatchResult, MatchScorer, ScoreBreakdown
from skillswap.matching.skills import (
    MatchedSkills,
    SkillComplement,
    SkillComplementScorer,
    find_similar_skills,
    normalize_skill_name,
)
from skillswap.matching.validation import MatchValidationError, validate_user
from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoreWeights, ScoringConfig

__all__ = [
    "EARTH_RADIUS_KM",
    "haversine_km",
    "ExperienceScorer",
    "LocationScorer",
    "RatingScorer",
    "SkillComplementScorer",
    "SkillComplement",
    "MatchedSkills",
    "find_similar_skills",
    "normalize_skill_name",
    "MatchScorer",
    "MatchResult",
    "ScoreBreakdown",
    "MatchFinder",
    "SortOrder",
    "filter_by_preferences",
    "sort_matches",
    "MatchValidationError",
    "validate_user",
    "DEFAULT_SCORING_CONFIG",
    "ScoreWeights",
    "ScoringConfig",
]
