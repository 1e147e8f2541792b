"""Overall match score calculation.

Combines the four component scores into one 0-100 score:
- skill_complement * 0.55
- location * 0.25
- experience_level * 0.10
- rating * 0.10

Weights come from ``ScoringConfig.weights`` and can be overridden.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from skillswap.matching.experience import ExperienceScorer
from skillswap.matching.location import LocationScorer
from skillswap.matching.rating import RatingScorer
from skillswap.matching.skills import MatchedSkills, SkillComplement, SkillComplementScorer
from skillswap.matching.validation import validate_user, validate_users
from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoringConfig, round_score
from skillswap.profile.models import ExperiencePreference, Skill, User

logger = logging.getLogger(__name__)


@dataclass
class ScoreBreakdown:
    """Component scores, each 0-100."""
    skill_complement_score: int
    location_score: int
    experience_level_score: int
    rating_score: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "skillComplementScore": self.skill_complement_score,
            "locationScore": self.location_score,
            "experienceLevelScore": self.experience_level_score,
            "ratingScore": self.rating_score,
        }


@dataclass
class MatchResult:
    """Scored match between the current user and one candidate."""
    user: User                       # The candidate
    score: int                       # Overall score (0-100)
    breakdown: ScoreBreakdown
    match_reasons: List[str] = field(default_factory=list)
    matched_skills: MatchedSkills = field(default_factory=MatchedSkills)
    distance_km: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": self.user.get_summary(),
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
            "matchReasons": list(self.match_reasons),
            "matchedSkills": self.matched_skills.to_dict(),
            "distanceKm": round(self.distance_km, 1) if self.distance_km is not None else None,
        }


def _join_names(skills: List[Skill]) -> str:
    return ", ".join(skill.name for skill in skills)


class MatchScorer:
    """Scores one candidate against the current user."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or DEFAULT_SCORING_CONFIG
        self.skill_scorer = SkillComplementScorer(self.config)
        self.location_scorer = LocationScorer(self.config)
        self.experience_scorer = ExperienceScorer(self.config)
        self.rating_scorer = RatingScorer(self.config)

    def aggregate(self, user_a: User, user_b: User, validate: bool = True) -> MatchResult:
        """Calculate the match between ``user_a`` and candidate ``user_b``.

        Args:
            user_a: The user looking for matches
            user_b: The candidate
            validate: Check both users first (skip when already validated)

        Returns:
            MatchResult with overall score, breakdown, reasons and matched skills

        Raises:
            MatchValidationError: If either user is missing required data
        """
        if validate:
            validate_user(user_a)
            validate_user(user_b)

        complement = self.skill_scorer.score(user_a, user_b)
        breakdown = ScoreBreakdown(
            skill_complement_score=round_score(complement.score),
            location_score=self.location_scorer.score(user_a, user_b),
            experience_level_score=self.experience_scorer.score(
                user_a, user_b, complement.matched_skills
            ),
            rating_score=self.rating_scorer.score(user_b),
        )
        distance = self.location_scorer.distance_km(user_a, user_b)

        return MatchResult(
            user=user_b,
            score=self.combine(breakdown),
            breakdown=breakdown,
            match_reasons=self.generate_reasons(user_a, user_b, complement, breakdown, distance),
            matched_skills=complement.matched_skills,
            distance_km=distance,
        )

    def combine(self, breakdown: ScoreBreakdown) -> int:
        """Weighted sum of the component scores, rounded half up into 0-100."""
        weights = self.config.weights
        total = (
            breakdown.skill_complement_score * weights.skill_complement +
            breakdown.location_score * weights.location +
            breakdown.experience_level_score * weights.experience_level +
            breakdown.rating_score * weights.rating
        )
        return min(100, max(0, round_score(total)))

    def generate_reasons(
        self,
        user_a: User,
        user_b: User,
        complement: SkillComplement,
        breakdown: ScoreBreakdown,
        distance: Optional[float] = None,
    ) -> List[str]:
        """Build human-readable explanations for a match."""
        reasons: List[str] = []
        reasons.extend(self._skill_reasons(complement))
        reasons.extend(self._location_reasons(user_a, user_b, distance))
        reasons.extend(self._experience_reasons(user_a, breakdown.experience_level_score))
        reasons.extend(self._rating_reasons(user_b))
        return reasons

    def _skill_reasons(self, complement: SkillComplement) -> List[str]:
        matched = complement.matched_skills
        if matched.is_empty():
            return []

        exact_offered = [] if complement.offered_by_category else matched.offered
        exact_wanted = [] if complement.wanted_by_category else matched.wanted
        reasons = []

        if exact_offered and exact_wanted:
            reasons.append(
                f"You can teach {_join_names(exact_wanted)} and learn "
                f"{_join_names(exact_offered)} from this person"
            )
        elif exact_offered:
            reasons.append(f"They can teach you {_join_names(exact_offered)}")
        elif exact_wanted:
            reasons.append(f"They want to learn {_join_names(exact_wanted)}, which you offer")

        category_skills = []
        if complement.offered_by_category:
            category_skills.extend(matched.offered)
        if complement.wanted_by_category:
            category_skills.extend(matched.wanted)
        if category_skills:
            categories = sorted({s.category for s in category_skills if s.category})
            reasons.append(f"Offers skills in related areas: {', '.join(categories)}")

        return reasons

    def _location_reasons(self, user_a: User, user_b: User, distance: Optional[float]) -> List[str]:
        max_distance = user_a.preferences.max_distance
        if user_a.is_remote_only or user_b.is_remote_only:
            if distance is not None and distance > max_distance:
                return ["Open to remote exchange even though they're far away"]
            return ["Open to remote skill exchange"]

        if distance is None:
            return []
        if distance <= max_distance:
            return [f"Located within your preferred distance ({distance:.0f} km away)"]
        return [f"Outside your preferred distance ({distance:.0f} km away)"]

    def _experience_reasons(self, user_a: User, experience_score: int) -> List[str]:
        preference = user_a.preferences.experience_level_preference
        if experience_score >= self.config.strong_component_score:
            if preference == ExperiencePreference.SIMILAR:
                return ["Has a similar experience level to you"]
            if preference == ExperiencePreference.HIGHER:
                return ["Has more experience in the skills you want to learn"]
            if preference == ExperiencePreference.LOWER:
                return ["Is looking to learn at your expertise level"]
        elif experience_score < self.config.weak_component_score:
            if preference == ExperiencePreference.HIGHER:
                return ["May not be more advanced than you in the skills you want to learn"]
        return []

    def _rating_reasons(self, user_b: User) -> List[str]:
        rating = user_b.rating
        if rating is None:
            return ["New member with no ratings yet"]
        if rating >= self.config.high_rating:
            return [f"Highly rated user ({rating:g}/5 stars)"]
        if rating >= self.config.good_rating:
            return [f"Well-rated user ({rating:g}/5 stars)"]
        return []

    def score_batch(self, user: User, candidates: List[User]) -> List[MatchResult]:
        """Score every candidate against ``user`` (same order, no filtering).

        Args:
            user: The user looking for matches
            candidates: Candidate users

        Returns:
            List of MatchResults (same order)
        """
        validate_user(user)
        validate_users(candidates)

        results = [self.aggregate(user, candidate, validate=False) for candidate in candidates]
        logger.info(f"Calculated {len(results)} match scores for user {user.id}")
        return results
