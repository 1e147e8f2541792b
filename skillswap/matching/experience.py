"""Experience level alignment scoring."""

import logging
from typing import Iterable, List, Optional, Tuple

from skillswap.matching.skills import MatchedSkills, normalize_skill_name
from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoringConfig, round_score
from skillswap.profile.models import ExperiencePreference, Skill, User

logger = logging.getLogger(__name__)


def _average_rank(skills: Iterable[Skill]) -> Optional[float]:
    ranks = [skill.level_rank for skill in skills]
    if not ranks:
        return None
    return sum(ranks) / len(ranks)


def _same_named(skills: Iterable[Skill], reference: Iterable[Skill]) -> List[Skill]:
    names = {normalize_skill_name(s.name) for s in reference}
    return [s for s in skills if normalize_skill_name(s.name) in names]


class ExperienceScorer:
    """Scores a candidate's proficiency against the user's experience preference."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or DEFAULT_SCORING_CONFIG

    def score(
        self,
        user_a: User,
        user_b: User,
        matched_skills: Optional[MatchedSkills] = None,
    ) -> int:
        """Calculate experience alignment of ``user_b`` for ``user_a``.

        Args:
            user_a: The user looking for matches (owns the preference)
            user_b: The candidate
            matched_skills: Skills matched by the complementarity scorer

        Returns:
            Score from 0 to 100
        """
        preference = user_a.preferences.experience_level_preference
        if preference == ExperiencePreference.ANY:
            return round_score(self.config.experience_any_score)

        own_level, partner_level = self.levels(user_a, user_b, matched_skills)
        if own_level is None or partner_level is None:
            logger.debug(
                f"No proficiency data for {user_a.id} vs {user_b.id}, using neutral experience score"
            )
            return round_score(self.config.experience_neutral_score)

        return round_score(self.score_levels(preference, own_level, partner_level))

    def levels(
        self,
        user_a: User,
        user_b: User,
        matched_skills: Optional[MatchedSkills],
    ) -> Tuple[Optional[float], Optional[float]]:
        """Ordinal levels of both users in the skills being exchanged.

        When ``user_b`` teaches ``user_a``, the candidate's level is the mean of
        the matched offered skills and the user's level comes from their own
        wanted-skill entries for those names. When only ``user_a`` teaches, the
        roles flip: the user's level is the mean of the matched skills they
        offer and the candidate's level comes from the candidate's wanted-skill
        entries. Either side missing falls back to that person's most advanced
        offered skill.

        Args:
            user_a: The user looking for matches
            user_b: The candidate
            matched_skills: Skills matched by the complementarity scorer

        Returns:
            Tuple of (user's level, candidate's level), either may be None
        """
        own_level = partner_level = None
        if matched_skills and matched_skills.offered:
            partner_level = _average_rank(matched_skills.offered)
            own_level = _average_rank(_same_named(user_a.wanted_skills, matched_skills.offered))
        elif matched_skills and matched_skills.wanted:
            own_level = _average_rank(matched_skills.wanted)
            partner_level = _average_rank(_same_named(user_b.wanted_skills, matched_skills.wanted))

        if own_level is None:
            own_level = user_a.highest_offered_level()
        if partner_level is None:
            partner_level = user_b.highest_offered_level()
        return own_level, partner_level

    def score_levels(
        self,
        preference: ExperiencePreference,
        own_level: float,
        partner_level: float,
    ) -> float:
        """Score two ordinal levels under a preference."""
        cfg = self.config

        if preference == ExperiencePreference.ANY:
            value = cfg.experience_any_score
        elif preference == ExperiencePreference.SIMILAR:
            value = 100.0 - cfg.similar_step_penalty * abs(own_level - partner_level)
        else:
            gap = partner_level - own_level
            if preference == ExperiencePreference.LOWER:
                gap = -gap
            if gap > 0:
                value = cfg.directional_base_score + cfg.directional_step_bonus * gap
            else:
                value = cfg.directional_miss_score - cfg.directional_miss_penalty * abs(gap)

        return min(100.0, max(0.0, value))
