"""Geographic proximity scoring.

All distances are in kilometres, matching ``Preferences.max_distance``.
"""

import logging
from typing import Optional

from skillswap.matching.geo import haversine_km
from skillswap.matching.validation import MatchValidationError
from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoringConfig, round_score
from skillswap.profile.models import User

logger = logging.getLogger(__name__)


class LocationScorer:
    """Scores how feasible an in-person exchange is between two users."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or DEFAULT_SCORING_CONFIG

    def distance_km(self, user_a: User, user_b: User) -> Optional[float]:
        """Distance between two users, or None if either has no location."""
        if user_a.location is None or user_b.location is None:
            return None
        return haversine_km(
            user_a.location.latitude,
            user_a.location.longitude,
            user_b.location.latitude,
            user_b.location.longitude,
        )

    def score(self, user_a: User, user_b: User) -> int:
        """Calculate the location score of ``user_b`` from ``user_a``'s view.

        Args:
            user_a: The user looking for matches (owns the distance preference)
            user_b: The candidate

        Returns:
            Score from 0 to 100
        """
        if user_a.is_remote_only or user_b.is_remote_only:
            return round_score(self.config.remote_score)

        distance = self.distance_km(user_a, user_b)
        if distance is None:
            missing = user_a if user_a.location is None else user_b
            raise MatchValidationError(
                f"User {missing.id} is not remote-only but has no location",
                user_id=missing.id,
                field="location",
            )

        return round_score(self.score_distance(distance, user_a.preferences.max_distance))

    def score_distance(self, distance: float, max_distance: float) -> float:
        """Map a distance against a maximum preferred distance.

        Inside the preferred radius the score falls linearly from
        ``in_range_max_score`` (distance 0) to ``in_range_min_score`` (at the
        boundary). Beyond it the score starts at ``out_of_range_score`` and
        decays in proportion to ``max_distance / distance``.
        """
        cfg = self.config
        if distance < 0:
            logger.warning(f"Negative distance {distance}, treating as 0")
            distance = 0.0

        if distance <= max_distance:
            span = cfg.in_range_max_score - cfg.in_range_min_score
            value = cfg.in_range_max_score - span * (distance / max_distance)
        else:
            value = cfg.out_of_range_score * (max_distance / distance)

        return min(100.0, max(0.0, value))
