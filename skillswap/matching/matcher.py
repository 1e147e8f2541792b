"""Match finding across a pool of candidate users.

Scores every candidate with ``MatchScorer``, drops non-matches and returns
the rest ranked best first.
"""

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from skillswap.matching.scorer import MatchResult, MatchScorer
from skillswap.matching.validation import validate_user, validate_users
from skillswap.matching.weights import ScoringConfig
from skillswap.profile.models import Preferences, User

logger = logging.getLogger(__name__)


class SortOrder(str, Enum):
    """Orderings available for a list of matches."""
    SCORE = "score"
    SKILL_COMPLEMENT = "skill_complement"
    LOCATION = "location"
    RATING = "rating"


def _score_key(match: MatchResult) -> tuple:
    return (-match.score, -match.breakdown.rating_score, match.user.id)


_SORT_KEYS: dict[SortOrder, Callable[[MatchResult], tuple]] = {
    SortOrder.SCORE: _score_key,
    SortOrder.SKILL_COMPLEMENT: lambda m: (-m.breakdown.skill_complement_score,) + _score_key(m),
    SortOrder.LOCATION: lambda m: (-m.breakdown.location_score,) + _score_key(m),
    SortOrder.RATING: lambda m: (-(m.user.rating or 0.0),) + _score_key(m),
}


def sort_matches(matches: Iterable[MatchResult], sort_by: SortOrder = SortOrder.SCORE) -> List[MatchResult]:
    """Return a new list of matches in the requested order.

    Every order falls back to overall score, rating score and candidate id so
    the result is fully deterministic.
    """
    return sorted(matches, key=_SORT_KEYS[SortOrder(sort_by)])


def filter_by_preferences(matches: Iterable[MatchResult], preferences: Preferences) -> List[MatchResult]:
    """Drop matches that fall outside a user's preferences.

    Args:
        matches: Scored matches
        preferences: Preferences of the user the matches were found for

    Returns:
        Matches at or above ``matching_threshold`` and, for users who are not
        remote-only, with a location score of at least 50
    """
    filtered = []
    for match in matches:
        if preferences.matching_threshold is not None and match.score < preferences.matching_threshold:
            continue
        if not preferences.remote_only and match.breakdown.location_score < 50:
            continue
        filtered.append(match)
    return filtered


class MatchFinder:
    """Finds and ranks skill-exchange partners for a user."""

    def __init__(self, config: Optional[ScoringConfig] = None, scorer: Optional[MatchScorer] = None):
        self.scorer = scorer or MatchScorer(config)

    def find_matches(
        self,
        current_user: User,
        candidates: Iterable[User],
        limit: Optional[int] = None,
    ) -> List[MatchResult]:
        """Rank candidates for ``current_user``.

        Candidates scoring exactly 0 are dropped, as are those below the
        user's ``matching_threshold`` when one is set. Results are sorted by
        score, then rating score (both descending), then candidate id.

        Args:
            current_user: The user looking for matches
            candidates: Candidate pool (may include the current user)
            limit: Maximum number of matches to return

        Returns:
            Ranked list of MatchResults, empty if nothing matches

        Raises:
            MatchValidationError: If any user is missing required data
        """
        candidates = list(candidates)
        validate_user(current_user)
        validate_users(candidates)
        pool = [c for c in candidates if c.id != current_user.id]

        threshold = current_user.preferences.matching_threshold
        matches = []
        for candidate in pool:
            result = self.scorer.aggregate(current_user, candidate, validate=False)
            if result.score == 0:
                logger.debug(f"Dropping candidate {candidate.id}: no basis for a match")
                continue
            if threshold is not None and result.score < threshold:
                continue
            matches.append(result)

        matches = sort_matches(matches)
        if limit is not None:
            matches = matches[:limit]

        logger.info(
            f"Found {len(matches)} matches for user {current_user.id} "
            f"out of {len(pool)} candidates"
        )
        return matches
