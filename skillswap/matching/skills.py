"""Skill complementarity scoring.

Two users complement each other when one offers what the other wants. Exact
(normalized) name matches are authoritative; category overlap is an opt-in
partial credit controlled by ``ScoringConfig.category_credit``.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoringConfig
from skillswap.profile.models import Skill, User

logger = logging.getLogger(__name__)

# Categories that are close enough to earn reduced credit
RELATED_CATEGORIES: Dict[str, List[str]] = {
    "programming": ["web-development", "mobile-development", "data-science"],
    "design": ["graphic-design", "ui-design", "ux-design"],
    "language": ["translation", "writing", "editing"],
    "music": ["production", "instruments", "vocals"],
}


def normalize_skill_name(name: Optional[str]) -> str:
    """Normalize a skill or category name for comparison.

    Args:
        name: Raw name

    Returns:
        Trimmed, whitespace-collapsed, case-folded name
    """
    if not name:
        return ""
    return re.sub(r"\s+", " ", name.strip()).casefold()


def is_related_category(category1: str, category2: str) -> bool:
    """Check if two categories are listed as related (either direction)."""
    cat1 = normalize_skill_name(category1)
    cat2 = normalize_skill_name(category2)
    if not cat1 or not cat2:
        return False
    return cat2 in RELATED_CATEGORIES.get(cat1, []) or cat1 in RELATED_CATEGORIES.get(cat2, [])


@dataclass
class MatchedSkills:
    """Skills that drove the complementarity score."""
    offered: List[Skill] = field(default_factory=list)  # Candidate's skills the user wants
    wanted: List[Skill] = field(default_factory=list)   # User's skills the candidate wants

    def to_dict(self) -> Dict[str, Any]:
        return {
            "offered": [s.model_dump(mode="json") for s in self.offered],
            "wanted": [s.model_dump(mode="json") for s in self.wanted],
        }

    def is_empty(self) -> bool:
        return not self.offered and not self.wanted


@dataclass
class SkillComplement:
    """Result of comparing two users' offered and wanted skills."""
    score: float
    matched_skills: MatchedSkills
    offered_by_category: bool = False   # Candidate side matched on category only
    wanted_by_category: bool = False    # User side matched on category only

    @property
    def is_mutual(self) -> bool:
        return bool(self.matched_skills.offered) and bool(self.matched_skills.wanted)


class SkillComplementScorer:
    """Scores how well two users' skill sets satisfy each other."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or DEFAULT_SCORING_CONFIG

    def score(self, user_a: User, user_b: User) -> SkillComplement:
        """Calculate skill complementarity of ``user_b`` for ``user_a``.

        Args:
            user_a: The user looking for matches
            user_b: The candidate

        Returns:
            SkillComplement with a 0-100 score and the matched skills
        """
        b_teaches = self._exact_matches(user_b.offered_skills, user_a.wanted_skills)
        a_teaches = self._exact_matches(user_a.offered_skills, user_b.wanted_skills)
        b_strength = 1.0 if b_teaches else 0.0
        a_strength = 1.0 if a_teaches else 0.0

        b_by_category = False
        a_by_category = False
        if self.config.category_credit:
            if not b_teaches:
                b_teaches, b_strength = self._category_matches(
                    user_b.offered_skills, user_a.wanted_skills
                )
                b_by_category = bool(b_teaches)
            if not a_teaches:
                a_teaches, a_strength = self._category_matches(
                    user_a.offered_skills, user_b.wanted_skills
                )
                a_by_category = bool(a_teaches)

        extra = 0
        if b_teaches and not b_by_category:
            extra += len(b_teaches) - 1
        if a_teaches and not a_by_category:
            extra += len(a_teaches) - 1

        value = self._combine(a_strength, b_strength, extra)

        return SkillComplement(
            score=value,
            matched_skills=MatchedSkills(offered=b_teaches, wanted=a_teaches),
            offered_by_category=b_by_category,
            wanted_by_category=a_by_category,
        )

    def _exact_matches(self, offered: Iterable[Skill], wanted: Iterable[Skill]) -> List[Skill]:
        """Offered skills whose normalized name appears in the wanted list."""
        wanted_names = {normalize_skill_name(s.name) for s in wanted}
        wanted_names.discard("")
        return [s for s in offered if normalize_skill_name(s.name) in wanted_names]

    def _category_matches(
        self,
        offered: Iterable[Skill],
        wanted: Iterable[Skill],
    ) -> Tuple[List[Skill], float]:
        """Offered skills sharing a category with a wanted skill.

        Returns:
            Tuple of (matched skills, strongest credit factor found)
        """
        wanted = list(wanted)
        matched: List[Skill] = []
        best = 0.0
        for skill in offered:
            strength = max(
                (self._category_strength(skill, w) for w in wanted),
                default=0.0,
            )
            if strength > 0:
                matched.append(skill)
                best = max(best, strength)
        return matched, best

    def _category_strength(self, offered: Skill, wanted: Skill) -> float:
        offered_cat = normalize_skill_name(offered.category)
        wanted_cat = normalize_skill_name(wanted.category)
        if offered_cat and offered_cat == wanted_cat:
            # Subcategories only count inside the same category
            offered_sub = normalize_skill_name(offered.subcategory)
            if offered_sub and offered_sub == normalize_skill_name(wanted.subcategory):
                return self.config.subcategory_credit_factor
            return self.config.category_credit_factor
        if is_related_category(offered_cat, wanted_cat):
            return self.config.related_category_factor
        return 0.0

    def _combine(self, a_strength: float, b_strength: float, extra_skills: int) -> float:
        """Turn per-direction match strengths into a 0-100 score."""
        cfg = self.config
        if a_strength > 0 and b_strength > 0:
            base = cfg.mutual_match_score * (a_strength + b_strength) / 2
            cap = 100.0
        elif a_strength > 0 or b_strength > 0:
            base = cfg.one_way_match_score * max(a_strength, b_strength)
            cap = cfg.one_way_cap
        else:
            return 0.0

        value = base + cfg.extra_skill_bonus * max(0, extra_skills)
        return min(cap, max(0.0, value))


def _keywords(text: str) -> Set[str]:
    return {w for w in re.split(r"\W+", text.lower()) if len(w) > 3}


def keyword_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity over words longer than three characters."""
    words1 = _keywords(text1)
    words2 = _keywords(text2)
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def find_similar_skills(
    skill: Skill,
    pool: Iterable[Skill],
    limit: int = 5,
    min_similarity: float = 0.3,
) -> List[Tuple[Skill, float]]:
    """Find skills similar to ``skill`` by category, subcategory and keywords.

    Scoring:
    - same category: +0.4
    - same subcategory: +0.3
    - keyword overlap of name and description: up to +0.3

    Args:
        skill: Skill to compare against
        pool: Candidate skills (the skill itself is skipped by id)
        limit: Maximum number of results
        min_similarity: Minimum similarity to include

    Returns:
        List of (skill, similarity) sorted by similarity (highest first)
    """
    reference_text = f"{skill.name} {skill.description or ''}"
    category = normalize_skill_name(skill.category)
    subcategory = normalize_skill_name(skill.subcategory)

    similar = []
    for other in pool:
        if other.id == skill.id:
            continue

        similarity = 0.0
        if category and normalize_skill_name(other.category) == category:
            similarity += 0.4
        if subcategory and normalize_skill_name(other.subcategory) == subcategory:
            similarity += 0.3
        similarity += 0.3 * keyword_similarity(
            reference_text, f"{other.name} {other.description or ''}"
        )

        if similarity >= min_similarity:
            similar.append((other, similarity))

    similar.sort(key=lambda pair: (-pair[1], pair[0].id))
    return similar[:limit]
