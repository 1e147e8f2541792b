"""Scoring weights and thresholds for the matching engine.

Every tunable number used by the scorers lives here so a configuration can be
audited, overridden from YAML and tested in isolation.

Overall score:
- skill_complement * 0.55
- location * 0.25
- experience_level * 0.10
- rating * 0.10

With these weights a candidate with no skill complementarity tops out at 45,
so disjoint skill sets never reach 50.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator


def round_score(value: float) -> int:
    """Round a score half up (84.5 -> 85).

    Float noise below 1e-6 is dropped first so 84.4999999 still rounds to 85.
    """
    return int(math.floor(round(value, 6) + 0.5))


class ScoreWeights(BaseModel):
    """Component weights for the overall score (must sum to 1.0)."""

    model_config = ConfigDict(frozen=True)

    skill_complement: float = Field(0.55, ge=0.0, le=1.0)
    location: float = Field(0.25, ge=0.0, le=1.0)
    experience_level: float = Field(0.10, ge=0.0, le=1.0)
    rating: float = Field(0.10, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_sum(self) -> "ScoreWeights":
        total = self.skill_complement + self.location + self.experience_level + self.rating
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"score weights must sum to 1.0, got {total:.3f}")
        return self


class ScoringConfig(BaseModel):
    """Complete set of scoring parameters."""

    model_config = ConfigDict(frozen=True)

    weights: ScoreWeights = Field(default_factory=ScoreWeights)

    # Skill complementarity
    mutual_match_score: float = Field(85.0, ge=0, le=100, description="Both sides teach something wanted")
    one_way_match_score: float = Field(42.0, ge=0, le=100, description="Only one side teaches something wanted")
    one_way_cap: float = Field(50.0, ge=0, le=100)
    extra_skill_bonus: float = Field(5.0, ge=0, le=100, description="Per matched skill beyond one per side")
    category_credit: bool = Field(False, description="Give partial credit for same-category skills")
    category_credit_factor: float = Field(0.5, ge=0, le=1.0)
    subcategory_credit_factor: float = Field(0.6, ge=0, le=1.0, description="Same category and subcategory")
    related_category_factor: float = Field(0.25, ge=0, le=1.0)

    # Location (kilometres)
    remote_score: float = Field(90.0, ge=0, le=100)
    in_range_max_score: float = Field(100.0, ge=0, le=100)
    in_range_min_score: float = Field(70.0, ge=0, le=100)
    out_of_range_score: float = Field(25.0, ge=0, le=100, description="Score just past max distance")

    # Experience alignment
    experience_any_score: float = Field(90.0, ge=0, le=100)
    experience_neutral_score: float = Field(50.0, ge=0, le=100)
    similar_step_penalty: float = Field(30.0, ge=0, le=100, description="Per ordinal step apart")
    directional_base_score: float = Field(70.0, ge=0, le=100, description="Partner one step in the wanted direction")
    directional_step_bonus: float = Field(10.0, ge=0, le=100)
    directional_miss_score: float = Field(40.0, ge=0, le=100, description="Partner at the same level")
    directional_miss_penalty: float = Field(15.0, ge=0, le=100)

    # Reputation
    rating_min: float = Field(1.0, ge=0)
    rating_max: float = Field(5.0, gt=0)
    rating_neutral_score: float = Field(50.0, ge=0, le=100)

    # Reason thresholds
    strong_component_score: float = Field(80.0, ge=0, le=100)
    weak_component_score: float = Field(50.0, ge=0, le=100)
    high_rating: float = Field(4.5, ge=0, le=5)
    good_rating: float = Field(4.0, ge=0, le=5)

    @model_validator(mode="after")
    def _check_ranges(self) -> "ScoringConfig":
        if self.rating_min >= self.rating_max:
            raise ValueError("rating_min must be lower than rating_max")
        if self.in_range_min_score > self.in_range_max_score:
            raise ValueError("in_range_min_score must not exceed in_range_max_score")
        return self


DEFAULT_SCORING_CONFIG = ScoringConfig()
