import pytest

from skillswap.matching.experience import ExperienceScorer
from skillswap.matching.skills import SkillComplementScorer
from skillswap.profile.models import PROFICIENCY_ORDER, ExperiencePreference, ProficiencyLevel

LEVELS = ["beginner", "intermediate", "advanced", "expert"]


@pytest.fixture
def scorer():
    return ExperienceScorer()


@pytest.fixture
def pair(make_user, make_skill):
    """Build (learner, mentor, matched skills) for one wanted skill."""

    def _pair(own_level, partner_level, preference):
        learner = make_user(
            "learner",
            offers=[make_skill("Cooking", level="beginner")],
            wants=[make_skill("Guitar", level=own_level, offering=False)],
            experience_level_preference=preference,
        )
        mentor = make_user(
            "mentor",
            offers=[make_skill("Guitar", level=partner_level)],
            wants=["Cooking"],
        )
        matched = SkillComplementScorer().score(learner, mentor).matched_skills
        return learner, mentor, matched

    return _pair


def test_ordinal_lookup_is_explicit():
    ranks = [PROFICIENCY_ORDER[ProficiencyLevel(level)] for level in LEVELS]
    assert ranks == [1, 2, 3, 4]
    assert ProficiencyLevel.EXPERT.rank > ProficiencyLevel.ADVANCED.rank


@pytest.mark.parametrize("own", LEVELS)
@pytest.mark.parametrize("partner", LEVELS)
def test_any_preference_is_high_and_neutral(scorer, pair, own, partner):
    learner, mentor, matched = pair(own, partner, "any")
    assert scorer.score(learner, mentor, matched) >= 80


def test_similar_peaks_at_equal_levels(scorer, pair):
    scores = [
        scorer.score(*pair("intermediate", partner, "similar"))
        for partner in ["intermediate", "advanced", "expert"]
    ]
    assert scores[0] == 100
    assert scores[0] > scores[1] > scores[2]


def test_similar_is_symmetric_in_distance(scorer, pair):
    below = scorer.score(*pair("advanced", "intermediate", "similar"))
    above = scorer.score(*pair("advanced", "expert", "similar"))
    assert below == above


@pytest.mark.parametrize(
    "own,partner",
    [
        ("beginner", "beginner"),
        ("intermediate", "beginner"),
        ("advanced", "advanced"),
        ("expert", "beginner"),
        ("expert", "expert"),
    ],
)
def test_higher_below_50_when_not_more_advanced(scorer, pair, own, partner):
    assert scorer.score(*pair(own, partner, "higher")) < 50


def test_higher_rewards_more_advanced_partner(scorer, pair):
    one_step = scorer.score(*pair("intermediate", "advanced", "higher"))
    two_steps = scorer.score(*pair("intermediate", "expert", "higher"))
    assert one_step >= 70
    assert two_steps > one_step


def test_lower_is_mirror_of_higher(scorer, pair):
    assert scorer.score(*pair("expert", "beginner", "lower")) >= 80
    assert scorer.score(*pair("beginner", "expert", "lower")) < 50


def test_falls_back_to_most_advanced_offered_skill(scorer, make_user, make_skill):
    learner = make_user(
        "learner",
        offers=[make_skill("Cooking", level="intermediate")],
        wants=["Guitar"],
        experience_level_preference="higher",
    )
    candidate = make_user(
        "candidate",
        offers=[make_skill("Welding", level="beginner"), make_skill("Chess", level="expert")],
    )
    # No shared skills: candidate's best (expert) vs learner's best (intermediate)
    assert scorer.score(learner, candidate) >= 80


def test_neutral_when_no_proficiency_data(scorer, make_user):
    learner = make_user("learner", wants=["Guitar"], experience_level_preference="similar")
    candidate = make_user("candidate")
    assert scorer.score(learner, candidate) == 50


def test_preference_parsing_is_case_insensitive(make_user):
    user = make_user("u", experience_level_preference=" Higher ")
    assert user.preferences.experience_level_preference == ExperiencePreference.HIGHER


@pytest.mark.parametrize("pref", ["similar", "higher", "lower"])
def test_score_levels_in_range(scorer, pref):
    for own in range(1, 5):
        for partner in range(1, 5):
            value = scorer.score_levels(ExperiencePreference(pref), own, partner)
            assert 0 <= value <= 100


def test_one_way_match_compares_levels_in_the_taught_skill(scorer, make_user, make_skill):
    cook = make_user(
        "cook",
        offers=[make_skill("Cooking", level="expert")],
        wants=["Guitar"],
        experience_level_preference="similar",
    )
    novice = make_user(
        "novice",
        offers=[make_skill("Welding", level="expert")],
        wants=[make_skill("Cooking", level="beginner", offering=False)],
    )
    matched = SkillComplementScorer().score(cook, novice).matched_skills
    assert matched.offered == []

    # Expert cook vs beginner learner, not the novice's unrelated welding
    assert scorer.levels(cook, novice, matched) == (4, 1)
    assert scorer.score(cook, novice, matched) < 50
