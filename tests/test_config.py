import pytest
import yaml
from pydantic import ValidationError

from skillswap import config
from skillswap.matching.scorer import MatchScorer
from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoreWeights, ScoringConfig

USERS_YAML = """
users:
  - id: alice
    display_name: Alice
    location: {latitude: 40.7128, longitude: -74.0060, description: "New York"}
    offered_skills:
      - {id: s1, name: JavaScript, category: programming, proficiency_level: Advanced}
    wanted_skills:
      - {id: s2, name: Spanish, category: language, proficiency_level: beginner, is_offering: false}
    preferences: {max_distance: 50, experience_level_preference: similar}
    rating: 4.5
  - id: remote
    preferences: {remote_only: true}
"""


def test_load_users(tmp_path):
    path = tmp_path / "users.yaml"
    path.write_text(USERS_YAML, encoding="utf-8")

    users = config.load_users(path)

    assert [u.id for u in users] == ["alice", "remote"]
    alice = users[0]
    assert alice.offered_skills[0].proficiency_level.value == "advanced"
    assert alice.preferences.max_distance == 50
    assert users[1].location is None
    assert users[1].is_remote_only


def test_load_users_accepts_plain_list(tmp_path):
    path = tmp_path / "users.yaml"
    path.write_text(yaml.dump([{"id": "a"}, {"id": "b"}]), encoding="utf-8")
    assert [u.id for u in config.load_users(path)] == ["a", "b"]


def test_load_users_empty_file(tmp_path):
    path = tmp_path / "users.yaml"
    path.write_text("", encoding="utf-8")
    assert config.load_users(path) == []


def test_load_users_rejects_bad_level(tmp_path):
    path = tmp_path / "users.yaml"
    path.write_text(
        yaml.dump([{"id": "a", "offered_skills": [{"id": "s", "name": "X", "proficiency_level": "guru"}]}]),
        encoding="utf-8",
    )
    with pytest.raises(ValidationError):
        config.load_users(path)


def test_load_users_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load_users(tmp_path / "missing.yaml")


def test_default_scoring_config(monkeypatch, tmp_path):
    monkeypatch.delenv(config.SCORING_CONFIG_ENV, raising=False)
    monkeypatch.setattr(config, "DEFAULT_SCORING_CONFIG_PATH", tmp_path / "none.yaml")
    assert config.load_scoring_config() == ScoringConfig()


def test_scoring_config_round_trip(tmp_path):
    custom = ScoringConfig(
        weights=ScoreWeights(skill_complement=0.6, location=0.2, experience_level=0.1, rating=0.1),
        category_credit=True,
    )
    path = config.save_scoring_config(custom, tmp_path / "scoring.yaml")
    assert config.load_scoring_config(path) == custom


def test_scoring_config_partial_override(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("remote_score: 95\n", encoding="utf-8")

    loaded = config.load_scoring_config(path)

    assert loaded.remote_score == 95
    assert loaded.weights == ScoreWeights()


def test_scoring_config_from_env(monkeypatch, tmp_path):
    path = tmp_path / "env.yaml"
    path.write_text("category_credit: true\n", encoding="utf-8")
    monkeypatch.setenv(config.SCORING_CONFIG_ENV, str(path))

    assert config.load_scoring_config().category_credit is True


def test_weights_must_sum_to_one(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text(yaml.dump({"weights": {"skill_complement": 0.9}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        config.load_scoring_config(path)


def test_default_weights_order():
    weights = ScoreWeights()
    assert weights.skill_complement > weights.location > weights.experience_level
    assert weights.location > weights.rating
    # Skill-less candidates must stay below 50
    assert (weights.location + weights.experience_level + weights.rating) * 100 < 50


def test_invalid_rating_range():
    with pytest.raises(ValidationError):
        ScoringConfig(rating_min=5, rating_max=1)


def test_scoring_config_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_SCORING_CONFIG.weights.skill_complement = 0.0
    with pytest.raises(ValidationError):
        ScoringConfig().remote_score = 10.0

    assert DEFAULT_SCORING_CONFIG.weights == ScoreWeights()


def test_mutating_a_scorer_config_does_not_leak(alice, bob):
    baseline = MatchScorer().aggregate(alice, bob).score
    with pytest.raises(ValidationError):
        MatchScorer().config.weights.skill_complement = 0.0

    assert MatchScorer().aggregate(alice, bob).score == baseline


def test_scoring_config_copy_with_update():
    tuned = DEFAULT_SCORING_CONFIG.model_copy(update={"category_credit": True})
    assert tuned.category_credit is True
    assert DEFAULT_SCORING_CONFIG.category_credit is False
