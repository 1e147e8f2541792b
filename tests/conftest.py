"""Shared fixtures for matching tests."""

import itertools

import pytest

from skillswap.profile.models import Location, Preferences, Skill, User

NEW_YORK = Location(latitude=40.7128, longitude=-74.0060, description="New York, NY")
UPPER_WEST_SIDE = Location(latitude=40.7831, longitude=-73.9712, description="Upper West Side, NY")
LOS_ANGELES = Location(latitude=34.0522, longitude=-118.2437, description="Los Angeles, CA")

_skill_ids = itertools.count(1)


@pytest.fixture
def make_skill():
    """Build a Skill with sensible defaults."""

    def _make(name, category="general", level="intermediate", offering=True, **kwargs):
        return Skill(
            id=kwargs.pop("id", f"skill-{next(_skill_ids)}"),
            name=name,
            category=category,
            proficiency_level=level,
            is_offering=offering,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_user(make_skill):
    """Build a User from skill names (or Skill objects) and preference overrides."""

    def _to_skills(items, offering):
        skills = []
        for item in items or []:
            if isinstance(item, Skill):
                skills.append(item)
            else:
                skills.append(make_skill(item, offering=offering))
        return skills

    def _make(
        user_id,
        offers=None,
        wants=None,
        location=NEW_YORK,
        rating=None,
        preferences=None,
        **pref_overrides,
    ):
        if preferences is None:
            preferences = Preferences(**pref_overrides)
        return User(
            id=user_id,
            username=user_id,
            display_name=user_id.title(),
            location=location,
            offered_skills=_to_skills(offers, True),
            wanted_skills=_to_skills(wants, False),
            preferences=preferences,
            rating=rating,
        )

    return _make


@pytest.fixture
def alice(make_user):
    return make_user(
        "alice",
        offers=["JavaScript", "React"],
        wants=["Spanish", "Piano"],
        location=NEW_YORK,
    )


@pytest.fixture
def bob(make_user):
    return make_user(
        "bob",
        offers=["Spanish", "Photography"],
        wants=["JavaScript", "Marketing"],
        location=UPPER_WEST_SIDE,
    )


@pytest.fixture
def charlie(make_user):
    return make_user(
        "charlie",
        offers=["Piano"],
        wants=["React"],
        location=LOS_ANGELES,
    )
