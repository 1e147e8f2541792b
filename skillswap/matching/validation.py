"""Input validation run before any scoring."""

from typing import Iterable, Optional

from skillswap.profile.models import User


class MatchValidationError(ValueError):
    """A user record cannot be scored because required data is missing."""

    def __init__(self, message: str, user_id: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.user_id = user_id
        self.field = field


def validate_user(user: User) -> None:
    """Check that a user carries everything the scorers need.

    Raises:
        MatchValidationError: If preferences are missing, or the user is not
            remote-only and has no location.
    """
    if not isinstance(user, User):
        raise MatchValidationError(
            f"Expected a User, got {type(user).__name__}", field="user"
        )
    if user.preferences is None:
        raise MatchValidationError(
            f"User {user.id} has no preferences", user_id=user.id, field="preferences"
        )
    if user.location is None and not user.preferences.remote_only:
        raise MatchValidationError(
            f"User {user.id} is not remote-only but has no location",
            user_id=user.id,
            field="location",
        )


def validate_users(users: Iterable[User]) -> None:
    """Validate every user, stopping at the first invalid one."""
    for user in users:
        validate_user(user)
