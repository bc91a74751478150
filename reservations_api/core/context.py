"""Authentication context model for typed user authentication."""

from dataclasses import dataclass

from reservations_api.database.models.users import User


@dataclass
class AuthenticatedUserContext:
    """Caller identity resolved once per request and passed to handlers by value."""

    user: User

    def __post_init__(self):
        if not self.user:
            raise ValueError("User is required in authentication context")

    @property
    def user_id(self) -> str:
        return self.user.id
