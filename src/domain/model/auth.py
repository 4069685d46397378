from dataclasses import dataclass

from domain.model.user import UserProfile


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""
    user: UserProfile
    token: str


@dataclass(frozen=True)
class AuthContext:
    """Identity resolved from a verified bearer token.

    Produced by the access guard and handed to protected handlers.
    """
    user_id: str
    token: str
