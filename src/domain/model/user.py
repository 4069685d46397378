from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class UserProfile:
    """Outward-facing view of a user. Never carries the password hash."""
    id: str
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    name: str
    email: str
    created_at: datetime
    password_hash: str = field(default="", repr=False)

    def profile(self) -> UserProfile:
        return UserProfile(id=self.id, name=self.name, email=self.email)
