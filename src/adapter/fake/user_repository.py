"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone
from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, email: str, password_hash: str, name: str) -> User:
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError("Email already registered")

        user_id = uuid.uuid4().hex
        user = User(
            id=user_id,
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
            password_hash=password_hash,
        )
        self.store[user_id] = user
        return user

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)
