from typing import Protocol


class PasswordHasher(Protocol):
    """One-way salted password hashing."""
    def hash(self, password: str) -> str:
        """Return a salted digest. Each call uses a fresh salt."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if password matches the digest. Never raises on mismatch."""
        ...
