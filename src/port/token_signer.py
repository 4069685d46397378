from typing import Protocol


class TokenSigner(Protocol):
    """Issues and verifies signed, time-limited bearer tokens."""
    def issue(self, user_id: str) -> str:
        """Return a signed token carrying user_id."""
        ...

    def verify(self, token: str) -> str:
        """Return the embedded user_id.

        Raises ExpiredTokenError or InvalidTokenError.
        """
        ...
