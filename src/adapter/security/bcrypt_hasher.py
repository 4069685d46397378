"""bcrypt implementation of PasswordHasher."""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of the password
BCRYPT_MAX_PASSWORD_BYTES = 72
DEFAULT_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash password using bcrypt with a freshly generated salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify password against a bcrypt hash.

        Returns False for a mismatch and for a hash bcrypt cannot parse.
        """
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as e:
            logger.warning("Password verification failed", extra={"error": str(e)})
            return False
