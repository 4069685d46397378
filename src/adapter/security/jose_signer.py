"""JWT implementation of TokenSigner backed by python-jose."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from jose import ExpiredSignatureError, JWTError, jwt

from domain.model.errors import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_DAYS = 7
USER_ID_CLAIM = "userId"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JoseTokenSigner:
    """Signs tokens with a single process-wide secret.

    Rotating the secret invalidates every token issued before the rotation.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = JWT_ALGORITHM,
        expires_in: timedelta = timedelta(days=JWT_EXPIRATION_DAYS),
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in
        self._clock = clock

    def issue(self, user_id: str) -> str:
        """Create a JWT carrying user_id that expires after expires_in."""
        issued_at = self._clock()
        payload = {
            USER_ID_CLAIM: user_id,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Verify token and return the embedded user_id.

        Raises:
            ExpiredTokenError: expiry claim is in the past
            InvalidTokenError: bad signature or malformed payload
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.debug(f"JWT expired: {e}")
            raise ExpiredTokenError("Token has expired") from e
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError("Token is invalid") from e

        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError("Token payload has no user id")
        return user_id
