"""Access guard for protected endpoints."""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api.dependencies import get_token_signer
from domain.model.auth import AuthContext
from domain.model.errors import AuthenticationError, ExpiredTokenError, InvalidTokenError
from port.token_signer import TokenSigner

logger = logging.getLogger(__name__)

NO_TOKEN = "No token provided. Please login first."
TOKEN_EXPIRED = "Token has expired. Please login again."
TOKEN_INVALID = "Invalid token. Please login again."

security = HTTPBearer(auto_error=False)


def authenticate_token(token: str | None, tokens: TokenSigner) -> AuthContext:
    """Verify a bearer token and resolve the caller's identity.

    Raises:
        AuthenticationError: token missing, expired or invalid
    """
    if not token:
        raise AuthenticationError(NO_TOKEN)

    try:
        user_id = tokens.verify(token)
    except ExpiredTokenError as e:
        raise AuthenticationError(TOKEN_EXPIRED) from e
    except InvalidTokenError as e:
        raise AuthenticationError(TOKEN_INVALID) from e

    return AuthContext(user_id=user_id, token=token)


def require_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenSigner = Depends(get_token_signer),
) -> AuthContext:
    """FastAPI dependency for endpoints that require a bearer token."""
    token = credentials.credentials if credentials else None
    return authenticate_token(token, tokens)
