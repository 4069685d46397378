"""Authentication routes (register, login, current user)."""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from api.models import (
    AuthResponse,
    CurrentUserResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from api.security import require_auth
from domain.model.auth import AuthContext, AuthResult
from domain.model.errors import DomainError, InternalError
from domain.model.user import UserProfile
from services.auth_service import AuthService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

_ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (400, 401, 404, 409, 500)
}


def _user_response(profile: UserProfile) -> UserResponse:
    return UserResponse(**profile.to_dict())


def _auth_response(result: AuthResult, message: str) -> AuthResponse:
    return AuthResponse(message=message, token=result.token, user=_user_response(result.user))


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new user.

    Returns:
        JWT token and public user info

    Raises:
        ValidationError (400), DuplicateEmailError (409), InternalError (500)
    """
    try:
        result = service.register(
            name=request.name,
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Register error")
        raise InternalError("Error during registration", error=type(e).__name__) from e

    return _auth_response(result, "User registered successfully!")


@router.post("/login", response_model=AuthResponse, responses=_ERROR_RESPONSES)
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Login user and return JWT token.

    Raises:
        ValidationError (400), InvalidCredentialsError (401), InternalError (500)
    """
    try:
        result = service.login(email=request.email, password=request.password)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Login error")
        raise InternalError("Error during login", error=type(e).__name__) from e

    return _auth_response(result, "Login successful!")


@router.get("/me", response_model=CurrentUserResponse, responses=_ERROR_RESPONSES)
def get_me(
    context: AuthContext = Depends(require_auth),
    service: AuthService = Depends(get_auth_service),
):
    """Get current authenticated user info (never the password hash).

    Raises:
        AuthenticationError (401), NotFoundError (404), InternalError (500)
    """
    try:
        profile = service.get_current_user(context.user_id)
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Get user error", extra={"userId": context.user_id})
        raise InternalError("Error fetching user", error=type(e).__name__) from e

    return CurrentUserResponse(user=_user_response(profile))
