"""Pydantic models for API request/response."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Request model for user registration.

    Fields are optional here so that missing values are reported by the
    auth service with its own message.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(None, alias="confirmPassword")


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public user fields. The password hash has no place here."""
    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """Response model for register and login."""
    success: bool = True
    message: str
    token: str
    user: UserResponse


class CurrentUserResponse(BaseModel):
    """Response model for GET /api/auth/me."""
    success: bool = True
    user: UserResponse


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
