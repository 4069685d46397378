"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers and the exception handlers in api.errors map them to
HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class DuplicateEmailError(DuplicateError):
    """A user with the same normalized email is already registered."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class InvalidCredentialsError(DomainError):
    """Email/password pair did not match a user.

    Raised for both unknown email and wrong password so callers cannot
    tell the two apart.
    """


class AuthenticationError(DomainError):
    """Request to a protected resource lacks a usable bearer token."""


class InternalError(DomainError):
    """Unexpected infrastructure failure surfaced with a short message."""

    def __init__(self, message: str, error: str | None = None):
        self.error = error
        super().__init__(message)


class TokenError(DomainError):
    """Base class for token verification failures."""


class ExpiredTokenError(TokenError):
    """Token signature is valid but its expiry has passed."""


class InvalidTokenError(TokenError):
    """Token signature does not validate or the payload is malformed."""
