"""Auth service: registration, login and current-user business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that the API layer maps to HTTP status codes.
"""

import logging

from email_validator import EmailNotValidError, validate_email

from domain.model.auth import AuthResult
from domain.model.errors import (
    DuplicateEmailError,
    DuplicateError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from domain.model.user import User, UserProfile
from port.password_hasher import PasswordHasher
from port.token_signer import TokenSigner
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72

MISSING_REGISTER_FIELDS = "Please provide all required fields: name, email, password, confirmPassword"
MISSING_LOGIN_FIELDS = "Please provide both email and password"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
EMAIL_ALREADY_REGISTERED = "Email already registered. Please login or use a different email."
INVALID_CREDENTIALS = "Invalid email or password"
USER_NOT_FOUND = "User not found"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _validate_name(name: str) -> None:
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(f"Name must be at least {MIN_NAME_LENGTH} characters long")


def _validate_email(email: str) -> None:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug("Email rejected", extra={"email": email, "error": str(e)})
        raise ValidationError("Please provide a valid email") from e


def _validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


class AuthService:
    """Orchestrates registration and login over the store, hasher and signer.

    Holds no per-request state; every call is independent.
    """

    def __init__(self, repo: UserRepository, hasher: PasswordHasher, tokens: TokenSigner):
        self.repo = repo
        self.hasher = hasher
        self.tokens = tokens

    def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        confirm_password: str | None,
    ) -> AuthResult:
        """Register a new user and issue a token for them.

        Raises:
            ValidationError: missing field, mismatched or weak password, bad name/email
            DuplicateEmailError: normalized email already registered
        """
        if not name or not email or not password or not confirm_password:
            raise ValidationError(MISSING_REGISTER_FIELDS)
        if password != confirm_password:
            raise ValidationError(PASSWORDS_DO_NOT_MATCH)

        name = name.strip()
        email = normalize_email(email)
        _validate_name(name)
        _validate_email(email)
        _validate_password(password)

        if self.repo.get_by_email(email):
            raise DuplicateEmailError(EMAIL_ALREADY_REGISTERED)

        password_hash = self.hasher.hash(password)
        try:
            user = self.repo.create(email=email, password_hash=password_hash, name=name)
        except DuplicateError as e:
            # Lost a race against a concurrent registration of the same email
            raise DuplicateEmailError(EMAIL_ALREADY_REGISTERED) from e

        logger.info("User registered", extra={"userId": user.id, "email": email})
        return self._authenticated(user)

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """Authenticate by email and password and issue a token.

        Unknown email and wrong password raise the same error; only the
        server log tells them apart.

        Raises:
            ValidationError: email or password missing
            InvalidCredentialsError: no such user or wrong password
        """
        if not email or not password:
            raise ValidationError(MISSING_LOGIN_FIELDS)

        email = normalize_email(email)
        user = self.repo.get_by_email(email)
        if not user:
            logger.warning("Login failed: unknown email", extra={"email": email})
            raise InvalidCredentialsError(INVALID_CREDENTIALS)

        if not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed: password mismatch", extra={"userId": user.id, "email": email})
            raise InvalidCredentialsError(INVALID_CREDENTIALS)

        logger.info("User logged in", extra={"userId": user.id, "email": email})
        return self._authenticated(user)

    def get_current_user(self, user_id: str) -> UserProfile:
        """Return the profile of the user a verified token points at.

        Raises:
            NotFoundError: user no longer exists
        """
        user = self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundError(USER_NOT_FOUND)
        return user.profile()

    def _authenticated(self, user: User) -> AuthResult:
        return AuthResult(user=user.profile(), token=self.tokens.issue(user.id))
