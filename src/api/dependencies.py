from datetime import timedelta

from fastapi import Depends

from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jose_signer import JoseTokenSigner
from api.config import Settings, get_settings
from domain.model.errors import InternalError
from port.password_hasher import PasswordHasher
from port.token_signer import TokenSigner
from port.user_repository import UserRepository
from services.auth_service import AuthService


def _get_db(settings: Settings):
    """Get MongoDB database.

    Raises:
        InternalError: store unreachable (reported as 500)
    """
    client = get_mongodb_client(settings.mongo_url)
    if client is None:
        raise InternalError("Database unavailable", error="ServiceUnavailable")
    return client[settings.database_name]


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    return MongoUserRepository(_get_db(settings))


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_signer(settings: Settings = Depends(get_settings)) -> TokenSigner:
    return JoseTokenSigner(
        settings.jwt_secret_key,
        expires_in=timedelta(days=settings.jwt_expiration_days),
    )


def get_auth_service(
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenSigner = Depends(get_token_signer),
) -> AuthService:
    return AuthService(repo=repo, hasher=hasher, tokens=tokens)
