"""Application settings loaded once from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


@dataclass(frozen=True)
class Settings:
    mongo_url: str | None
    database_name: str
    jwt_secret_key: str
    jwt_expiration_days: int = 7
    bcrypt_rounds: int = 10
    cors_origins: str = DEFAULT_CORS_ORIGINS
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (after loading .env).

        Raises:
            ValueError: JWT_SECRET_KEY is not set
        """
        load_dotenv()
        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        return cls(
            mongo_url=os.getenv("MONGO_URL"),
            database_name=os.getenv("MONGODB_DATABASE", "authservice"),
            jwt_secret_key=secret,
            jwt_expiration_days=int(os.getenv("JWT_EXPIRATION_DAYS", "7")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
            cors_origins=os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parsed CORS origins. ["*"] means any origin."""
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
