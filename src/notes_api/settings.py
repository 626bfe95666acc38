"""
notes_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for every layer (API, auth, persistence).
- Hide secrets from repr/logging (JWT secret, seed admin password).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev-secret-change-me"


class Settings(BaseSettings):
    """
    Loaded once at process start and treated as immutable afterwards.
    """

    model_config = SettingsConfigDict(env_prefix="NOTES_", case_sensitive=False)

    # `dev`/`test` auto-create tables on startup; `prod` hides error details.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "notes-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 4000

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "notes-api"
    jwt_audience: str = "notes-api"
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET, repr=False)
    jwt_ttl_seconds: int = Field(default=7 * 24 * 60 * 60, ge=1)

    # bcrypt work factor (4..31)
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./notes.db"

    # Admin account created by `python -m notes_api.db.seed`
    seed_admin_name: str = "Admin User"
    seed_admin_email: str = "admin@example.com"
    seed_admin_password: str = Field(default="admin123", repr=False)

    @model_validator(mode="after")
    def _check_prod_secret(self) -> Settings:
        if self.env == "prod" and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("NOTES_JWT_SECRET must be set to a non-default value in prod")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Token lifetime and signing secret are read from here only; rotating the secret
# invalidates every outstanding token.
