"""
notes_api.auth.jwt

JWT issuing and validation helpers.

Responsibilities:
- Issue signed, time-limited bearer tokens for a user id.
- Decode and validate tokens with strict claim requirements (iss/aud/exp/iat/sub)
  and return the subject as a user id.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError

from notes_api.settings import Settings


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/issuer/audience are enforced during decoding.
    alg: str
    issuer: str
    audience: str
    secret: str
    ttl: timedelta

    @classmethod
    def from_settings(cls, settings: Settings) -> JwtConfig:
        return cls(
            alg=settings.jwt_alg,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            secret=settings.jwt_secret,
            ttl=timedelta(seconds=settings.jwt_ttl_seconds),
        )


class InvalidToken(Exception):
    pass


def issue_token(*, cfg: JwtConfig, subject: uuid.UUID, now: datetime | None = None) -> str:
    now = now or datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "exp": int((now + cfg.ttl).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def verify_token(*, cfg: JwtConfig, token: str) -> uuid.UUID:
    try:
        payload = jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise InvalidToken(str(e)) from e

    try:
        return uuid.UUID(str(payload["sub"]))
    except ValueError as e:
        raise InvalidToken("subject is not a user id") from e


# --- Module Notes -----------------------------------------------------------
# There is no revocation list: a token stays valid until `exp` or until the
# signing secret changes.
