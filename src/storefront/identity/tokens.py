"""Signed identity tokens (JWT, HMAC-signed by default).

Claims: ``sub`` (user id), ``role``, ``iat`` and ``exp``.
"""

from datetime import UTC, datetime, timedelta

import jwt

from storefront.config import get_settings


class TokenError(Exception):
    """The token could not be trusted: bad signature, malformed, or expired."""


class TokenExpired(TokenError):
    pass


def issue_token(user_id: str, role: str, now: datetime | None = None) -> str:
    settings = get_settings()
    issued_at = now or datetime.now(UTC)
    claims = {
        "sub": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.jwt_expires_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "role", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenError("Invalid token") from exc
