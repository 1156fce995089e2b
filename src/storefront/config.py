"""Application settings read from the environment.

Protean's own configuration (providers, brokers, event store) lives under
``[tool.protean]`` in pyproject.toml. These are the settings the storefront
needs on top of it: token signing, password hashing and HTTP concerns.
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    jwt_algorithm: str
    jwt_expires_minutes: int
    bcrypt_rounds: int
    cors_origins: tuple[str, ...]
    seed_demo_data: bool


def get_settings() -> Settings:
    """Build settings from the current environment.

    Read on every call so tests can adjust values with ``monkeypatch.setenv``.
    """
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        jwt_secret=os.getenv("JWT_SECRET", "change-me-in-production-storefront-signing-key"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", "1440")),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        seed_demo_data=os.getenv("SEED_DEMO_DATA", "").lower() in _TRUTHY,
    )
