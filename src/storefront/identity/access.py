"""Access gate: turns a bearer token into an ``Identity`` and checks roles.

The gate holds no state. Callers thread the returned ``Identity`` into every
operation that needs to know who is asking.
"""

from dataclasses import dataclass

from storefront.identity.tokens import TokenError, decode_token
from storefront.identity.user import Role

ANY_ROLE: frozenset[Role] = frozenset()
ADMIN_ONLY: frozenset[Role] = frozenset({Role.ADMIN})


class AuthenticationError(Exception):
    """No usable identity: token missing, malformed, forged or expired."""


class AuthorizationError(Exception):
    """The caller is known but their role does not allow the operation."""


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise AuthenticationError("No token provided")

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("No token provided")
    return token.strip()


def authenticate(authorization: str | None) -> Identity:
    """Verify an ``Authorization: Bearer <token>`` header value."""
    token = _bearer_token(authorization)
    try:
        claims = decode_token(token)
    except TokenError as exc:
        raise AuthenticationError(str(exc)) from exc

    try:
        role = Role(claims["role"])
    except ValueError:
        raise AuthenticationError("Invalid token") from None

    return Identity(user_id=str(claims["sub"]), role=role)


def authorize(identity: Identity, roles: frozenset[Role] | set[Role] = ANY_ROLE) -> Identity:
    """Allow the call when ``roles`` is empty or contains the caller's role."""
    if roles and identity.role not in roles:
        raise AuthorizationError("Access denied")
    return identity
