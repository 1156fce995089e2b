"""FastAPI dependencies wrapping the access gate."""

from fastapi import Header

from storefront.identity.access import ANY_ROLE, Identity, authenticate, authorize
from storefront.identity.user import Role


async def current_identity(authorization: str | None = Header(default=None)) -> Identity:
    """Resolve the caller from the ``Authorization`` header or fail with 401."""
    return authenticate(authorization)


def require_roles(*roles: Role):
    """Build a dependency that admits only callers holding one of ``roles``."""
    allowed = frozenset(roles) or ANY_ROLE

    async def dependency(authorization: str | None = Header(default=None)) -> Identity:
        return authorize(authenticate(authorization), allowed)

    return dependency


require_admin = require_roles(Role.ADMIN)
