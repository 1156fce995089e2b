"""Login: exchange email and password for an identity token."""

from protean.utils.globals import current_domain

from storefront.identity.access import AuthenticationError
from storefront.identity.tokens import issue_token
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def login(email: str, password: str) -> tuple[str, User]:
    """Return ``(token, user)`` or raise ``AuthenticationError``."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        logger.warning("login_failed", email=email)
        raise AuthenticationError("Invalid credentials")

    logger.info("login_succeeded", user_id=str(user.id))
    return issue_token(user.id, user.role), user
