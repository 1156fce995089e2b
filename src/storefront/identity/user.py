"""User aggregate root — credentials and the role carried in identity tokens."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.identity.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password

MIN_PASSWORD_LENGTH = 6

_FORBIDDEN_EMAIL_CHARS = (" ", "\t", "\n", ";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


class Role(Enum):
    """Coarse permission tags. Every authenticated caller holds exactly one."""

    USER = "user"
    ADMIN = "admin"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def validate_email(email: str) -> None:
    """Reject addresses that are structurally invalid."""
    invalid = ValidationError({"email": [f"Invalid email address: {email!r}"]})

    if email.count("@") != 1 or any(ch in email for ch in _FORBIDDEN_EMAIL_CHARS):
        raise invalid

    local_part, domain_part = email.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise invalid
    if not domain_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise invalid
    if ".." in email:
        raise invalid
    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        raise invalid


@storefront.aggregate
class User:
    """A registered shopper or administrator."""

    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=128)
    role: String(choices=Role, default=Role.USER.value)
    created_at: DateTime()

    @classmethod
    def register(cls, username, email, password, role=Role.USER.value):
        from storefront.identity.events import UserRegistered

        username = (username or "").strip()
        if not username:
            raise ValidationError({"username": ["Username is required"]})

        email = normalize_email(email)
        validate_email(email)

        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError({"password": [f"Password must be at most {MAX_PASSWORD_BYTES} bytes"]})

        try:
            role = Role(role).value
        except ValueError:
            raise ValidationError({"role": [f"Unknown role '{role}'"]}) from None

        now = datetime.now(UTC)
        user = cls(
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=role,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=username,
                email=email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=normalize_email(email)).all().items
        return users[0] if users else None


def user_view(user: User) -> dict:
    """Public profile fields. The password hash never leaves the aggregate."""
    return {
        "id": str(user.id),
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "created_at": user.created_at,
    }
