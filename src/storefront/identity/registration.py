"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user import Role, User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create an account. Self-service sign-ups are always plain users."""

    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)
    role = String(max_length=10, default=Role.USER.value)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already registered"]})

        user = User.register(
            username=command.username,
            email=command.email,
            password=command.password,
            role=command.role or Role.USER.value,
        )
        repo.add(user)

        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return str(user.id)
