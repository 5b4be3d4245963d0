"""
Change User Role use case.
"""

from uuid import UUID

from huissier.domain.entities.user import User
from huissier.domain.exceptions import (
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.value_objects import UserRole
from huissier.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class ChangeUserRole:
    """
    Assign a role to a user.

    Only admins may change roles. The check runs before the target is
    looked up, so non-admins get Forbidden even for unknown targets.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, actor: User, user_id: UUID, role: str) -> User:
        """
        Raises:
            ForbiddenError: If actor is not an admin
            ValidationError: If role is not a known role
            EntityNotFoundError: If user does not exist
        """
        if not actor.role.is_admin:
            raise ForbiddenError("Admin role required")

        try:
            new_role = UserRole(role)
        except ValueError:
            allowed = ", ".join(r.value for r in UserRole)
            raise ValidationError(field="role", reason=f"must be one of: {allowed}")

        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", str(user_id))

        user.change_role(new_role)
        user = await self.user_repository.update(user)

        logger.info(
            "Role changed",
            extra={
                "user_id": str(user.id),
                "role": new_role.value,
                "actor_id": str(actor.id),
            },
        )
        return user
