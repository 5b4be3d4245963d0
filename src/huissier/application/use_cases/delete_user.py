"""
Delete User use case.
"""

from uuid import UUID

from huissier.domain.entities.user import User
from huissier.domain.exceptions import EntityNotFoundError, ForbiddenError
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class DeleteUser:
    """Remove a user. Allowed for the owner and for admins."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, actor: User, user_id: UUID) -> None:
        if not actor.can_manage(user_id):
            raise ForbiddenError("Not allowed to delete this user")

        if not await self.user_repository.delete(user_id):
            raise EntityNotFoundError("User", str(user_id))

        logger.info(
            "User deleted",
            extra={"user_id": str(user_id), "actor_id": str(actor.id)},
        )
