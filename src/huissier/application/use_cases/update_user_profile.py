"""
Update User Profile use case.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from huissier.domain.entities.user import User
from huissier.domain.exceptions import EntityNotFoundError, ForbiddenError
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


@dataclass
class UpdateProfileCommand:
    """Profile fields to change. None leaves a field untouched."""

    username: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None


class UpdateUserProfile:
    """
    Update a user's profile.

    Business rules:
    - Users may edit their own profile; admins may edit any profile
    - Username and email stay unique across users
    - Field lengths are enforced by the entity
    """

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case with dependencies.

        Args:
            user_repository: Repository for user persistence
        """
        self.user_repository = user_repository

    async def execute(
        self,
        actor: User,
        user_id: UUID,
        command: UpdateProfileCommand,
    ) -> User:
        """
        Execute profile update.

        Args:
            actor: Authenticated caller
            user_id: Profile to update
            command: Requested changes

        Returns:
            Updated user entity

        Raises:
            ForbiddenError: If actor is neither the owner nor an admin
            EntityNotFoundError: If user does not exist
            ValidationError: If a field exceeds its limit
            DuplicateEntityError: If username or email is taken
        """
        if not actor.can_manage(user_id):
            raise ForbiddenError("Not allowed to modify this profile")

        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", str(user_id))

        user.update_profile(
            username=command.username,
            email=command.email,
            display_name=command.display_name,
            bio=command.bio,
            avatar=command.avatar,
        )
        user = await self.user_repository.update(user)

        logger.info(
            "Profile updated",
            extra={"user_id": str(user.id), "actor_id": str(actor.id)},
        )
        return user
