"""
User lookup use cases.
"""

from dataclasses import dataclass
from typing import List
from uuid import UUID

from huissier.application.use_cases._validation import require_wallet_address
from huissier.domain.entities.user import User
from huissier.domain.exceptions import EntityNotFoundError
from huissier.domain.repositories.i_user_repository import IUserRepository


class GetUserProfile:
    """Fetch a single user by id."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: UUID) -> User:
        """
        Raises:
            EntityNotFoundError: If user does not exist
        """
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", str(user_id))
        return user


class GetUserByWallet:
    """Fetch a single user by wallet address."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, wallet_address: str) -> User:
        address = require_wallet_address(wallet_address)
        user = await self.user_repository.get_by_wallet(address)
        if not user:
            raise EntityNotFoundError("User", f"with wallet {address}")
        return user


@dataclass
class UserPage:
    users: List[User]
    total: int


class ListUsers:
    """Paginated user listing, newest first."""

    MAX_LIMIT = 100

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, limit: int = 50, offset: int = 0) -> UserPage:
        limit = max(1, min(limit, self.MAX_LIMIT))
        offset = max(0, offset)
        users = await self.user_repository.list(limit=limit, offset=offset)
        total = await self.user_repository.count()
        return UserPage(users=users, total=total)
