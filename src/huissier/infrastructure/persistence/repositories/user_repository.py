"""
User repository implementation.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from huissier.domain.entities.user import User
from huissier.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    StoreUnavailableError,
)
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.value_objects import UserRole, WalletProvider
from huissier.infrastructure.monitoring import get_logger
from huissier.infrastructure.persistence.models import UserModel

logger = get_logger(__name__)

UNIQUE_FIELDS = ("wallet_address", "username", "email")


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Writes are flushed, not committed; the session owner commits at the
    end of the request.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """
        Create new user in database.

        Args:
            user: User entity to create

        Returns:
            Created user entity
        """
        model = UserModel(id=user.id)
        self._apply(model, user)

        async with self._translate_errors("create", user):
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

        return self._to_entity(model)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            User entity if found, None otherwise
        """
        async with self._translate_errors("get_by_id"):
            model = await self._fetch_model(user_id)
        return self._to_entity(model) if model else None

    async def get_by_wallet(self, wallet_address: str) -> Optional[User]:
        """
        Get user by wallet address.

        Args:
            wallet_address: Wallet address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.wallet_address == wallet_address)
        async with self._translate_errors("get_by_wallet"):
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list(self, limit: int = 50, offset: int = 0) -> List[User]:
        """List users, newest first."""
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc(), UserModel.id)
            .offset(offset)
            .limit(limit)
        )
        async with self._translate_errors("list"):
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def count(self) -> int:
        async with self._translate_errors("count"):
            result = await self.session.execute(
                select(func.count()).select_from(UserModel)
            )
        return int(result.scalar_one())

    async def update(self, user: User) -> User:
        """
        Update existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity
        """
        async with self._translate_errors("update", user):
            model = await self._fetch_model(user.id)
            if not model:
                raise EntityNotFoundError("User", str(user.id))

            self._apply(model, user)
            await self.session.flush()
            await self.session.refresh(model)

        return self._to_entity(model)

    async def delete(self, user_id: UUID) -> bool:
        """
        Delete user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            True if deleted, False if not found
        """
        async with self._translate_errors("delete"):
            model = await self._fetch_model(user_id)
            if not model:
                return False

            await self.session.delete(model)
            await self.session.flush()

        return True

    async def _fetch_model(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @asynccontextmanager
    async def _translate_errors(
        self, operation: str, user: Optional[User] = None
    ) -> AsyncIterator[None]:
        """
        Map driver errors onto domain exceptions.

        A unique violation rolls the session back so it stays usable.
        """
        try:
            yield
        except IntegrityError as e:
            await self.session.rollback()
            field = self._conflicting_field(e)
            value = getattr(user, field, None) if user else None
            logger.info(
                f"Unique constraint violated on {field} during {operation}",
            )
            raise DuplicateEntityError("User", f"{field} {value or ''}".strip())
        except (OperationalError, InterfaceError) as e:
            logger.error(f"User store error during {operation}: {e}")
            raise StoreUnavailableError(operation)

    @staticmethod
    def _conflicting_field(error: IntegrityError) -> str:
        detail = str(error.orig).lower()
        for field in UNIQUE_FIELDS:
            if field in detail:
                return field
        return "unique field"

    @staticmethod
    def _apply(model: UserModel, user: User) -> None:
        """Copy mutable entity state onto the model. id is never touched."""
        model.wallet_address = user.wallet_address
        model.username = user.username
        model.email = user.email
        model.wallet_provider = user.wallet_provider.value
        model.role = user.role.value
        model.nonce = user.nonce
        model.display_name = user.display_name
        model.bio = user.bio
        model.avatar = user.avatar
        model.is_active = user.is_active
        model.is_verified = user.is_verified
        model.last_login = user.last_login
        model.created_at = user.created_at
        model.updated_at = user.updated_at

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        """
        Convert UserModel to User entity.

        Args:
            model: SQLAlchemy model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            wallet_address=model.wallet_address,
            nonce=model.nonce,
            wallet_provider=WalletProvider.parse(model.wallet_provider),
            role=UserRole(model.role),
            username=model.username,
            email=model.email,
            display_name=model.display_name,
            bio=model.bio,
            avatar=model.avatar or "",
            is_active=model.is_active,
            is_verified=model.is_verified,
            last_login=_as_utc(model.last_login),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
