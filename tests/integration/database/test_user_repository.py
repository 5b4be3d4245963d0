"""
Integration tests for UserRepository against in-memory SQLite.
"""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from huissier.domain.entities.user import User
from huissier.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from huissier.domain.value_objects import UserRole, WalletProvider
from huissier.infrastructure.persistence.repositories import UserRepository
from tests.helpers.sign_message import TestWallet


def new_user(**overrides) -> User:
    data = {"wallet_address": TestWallet.generate().address, "nonce": "123"}
    data.update(overrides)
    return User(**data)


class TestUserRepository:
    """Integration tests for UserRepository."""

    # ================================================================
    # Create / read
    # ================================================================

    async def test_create_and_get_by_id(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        user = new_user(wallet_provider=WalletProvider.PHANTOM)

        created = await repo.create(user)
        fetched = await repo.get_by_id(user.id)

        assert created.id == user.id
        assert fetched is not None
        assert fetched.wallet_address == user.wallet_address
        assert fetched.nonce == "123"
        assert fetched.wallet_provider is WalletProvider.PHANTOM
        assert fetched.role is UserRole.USER
        assert fetched.created_at.tzinfo is not None

    async def test_get_by_wallet(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        user = await repo.create(new_user())

        fetched = await repo.get_by_wallet(user.wallet_address)

        assert fetched is not None
        assert fetched.id == user.id

    async def test_missing_user_returns_none(self, db_session: AsyncSession):
        repo = UserRepository(db_session)

        assert await repo.get_by_id(uuid4()) is None
        assert await repo.get_by_wallet(TestWallet.generate().address) is None

    # ================================================================
    # Uniqueness
    # ================================================================

    async def test_duplicate_wallet(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        first = await repo.create(new_user())

        with pytest.raises(DuplicateEntityError) as exc_info:
            await repo.create(new_user(wallet_address=first.wallet_address))

        assert "wallet_address" in exc_info.value.message

    async def test_session_usable_after_duplicate(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        first = await repo.create(new_user())
        await db_session.commit()

        with pytest.raises(DuplicateEntityError):
            await repo.create(new_user(wallet_address=first.wallet_address))

        assert await repo.get_by_wallet(first.wallet_address) is not None

    async def test_many_users_without_username_or_email(
        self, db_session: AsyncSession
    ):
        repo = UserRepository(db_session)

        for _ in range(3):
            await repo.create(new_user())

        assert await repo.count() == 3

    async def test_duplicate_username(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        await repo.create(new_user(username="satoshi"))

        with pytest.raises(DuplicateEntityError) as exc_info:
            await repo.create(new_user(username="satoshi"))

        assert "username" in exc_info.value.message

    # ================================================================
    # Update / delete / list
    # ================================================================

    async def test_update_persists_changes(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        user = await repo.create(new_user())

        user.regenerate_nonce("999")
        user.update_profile(username="hal", bio="running bitcoin")
        await repo.update(user)
        fetched = await repo.get_by_id(user.id)

        assert fetched.nonce == "999"
        assert fetched.username == "hal"
        assert fetched.bio == "running bitcoin"

    async def test_update_missing_user(self, db_session: AsyncSession):
        repo = UserRepository(db_session)

        with pytest.raises(EntityNotFoundError):
            await repo.update(new_user())

    async def test_delete(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        user = await repo.create(new_user())

        assert await repo.delete(user.id) is True
        assert await repo.get_by_id(user.id) is None
        assert await repo.delete(user.id) is False

    async def test_list_paginates(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        for _ in range(5):
            await repo.create(new_user())

        page = await repo.list(limit=2, offset=0)
        rest = await repo.list(limit=10, offset=2)

        assert len(page) == 2
        assert len(rest) == 3
        assert {u.id for u in page}.isdisjoint({u.id for u in rest})
        assert await repo.count() == 5
