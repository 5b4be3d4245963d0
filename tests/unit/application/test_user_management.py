"""
Unit tests for profile, deletion, role and lookup use cases.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from huissier.application.use_cases import (
    ChangeUserRole,
    DeleteUser,
    GetUserByWallet,
    GetUserProfile,
    ListUsers,
    UpdateProfileCommand,
    UpdateUserProfile,
)
from huissier.domain.entities.user import User
from huissier.domain.exceptions import (
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)
from huissier.domain.value_objects import UserRole


class TestUpdateUserProfile:
    async def test_owner_updates_own_profile(
        self, user_repository: AsyncMock, existing_user: User
    ):
        user_repository.get_by_id.return_value = existing_user
        use_case = UpdateUserProfile(user_repository)

        user = await use_case.execute(
            actor=existing_user,
            user_id=existing_user.id,
            command=UpdateProfileCommand(username="satoshi", bio="gm"),
        )

        assert user.username == "satoshi"
        assert user.bio == "gm"
        user_repository.update.assert_awaited_once_with(existing_user)

    async def test_admin_updates_other_profile(
        self, user_repository: AsyncMock, existing_user: User, admin: User
    ):
        user_repository.get_by_id.return_value = existing_user
        use_case = UpdateUserProfile(user_repository)

        user = await use_case.execute(
            actor=admin,
            user_id=existing_user.id,
            command=UpdateProfileCommand(display_name="Moderated"),
        )

        assert user.display_name == "Moderated"

    async def test_other_user_forbidden(
        self, user_repository: AsyncMock, existing_user: User
    ):
        use_case = UpdateUserProfile(user_repository)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                actor=existing_user,
                user_id=uuid4(),
                command=UpdateProfileCommand(username="x"),
            )

        user_repository.get_by_id.assert_not_awaited()

    async def test_missing_target(self, user_repository: AsyncMock, admin: User):
        user_repository.get_by_id.return_value = None
        use_case = UpdateUserProfile(user_repository)

        with pytest.raises(EntityNotFoundError):
            await use_case.execute(
                actor=admin, user_id=uuid4(), command=UpdateProfileCommand()
            )


class TestDeleteUser:
    async def test_owner_deletes_self(
        self, user_repository: AsyncMock, existing_user: User
    ):
        user_repository.delete.return_value = True

        await DeleteUser(user_repository).execute(existing_user, existing_user.id)

        user_repository.delete.assert_awaited_once_with(existing_user.id)

    async def test_other_user_forbidden(
        self, user_repository: AsyncMock, existing_user: User
    ):
        with pytest.raises(ForbiddenError):
            await DeleteUser(user_repository).execute(existing_user, uuid4())

        user_repository.delete.assert_not_awaited()

    async def test_admin_missing_target(self, user_repository: AsyncMock, admin: User):
        user_repository.delete.return_value = False

        with pytest.raises(EntityNotFoundError):
            await DeleteUser(user_repository).execute(admin, uuid4())


class TestChangeUserRole:
    async def test_admin_promotes_user(
        self, user_repository: AsyncMock, existing_user: User, admin: User
    ):
        user_repository.get_by_id.return_value = existing_user

        user = await ChangeUserRole(user_repository).execute(
            admin, existing_user.id, "moderator"
        )

        assert user.role is UserRole.MODERATOR

    @pytest.mark.parametrize("role", [UserRole.USER, UserRole.MODERATOR])
    async def test_non_admin_forbidden_even_for_unknown_target(
        self, user_repository: AsyncMock, existing_user: User, role: UserRole
    ):
        existing_user.role = role

        with pytest.raises(ForbiddenError):
            await ChangeUserRole(user_repository).execute(
                existing_user, uuid4(), "admin"
            )

        user_repository.get_by_id.assert_not_awaited()

    async def test_unknown_role(self, user_repository: AsyncMock, admin: User):
        with pytest.raises(ValidationError) as exc_info:
            await ChangeUserRole(user_repository).execute(admin, uuid4(), "root")

        assert exc_info.value.field == "role"


class TestLookups:
    async def test_get_profile_not_found(self, user_repository: AsyncMock):
        user_repository.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await GetUserProfile(user_repository).execute(uuid4())

    async def test_get_by_wallet(self, user_repository: AsyncMock, existing_user: User):
        user_repository.get_by_wallet.return_value = existing_user

        user = await GetUserByWallet(user_repository).execute(
            existing_user.wallet_address
        )

        assert user is existing_user

    async def test_list_clamps_paging(
        self, user_repository: AsyncMock, existing_user: User
    ):
        user_repository.list.return_value = [existing_user]
        user_repository.count.return_value = 1

        page = await ListUsers(user_repository).execute(limit=1000, offset=-5)

        assert page.total == 1
        assert page.users == [existing_user]
        user_repository.list.assert_awaited_once_with(limit=100, offset=0)
