"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from huissier.application.use_cases import (
    ChangeUserRole,
    DeleteUser,
    GetUserByWallet,
    GetUserProfile,
    IssueNonce,
    ListUsers,
    RegisterWallet,
    UpdateUserProfile,
    VerifyWallet,
)
from huissier.di.container import get_container
from huissier.domain.repositories.i_user_repository import IUserRepository

# ================================================================
# Database Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Commits when the request succeeds, rolls back when the handler raises.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IUserRepository:
    return get_container().get_user_repository(session)


# ================================================================
# Use Case Dependencies
# ================================================================


def get_issue_nonce(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> IssueNonce:
    """Get IssueNonce use case dependency."""
    container = get_container()
    return IssueNonce(
        user_repository=user_repo,
        nonce_challenge=container.nonce_challenge,
    )


def get_verify_wallet(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> VerifyWallet:
    """Get VerifyWallet use case dependency."""
    container = get_container()
    return VerifyWallet(
        user_repository=user_repo,
        signature_verifier=container.signature_verifier,
        token_issuer=container.token_issuer,
        nonce_challenge=container.nonce_challenge,
        rotate_nonce=container.settings.NONCE_ROTATE_ON_VERIFY,
    )


def get_register_wallet(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> RegisterWallet:
    """Get RegisterWallet use case dependency."""
    container = get_container()
    return RegisterWallet(
        user_repository=user_repo,
        token_issuer=container.token_issuer,
        nonce_challenge=container.nonce_challenge,
    )


def get_get_user_profile(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> GetUserProfile:
    """Get GetUserProfile use case dependency."""
    return GetUserProfile(user_repository=user_repo)


def get_get_user_by_wallet(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> GetUserByWallet:
    """Get GetUserByWallet use case dependency."""
    return GetUserByWallet(user_repository=user_repo)


def get_list_users(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> ListUsers:
    return ListUsers(user_repository=user_repo)


def get_update_user_profile(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> UpdateUserProfile:
    """Get UpdateUserProfile use case dependency."""
    return UpdateUserProfile(user_repository=user_repo)


def get_delete_user(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> DeleteUser:
    return DeleteUser(user_repository=user_repo)


def get_change_user_role(
    user_repo: IUserRepository = Depends(get_user_repository),
) -> ChangeUserRole:
    return ChangeUserRole(user_repository=user_repo)
