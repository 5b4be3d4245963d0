"""
User API routes.

Public lookups:
- GET /getAllUser                 - paginated listing
- GET /users                      - same listing
- GET /user/{user_id}             - user by id
- GET /wallet/{wallet_address}    - user by wallet

Protected (bearer token):
- GET    /protected/me
- PATCH  /protected/profile/{user_id}
- DELETE /protected/user/{user_id}
- PATCH  /protected/user/{user_id}/role
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from huissier.application.use_cases import (
    ChangeUserRole,
    DeleteUser,
    GetUserByWallet,
    GetUserProfile,
    ListUsers,
    UpdateProfileCommand,
    UpdateUserProfile,
)
from huissier.di.dependencies import (
    get_change_user_role,
    get_delete_user,
    get_get_user_by_wallet,
    get_get_user_profile,
    get_list_users,
    get_update_user_profile,
)
from huissier.domain.entities.user import User
from huissier.presentation.api.middleware.auth import get_current_user
from huissier.presentation.schemas import (
    ChangeRoleRequest,
    ErrorResponse,
    MessageResponse,
    UpdateProfileRequest,
    UserEnvelope,
    UserListResponse,
    UserMessageResponse,
    UserResponse,
)

router = APIRouter(tags=["Users"])
protected_router = APIRouter(
    prefix="/protected",
    tags=["Users"],
    responses={401: {"model": ErrorResponse}},
)


# ================================================================
# Public lookups
# ================================================================


@router.get("/getAllUser", response_model=UserListResponse)
@router.get("/users", response_model=UserListResponse)
async def list_users(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    use_case: ListUsers = Depends(get_list_users),
) -> UserListResponse:
    page = await use_case.execute(limit=limit, offset=offset)
    return UserListResponse(
        users=[UserResponse.from_entity(u) for u in page.users],
        total=page.total,
    )


@router.get(
    "/user/{user_id}",
    response_model=UserEnvelope,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_user(
    user_id: UUID,
    use_case: GetUserProfile = Depends(get_get_user_profile),
) -> UserEnvelope:
    user = await use_case.execute(user_id)
    return UserEnvelope(user=UserResponse.from_entity(user))


@router.get(
    "/wallet/{wallet_address}",
    response_model=UserEnvelope,
    responses={404: {"model": ErrorResponse}},
)
async def get_user_by_wallet(
    wallet_address: str,
    use_case: GetUserByWallet = Depends(get_get_user_by_wallet),
) -> UserEnvelope:
    user = await use_case.execute(wallet_address)
    return UserEnvelope(user=UserResponse.from_entity(user))


# ================================================================
# Protected
# ================================================================


@protected_router.get("/me", response_model=UserEnvelope)
async def get_me(current_user: User = Depends(get_current_user)) -> UserEnvelope:
    """Return the authenticated user."""
    return UserEnvelope(user=UserResponse.from_entity(current_user))


@protected_router.patch(
    "/profile/{user_id}",
    response_model=UserMessageResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_profile(
    user_id: UUID,
    request: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateUserProfile = Depends(get_update_user_profile),
) -> UserMessageResponse:
    """
    Update profile fields.

    Owners may edit their own profile; admins may edit any.
    """
    user = await use_case.execute(
        actor=current_user,
        user_id=user_id,
        command=UpdateProfileCommand(
            username=request.username,
            email=request.email,
            display_name=request.display_name,
            bio=request.bio,
            avatar=request.avatar,
        ),
    )
    return UserMessageResponse(
        message="Profile updated successfully",
        user=UserResponse.from_entity(user),
    )


@protected_router.delete(
    "/user/{user_id}",
    response_model=MessageResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_user(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: DeleteUser = Depends(get_delete_user),
) -> MessageResponse:
    await use_case.execute(actor=current_user, user_id=user_id)
    return MessageResponse(message="User deleted successfully")


@protected_router.patch(
    "/user/{user_id}/role",
    response_model=UserMessageResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def change_role(
    user_id: UUID,
    request: ChangeRoleRequest,
    current_user: User = Depends(get_current_user),
    use_case: ChangeUserRole = Depends(get_change_user_role),
) -> UserMessageResponse:
    """Assign a role. Admin only."""
    user = await use_case.execute(
        actor=current_user,
        user_id=user_id,
        role=request.role,
    )
    return UserMessageResponse(
        message="Role updated successfully",
        user=UserResponse.from_entity(user),
    )
