"""
User API schemas.
"""

from typing import List, Literal, Optional, Union

from pydantic import EmailStr, Field

from huissier.domain.entities.user import (
    BIO_MAX_LENGTH,
    DISPLAY_NAME_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    User,
    to_public_view,
)
from huissier.presentation.schemas.base import CamelModel

# ================================================================
# Response Schemas
# ================================================================


class ProfileResponse(CamelModel):
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar: str = ""


class UserResponse(CamelModel):
    """Public view of a user. Never carries the nonce."""

    id: str = Field(..., description="User ID")
    wallet_address: str = Field(..., description="Solana wallet address")
    wallet_provider: str = Field(..., description="Wallet application")
    username: Optional[str] = None
    email: Optional[str] = None
    role: str
    profile: ProfileResponse
    is_active: bool
    is_verified: bool
    last_login: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls.model_validate(to_public_view(user))


class UserEnvelope(CamelModel):
    user: UserResponse


class UserMessageResponse(CamelModel):
    message: str
    user: UserResponse


class UserListResponse(CamelModel):
    users: List[UserResponse]
    total: int = Field(..., description="Total number of users")


# ================================================================
# Request Schemas
# ================================================================


class UpdateProfileRequest(CamelModel):
    """Profile changes. Omitted fields are left untouched."""

    username: Optional[str] = Field(None, max_length=USERNAME_MAX_LENGTH)
    email: Optional[Union[EmailStr, Literal[""]]] = None
    display_name: Optional[str] = Field(None, max_length=DISPLAY_NAME_MAX_LENGTH)
    bio: Optional[str] = Field(None, max_length=BIO_MAX_LENGTH)
    avatar: Optional[str] = None


class ChangeRoleRequest(CamelModel):
    role: str = Field(..., description="One of: user, admin, moderator")
