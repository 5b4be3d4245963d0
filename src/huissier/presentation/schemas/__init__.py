"""
Request and response schemas.
"""

from huissier.presentation.schemas.auth_schemas import (
    AuthResponse,
    NonceRequest,
    NonceResponse,
    RegisterRequest,
    VerifyRequest,
)
from huissier.presentation.schemas.base import ErrorResponse, MessageResponse
from huissier.presentation.schemas.user_schemas import (
    ChangeRoleRequest,
    UpdateProfileRequest,
    UserEnvelope,
    UserListResponse,
    UserMessageResponse,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "ChangeRoleRequest",
    "ErrorResponse",
    "MessageResponse",
    "NonceRequest",
    "NonceResponse",
    "RegisterRequest",
    "UpdateProfileRequest",
    "UserEnvelope",
    "UserListResponse",
    "UserMessageResponse",
    "UserResponse",
    "VerifyRequest",
]
