"""
Domain exceptions package.
"""

# Auth exceptions
from huissier.domain.exceptions.auth import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidNonceError,
    InvalidSignatureError,
    InvalidTokenError,
    InvalidTokenSignatureError,
    MalformedTokenError,
    MissingCredentialsError,
    UserNotFoundError,
)

# Base exceptions
from huissier.domain.exceptions.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
    HuissierException,
    StoreUnavailableError,
    ValidationError,
)

__all__ = [
    # Base
    "HuissierException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "ForbiddenError",
    "StoreUnavailableError",
    # Auth
    "AuthenticationError",
    "MissingCredentialsError",
    "InvalidNonceError",
    "InvalidSignatureError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MalformedTokenError",
    "InvalidTokenSignatureError",
    "UserNotFoundError",
]
