"""
Authentication result DTOs.
"""

from dataclasses import dataclass

from huissier.domain.entities.user import User


@dataclass
class NonceIssued:
    """Result of a challenge request."""

    nonce: str
    wallet_address: str
    user_created: bool


@dataclass
class AuthenticationResult:
    """Authenticated user together with a freshly minted session token."""

    user: User
    token: str
