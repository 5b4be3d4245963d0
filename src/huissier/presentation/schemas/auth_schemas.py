"""
Authentication API schemas.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from huissier.presentation.schemas.base import CamelModel
from huissier.presentation.schemas.user_schemas import UserResponse

# ================================================================
# Nonce Schemas
# ================================================================


class NonceRequest(CamelModel):
    """Request a challenge nonce for a wallet."""

    wallet_address: str = Field(..., description="Solana wallet address")
    wallet_provider: Optional[str] = Field(
        None,
        description="Wallet application (Phantom, Solflare)",
    )


class NonceResponse(CamelModel):
    message: str = Field(..., description="Exact message the wallet must sign")
    nonce: str
    wallet_address: str


# ================================================================
# Verify / Register Schemas
# ================================================================


class VerifyRequest(CamelModel):
    """Signed challenge submitted for verification."""

    # Nonces are numeric strings; some clients send them as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    wallet_address: str = Field(..., description="Solana wallet address")
    signature: str = Field(..., description="Detached signature (base58 encoded)")
    nonce: str = Field(..., description="Nonce returned by the nonce endpoint")
    wallet_provider: Optional[str] = None


class RegisterRequest(CamelModel):
    wallet_address: str = Field(..., description="Solana wallet address")
    wallet_provider: Optional[str] = None


class AuthResponse(CamelModel):
    """Session opened for a wallet."""

    message: str
    user: UserResponse
    token: str = Field(..., description="JWT access token")
