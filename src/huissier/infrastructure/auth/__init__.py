"""
Authentication infrastructure: signature strategies and session tokens.
"""

from huissier.infrastructure.auth.signature_verifier import WalletSignatureVerifier
from huissier.infrastructure.auth.solana_wallet_adapter import SolanaWalletAdapter
from huissier.infrastructure.auth.token_issuer import (
    TokenClaims,
    TokenConfig,
    TokenIssuer,
)

__all__ = [
    "SolanaWalletAdapter",
    "TokenClaims",
    "TokenConfig",
    "TokenIssuer",
    "WalletSignatureVerifier",
]
