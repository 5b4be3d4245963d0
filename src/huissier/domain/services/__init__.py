"""
Domain service interfaces and pure domain services.
"""

from huissier.domain.services.i_wallet_authenticator import IWalletAuthenticator
from huissier.domain.services.nonce_challenge import (
    CHALLENGE_PREFIX,
    NonceChallenge,
    build_challenge_message,
)

__all__ = [
    "CHALLENGE_PREFIX",
    "IWalletAuthenticator",
    "NonceChallenge",
    "build_challenge_message",
]
