"""
Domain value objects.
"""

from huissier.domain.value_objects.user_role import UserRole
from huissier.domain.value_objects.wallet_address import WalletAddress
from huissier.domain.value_objects.wallet_provider import WalletProvider

__all__ = [
    "UserRole",
    "WalletAddress",
    "WalletProvider",
]
