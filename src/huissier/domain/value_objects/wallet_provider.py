"""
WalletProvider value object - closed set of supported signing wallets.
"""

from enum import Enum
from typing import Optional


class WalletProvider(str, Enum):
    """Wallet application that produced a signature."""

    PHANTOM = "Phantom"
    SOLFLARE = "Solflare"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "WalletProvider":
        """
        Map a client-supplied tag to a provider.

        Matching is case-insensitive; anything unrecognised (including
        None) falls back to UNKNOWN.
        """
        if not value:
            return cls.UNKNOWN
        normalized = value.strip().lower()
        for provider in cls:
            if provider.value.lower() == normalized:
                return provider
        return cls.UNKNOWN
