"""
Provider-aware signature verification.

Routes each verification to the strategy registered for the wallet
provider that produced it.
"""

from typing import Dict, Mapping, Optional

from huissier.domain.services.i_wallet_authenticator import IWalletAuthenticator
from huissier.domain.value_objects import WalletProvider
from huissier.infrastructure.auth.solana_wallet_adapter import SolanaWalletAdapter
from huissier.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class WalletSignatureVerifier:
    """
    Dispatches signature checks by WalletProvider.

    Every provider currently shares the Ed25519 strategy; the registry
    exists so a provider can get its own strategy without touching callers.
    """

    def __init__(
        self,
        strategies: Optional[Mapping[WalletProvider, IWalletAuthenticator]] = None,
    ):
        if strategies is None:
            solana = SolanaWalletAdapter()
            strategies = {provider: solana for provider in WalletProvider}

        missing = set(WalletProvider) - set(strategies)
        if missing:
            names = ", ".join(sorted(p.value for p in missing))
            raise ValueError(f"No verification strategy for: {names}")

        self._strategies: Dict[WalletProvider, IWalletAuthenticator] = dict(
            strategies
        )

    def strategy_for(self, provider: WalletProvider) -> IWalletAuthenticator:
        return self._strategies[provider]

    async def verify(
        self,
        wallet_address: str,
        signature: str,
        message: str,
        wallet_provider: WalletProvider = WalletProvider.UNKNOWN,
    ) -> bool:
        """
        Verify a detached signature for the given provider.

        Returns False for malformed input rather than raising.
        """
        strategy = self.strategy_for(wallet_provider)
        is_valid = await strategy.verify_signature(
            wallet_address=wallet_address,
            message=message,
            signature=signature,
        )
        if not is_valid:
            logger.debug(
                "Signature rejected",
                extra={"wallet_provider": wallet_provider.value},
            )
        return is_valid
