"""
Issue Nonce use case.

First half of the wallet challenge: find or create the user for a wallet
and hand out a fresh nonce for it to sign.
"""

from typing import Optional

from huissier.application.dto import NonceIssued
from huissier.application.use_cases._validation import require_wallet_address
from huissier.domain.entities.user import User
from huissier.domain.exceptions import DuplicateEntityError
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.services import NonceChallenge
from huissier.domain.value_objects import WalletProvider
from huissier.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


class IssueNonce:
    """
    Issue a new challenge nonce for a wallet.

    Business rules:
    - Unseen wallets get a user record created on the spot
    - Every call replaces the stored nonce, invalidating earlier ones
    - The nonce is persisted before it is returned
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        nonce_challenge: NonceChallenge,
    ):
        """
        Initialize use case with dependencies.

        Args:
            user_repository: Repository for user persistence
            nonce_challenge: Nonce generator
        """
        self.user_repository = user_repository
        self.nonce_challenge = nonce_challenge

    async def execute(
        self,
        wallet_address: Optional[str],
        wallet_provider: Optional[str] = None,
    ) -> NonceIssued:
        """
        Execute nonce issuance.

        Args:
            wallet_address: Wallet requesting a challenge
            wallet_provider: Optional wallet application tag, stored on
                first contact only

        Returns:
            NonceIssued with the nonce and wallet address

        Raises:
            ValidationError: If wallet address is missing or malformed
        """
        address = require_wallet_address(wallet_address)
        nonce = self.nonce_challenge.generate()

        user = await self.user_repository.get_by_wallet(address)
        created = False

        if user is None:
            try:
                user = await self.user_repository.create(
                    User(
                        wallet_address=address,
                        nonce=nonce,
                        wallet_provider=WalletProvider.parse(wallet_provider),
                    )
                )
                created = True
            except DuplicateEntityError:
                # Lost a race with a concurrent first request for this wallet
                user = await self.user_repository.get_by_wallet(address)
                if user is None:
                    raise

        if not created:
            user.regenerate_nonce(nonce)
            await self.user_repository.update(user)

        metrics.nonces_issued_total.inc()
        logger.info(
            "Nonce issued",
            extra={"wallet": user.wallet_address, "user_created": created},
        )

        return NonceIssued(
            nonce=nonce,
            wallet_address=address,
            user_created=created,
        )
