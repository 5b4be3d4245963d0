"""
Register Wallet use case.
"""

from typing import Optional

from huissier.application.dto import AuthenticationResult
from huissier.application.use_cases._validation import require_wallet_address
from huissier.domain.entities.user import User
from huissier.domain.exceptions import DuplicateEntityError
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.services import NonceChallenge
from huissier.domain.value_objects import WalletProvider
from huissier.infrastructure.auth.token_issuer import TokenIssuer
from huissier.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class RegisterWallet:
    """
    Explicitly register a wallet and open a session for it.

    Business rules:
    - Wallet address must be unique
    - New users start with a fresh nonce and the default role
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        token_issuer: TokenIssuer,
        nonce_challenge: NonceChallenge,
    ):
        self.user_repository = user_repository
        self.token_issuer = token_issuer
        self.nonce_challenge = nonce_challenge

    async def execute(
        self,
        wallet_address: Optional[str],
        wallet_provider: Optional[str] = None,
    ) -> AuthenticationResult:
        """
        Execute registration.

        Raises:
            ValidationError: If wallet address is missing or malformed
            DuplicateEntityError: If the wallet is already registered
        """
        address = require_wallet_address(wallet_address)

        if await self.user_repository.get_by_wallet(address):
            raise DuplicateEntityError("User", f"wallet address {address}")

        user = await self.user_repository.create(
            User(
                wallet_address=address,
                nonce=self.nonce_challenge.generate(),
                wallet_provider=WalletProvider.parse(wallet_provider),
            )
        )
        logger.info("Wallet registered", extra={"user_id": str(user.id)})

        return AuthenticationResult(user=user, token=self.token_issuer.mint(user))
