"""
Verify Wallet use case.

Second half of the wallet challenge: check the nonce and the signature,
then open a session.
"""

from typing import Optional

from huissier.application.dto import AuthenticationResult
from huissier.application.use_cases._validation import (
    require_text,
    require_wallet_address,
)
from huissier.domain.exceptions import (
    EntityNotFoundError,
    InvalidNonceError,
    InvalidSignatureError,
)
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.services import NonceChallenge, build_challenge_message
from huissier.domain.value_objects import WalletProvider
from huissier.infrastructure.auth.signature_verifier import WalletSignatureVerifier
from huissier.infrastructure.auth.token_issuer import TokenIssuer
from huissier.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


class VerifyWallet:
    """
    Authenticate a wallet by its signature over the issued nonce.

    Business rules:
    - User must already exist (created by the nonce request)
    - Supplied nonce must equal the stored nonce exactly
    - Signature must cover the exact challenge message for that nonce
    - Successful login refreshes last_login and the wallet provider
    - With rotate_nonce enabled, the nonce is replaced after success so a
      captured signature cannot be replayed
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        signature_verifier: WalletSignatureVerifier,
        token_issuer: TokenIssuer,
        nonce_challenge: NonceChallenge,
        rotate_nonce: bool = False,
    ):
        self.user_repository = user_repository
        self.signature_verifier = signature_verifier
        self.token_issuer = token_issuer
        self.nonce_challenge = nonce_challenge
        self.rotate_nonce = rotate_nonce

    async def execute(
        self,
        wallet_address: Optional[str],
        signature: Optional[str],
        nonce: Optional[str],
        wallet_provider: Optional[str] = None,
    ) -> AuthenticationResult:
        """
        Execute wallet verification.

        Args:
            wallet_address: Wallet claiming ownership
            signature: Base58 detached signature of the challenge message
            nonce: Nonce the client believes is current
            wallet_provider: Optional wallet application tag

        Returns:
            AuthenticationResult with the user and a session token

        Raises:
            ValidationError: If any required field is missing
            EntityNotFoundError: If no user exists for the wallet
            InvalidNonceError: If the nonce does not match
            InvalidSignatureError: If the signature does not verify
        """
        address = require_wallet_address(wallet_address)
        signature = require_text("signature", signature)
        nonce = require_text("nonce", nonce)

        user = await self.user_repository.get_by_wallet(address)
        if user is None:
            metrics.auth_attempts_total.labels(outcome="unknown_wallet").inc()
            raise EntityNotFoundError("User", f"with wallet {address}")

        if not self.nonce_challenge.matches(user.nonce, nonce):
            metrics.auth_attempts_total.labels(outcome="invalid_nonce").inc()
            logger.warning(
                "Wallet verification failed: nonce mismatch",
                extra={"wallet": address},
            )
            raise InvalidNonceError()

        provider = (
            WalletProvider.parse(wallet_provider)
            if wallet_provider
            else user.wallet_provider
        )
        message = build_challenge_message(user.nonce)

        is_valid = await self.signature_verifier.verify(
            wallet_address=address,
            signature=signature,
            message=message,
            wallet_provider=provider,
        )
        if not is_valid:
            metrics.auth_attempts_total.labels(outcome="invalid_signature").inc()
            logger.warning(
                "Wallet verification failed: bad signature",
                extra={"wallet": address, "wallet_provider": provider.value},
            )
            raise InvalidSignatureError()

        user.record_login(provider if wallet_provider else None)
        if self.rotate_nonce:
            user.regenerate_nonce(self.nonce_challenge.generate())

        user = await self.user_repository.update(user)
        token = self.token_issuer.mint(user)

        metrics.auth_attempts_total.labels(outcome="success").inc()
        logger.info(
            "Wallet authenticated",
            extra={"user_id": str(user.id), "wallet_provider": provider.value},
        )

        return AuthenticationResult(user=user, token=token)
