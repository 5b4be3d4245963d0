"""
Solana wallet authentication adapter.

Implements wallet signature verification using Ed25519.
"""

import base58
from nacl.exceptions import BadSignatureError, CryptoError
from nacl.signing import VerifyKey

from huissier.domain.services.i_wallet_authenticator import IWalletAuthenticator

ED25519_PUBLIC_KEY_BYTES = 32
ED25519_SIGNATURE_BYTES = 64


class SolanaWalletAdapter(IWalletAuthenticator):
    """
    Solana wallet authentication using Ed25519 signatures.

    The wallet address is the base58 encoding of the Ed25519 public key.
    Signatures are detached and cover the raw UTF-8 message bytes.
    """

    async def verify_signature(
        self,
        wallet_address: str,
        message: str,
        signature: str,
    ) -> bool:
        """
        Verify Solana wallet signature.

        Args:
            wallet_address: Solana wallet address (base58)
            message: Original message that was signed
            signature: Signature (base58 encoded)

        Returns:
            True if signature is valid, False otherwise
        """
        try:
            public_key_bytes = base58.b58decode(wallet_address)
            signature_bytes = base58.b58decode(signature)
        except ValueError:
            return False

        if len(public_key_bytes) != ED25519_PUBLIC_KEY_BYTES:
            return False
        if len(signature_bytes) != ED25519_SIGNATURE_BYTES:
            return False

        try:
            verify_key = VerifyKey(public_key_bytes)
            verify_key.verify(message.encode("utf-8"), signature_bytes)
        except (BadSignatureError, CryptoError, ValueError, TypeError):
            return False

        return True
