"""
JWT session token issuer.

Mints and validates stateless access tokens. Validity is signature plus
expiry only; there is no server-side session table.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from jose.utils import base64url_decode, base64url_encode

from huissier.domain.entities.user import User
from huissier.domain.exceptions import (
    ExpiredTokenError,
    InvalidTokenSignatureError,
    MalformedTokenError,
)
from huissier.domain.value_objects import WalletProvider

TOKEN_TYPE = "access"
REQUIRED_CLAIMS = ("sub", "exp")


@dataclass(frozen=True)
class TokenConfig:
    """Signing parameters for session tokens."""

    secret_key: str
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(days=3)

    @classmethod
    def from_settings(cls, settings) -> "TokenConfig":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            lifetime=timedelta(hours=settings.JWT_EXPIRATION_HOURS),
        )


@dataclass(frozen=True)
class TokenClaims:
    """Decoded contents of a valid access token."""

    user_id: UUID
    wallet_address: str
    wallet_provider: WalletProvider
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Mints and validates signed, time-limited access tokens.

    Example:
        >>> issuer = TokenIssuer(TokenConfig(secret_key="..."))
        >>> token = issuer.mint(user)
        >>> issuer.validate(token).user_id == user.id
        True
    """

    def __init__(
        self,
        config: TokenConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not config.secret_key:
            raise ValueError("Token secret key is required")
        self.config = config
        self._clock = clock or _utcnow

    def mint(self, user: User) -> str:
        """
        Create JWT access token for an authenticated user.

        Args:
            user: Authenticated user

        Returns:
            Encoded JWT token string
        """
        now = self._clock()
        payload = {
            "sub": str(user.id),
            "wallet": user.wallet_address,
            "wallet_provider": user.wallet_provider.value,
            "iat": now,
            "exp": now + self.config.lifetime,
            "type": TOKEN_TYPE,
        }
        return jwt.encode(
            payload, self.config.secret_key, algorithm=self.config.algorithm
        )

    def validate(self, token: str) -> TokenClaims:
        """
        Decode and validate JWT access token.

        Args:
            token: JWT token string

        Returns:
            TokenClaims for the token's subject

        Raises:
            MalformedTokenError: If token cannot be parsed or lacks claims
            InvalidTokenSignatureError: If the signature does not verify
            ExpiredTokenError: If token has expired
        """
        if not token:
            raise MalformedTokenError("empty token")

        try:
            unverified = jwt.get_unverified_claims(token)
        except JWTError:
            raise MalformedTokenError()

        missing = [claim for claim in REQUIRED_CLAIMS if claim not in unverified]
        if missing:
            raise MalformedTokenError(f"missing claims: {', '.join(missing)}")

        if not self._has_canonical_signature(token):
            raise MalformedTokenError("non-canonical signature encoding")

        try:
            payload = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTClaimsError as e:
            raise MalformedTokenError(f"invalid claims: {e}")
        except JWTError:
            raise InvalidTokenSignatureError()

        if payload.get("type") != TOKEN_TYPE:
            raise MalformedTokenError("unexpected token type")

        try:
            user_id = UUID(str(payload["sub"]))
        except (KeyError, ValueError):
            raise MalformedTokenError("invalid subject")

        return TokenClaims(
            user_id=user_id,
            wallet_address=payload.get("wallet", ""),
            wallet_provider=WalletProvider.parse(payload.get("wallet_provider")),
            issued_at=datetime.fromtimestamp(payload.get("iat", 0), tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    @staticmethod
    def _has_canonical_signature(token: str) -> bool:
        """True when the signature segment is canonical base64url."""
        segment = token.rsplit(".", 1)[-1]
        try:
            raw = base64url_decode(segment.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            return False
        return base64url_encode(raw).decode("ascii") == segment
