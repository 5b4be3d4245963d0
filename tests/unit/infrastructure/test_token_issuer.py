"""
Unit tests for JWT session tokens.
"""

import string
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from huissier.domain.entities.user import User
from huissier.domain.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    InvalidTokenSignatureError,
    MalformedTokenError,
)
from huissier.domain.value_objects import WalletProvider
from huissier.infrastructure.auth.token_issuer import TokenConfig, TokenIssuer

SECRET = "unit-test-secret-key-0123456789"
WALLET = "DYw8jCTfwHNRJhhmFcbXvVDTqWMEVFBX6ZKUmG5CNSKK"
BASE64URL_ALPHABET = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
)


@pytest.fixture
def user() -> User:
    return User(
        wallet_address=WALLET,
        nonce="1",
        wallet_provider=WalletProvider.PHANTOM,
    )


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(TokenConfig(secret_key=SECRET))


def _tampered(token: str):
    """Yield every single-character substitution of a token."""
    for index, char in enumerate(token):
        if char == ".":
            continue
        for replacement in BASE64URL_ALPHABET:
            if replacement != char:
                yield index, token[:index] + replacement + token[index + 1 :]


class TestTokenIssuer:
    # ================================================================
    # Minting
    # ================================================================

    def test_mint_and_validate(self, issuer: TokenIssuer, user: User):
        claims = issuer.validate(issuer.mint(user))

        assert claims.user_id == user.id
        assert claims.wallet_address == WALLET
        assert claims.wallet_provider is WalletProvider.PHANTOM
        assert claims.expires_at - claims.issued_at == timedelta(days=3)

    def test_token_claims(self, issuer: TokenIssuer, user: User):
        payload = jwt.get_unverified_claims(issuer.mint(user))

        assert payload["sub"] == str(user.id)
        assert payload["wallet"] == WALLET
        assert payload["type"] == "access"
        assert "nonce" not in payload

    def test_lifetime_from_settings(self, settings, user: User):
        issuer = TokenIssuer(TokenConfig.from_settings(settings))

        claims = issuer.validate(issuer.mint(user))

        assert claims.expires_at - claims.issued_at == timedelta(hours=72)

    def test_secret_required(self):
        with pytest.raises(ValueError):
            TokenIssuer(TokenConfig(secret_key=""))

    # ================================================================
    # Rejection
    # ================================================================

    def test_expired_token(self, user: User):
        past = datetime.now(timezone.utc) - timedelta(days=4)
        issuer = TokenIssuer(TokenConfig(secret_key=SECRET), clock=lambda: past)
        token = issuer.mint(user)

        with pytest.raises(ExpiredTokenError):
            TokenIssuer(TokenConfig(secret_key=SECRET)).validate(token)

    def test_wrong_secret(self, issuer: TokenIssuer, user: User):
        token = issuer.mint(user)
        other = TokenIssuer(TokenConfig(secret_key="another-secret-key-0123456789"))

        with pytest.raises(InvalidTokenSignatureError):
            other.validate(token)

    def test_tampered_payload(self, issuer: TokenIssuer, user: User):
        token = issuer.mint(user)
        header, payload, signature = token.split(".")
        forged_payload = jwt.encode(
            {"sub": str(user.id), "type": "access", "exp": 9999999999},
            "attacker",
        ).split(".")[1]

        with pytest.raises(InvalidTokenError):
            issuer.validate(f"{header}.{forged_payload}.{signature}")

    def test_tampering_any_character(self, issuer: TokenIssuer, user: User):
        token = issuer.mint(user)
        accepted = []

        for index, forged in _tampered(token):
            try:
                issuer.validate(forged)
            except InvalidTokenError:
                continue
            accepted.append((index, forged[index]))

        assert accepted == []

    def test_non_canonical_signature_tail(self, issuer: TokenIssuer, user: User):
        token = issuer.mint(user)
        # 32 signature bytes leave two unused bits in the last character
        last = token[-1]
        sibling = BASE64URL_ALPHABET[BASE64URL_ALPHABET.index(last) ^ 1]

        with pytest.raises(MalformedTokenError):
            issuer.validate(token[:-1] + sibling)

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b", "a.b.c"])
    def test_malformed_token(self, issuer: TokenIssuer, token: str):
        with pytest.raises(MalformedTokenError):
            issuer.validate(token)

    def test_wrong_token_type(self, issuer: TokenIssuer, user: User):
        token = jwt.encode(
            {"sub": str(user.id), "type": "refresh", "exp": 9999999999},
            SECRET,
        )

        with pytest.raises(MalformedTokenError):
            issuer.validate(token)

    def test_non_uuid_subject(self, issuer: TokenIssuer):
        token = jwt.encode(
            {"sub": "user-1", "type": "access", "exp": 9999999999},
            SECRET,
        )

        with pytest.raises(MalformedTokenError):
            issuer.validate(token)

    def test_missing_expiry(self, issuer: TokenIssuer, user: User):
        token = jwt.encode({"sub": str(user.id), "type": "access"}, SECRET)

        with pytest.raises(MalformedTokenError):
            issuer.validate(token)
