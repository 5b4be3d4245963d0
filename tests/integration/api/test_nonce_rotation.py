"""
Integration tests for single-use nonces (NONCE_ROTATE_ON_VERIFY).
"""

import pytest
from httpx import AsyncClient

from huissier.config.settings import Settings, override_settings
from tests.helpers.api import PREFIX, replay_verify
from tests.helpers.sign_message import TestWallet


@pytest.fixture
def settings(settings: Settings) -> Settings:
    rotating = settings.model_copy(update={"NONCE_ROTATE_ON_VERIFY": True})
    override_settings(rotating)
    return rotating


class TestNonceRotation:
    async def test_replayed_signature_rejected(
        self, client: AsyncClient, wallet: TestWallet
    ):
        statuses = await replay_verify(client, wallet)

        assert statuses == [200, 401]

    async def test_replay_error_body(self, client: AsyncClient, wallet: TestWallet):
        challenge = (
            await client.post(f"{PREFIX}/nonce", json={"walletAddress": wallet.address})
        ).json()
        payload = {
            "walletAddress": wallet.address,
            "signature": wallet.sign(challenge["message"]),
            "nonce": challenge["nonce"],
        }
        await client.post(f"{PREFIX}/verify", json=payload)

        response = await client.post(f"{PREFIX}/verify", json=payload)

        assert response.status_code == 401
        assert response.json() == {
            "error": "Invalid nonce",
            "code": "AUTHENTICATION_ERROR",
        }

    async def test_fresh_nonce_after_rotation(
        self, client: AsyncClient, wallet: TestWallet
    ):
        await replay_verify(client, wallet)

        challenge = (
            await client.post(f"{PREFIX}/nonce", json={"walletAddress": wallet.address})
        ).json()
        response = await client.post(
            f"{PREFIX}/verify",
            json={
                "walletAddress": wallet.address,
                "signature": wallet.sign(challenge["message"]),
                "nonce": challenge["nonce"],
            },
        )

        assert response.status_code == 200
