"""
Fixtures for use case tests with a mocked repository.
"""

from unittest.mock import AsyncMock

import pytest

from huissier.domain.entities.user import User
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.services import NonceChallenge
from huissier.domain.value_objects import UserRole
from tests.helpers.sign_message import TestWallet


@pytest.fixture
def user_repository() -> AsyncMock:
    repo = AsyncMock(spec=IUserRepository)
    repo.create.side_effect = lambda user: user
    repo.update.side_effect = lambda user: user
    return repo


@pytest.fixture
def nonce_challenge() -> NonceChallenge:
    return NonceChallenge()


@pytest.fixture
def existing_user(wallet: TestWallet) -> User:
    return User(wallet_address=wallet.address, nonce="111111")


@pytest.fixture
def admin(other_wallet: TestWallet) -> User:
    return User(wallet_address=other_wallet.address, nonce="1", role=UserRole.ADMIN)
