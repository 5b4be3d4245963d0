"""
Test fixtures and configuration.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from huissier.config.settings import Settings, override_settings, reset_settings
from huissier.di import get_container, set_container
from huissier.infrastructure.auth.token_issuer import TokenConfig, TokenIssuer
from huissier.infrastructure.persistence.database import Database
from huissier.infrastructure.persistence.models import Base
from tests.helpers.sign_message import TestWallet

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET = "test-secret-key-for-huissier"


@pytest.fixture
def settings() -> Settings:
    """Settings for an isolated in-memory test run."""
    test_settings = Settings(
        ENV="test",
        JWT_SECRET_KEY=TEST_SECRET,
        DATABASE_URL=TEST_DATABASE_URL,
        LOG_LEVEL="WARNING",
        METRICS_ENABLED=True,
    )
    override_settings(test_settings)
    yield test_settings
    reset_settings()


@pytest.fixture
def token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(TokenConfig.from_settings(settings))


@pytest.fixture
def wallet() -> TestWallet:
    return TestWallet.generate()


@pytest.fixture
def other_wallet() -> TestWallet:
    return TestWallet.generate()


# ================================================================
# Database
# ================================================================


@pytest_asyncio.fixture
async def test_db() -> AsyncGenerator[Database, None]:
    """
    Fresh in-memory database with tables.

    Each test gets a clean database.
    """
    db = Database(database_url=TEST_DATABASE_URL)
    await db.connect()
    await db.create_schema(Base.metadata)

    yield db

    await db.disconnect()


@pytest_asyncio.fixture
async def db_session(test_db: Database) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with test_db.session() as session:
        yield session


# ================================================================
# API
# ================================================================


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """
    Application wired to a fresh in-memory database.

    ASGITransport does not run the lifespan, so the container is
    initialized here.
    """
    from huissier.main import create_app

    application = create_app(settings)
    container = get_container()
    await container.initialize(create_schema=True)

    yield application

    await container.shutdown()
    set_container(None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
