"""
Dependency Injection Container for Huissier.

Manages all service instances and their dependencies.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from huissier.config.settings import Settings, get_settings
from huissier.domain.repositories.i_user_repository import IUserRepository
from huissier.domain.services import NonceChallenge
from huissier.infrastructure.auth.signature_verifier import WalletSignatureVerifier
from huissier.infrastructure.auth.token_issuer import TokenConfig, TokenIssuer
from huissier.infrastructure.monitoring import get_logger
from huissier.infrastructure.persistence.database import Database
from huissier.infrastructure.persistence.models import Base
from huissier.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container.

    Holds process-wide singletons (database, verifier, token issuer).
    Repositories are session-scoped and built per request.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize container with None instances."""
        self._settings = settings

        # Infrastructure
        self._database: Optional[Database] = None

        # Domain services
        self._signature_verifier: Optional[WalletSignatureVerifier] = None
        self._token_issuer: Optional[TokenIssuer] = None
        self._nonce_challenge: Optional[NonceChallenge] = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def initialize(self, create_schema: bool = False) -> None:
        """
        Connect the database and optionally create tables.

        Args:
            create_schema: Create missing tables on startup
        """
        await self.database.connect()
        if create_schema:
            await self.database.create_schema(Base.metadata)
            logger.info("Database schema ensured")

    async def shutdown(self) -> None:
        """Close all connections."""
        if self._database:
            await self._database.disconnect()

    # ================================================================
    # Infrastructure
    # ================================================================

    @property
    def database(self) -> Database:
        """Get database instance (singleton)."""
        if self._database is None:
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
            )
        return self._database

    # ================================================================
    # Domain Services
    # ================================================================

    @property
    def signature_verifier(self) -> WalletSignatureVerifier:
        """Get wallet signature verifier (singleton)."""
        if self._signature_verifier is None:
            self._signature_verifier = WalletSignatureVerifier()
        return self._signature_verifier

    @property
    def token_issuer(self) -> TokenIssuer:
        """Get session token issuer (singleton)."""
        if self._token_issuer is None:
            self._token_issuer = TokenIssuer(TokenConfig.from_settings(self.settings))
        return self._token_issuer

    @property
    def nonce_challenge(self) -> NonceChallenge:
        if self._nonce_challenge is None:
            self._nonce_challenge = NonceChallenge(
                upper_bound=self.settings.NONCE_UPPER_BOUND
            )
        return self._nonce_challenge

    # ================================================================
    # Repositories (session-scoped)
    # ================================================================

    def get_user_repository(self, session: AsyncSession) -> IUserRepository:
        """
        Get user repository bound to a session.

        Args:
            session: Database session for this request

        Returns:
            UserRepository instance
        """
        return UserRepository(session)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (for testing)."""
    global _container
    _container = container


async def initialize_container(create_schema: bool = False) -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize(create_schema=create_schema)
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()
