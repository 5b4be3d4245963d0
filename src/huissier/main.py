"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from huissier.config.settings import Settings, get_settings
from huissier.di import DIContainer, get_container, set_container
from huissier.domain.exceptions import HuissierException
from huissier.infrastructure.monitoring import get_logger, setup_logging
from huissier.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    http_exception_handler,
    huissier_exception_handler,
    request_validation_handler,
)
from huissier.presentation.api.routes import auth, health, users


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    # Structured logging (JSON only in production)
    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.ENV == "production")
    logger = get_logger(__name__)

    logger.info(f"Creating {settings.APP_NAME} application (ENV={settings.ENV})")

    set_container(DIContainer(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.APP_NAME}...")
        container = get_container()

        # No migrations: tables are created outside production
        create_schema = (
            settings.ENV != "production"
            or container.database.is_sqlite
        )
        await container.initialize(create_schema=create_schema)
        logger.info(f"{settings.APP_NAME} started successfully")

        yield

        logger.info(f"Shutting down {settings.APP_NAME}...")
        await container.shutdown()
        logger.info(f"{settings.APP_NAME} shutdown complete")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Wallet-signature authentication and user accounts",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware chain, outermost first
    # 1. Request ID middleware (FIRST for tracking)
    # 2. Metrics middleware (SECOND for accurate timing)
    # 3. CORS middleware (LAST)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Exception handlers
    app.add_exception_handler(HuissierException, huissier_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Routes
    app.include_router(health.router)
    app.include_router(auth.router, prefix=settings.API_PREFIX)
    app.include_router(users.router, prefix=settings.API_PREFIX)
    app.include_router(users.protected_router, prefix=settings.API_PREFIX)

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info(f"{settings.APP_NAME} application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance.

    For uvicorn: uvicorn huissier.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "huissier.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
