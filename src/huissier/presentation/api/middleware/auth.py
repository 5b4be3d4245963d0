"""
Authentication dependency for bearer session tokens.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from huissier.di.container import get_container
from huissier.di.dependencies import get_db_session
from huissier.domain.entities.user import User
from huissier.domain.exceptions import (
    InvalidTokenError,
    MissingCredentialsError,
    UserNotFoundError,
)
from huissier.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)

BEARER_SCHEME = "Bearer"


def extract_bearer_token(header: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header.

    Only the exact form ``Bearer <token>`` is accepted: one space,
    a non-empty token, nothing after it.

    Raises:
        MissingCredentialsError: If the header is absent or malformed
    """
    if not header:
        raise MissingCredentialsError()

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        raise MissingCredentialsError()

    return parts[1]


async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
) -> User:
    """
    Resolve the authenticated user for a protected route.

    On success the user is also stored on ``request.state.user``.

    Raises:
        MissingCredentialsError: Missing or malformed Authorization header
        InvalidTokenError: Token expired, tampered or unparseable
        UserNotFoundError: Token subject no longer exists
    """
    try:
        token = extract_bearer_token(request.headers.get("Authorization"))
    except MissingCredentialsError:
        metrics.token_rejections_total.labels(reason="missing").inc()
        raise

    container = get_container()
    try:
        claims = container.token_issuer.validate(token)
    except InvalidTokenError as e:
        metrics.token_rejections_total.labels(reason=type(e).__name__).inc()
        logger.warning("Token rejected", extra={"reason": e.reason})
        raise

    user = await container.get_user_repository(session).get_by_id(claims.user_id)
    if not user:
        metrics.token_rejections_total.labels(reason="unknown_user").inc()
        logger.warning(
            "Token subject not found",
            extra={"user_id": str(claims.user_id)},
        )
        raise UserNotFoundError()

    request.state.user = user
    return user
