"""
Global error handling.

Every error leaves the service as ``{"error": <message>, "code": <CODE>}``.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from huissier.domain.exceptions import HuissierException
from huissier.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "STORE_UNAVAILABLE": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(message: str, code: str) -> dict:
    return {"error": message, "code": code}


async def huissier_exception_handler(
    request: Request, exc: HuissierException
) -> JSONResponse:
    """
    Handle Huissier domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    elif status_code >= 500:
        logger.error(
            f"{exc.code}: {exc.message}",
            extra={"path": request.url.path},
        )

    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.message, exc.code),
        headers=headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies, paths and queries as 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part not in ("body",)
        )
        message = f"Validation failed for {location}: {first.get('msg')}"
    else:
        message = "Invalid request"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, "VALIDATION_ERROR"),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep framework errors (unknown route, bad method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), "HTTP_ERROR"),
        headers=getattr(exc, "headers", None),
    )
