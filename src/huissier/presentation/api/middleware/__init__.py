"""
API middleware and request-scoped dependencies.
"""

from huissier.presentation.api.middleware.auth import (
    extract_bearer_token,
    get_current_user,
)
from huissier.presentation.api.middleware.error_handler import (
    http_exception_handler,
    huissier_exception_handler,
    request_validation_handler,
)
from huissier.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from huissier.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "MetricsMiddleware",
    "RequestIDMiddleware",
    "extract_bearer_token",
    "get_current_user",
    "http_exception_handler",
    "huissier_exception_handler",
    "request_validation_handler",
]
