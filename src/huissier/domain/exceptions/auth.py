"""
Authentication domain exceptions.

Messages are deliberately generic; the precise reason is kept on
``reason`` for logging only.
"""

from huissier.domain.exceptions.base import HuissierException


class AuthenticationError(HuissierException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed", reason: str = ""):
        self.reason = reason or message
        super().__init__(message, code="AUTHENTICATION_ERROR")


class MissingCredentialsError(AuthenticationError):
    """Raised when the Authorization header is absent or malformed."""

    def __init__(self):
        super().__init__("Authorization token required")


class InvalidNonceError(AuthenticationError):
    """Raised when the supplied nonce does not match the stored one."""

    def __init__(self):
        super().__init__("Invalid nonce")


class InvalidSignatureError(AuthenticationError):
    """Raised when wallet signature is invalid."""

    def __init__(self):
        super().__init__("Invalid signature")


class InvalidTokenError(AuthenticationError):
    """Raised when a session token cannot be accepted."""

    def __init__(self, reason: str = "invalid token"):
        super().__init__("Request is not authorized", reason=reason)


class ExpiredTokenError(InvalidTokenError):
    """Raised when JWT token has expired."""

    def __init__(self):
        super().__init__(reason="token expired")


class MalformedTokenError(InvalidTokenError):
    """Raised when JWT token cannot be parsed or lacks required claims."""

    def __init__(self, detail: str = "malformed token"):
        super().__init__(reason=detail)


class InvalidTokenSignatureError(InvalidTokenError):
    """Raised when JWT signature does not verify."""

    def __init__(self):
        super().__init__(reason="token signature mismatch")


class UserNotFoundError(AuthenticationError):
    """Raised when a valid token refers to a user that no longer exists."""

    def __init__(self):
        super().__init__("User not found")
