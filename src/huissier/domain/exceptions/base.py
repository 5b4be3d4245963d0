"""
Base domain exceptions.
"""


class HuissierException(Exception):
    """Base exception for all Huissier domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(HuissierException):
    """Raised when entity is not found in repository."""

    def __init__(self, entity_type: str, identifier: str):
        message = f"{entity_type} {identifier} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class DuplicateEntityError(HuissierException):
    """Raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, identifier: str):
        message = f"{entity_type} with {identifier} already exists"
        super().__init__(message, code="DUPLICATE_ENTITY")


class ValidationError(HuissierException):
    """Raised when entity validation fails."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")


class ForbiddenError(HuissierException):
    """Raised when the caller lacks the role or ownership for an action."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


class StoreUnavailableError(HuissierException):
    """Raised when the user store cannot be reached."""

    def __init__(self, operation: str):
        super().__init__(
            f"User store unavailable during {operation}",
            code="STORE_UNAVAILABLE",
        )
