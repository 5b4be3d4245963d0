"""
Data transfer objects for the application layer.
"""

from huissier.application.dto.auth_dto import AuthenticationResult, NonceIssued

__all__ = ["AuthenticationResult", "NonceIssued"]
