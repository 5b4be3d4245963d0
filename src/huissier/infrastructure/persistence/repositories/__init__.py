"""
Repository implementations.
"""

from huissier.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["UserRepository"]
