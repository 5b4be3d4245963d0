"""
Domain repository interfaces.
"""

from huissier.domain.repositories.i_user_repository import IUserRepository

__all__ = ["IUserRepository"]
