"""
Persistence infrastructure.
"""

from huissier.infrastructure.persistence.database import Database
from huissier.infrastructure.persistence.models import Base, UserModel

__all__ = ["Base", "Database", "UserModel"]
