"""
UserRole value object.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role-based access level of a user."""

    USER = "user"
    ADMIN = "admin"
    MODERATOR = "moderator"

    @property
    def is_admin(self) -> bool:
        return self is UserRole.ADMIN
