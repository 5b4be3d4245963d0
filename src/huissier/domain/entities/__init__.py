"""
Domain entities.
"""

from huissier.domain.entities.user import User, to_public_view

__all__ = ["User", "to_public_view"]
