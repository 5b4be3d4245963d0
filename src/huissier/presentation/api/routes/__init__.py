"""
API route modules.
"""

from huissier.presentation.api.routes import auth, health, users

__all__ = ["auth", "health", "users"]
