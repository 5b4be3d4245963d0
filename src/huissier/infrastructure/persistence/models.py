"""
SQLAlchemy models for Huissier persistence.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""


class UserModel(Base):
    """
    User database model - wallet-based identity.

    username and email are nullable unique columns; NULLs never collide,
    which gives sparse uniqueness on both PostgreSQL and SQLite.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    wallet_address: Mapped[str] = mapped_column(
        String(44), unique=True, index=True, nullable=False
    )
    username: Mapped[str | None] = mapped_column(String(30), unique=True)
    email: Mapped[str | None] = mapped_column(String(320), unique=True)
    wallet_provider: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Unknown"
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    nonce: Mapped[str] = mapped_column(String(32), nullable=False)

    display_name: Mapped[str | None] = mapped_column(String(50))
    bio: Mapped[str | None] = mapped_column(Text)
    avatar: Mapped[str] = mapped_column(String(2048), nullable=False, default="")

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    last_login: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
