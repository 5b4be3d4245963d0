"""
User entity - Domain model for wallet-identified accounts.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from huissier.domain.exceptions import ValidationError
from huissier.domain.value_objects import UserRole, WalletAddress, WalletProvider

USERNAME_MAX_LENGTH = 30
DISPLAY_NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500
AVATAR_MAX_LENGTH = 2048


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """
    User entity keyed by a Solana wallet address.

    The wallet address never changes after creation. The nonce is always
    present; it is replaced, never cleared. Username and email are optional
    and only unique when set.
    """

    wallet_address: str = field(default="")
    nonce: str = field(default="")
    id: UUID = field(default_factory=uuid4)
    wallet_provider: WalletProvider = WalletProvider.UNKNOWN
    role: UserRole = UserRole.USER
    username: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar: str = ""
    is_active: bool = True
    is_verified: bool = False
    last_login: datetime = field(default_factory=_utcnow)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        """Validate user data after initialization."""
        self.wallet_address = WalletAddress(self.wallet_address).address

        if not self.nonce:
            raise ValueError("Nonce is required")

        self.wallet_provider = WalletProvider(self.wallet_provider)
        self.role = UserRole(self.role)

    # ================================================================
    # State transitions
    # ================================================================

    def regenerate_nonce(self, nonce: str) -> None:
        """Replace the current challenge value."""
        if not nonce:
            raise ValueError("Nonce is required")
        self.nonce = nonce
        self.updated_at = _utcnow()

    def record_login(self, wallet_provider: Optional[WalletProvider] = None) -> None:
        """Refresh last_login and adopt a newly reported wallet provider."""
        now = _utcnow()
        if wallet_provider is not None and wallet_provider != self.wallet_provider:
            self.wallet_provider = wallet_provider
        self.last_login = now
        self.updated_at = now

    def update_profile(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        display_name: Optional[str] = None,
        bio: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> None:
        """
        Update mutable profile fields.

        Only arguments that are not None are applied. Strings are stripped;
        an empty username or email clears it.
        """
        if username is not None:
            username = username.strip()
            _check_length("username", username, USERNAME_MAX_LENGTH)
            self.username = username or None

        if email is not None:
            email = email.strip().lower()
            self.email = email or None

        if display_name is not None:
            display_name = display_name.strip()
            _check_length("display_name", display_name, DISPLAY_NAME_MAX_LENGTH)
            self.display_name = display_name or None

        if bio is not None:
            bio = bio.strip()
            _check_length("bio", bio, BIO_MAX_LENGTH)
            self.bio = bio or None

        if avatar is not None:
            avatar = avatar.strip()
            _check_length("avatar", avatar, AVATAR_MAX_LENGTH)
            self.avatar = avatar

        self.updated_at = _utcnow()

    def change_role(self, role: UserRole) -> None:
        """Assign a new role. Authorization is enforced by the caller."""
        self.role = UserRole(role)
        self.updated_at = _utcnow()

    def can_manage(self, other_id: UUID) -> bool:
        """True if this user may modify the account identified by other_id."""
        return self.role.is_admin or self.id == other_id


def _check_length(field_name: str, value: str, limit: int) -> None:
    if len(value) > limit:
        raise ValidationError(
            field=field_name,
            reason=f"cannot exceed {limit} characters",
        )


def to_public_view(user: User) -> Dict[str, Any]:
    """
    Serialize a user for anything leaving the service.

    The nonce is never included.
    """
    return {
        "id": str(user.id),
        "wallet_address": user.wallet_address,
        "wallet_provider": user.wallet_provider.value,
        "username": user.username,
        "email": user.email,
        "role": user.role.value,
        "profile": {
            "display_name": user.display_name,
            "bio": user.bio,
            "avatar": user.avatar,
        },
        "is_active": user.is_active,
        "is_verified": user.is_verified,
        "last_login": user.last_login.isoformat(),
        "created_at": user.created_at.isoformat(),
        "updated_at": user.updated_at.isoformat(),
    }
