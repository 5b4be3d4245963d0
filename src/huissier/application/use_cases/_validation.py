"""
Input checks shared by the wallet use cases.
"""

from huissier.domain.exceptions import ValidationError
from huissier.domain.value_objects import WalletAddress


def require_wallet_address(raw: str | None) -> str:
    """Return the validated, stripped wallet address."""
    if raw is None or not raw.strip():
        raise ValidationError(field="wallet_address", reason="is required")
    try:
        return WalletAddress.parse(raw).address
    except ValueError as e:
        raise ValidationError(field="wallet_address", reason=str(e))


def require_text(field: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError(field=field, reason="is required")
    return value
