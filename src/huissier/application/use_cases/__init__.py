"""
Application use cases.
"""

from huissier.application.use_cases.change_user_role import ChangeUserRole
from huissier.application.use_cases.delete_user import DeleteUser
from huissier.application.use_cases.get_user_profile import (
    GetUserByWallet,
    GetUserProfile,
    ListUsers,
    UserPage,
)
from huissier.application.use_cases.issue_nonce import IssueNonce
from huissier.application.use_cases.register_wallet import RegisterWallet
from huissier.application.use_cases.update_user_profile import (
    UpdateProfileCommand,
    UpdateUserProfile,
)
from huissier.application.use_cases.verify_wallet import VerifyWallet

__all__ = [
    "ChangeUserRole",
    "DeleteUser",
    "GetUserByWallet",
    "GetUserProfile",
    "IssueNonce",
    "ListUsers",
    "RegisterWallet",
    "UpdateProfileCommand",
    "UpdateUserProfile",
    "UserPage",
    "VerifyWallet",
]
