"""
Accounts Domain Entities

Each entity in its own file, together with its in-flight draft.
"""

from .user import User, UserDraft
from .password_reset import PASSWORD_RESET_TTL, PasswordReset, PasswordResetDraft

__all__ = [
    # Entities
    "User",
    "PasswordReset",
    # Drafts
    "UserDraft",
    "PasswordResetDraft",
    # Constants
    "PASSWORD_RESET_TTL",
]
