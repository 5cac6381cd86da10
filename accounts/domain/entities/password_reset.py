"""
PasswordReset Entity

Short-lived, single-use password reset credentials.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from accounts.domain.base import utcnow

PASSWORD_RESET_TTL = timedelta(hours=12)


class PasswordReset(SQLModel, table=True):
    """
    PasswordReset entity - proves the holder received the reset email.

    Business Rules:
    - Token is HMAC-SHA256 of a secure random string, only the hash is stored
    - Valid for 12 hours after created_at
    - Consumed (soft-deleted) once the password has been changed
    """

    __tablename__ = "password_resets"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="users.id", index=True)
    token_hash: str = Field(default="", unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime, nullable=False, onupdate=utcnow),
    )
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    def is_expired(self, now: datetime, ttl: timedelta = PASSWORD_RESET_TTL) -> bool:
        return now - self.created_at > ttl


@dataclass
class PasswordResetDraft:
    """A reset record plus its plaintext token, which is handed to the mailer and never stored."""

    reset: PasswordReset
    token: str = ""
