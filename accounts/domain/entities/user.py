"""
User Entity

Identity record for a person who can log in.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from accounts.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - one account per normalized email address.

    Business Rules:
    - Email is stored trimmed and lowercased, unique across users
    - Password stored as bcrypt hash of the password keyed with the pepper
    - Remember token stored only as its HMAC hash
    - Never hard-deleted; deleted_at hides the row from lookups
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(default="", max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(default="", max_length=60)  # Bcrypt output is 60 chars
    remember_hash: str = Field(default="", unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime, nullable=False, onupdate=utcnow),
    )
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))


@dataclass
class UserDraft:
    """
    A user on its way into (or out of) storage.

    ``password`` and ``remember_token`` are plaintext and never persisted.
    The validation chain hashes them onto ``user`` and clears the password.
    """

    user: User
    password: str = ""
    remember_token: str = ""
