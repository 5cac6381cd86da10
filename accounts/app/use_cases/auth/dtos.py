"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel

from accounts.domain.entities import User


# ============================================================================
# Nested Models
# ============================================================================


class UserInfo(BaseModel):
    """Public user fields - never includes hashes"""

    id: int
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(id=user.id, name=user.name, email=user.email)


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserInfo
    remember_token: str


class LogoutResponse(BaseModel):
    """Response for logout (remember token rotation) use case"""

    status: str
    message: str


class PasswordResetIssued(BaseModel):
    """
    Output of request password reset use case

    Carries the plaintext token so the caller can deliver it out-of-band.
    Never returned over HTTP.
    """

    user_id: int
    email: str
    token: str


class RequestPasswordResetResponse(BaseModel):
    """HTTP response for request password reset"""

    status: str
    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    user: UserInfo
    remember_token: str
