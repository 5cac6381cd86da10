"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import SignupCommand, SignupResponse
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    UserInfo,
    LoginResponse,
    LogoutResponse,
    PasswordResetIssued,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "LoginResponse",
    "LogoutResponse",
    "PasswordResetIssued",
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
    # DTOs - Nested Models
    "UserInfo",
]
