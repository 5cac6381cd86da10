"""
Use Cases

Organized into domain folders:
- auth/: Signup, login, logout and password reset
- users/: Current user and profile management
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    SignupResponse,
    LoginUseCase,
    LogoutUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .users import (
    LoadUserUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    "LoginUseCase",
    "LogoutUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Users
    "LoadUserUseCase",
    "UpdateProfileCommand",
    "UpdateProfileUseCase",
]
