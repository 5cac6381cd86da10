"""
User Use Cases

Current-user lookup and profile management.
"""

from .load_user_use_case import LoadUserUseCase
from .update_profile_use_case import UpdateProfileCommand, UpdateProfileUseCase

__all__ = [
    "LoadUserUseCase",
    "UpdateProfileCommand",
    "UpdateProfileUseCase",
]
