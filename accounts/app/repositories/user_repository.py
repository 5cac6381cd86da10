from abc import ABC, abstractmethod

from accounts.domain.entities import User
from accounts.libs.result import Result


class IUserRepository(ABC):
    """User repository interface - application layer

    Lookups return NOT_FOUND when no live (non-deleted) row matches,
    STORAGE_FAILURE for any database error.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Result[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Result[User]:
        """Get user by (already normalized) email address"""
        pass

    @abstractmethod
    async def get_by_remember_hash(self, remember_hash: str) -> Result[User]:
        """Get user by remember token hash"""
        pass

    @abstractmethod
    async def create(self, user: User) -> Result[User]:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> Result[User]:
        """Update existing user"""
        pass
