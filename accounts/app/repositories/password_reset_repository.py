from abc import ABC, abstractmethod

from accounts.domain.entities import PasswordReset
from accounts.libs.result import Result


class IPasswordResetRepository(ABC):
    """PasswordReset repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Result[PasswordReset]:
        """Get live password reset by token hash"""
        pass

    @abstractmethod
    async def create(self, reset: PasswordReset) -> Result[PasswordReset]:
        """Create a new password reset"""
        pass

    @abstractmethod
    async def delete(self, reset_id: int) -> Result[None]:
        """Soft-delete a password reset. NOT_FOUND if it is not live."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: int) -> Result[int]:
        """Soft-delete every live password reset of a user. Returns the count."""
        pass
