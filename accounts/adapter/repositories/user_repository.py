from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from accounts.adapter.repositories.base import first_or_not_found, save
from accounts.app.repositories.user_repository import IUserRepository
from accounts.domain.entities import User
from accounts.libs.result import Result


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Result[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id, User.deleted_at.is_(None))
        return await first_or_not_found(self.session, stmt, "User not found")

    async def get_by_email(self, email: str) -> Result[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email, User.deleted_at.is_(None))
        return await first_or_not_found(self.session, stmt, "User not found")

    async def get_by_remember_hash(self, remember_hash: str) -> Result[User]:
        """Get user by remember token hash"""
        stmt = select(User).where(
            User.remember_hash == remember_hash, User.deleted_at.is_(None)
        )
        return await first_or_not_found(self.session, stmt, "User not found")

    async def create(self, user: User) -> Result[User]:
        """Create a new user"""
        return await save(self.session, user)

    async def update(self, user: User) -> Result[User]:
        """Update existing user"""
        return await save(self.session, user)
